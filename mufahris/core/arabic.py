"""
Arabic text normalization utilities.

These functions are the single source of equality for Arabic strings in
the library: indexing, query filtering and collocation matching all
compare through them, never through raw string equality.
"""

import re
import unicodedata


# Harakat, tanwin, shadda, sukun, small high marks and dagger alif
ARABIC_DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0670\u06D6-\u06ED]")
TATWEEL_RE = re.compile(r"\u0640")
WHITESPACE_RE = re.compile(r"\s+")

WEAK_FINAL_ROOT_CHARS = frozenset({"ا", "ى", "ي", "و"})
ROOT_FAMILY_MARKER = "ى"

# Bound pronoun/possessive suffixes, longest first. Tunable: derived from
# the annotation's conventions, not from a suffix grammar.
COMMON_SUFFIXES = (
    "كما",
    "كم",
    "كن",
    "هما",
    "هم",
    "هن",
    "نا",
    "ها",
    "ه",
    "ك",
    "ي",
)

_SEARCH_FOLDING = str.maketrans({
    "ٱ": "ا",
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ى": "ي",
    "ؤ": "و",
    "ئ": "ي",
    "ة": "ه",
})


def normalize_for_match(text: str | None) -> str:
    """
    Canonical matching form of an Arabic string.

    Applies NFKC, strips tatweel and diacritics, and trims whitespace.
    Idempotent.

    Args:
        text: Arabic text (None is treated as empty)

    Returns:
        Normalized text

    Examples:
        >>> normalize_for_match("الْحَمْدُ")
        'الحمد'
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text)
    text = TATWEEL_RE.sub("", text)
    text = ARABIC_DIACRITICS_RE.sub("", text)
    return text.strip()


def normalize_root_family(text: str | None) -> str:
    """
    Root-family key: the matching form with a final weak letter folded.

    Roots that differ only in their transcribed final weak letter
    (ا, ى, ي, و) share a key.

    Examples:
        >>> normalize_root_family("عصو") == normalize_root_family("عصا")
        True
    """
    normalized = normalize_for_match(text)
    if normalized and normalized[-1] in WEAK_FINAL_ROOT_CHARS:
        return normalized[:-1] + ROOT_FAMILY_MARKER
    return normalized


def lemma_candidates(text: str | None) -> set[str]:
    """
    Conservative set of lemma spellings for matching.

    Contains the matching form plus every stem obtained by removing one
    common pronoun suffix, as long as more than one letter remains.

    Examples:
        >>> sorted(lemma_candidates("عصاك"))
        ['عصا', 'عصاك']
    """
    base = normalize_for_match(text)
    if not base:
        return set()

    candidates = {base}
    for suffix in COMMON_SUFFIXES:
        if len(base) > len(suffix) + 1 and base.endswith(suffix):
            candidates.add(base[: -len(suffix)])
    return candidates


def normalize_for_search(text: str | None) -> str:
    """
    Loose search form: matching form plus orthographic folding.

    Folds hamza-seated alifs and alif wasla to bare alif, alif maqsura and
    yeh-seated hamza to yeh, waw-seated hamza to waw, teh marbuta to heh,
    and collapses whitespace. Used for surface-text lookups where the user
    types without hamza seats.

    Examples:
        >>> normalize_for_search("ٱلْحَمْدُ")
        'الحمد'
        >>> normalize_for_search("مُوسَىٰ")
        'موسي'
    """
    normalized = normalize_for_match(text)
    if not normalized:
        return ""
    normalized = normalized.translate(_SEARCH_FOLDING)
    return WHITESPACE_RE.sub(" ", normalized)


def roots_match(root_a: str | None, root_b: str | None) -> bool:
    """Whether two roots are equal up to orthographic and weak-final variation."""
    if not root_a or not root_b:
        return False
    norm_a = normalize_for_match(root_a)
    norm_b = normalize_for_match(root_b)
    if not norm_a or not norm_b:
        return False
    return norm_a == norm_b or normalize_root_family(norm_a) == normalize_root_family(norm_b)


def lemma_matches(lemma: str | None, *values: str | None) -> bool:
    """
    Whether any lemma candidate of ``lemma`` equals one of ``values``.

    Values (typically a token's lemma and surface text) are compared in
    their matching form.
    """
    candidates = lemma_candidates(lemma)
    if not candidates:
        return False
    for value in values:
        normalized = normalize_for_match(value)
        if normalized and normalized in candidates:
            return True
    return False
