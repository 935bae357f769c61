"""
Buckwalter transliteration decoding.

The morphology annotation writes roots, lemmas and surface forms in the
Buckwalter Latin transliteration. This module decodes them to Arabic
script in a single left-to-right pass.

The ``#`` symbol is a contextual hamza whose seat is chosen from the
decoder state (last vowel, last base letter) and the next input symbol.
"""

from dataclasses import dataclass
from typing import Optional


# Unicode constants
HAMZA = "ء"
HAMZA_ALIF = "أ"
HAMZA_WAW = "ؤ"
HAMZA_YA = "ئ"
WAW = "و"
YA = "ي"
ALIF_MAQSURA = "ى"

FATHA = "َ"
DAMMA = "ُ"
KASRA = "ِ"
FATHATAN = "ً"
DAMMATAN = "ٌ"
KASRATAN = "ٍ"
SHADDA = "ّ"
SUKUN = "ْ"
SUPERSCRIPT_ALEF = "ٰ"  # dagger alif

CONTEXTUAL_HAMZA = "#"

# Base letters (Buckwalter -> Arabic)
_LETTERS = {
    "'": HAMZA,
    "|": "آ",
    ">": HAMZA_ALIF,
    "<": "إ",
    "&": HAMZA_WAW,
    "}": HAMZA_YA,
    "A": "ا",
    "b": "ب",
    "p": "ة",
    "t": "ت",
    "v": "ث",
    "j": "ج",
    "H": "ح",
    "x": "خ",
    "d": "د",
    "*": "ذ",
    "r": "ر",
    "z": "ز",
    "s": "س",
    "$": "ش",
    "S": "ص",
    "D": "ض",
    "T": "ط",
    "Z": "ظ",
    "E": "ع",
    "g": "غ",
    "f": "ف",
    "q": "ق",
    "k": "ك",
    "l": "ل",
    "m": "م",
    "n": "ن",
    "h": "ه",
    "w": WAW,
    "Y": ALIF_MAQSURA,
    "y": YA,
    "{": "ٱ",
}

# Vowel and other diacritics (Buckwalter -> Arabic)
_DIACRITICS = {
    "F": FATHATAN,
    "N": DAMMATAN,
    "K": KASRATAN,
    "a": FATHA,
    "u": DAMMA,
    "i": KASRA,
    "~": SHADDA,
    "o": SUKUN,
    "`": SUPERSCRIPT_ALEF,
}

# Pause marks, annotation punctuation and the segment boundary
STRIP_SYMBOLS = frozenset({"^", "@", "_", ".", ",", "2", "[", "]", "+"})

_KASRA_CLASS = frozenset({KASRA, KASRATAN})
_DAMMA_CLASS = frozenset({DAMMA, DAMMATAN})
_FATHA_CLASS_SYMBOLS = frozenset({"a", "F"})

# Diacritics that do not change the vowel of the current letter
_VOWEL_NEUTRAL = frozenset({SHADDA, SUPERSCRIPT_ALEF})


@dataclass
class _DecoderState:
    """Left context of the decoder."""
    last_vowel: Optional[str] = None  # vowel diacritic on the current letter
    last_letter: Optional[str] = None  # last emitted base letter

    def emit_letter(self, letter: str) -> None:
        self.last_letter = letter
        self.last_vowel = None

    def emit_diacritic(self, mark: str) -> None:
        if mark not in _VOWEL_NEUTRAL:
            self.last_vowel = mark


def decode_hamza_seat(
    last_vowel: Optional[str],
    last_letter: Optional[str],
    next_symbol: Optional[str],
) -> str:
    """
    Choose the seat of a contextual hamza.

    Precedence, first match wins:
    1. kasra before, or yeh/alif maqsura before -> hamza on yeh
    2. damma before, or waw before -> hamza on waw
    3. fatha-class vowel next -> hamza above alif
    4. bare hamza

    Args:
        last_vowel: Vowel diacritic on the preceding letter, if any
        last_letter: Preceding base letter, if any
        next_symbol: Next transliteration symbol, if any

    Returns:
        The seated hamza character
    """
    if last_vowel in _KASRA_CLASS or last_letter in (YA, ALIF_MAQSURA):
        return HAMZA_YA
    if last_vowel in _DAMMA_CLASS or last_letter == WAW:
        return HAMZA_WAW
    if next_symbol in _FATHA_CLASS_SYMBOLS:
        return HAMZA_ALIF
    return HAMZA


def _next_symbols(text: str) -> list[Optional[str]]:
    """For each position, the next symbol after it that is not stripped."""
    following: list[Optional[str]] = [None] * len(text)
    upcoming: Optional[str] = None
    for i in range(len(text) - 1, -1, -1):
        following[i] = upcoming
        if text[i] not in STRIP_SYMBOLS:
            upcoming = text[i]
    return following


def decode(text: str) -> str:
    """
    Decode a Buckwalter-transliterated string to Arabic script.

    Unknown characters pass through unchanged; strip symbols are dropped.

    Args:
        text: Transliterated token or feature value

    Returns:
        Arabic text

    Examples:
        >>> decode("ktb")
        'كتب'
        >>> decode("bi#")
        'بِئ'
    """
    if not text:
        return ""

    state = _DecoderState()
    out: list[str] = []
    following = _next_symbols(text)

    for i, ch in enumerate(text):
        if ch in STRIP_SYMBOLS:
            continue

        if ch == CONTEXTUAL_HAMZA:
            seat = decode_hamza_seat(state.last_vowel, state.last_letter, following[i])
            out.append(seat)
            state.emit_letter(seat)
            continue

        letter = _LETTERS.get(ch)
        if letter is not None:
            out.append(letter)
            state.emit_letter(letter)
            continue

        mark = _DIACRITICS.get(ch)
        if mark is not None:
            out.append(mark)
            state.emit_diacritic(mark)
            continue

        out.append(ch)

    return "".join(out)
