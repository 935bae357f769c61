"""
Search box query parsing.

Splits a free-text query such as ``"r:سعي l:تسعى p:v عصاك"`` into the
structured fields understood by the index and the remaining free text.
"""

import re
from typing import Optional

from mufahris.models import ParsedSearchQuery, PartOfSpeech


POS_ALIASES = {
    "n": PartOfSpeech.NOUN,
    "noun": PartOfSpeech.NOUN,
    "v": PartOfSpeech.VERB,
    "verb": PartOfSpeech.VERB,
    "p": PartOfSpeech.PARTICLE,
    "particle": PartOfSpeech.PARTICLE,
    "adj": PartOfSpeech.ADJECTIVE,
    "adjective": PartOfSpeech.ADJECTIVE,
    "pron": PartOfSpeech.PRONOUN,
    "pronoun": PartOfSpeech.PRONOUN,
}

FIELD_ALIASES = {
    "root": "root",
    "r": "root",
    "lemma": "lemma",
    "l": "lemma",
    "pos": "pos",
    "p": "pos",
    "ayah": "ayah",
    "a": "ayah",
    "text": "text",
    "t": "text",
    "gloss": "gloss",
    "g": "gloss",
}

# Operator characters users paste around terms
_EDGE_OPERATORS_RE = re.compile(r"^[+~|]+|[+~|]+$")


def resolve_pos(value: "str | PartOfSpeech | None") -> Optional[PartOfSpeech]:
    """
    Map a part-of-speech value or alias to PartOfSpeech.

    Accepts enum members, tag values ("N", "ADJ") and aliases ("noun",
    "pron"), case-insensitively.

    Returns:
        PartOfSpeech, or None when the value is not recognized
    """
    if value is None:
        return None
    if isinstance(value, PartOfSpeech):
        return value
    key = value.strip().lower()
    if key in POS_ALIASES:
        return POS_ALIASES[key]
    for pos in PartOfSpeech:
        if pos.value.lower() == key:
            return pos
    return None


def parse_search_query(raw_input: str) -> ParsedSearchQuery:
    """
    Parse a search box query.

    ``field:value`` chunks with a known field populate that field (the
    value may itself contain colons, as in ``ayah:20:17``). Unknown part
    of speech values are dropped. Everything else becomes free text.

    Examples:
        >>> q = parse_search_query("root:عصو pos:n ayah:20:17")
        >>> q.root, q.pos, q.ayah
        ('عصو', <PartOfSpeech.NOUN: 'N'>, '20:17')
    """
    raw = (raw_input or "").strip()
    fields: dict[str, object] = {}
    if not raw:
        return ParsedSearchQuery(raw=raw)

    chunks = [_EDGE_OPERATORS_RE.sub("", part) for part in raw.split()]
    leftover = []

    for chunk in chunks:
        if not chunk:
            continue
        idx = chunk.find(":")
        if idx <= 0:
            leftover.append(chunk)
            continue

        field_name = FIELD_ALIASES.get(chunk[:idx].lower())
        value = chunk[idx + 1:].strip()
        if not value:
            continue
        if field_name is None:
            leftover.append(chunk)
            continue

        if field_name == "pos":
            pos = resolve_pos(value)
            if pos is not None:
                fields["pos"] = pos
            continue

        fields[field_name] = value

    return ParsedSearchQuery(raw=raw, free_text=" ".join(leftover).strip(), **fields)
