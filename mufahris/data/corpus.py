"""
Corpus token assembly.

Joins surface words supplied by a token source (surah, ayah, position,
text, optional gloss) with merged morphology records, or builds fallback
tokens from the morphology alone when no token source is available.
"""

import re
from typing import Any, Iterable, Mapping

from mufahris._logging import log_warning
from mufahris.models import CorpusToken, Morphology, MorphologyRecord, PartOfSpeech


TOKEN_ID_RE = re.compile(r"^(\d+):(\d+):(\d+)$")
FALLBACK_TEXT = "-"


def _field(word: Any, name: str, default: Any = None) -> Any:
    if isinstance(word, Mapping):
        return word.get(name, default)
    return getattr(word, name, default)


def build_corpus_tokens(
    words: Iterable[Any],
    morphology: Mapping[str, MorphologyRecord],
) -> list[CorpusToken]:
    """
    Join surface words with their morphology records.

    Words are mappings or objects exposing ``sura``, ``ayah``, ``position``,
    ``text`` and optionally ``gloss``. A word without a record gets an
    empty root, its own text as lemma and the Noun class.

    Args:
        words: Surface words in corpus order
        morphology: Records keyed by "sura:ayah:position"

    Returns:
        Corpus tokens in the order of ``words``
    """
    tokens = []
    missing = 0

    for word in words:
        sura = int(_field(word, "sura"))
        ayah = int(_field(word, "ayah"))
        position = int(_field(word, "position"))
        text = _field(word, "text", "") or ""
        token_id = CorpusToken.location_id(sura, ayah, position)

        record = morphology.get(token_id)
        if record is None:
            missing += 1

        tokens.append(CorpusToken(
            id=token_id,
            sura=sura,
            ayah=ayah,
            position=position,
            text=text,
            root=record.root if record else "",
            lemma=record.lemma if record else text,
            pos=record.pos if record else PartOfSpeech.NOUN,
            morphology=Morphology(
                features=dict(record.features) if record else {},
                gloss=_field(word, "gloss"),
                stem=record.stem if record else None,
            ),
        ))

    if missing:
        log_warning("Words without morphology record", missing=missing, total=len(tokens))

    return tokens


def tokens_from_morphology(morphology: Mapping[str, MorphologyRecord]) -> list[CorpusToken]:
    """
    Build tokens from morphology records alone.

    The surface text falls back to the stem, lemma or root. Keys that are
    not "sura:ayah:position" are skipped.

    Returns:
        Tokens sorted by (sura, ayah, position)
    """
    tokens = []

    for token_id, record in morphology.items():
        match = TOKEN_ID_RE.match(token_id)
        if not match:
            continue
        sura, ayah, position = (int(g) for g in match.groups())
        if min(sura, ayah, position) < 1:
            continue

        text = record.stem or record.lemma or record.root or FALLBACK_TEXT
        tokens.append(CorpusToken(
            id=token_id,
            sura=sura,
            ayah=ayah,
            position=position,
            text=text,
            root=record.root,
            lemma=record.lemma or text,
            pos=record.pos,
            morphology=Morphology(features=dict(record.features), stem=record.stem),
        ))

    tokens.sort(key=lambda t: (t.sura, t.ayah, t.position))
    return tokens


def morphology_from_tokens(tokens: Iterable[CorpusToken]) -> dict[str, MorphologyRecord]:
    """Morphology records carried by already-built tokens, keyed by token id."""
    return {
        token.id: MorphologyRecord(
            root=token.root,
            lemma=token.lemma,
            pos=token.pos,
            features=dict(token.morphology.features),
            stem=token.morphology.stem,
        )
        for token in tokens
    }
