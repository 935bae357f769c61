"""
Inverted indexes over corpus tokens and conjunctive queries.

All keys are normalized: roots by root family, lemmas by every lemma
candidate, surface text by the loose search form. Buckets keep source
order.
"""

import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from mufahris._logging import log_indexes_built, log_warning
from mufahris.core.arabic import (
    lemma_candidates,
    normalize_for_match,
    normalize_for_search,
    normalize_root_family,
)
from mufahris.core.query_parser import resolve_pos
from mufahris.models import CorpusToken, QueryFilters


Buckets = dict[str, list[str]]


@dataclass(frozen=True)
class CorpusIndexes:
    """
    Token id buckets keyed by normalized values. Read-only once built.

    Attributes:
        by_root: root-family key -> token ids
        by_lemma: lemma candidate -> token ids
        by_pos: part-of-speech tag -> token ids
        by_ayah: "sura:ayah" -> token ids
        by_text: loose search form of the surface text -> token ids
        order: token id -> corpus position
    """
    by_root: Buckets = field(default_factory=dict)
    by_lemma: Buckets = field(default_factory=dict)
    by_pos: Buckets = field(default_factory=dict)
    by_ayah: Buckets = field(default_factory=dict)
    by_text: Buckets = field(default_factory=dict)
    order: dict[str, int] = field(default_factory=dict)

    def stats(self) -> dict[str, int]:
        """Number of distinct keys per index."""
        return {
            "roots": len(self.by_root),
            "lemmas": len(self.by_lemma),
            "pos": len(self.by_pos),
            "ayahs": len(self.by_ayah),
            "texts": len(self.by_text),
        }

    def __len__(self) -> int:
        return len(self.order)


def build_indexes(tokens: Iterable[CorpusToken]) -> CorpusIndexes:
    """
    Build the root, lemma, part-of-speech, ayah and text indexes.

    Tokens with an empty root or lemma are left out of that index.

    Args:
        tokens: Corpus tokens in corpus order

    Returns:
        CorpusIndexes
    """
    start = time.time()
    by_root: defaultdict[str, list[str]] = defaultdict(list)
    by_lemma: defaultdict[str, list[str]] = defaultdict(list)
    by_pos: defaultdict[str, list[str]] = defaultdict(list)
    by_ayah: defaultdict[str, list[str]] = defaultdict(list)
    by_text: defaultdict[str, list[str]] = defaultdict(list)
    order: dict[str, int] = {}

    for i, token in enumerate(tokens):
        order[token.id] = i

        root_key = normalize_root_family(token.root)
        if root_key:
            by_root[root_key].append(token.id)

        for candidate in lemma_candidates(token.lemma):
            by_lemma[candidate].append(token.id)

        text_key = normalize_for_search(token.text)
        if text_key:
            by_text[text_key].append(token.id)

        by_pos[token.pos.value].append(token.id)
        by_ayah[token.ayah_key].append(token.id)

    indexes = CorpusIndexes(
        by_root=dict(by_root),
        by_lemma=dict(by_lemma),
        by_pos=dict(by_pos),
        by_ayah=dict(by_ayah),
        by_text=dict(by_text),
        order=order,
    )
    log_indexes_built(len(order), indexes.stats(), time.time() - start)
    return indexes


def _coerce_filters(
    filters: "QueryFilters | Mapping[str, Any] | None",
    overrides: Mapping[str, Any],
) -> Optional[QueryFilters]:
    if isinstance(filters, QueryFilters):
        values = filters.model_dump(exclude={"is_empty"})
    else:
        values = dict(filters or {})
    values.update(overrides)

    pos = values.get("pos")
    if pos is not None and pos != "":
        resolved = resolve_pos(pos)
        if resolved is None:
            log_warning("Unknown part of speech in query", pos=pos)
            return None
        values["pos"] = resolved

    try:
        return QueryFilters(**{k: (v or None) for k, v in values.items()})
    except ValidationError as e:
        log_warning("Invalid query filters", error=e.error_count())
        return None


def _root_bucket(indexes: CorpusIndexes, root: str) -> set[str]:
    ids = set(indexes.by_root.get(normalize_root_family(root), ()))
    # A full word typed into the root field still finds its tokens.
    ids.update(indexes.by_lemma.get(normalize_for_match(root), ()))
    ids.update(indexes.by_text.get(normalize_for_search(root), ()))
    return ids


def _lemma_bucket(indexes: CorpusIndexes, lemma: str) -> set[str]:
    ids: set[str] = set()
    for candidate in lemma_candidates(lemma):
        ids.update(indexes.by_lemma.get(candidate, ()))
    ids.update(indexes.by_text.get(normalize_for_search(lemma), ()))
    return ids


def query(
    indexes: CorpusIndexes,
    filters: "QueryFilters | Mapping[str, Any] | None" = None,
    **kwargs: Any,
) -> list[str]:
    """
    Token ids matching every supplied filter.

    Root filters match through the root family, lemma filters through
    lemma candidates, so ``query(ix, root="عصا")`` also finds tokens whose
    root is spelled "عصو", and ``query(ix, lemma="عصاك")`` finds "عصا".

    Args:
        indexes: Indexes from build_indexes
        filters: QueryFilters or mapping with root, lemma, pos, ayah
        **kwargs: Filters given as keywords (override ``filters``)

    Returns:
        Matching token ids in ascending corpus order. An empty filter set
        returns an empty list, never every token.
    """
    resolved = _coerce_filters(filters, kwargs)
    if resolved is None:
        return []
    if resolved.is_empty:
        log_warning("Query without filters returns no tokens")
        return []

    buckets: list[set[str]] = []
    if resolved.root:
        buckets.append(_root_bucket(indexes, resolved.root))
    if resolved.lemma:
        buckets.append(_lemma_bucket(indexes, resolved.lemma))
    if resolved.pos:
        buckets.append(set(indexes.by_pos.get(resolved.pos.value, ())))
    if resolved.ayah:
        buckets.append(set(indexes.by_ayah.get(resolved.ayah.strip(), ())))

    buckets.sort(key=len)
    result = buckets[0]
    for bucket in buckets[1:]:
        result = result & bucket
        if not result:
            break

    return sorted(result, key=indexes.order.__getitem__)
