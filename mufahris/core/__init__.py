"""
Core modules for Mufahris library.

This package contains the core algorithms for:
- Buckwalter transliteration decoding
- Arabic text normalization
- Inverted indexes and conjunctive queries
- Collocation analysis with PMI
- Search query parsing and root flows
"""

from mufahris.core.transliteration import decode, decode_hamza_seat
from mufahris.core.arabic import (
    lemma_candidates,
    lemma_matches,
    normalize_for_match,
    normalize_for_search,
    normalize_root_family,
    roots_match,
)
from mufahris.core.query_parser import parse_search_query, resolve_pos
from mufahris.core.indexes import CorpusIndexes, build_indexes, query
from mufahris.core.collocation import (
    calculate_frequencies,
    get_collocations,
    get_pair_cooccurrence,
    token_matches_filter,
    token_matches_term,
)
from mufahris.core.flows import build_root_word_flows, unique_roots

__all__ = [
    # Transliteration
    "decode",
    "decode_hamza_seat",
    # Arabic
    "lemma_candidates",
    "lemma_matches",
    "normalize_for_match",
    "normalize_for_search",
    "normalize_root_family",
    "roots_match",
    # Query parsing
    "parse_search_query",
    "resolve_pos",
    # Indexes
    "CorpusIndexes",
    "build_indexes",
    "query",
    # Collocation
    "calculate_frequencies",
    "get_collocations",
    "get_pair_cooccurrence",
    "token_matches_filter",
    "token_matches_term",
    # Flows
    "build_root_word_flows",
    "unique_roots",
]
