"""
مُفَهْرِس (Mufahris): a Python library to index and analyse the Quranic Arabic Corpus morphology.

Usage:
    from mufahris.data import MorphologyCache, build_corpus_tokens
    from mufahris.core import build_indexes, query, calculate_frequencies, get_collocations

    # Parse the annotation once per session
    cache = MorphologyCache()
    morphology = cache.get("quranic-corpus-morphology-0.4.txt")

    # Join with surface words from your token source
    tokens = build_corpus_tokens(words, morphology)

    # Structured queries
    indexes = build_indexes(tokens)
    ids = query(indexes, root="رحم", pos="N")

    # Collocations
    freq = calculate_frequencies(tokens)
    for result in get_collocations("رحم", tokens, freq, {"window_type": "ayah"})[:10]:
        print(f"{result.term}: count={result.count}, pmi={result.pmi:.2f}")
"""

import logging

from mufahris.models import (
    CollocateFilter,
    CollocationOptions,
    CollocationResult,
    CollocationTerm,
    CorpusToken,
    FrequencyTable,
    Morphology,
    MorphologyRecord,
    PairCooccurrenceResult,
    ParsedSearchQuery,
    PartOfSpeech,
    QueryFilters,
    RawSegment,
    RootWordFlow,
    TermKind,
    WindowType,
)
from mufahris.config import MufahrisSettings, get_settings, configure
from mufahris.exceptions import (
    MufahrisError,
    ConfigurationError,
    MorphologyDataError,
    InvalidOptionsError,
)
from mufahris.core import (
    CorpusIndexes,
    build_indexes,
    calculate_frequencies,
    decode,
    get_collocations,
    get_pair_cooccurrence,
    parse_search_query,
    query,
)
from mufahris.data import (
    MorphologyCache,
    build_corpus_tokens,
    parse_annotation_text,
    tokens_from_morphology,
)

logging.getLogger("mufahris").addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "CollocateFilter",
    "CollocationOptions",
    "CollocationResult",
    "CollocationTerm",
    "CorpusToken",
    "FrequencyTable",
    "Morphology",
    "MorphologyRecord",
    "PairCooccurrenceResult",
    "ParsedSearchQuery",
    "PartOfSpeech",
    "QueryFilters",
    "RawSegment",
    "RootWordFlow",
    "TermKind",
    "WindowType",
    # Config
    "MufahrisSettings",
    "get_settings",
    "configure",
    # Exceptions
    "MufahrisError",
    "ConfigurationError",
    "MorphologyDataError",
    "InvalidOptionsError",
    # Core
    "CorpusIndexes",
    "build_indexes",
    "calculate_frequencies",
    "decode",
    "get_collocations",
    "get_pair_cooccurrence",
    "parse_search_query",
    "query",
    # Data
    "MorphologyCache",
    "build_corpus_tokens",
    "parse_annotation_text",
    "tokens_from_morphology",
]
