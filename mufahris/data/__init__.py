"""
Corpus data module for Mufahris library.

Parses the morphology annotation and assembles corpus tokens.
"""

from mufahris.data.annotation import (
    build_feature_map,
    extract_feature,
    load_annotation_file,
    merge_segments,
    normalize_pos,
    parse_annotation_text,
    parse_segment_line,
)
from mufahris.data.corpus import (
    build_corpus_tokens,
    morphology_from_tokens,
    tokens_from_morphology,
)
from mufahris.data.cache import MorphologyCache

__all__ = [
    "build_feature_map",
    "extract_feature",
    "load_annotation_file",
    "merge_segments",
    "normalize_pos",
    "parse_annotation_text",
    "parse_segment_line",
    "build_corpus_tokens",
    "morphology_from_tokens",
    "tokens_from_morphology",
    "MorphologyCache",
]
