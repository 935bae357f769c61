"""
Pydantic data models for Mufahris library.

These models represent the core data structures used throughout the library:
- CorpusToken: A surface word with root, lemma, part of speech and features
- RawSegment: One line of the morphology annotation
- MorphologyRecord: Merged morphology of one surface word
- FrequencyTable: Corpus-wide frequency baselines
- CollocationOptions / CollocationResult: Collocation queries and results
- QueryFilters / ParsedSearchQuery: Index queries
"""

from mufahris.models.token import CorpusToken, Morphology, PartOfSpeech
from mufahris.models.morphology import MorphologyRecord, RawSegment
from mufahris.models.collocation import (
    CollocateFilter,
    CollocationOptions,
    CollocationResult,
    CollocationTerm,
    PairCooccurrenceResult,
    TermKind,
    WindowType,
)
from mufahris.models.frequency import FrequencyTable
from mufahris.models.query import ParsedSearchQuery, QueryFilters
from mufahris.models.flow import RootWordFlow

__all__ = [
    "CorpusToken",
    "Morphology",
    "PartOfSpeech",
    "MorphologyRecord",
    "RawSegment",
    "CollocateFilter",
    "CollocationOptions",
    "CollocationResult",
    "CollocationTerm",
    "PairCooccurrenceResult",
    "TermKind",
    "WindowType",
    "FrequencyTable",
    "ParsedSearchQuery",
    "QueryFilters",
    "RootWordFlow",
]
