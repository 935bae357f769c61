"""
Collocation query and result data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from mufahris.models.token import PartOfSpeech


class TermKind(str, Enum):
    """Whether a term is matched as a root or as a lemma."""

    ROOT = "root"
    LEMMA = "lemma"


class WindowType(str, Enum):
    """Co-occurrence scope around each target occurrence."""

    AYAH = "ayah"
    DISTANCE = "distance"
    SURAH = "surah"


class CollocationTerm(BaseModel):
    """
    A root or lemma to search for.

    Attributes:
        kind: Match as root (root-family equality) or lemma (candidate equality)
        value: Arabic root or lemma
    """

    kind: TermKind = Field(default=TermKind.ROOT, description="Root or lemma")
    value: str = Field(..., description="Arabic root or lemma")

    model_config = {"frozen": True}

    @classmethod
    def coerce(cls, term: "str | CollocationTerm | dict") -> "CollocationTerm":
        """Accept a bare root string, a mapping or a term."""
        if isinstance(term, CollocationTerm):
            return term
        if isinstance(term, str):
            return cls(kind=TermKind.ROOT, value=term)
        return cls.model_validate(term)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


class CollocateFilter(BaseModel):
    """Restricts which collocates are counted."""

    pos: Optional[list[PartOfSpeech]] = Field(
        default=None,
        description="Allowed parts of speech",
    )
    lemma: Optional[str] = Field(default=None, description="Required lemma")
    root: Optional[str] = Field(default=None, description="Required root")


class CollocationOptions(BaseModel):
    """
    Options for a collocation query.

    Attributes:
        window_type: ayah, distance or surah window
        distance: +/- token radius for distance windows (None = settings default)
        min_frequency: Minimum co-occurrence count (None = settings default)
        group_by: Group collocates by root or by lemma
        filter: Optional collocate filter
        pair_term: Only count collocates matching this second term
        sample_limit: Samples kept per result (None = settings default)
    """

    window_type: WindowType = Field(..., description="Co-occurrence scope")
    distance: Optional[int] = Field(
        default=None,
        description="+/- token radius for distance windows",
        ge=0,
    )
    min_frequency: Optional[int] = Field(
        default=None,
        description="Minimum co-occurrence count",
        ge=1,
    )
    group_by: TermKind = Field(
        default=TermKind.ROOT,
        description="Group collocates by root or lemma",
    )
    filter: Optional[CollocateFilter] = Field(
        default=None,
        description="Collocate filter",
    )
    pair_term: Optional[CollocationTerm] = Field(
        default=None,
        description="Restrict collocates to this term",
    )
    sample_limit: Optional[int] = Field(
        default=None,
        description="Sample lemmas/windows kept per result",
        ge=0,
    )


class CollocationResult(BaseModel):
    """
    A collocate of a target term with its association score.

    Attributes:
        term: The collocate root or lemma, as stored on the tokens
        group_by: Whether term is a root or a lemma
        count: Number of windows in which the collocate co-occurs
        pmi: Pointwise mutual information (log2)
        sample_lemmas: Lemmas seen for this collocate
        sample_windows: Window labels ("2:255", "2:255:7" or "2")
    """

    term: str = Field(..., description="Collocate root or lemma")
    group_by: TermKind = Field(..., description="Root or lemma grouping")
    count: int = Field(..., description="Co-occurrence window count", ge=1)
    pmi: float = Field(..., description="Pointwise mutual information")
    sample_lemmas: list[str] = Field(default_factory=list)
    sample_windows: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"CollocationResult({self.term}, count={self.count}, pmi={self.pmi:.2f})"


class PairCooccurrenceResult(BaseModel):
    """
    Raw window overlap between two terms.

    For distance windows, shared windows are the A-centred windows that
    contain B.
    """

    term_a: CollocationTerm
    term_b: CollocationTerm
    windows_a: list[str] = Field(default_factory=list)
    windows_b: list[str] = Field(default_factory=list)
    shared_windows: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def count_a(self) -> int:
        """Number of windows containing term A."""
        return len(self.windows_a)

    @computed_field
    @property
    def count_b(self) -> int:
        """Number of windows containing term B."""
        return len(self.windows_b)

    @computed_field
    @property
    def cooccurrence_count(self) -> int:
        """Number of shared windows."""
        return len(self.shared_windows)
