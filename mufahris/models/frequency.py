"""
Corpus frequency table data model.
"""

from pydantic import BaseModel, Field

from mufahris.models.collocation import TermKind, WindowType


class FrequencyTable(BaseModel):
    """
    Corpus-wide frequency baselines used as PMI denominators.

    Raw counts are token counts; ayah and surah frequencies are document
    frequencies (number of distinct ayahs/surahs a value appears in).
    Keys are the root/lemma strings as stored on the tokens.
    """

    total_tokens: int = Field(default=0, ge=0)
    total_ayahs: int = Field(default=0, ge=0)
    total_surahs: int = Field(default=0, ge=0)
    root_frequencies: dict[str, int] = Field(default_factory=dict)
    root_ayah_frequencies: dict[str, int] = Field(default_factory=dict)
    root_surah_frequencies: dict[str, int] = Field(default_factory=dict)
    lemma_frequencies: dict[str, int] = Field(default_factory=dict)
    lemma_ayah_frequencies: dict[str, int] = Field(default_factory=dict)
    lemma_surah_frequencies: dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def source_for(self, kind: TermKind, window_type: WindowType) -> dict[str, int]:
        """Frequency map for a term kind at the granularity of a window type."""
        if kind == TermKind.LEMMA:
            if window_type == WindowType.AYAH:
                return self.lemma_ayah_frequencies
            if window_type == WindowType.SURAH:
                return self.lemma_surah_frequencies
            return self.lemma_frequencies

        if window_type == WindowType.AYAH:
            return self.root_ayah_frequencies
        if window_type == WindowType.SURAH:
            return self.root_surah_frequencies
        return self.root_frequencies

    def total_for(self, window_type: WindowType) -> int:
        """Number of windows N at the granularity of a window type."""
        if window_type == WindowType.AYAH:
            return self.total_ayahs
        if window_type == WindowType.SURAH:
            return self.total_surahs
        return self.total_tokens
