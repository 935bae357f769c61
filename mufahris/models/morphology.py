"""
Annotation segment and merged morphology record models.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from mufahris.models.token import PartOfSpeech


class RawSegment(BaseModel):
    """
    One line of the morphology annotation.

    A surface word can be split into several segments (prefix clitics,
    stem, suffix pronouns) sharing the same (sura, ayah, word) location.

    Attributes:
        sura: Surah number
        ayah: Ayah number
        word: Word position within the ayah
        segment: Segment number within the word
        form: Transliterated surface form of the segment
        tag: Fine-grained tag column
        features: Pipe-delimited feature tokens, in source order
    """

    sura: int = Field(..., ge=1, description="Surah number")
    ayah: int = Field(..., ge=1, description="Ayah number")
    word: int = Field(..., ge=1, description="Word position within the ayah")
    segment: int = Field(..., ge=1, description="Segment number within the word")
    form: str = Field(default="", description="Transliterated surface form")
    tag: str = Field(default="", description="Fine-grained tag")
    features: list[str] = Field(
        default_factory=list,
        description="Feature tokens such as ROOT:ktb, LEM:kitAb, GEN",
    )

    @computed_field
    @property
    def word_key(self) -> str:
        """Merge key "sura:ayah:word" (segment dropped)."""
        return f"{self.sura}:{self.ayah}:{self.word}"

    def __str__(self) -> str:
        return f"RawSegment({self.sura}:{self.ayah}:{self.word}:{self.segment}, {self.tag})"


class MorphologyRecord(BaseModel):
    """
    Canonical morphology of one surface word, merged from its segments.

    Attributes:
        root: Decoded Arabic root, empty when no segment carries ROOT
        lemma: Decoded Arabic lemma (or surface form fallback)
        pos: Coarse part of speech
        features: Feature map of the canonical segment
        stem: Stem form
    """

    root: str = Field(default="", description="Arabic root")
    lemma: str = Field(default="", description="Arabic lemma")
    pos: PartOfSpeech = Field(
        default=PartOfSpeech.NOUN,
        description="Coarse part of speech",
    )
    features: dict[str, str] = Field(
        default_factory=dict,
        description="Feature map without ROOT/LEM/POS",
    )
    stem: Optional[str] = Field(default=None, description="Stem form")

    @property
    def has_root(self) -> bool:
        """Whether the word carries a root."""
        return bool(self.root)
