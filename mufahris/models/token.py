"""
Corpus token data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class PartOfSpeech(str, Enum):
    """Coarse part-of-speech classes used across the corpus."""

    NOUN = "N"
    VERB = "V"
    PARTICLE = "P"
    ADJECTIVE = "ADJ"
    PRONOUN = "PRON"


class Morphology(BaseModel):
    """
    Morphological detail attached to a token.

    Attributes:
        features: Open feature map (e.g. {"GEN": "true", "MOOD": "IND"}).
            The reserved ROOT, LEM and POS keys never appear here.
        gloss: English gloss, when the token source supplies one
        stem: Stem form, usually the decoded lemma
    """

    features: dict[str, str] = Field(
        default_factory=dict,
        description="Open string-to-string feature map",
    )
    gloss: Optional[str] = Field(
        default=None,
        description="English gloss from the token source",
    )
    stem: Optional[str] = Field(
        default=None,
        description="Stem form",
    )

    model_config = {"frozen": True}


class CorpusToken(BaseModel):
    """
    A single surface word of the corpus with its morphology.

    Attributes:
        id: Location key "sura:ayah:position"
        sura: Surah number
        ayah: Ayah number within the surah
        position: 1-based word position within the ayah
        text: Surface form in Arabic script
        root: Arabic root, empty for function words
        lemma: Arabic lemma, may be empty
        pos: Coarse part of speech
        morphology: Feature map, gloss and stem
    """

    id: str = Field(
        ...,
        description="Location key sura:ayah:position",
        pattern=r"^\d+:\d+:\d+$",
    )
    sura: int = Field(
        ...,
        description="Surah number",
        ge=1,
    )
    ayah: int = Field(
        ...,
        description="Ayah number within the surah",
        ge=1,
    )
    position: int = Field(
        ...,
        description="1-based word position within the ayah",
        ge=1,
    )
    text: str = Field(
        ...,
        description="Surface form in Arabic script",
    )
    root: str = Field(
        default="",
        description="Arabic root (empty for function words)",
    )
    lemma: str = Field(
        default="",
        description="Arabic lemma",
    )
    pos: PartOfSpeech = Field(
        default=PartOfSpeech.NOUN,
        description="Coarse part of speech",
    )
    morphology: Morphology = Field(
        default_factory=Morphology,
        description="Morphological features, gloss and stem",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "1:2:1",
                    "sura": 1,
                    "ayah": 2,
                    "position": 1,
                    "text": "ٱلْحَمْدُ",
                    "root": "حمد",
                    "lemma": "حَمْد",
                    "pos": "N",
                    "morphology": {
                        "features": {"NOM": "true"},
                        "gloss": "praise",
                        "stem": "حَمْد",
                    },
                }
            ]
        },
    }

    @computed_field
    @property
    def ayah_key(self) -> str:
        """Ayah location key "sura:ayah"."""
        return f"{self.sura}:{self.ayah}"

    @classmethod
    def location_id(cls, sura: int, ayah: int, position: int) -> str:
        """Build a token id from its location."""
        return f"{sura}:{ayah}:{position}"

    def __str__(self) -> str:
        return f"CorpusToken({self.id}, {self.text}, root={self.root or '-'})"
