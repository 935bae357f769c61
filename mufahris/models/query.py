"""
Structured query data models.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from mufahris.models.token import PartOfSpeech


class QueryFilters(BaseModel):
    """
    Conjunctive index query. Every supplied field must match.

    Attributes:
        root: Root in any weak-final spelling
        lemma: Lemma, optionally with a pronoun suffix
        pos: Part of speech
        ayah: Ayah key "sura:ayah"
    """

    root: Optional[str] = Field(default=None)
    lemma: Optional[str] = Field(default=None)
    pos: Optional[PartOfSpeech] = Field(default=None)
    ayah: Optional[str] = Field(default=None)

    @computed_field
    @property
    def is_empty(self) -> bool:
        """Whether no filter is set."""
        return not (self.root or self.lemma or self.pos or self.ayah)


class ParsedSearchQuery(BaseModel):
    """
    A free-text search box query split into known fields.

    Example:
        "root:عصو pos:n ayah:20:17 عصاك" parses into root, pos, ayah and
        free_text "عصاك".
    """

    raw: str = ""
    free_text: str = ""
    root: Optional[str] = None
    lemma: Optional[str] = None
    pos: Optional[PartOfSpeech] = None
    ayah: Optional[str] = None
    text: Optional[str] = None
    gloss: Optional[str] = None

    def to_filters(self) -> QueryFilters:
        """Index filters carried by this query."""
        return QueryFilters(root=self.root, lemma=self.lemma, pos=self.pos, ayah=self.ayah)
