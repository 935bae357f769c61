"""
Root-to-lemma flow data model.
"""

from pydantic import BaseModel, Field


class RootWordFlow(BaseModel):
    """Tokens sharing one (root, lemma) pair."""

    root: str = Field(..., description="Arabic root, may be empty")
    lemma: str = Field(..., description="Arabic lemma, may be empty")
    count: int = Field(default=0, ge=0, description="Number of tokens")
    token_ids: list[str] = Field(default_factory=list)
