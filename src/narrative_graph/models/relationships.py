"""Relationship models for the character graph."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RelationshipEdge(BaseModel):
    """An undirected co-occurrence edge between two characters.

    The pair is stored in lexicographic order, so (A, B) and (B, A)
    describe the same edge.
    """

    model_config = ConfigDict(frozen=True)

    char1: str
    char2: str
    strength: int = Field(ge=1)
    context: list[str] = Field(default_factory=list, max_length=5)

    @model_validator(mode="before")
    @classmethod
    def _order_pair(cls, data):
        if isinstance(data, dict) and "char1" in data and "char2" in data:
            first, second = data["char1"], data["char2"]
            if isinstance(first, str) and isinstance(second, str) and second < first:
                data = {**data, "char1": second, "char2": first}
        return data

    @property
    def pair(self) -> tuple[str, str]:
        return (self.char1, self.char2)
