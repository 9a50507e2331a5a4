"""Entity models produced by the extractors."""

from pydantic import BaseModel, ConfigDict, Field


class CharacterCandidate(BaseModel):
    """A probable character name with its heuristic hit count.

    With mention corroboration on (the default), ``count`` is the larger
    of the heuristic hits and the capitalized whole-word mentions of the
    name. A name with one dialogue tag that is mentioned twice therefore
    clears a floor of 2. Set ``corroborate_mentions`` to False to get
    raw hit counts.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(ge=1)
    context: list[str] = Field(default_factory=list, max_length=5)


class LocationCandidate(BaseModel):
    """A probable place name."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(ge=1)
