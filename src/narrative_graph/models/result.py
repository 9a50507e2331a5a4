"""Aggregate extraction result."""

from pydantic import BaseModel, ConfigDict, Field

from narrative_graph.models.entities import CharacterCandidate, LocationCandidate
from narrative_graph.models.relationships import RelationshipEdge


class ExtractionResult(BaseModel):
    """Characters, locations and relationships found in one corpus."""

    model_config = ConfigDict(frozen=True)

    characters: list[CharacterCandidate] = Field(default_factory=list)
    locations: list[LocationCandidate] = Field(default_factory=list)
    relationships: list[RelationshipEdge] = Field(default_factory=list)

    def character_names(self) -> list[str]:
        """Names of all characters, in ranking order."""
        return [c.name for c in self.characters]

    def get_character_graph(self) -> dict:
        """Get character interaction graph as plain nodes and edges."""
        return {
            "nodes": [
                {"id": c.name, "name": c.name, "mentions": c.count}
                for c in self.characters
            ],
            "edges": [
                {"source": r.char1, "target": r.char2, "weight": r.strength}
                for r in self.relationships
            ],
        }
