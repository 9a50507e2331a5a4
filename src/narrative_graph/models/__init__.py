"""Data models for documents, entities and relationships."""

from narrative_graph.models.document import Document
from narrative_graph.models.entities import CharacterCandidate, LocationCandidate
from narrative_graph.models.relationships import RelationshipEdge
from narrative_graph.models.result import ExtractionResult

__all__ = [
    "Document",
    "CharacterCandidate",
    "LocationCandidate",
    "RelationshipEdge",
    "ExtractionResult",
]
