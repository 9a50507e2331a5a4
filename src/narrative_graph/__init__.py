"""Narrative Graph - heuristic characters, places and relationships from fiction."""

__version__ = "0.1.0"

from narrative_graph.exceptions import InvalidInputError, NarrativeGraphError
from narrative_graph.extract import (
    analyze_relationships,
    extract_characters,
    extract_locations,
    parse_files,
)
from narrative_graph.ingest.splitter import split_into_sentences
from narrative_graph.models import (
    CharacterCandidate,
    Document,
    ExtractionResult,
    LocationCandidate,
    RelationshipEdge,
)

__all__ = [
    "__version__",
    "CharacterCandidate",
    "Document",
    "ExtractionResult",
    "InvalidInputError",
    "LocationCandidate",
    "NarrativeGraphError",
    "RelationshipEdge",
    "analyze_relationships",
    "extract_characters",
    "extract_locations",
    "parse_files",
    "split_into_sentences",
]
