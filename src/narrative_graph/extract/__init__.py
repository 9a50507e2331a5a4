"""Heuristic extraction of characters, locations and relationships."""

from .characters import CharacterExtractor, extract_characters
from .corpus import CorpusAnalyzer, parse_files
from .locations import extract_locations
from .patterns import compile_name_matcher
from .relationships import RelationshipAnalyzer, analyze_relationships

__all__ = [
    "CharacterExtractor",
    "CorpusAnalyzer",
    "RelationshipAnalyzer",
    "analyze_relationships",
    "compile_name_matcher",
    "extract_characters",
    "extract_locations",
    "parse_files",
]
