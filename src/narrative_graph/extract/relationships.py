"""Relationship inference from sentence-level co-occurrence.

Two characters named in the same sentence count as one interaction.
Every pair among the names in a sentence is credited, so a sentence with
N characters adds N*(N-1)/2 increments.
"""

import re
from dataclasses import dataclass, field
from itertools import combinations

from ..config import Settings, get_settings
from ..exceptions import InvalidInputError
from ..ingest.splitter import ensure_text, normalize_whitespace, split_into_sentences
from ..logging import logger
from ..models.relationships import RelationshipEdge
from .patterns import compile_name_matcher


@dataclass
class EdgeTally:
    """Running strength and context samples for one character pair."""

    char1: str
    char2: str
    strength: int = 0
    context: list[str] = field(default_factory=list)


class RelationshipAnalyzer:
    """Build weighted, undirected character edges from co-occurrence."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the analyzer.

        Args:
            settings: Thresholds to use; defaults to the cached global settings
        """
        self.settings = settings or get_settings()

    def analyze(self, text: str, character_names: list[str]) -> list[RelationshipEdge]:
        """Find character pairs that share at least the minimum number of sentences."""
        sentences = split_into_sentences(ensure_text(text))
        matchers = self._build_matchers(character_names)

        edges: dict[tuple[str, str], EdgeTally] = {}

        for sentence in sentences:
            present = [name for name, matcher in matchers if matcher.search(sentence)]
            if len(present) < 2:
                continue

            context = normalize_whitespace(sentence)
            for first, second in combinations(present, 2):
                key = (first, second) if first <= second else (second, first)
                edge = edges.setdefault(key, EdgeTally(*key))
                edge.strength += 1
                if len(edge.context) < self.settings.max_context_samples:
                    edge.context.append(context)

        kept = [e for e in edges.values() if e.strength >= self.settings.min_relationship_strength]
        kept.sort(key=lambda e: e.strength, reverse=True)

        logger.debug("Kept %d of %d co-occurrence edges", len(kept), len(edges))
        return [
            RelationshipEdge(char1=e.char1, char2=e.char2, strength=e.strength, context=e.context)
            for e in kept
        ]

    def _build_matchers(self, character_names: list[str]) -> list[tuple[str, re.Pattern]]:
        """Compile one case-insensitive matcher per distinct, non-blank name.

        Names differing only in case would always match together, so only
        the first spelling is kept.
        """
        if isinstance(character_names, (str, bytes)) or not hasattr(character_names, "__iter__"):
            raise InvalidInputError("character_names must be a list of strings")

        matchers: list[tuple[str, re.Pattern]] = []
        seen: set[str] = set()
        for name in character_names:
            if not isinstance(name, str):
                raise InvalidInputError(
                    f"character names must be strings, got {type(name).__name__}"
                )
            key = name.casefold()
            if not name.strip() or key in seen:
                continue
            seen.add(key)
            matchers.append((name, compile_name_matcher(name)))
        return matchers


def analyze_relationships(
    text: str,
    character_names: list[str],
    settings: Settings | None = None,
) -> list[RelationshipEdge]:
    """Suggest relationships between the given characters.

    Args:
        text: Raw text, markup allowed
        character_names: Names to look for, usually from extract_characters
        settings: Optional threshold overrides

    Returns:
        Edges sorted by strength, strongest first
    """
    return RelationshipAnalyzer(settings).analyze(text, character_names)
