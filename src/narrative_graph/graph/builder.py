"""Build a networkx character graph from an extraction result."""

from pathlib import Path

import networkx as nx

from ..models.result import ExtractionResult

# GraphML has no list type, so context samples are joined
CONTEXT_JOINER = "\n"


def build_character_graph(result: ExtractionResult, min_strength: int = 1) -> nx.Graph:
    """Create an undirected graph of characters and their relationships.

    Nodes carry the character's mention count; edges carry the
    co-occurrence strength as ``weight``. Edges can name characters that
    are not in ``result.characters`` (external name lists), so those
    nodes are added with a count of 0.
    """
    G = nx.Graph()

    for character in result.characters:
        G.add_node(
            character.name,
            type="character",
            count=character.count,
            context=CONTEXT_JOINER.join(character.context),
        )

    for edge in result.relationships:
        if edge.strength < min_strength:
            continue
        for name in edge.pair:
            if name not in G:
                G.add_node(name, type="character", count=0, context="")
        G.add_edge(
            edge.char1,
            edge.char2,
            weight=edge.strength,
            context=CONTEXT_JOINER.join(edge.context),
        )

    return G


def write_graphml(result: ExtractionResult, path: Path, min_strength: int = 1) -> nx.Graph:
    """Write the character graph to a GraphML file and return it."""
    G = build_character_graph(result, min_strength=min_strength)
    nx.write_graphml(G, str(path))
    return G


def top_connections(G: nx.Graph, limit: int = 10) -> list[tuple[str, list[str]]]:
    """Most connected characters with their strongest neighbours."""
    ranked = sorted(G.nodes(), key=lambda n: G.degree(n, weight="weight"), reverse=True)
    connections = []
    for node in ranked[:limit]:
        neighbours = sorted(G.neighbors(node), key=lambda n: G[node][n]["weight"], reverse=True)
        if neighbours:
            connections.append((node, neighbours[:5]))
    return connections
