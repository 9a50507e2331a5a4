"""Character graph export."""

from narrative_graph.graph.builder import build_character_graph, top_connections, write_graphml

__all__ = ["build_character_graph", "top_connections", "write_graphml"]
