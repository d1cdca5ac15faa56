# knowledge_graph.py

"""
Weighted Knowledge Graph — NetworkX storage layer
==================================================
A directed graph over string vertices where every edge carries an integer
weight. The inference engine stores noun relationships here:

  - weight 1 : "X implies Y"
  - weight 0 : "X does not imply Y"
  - no edge  : relationship unknown

Vertices are never created implicitly. Setting an edge between vertices that
were not added first raises VertexNotFoundError, so the engine can keep its
noun / negation pairs consistent.
"""

import logging
from typing import Dict, List, Optional, Tuple

import networkx as nx
import pandas as pd

logger = logging.getLogger(__name__)


class GraphError(LookupError):
    """Base class for lookups that reference missing graph elements."""


class VertexNotFoundError(GraphError):
    def __init__(self, vertex: str, message: Optional[str] = None):
        super().__init__(message or f"Vertex not found: {vertex!r}")
        self.vertex = vertex


class EdgeNotFoundError(GraphError):
    def __init__(self, source: str, target: str):
        super().__init__(f"Edge not found: {source!r} -> {target!r}")
        self.source = source
        self.target = target


class WeightedGraph:
    """
    Directed graph with one weight per ordered vertex pair.
    Thin wrapper over networkx.DiGraph that forbids implicit vertices.
    """

    def __init__(self):
        self._graph = nx.DiGraph()

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, vertex: str) -> bool:
        return self._graph.has_node(vertex)

    # ─────────────────────────────────────────────────────────────
    # VERTICES
    # ─────────────────────────────────────────────────────────────

    def add_vertex(self, vertex: str) -> None:
        if self._graph.has_node(vertex):
            return
        self._graph.add_node(vertex)
        logger.debug(f"[WeightedGraph] Added vertex {vertex!r}")

    def has_vertex(self, vertex: str) -> bool:
        return self._graph.has_node(vertex)

    def vertices(self) -> List[str]:
        return list(self._graph.nodes)

    def get_size(self) -> int:
        """Number of vertices."""
        return self._graph.number_of_nodes()

    # ─────────────────────────────────────────────────────────────
    # EDGES
    # ─────────────────────────────────────────────────────────────

    def set_edge(self, source: str, target: str, weight: int) -> None:
        """Insert the edge source → target, or overwrite its weight."""
        for vertex in (source, target):
            if not self._graph.has_node(vertex):
                raise VertexNotFoundError(vertex)

        if self._graph.has_edge(source, target):
            previous = self._graph[source][target]["weight"]
            if previous != weight:
                logger.debug(f"[WeightedGraph] Overwriting {source} → {target}: "
                             f"{previous} → {weight}")
        self._graph.add_edge(source, target, weight=weight)

    def has_edge(self, source: str, target: str) -> bool:
        return self._graph.has_edge(source, target)

    def get_weight(self, source: str, target: str) -> int:
        try:
            return self._graph[source][target]["weight"]
        except KeyError:
            raise EdgeNotFoundError(source, target) from None

    def get_neighbors(self, source: str) -> Dict[str, int]:
        """
        Outgoing edges of `source` as {target: weight}.
        Returns a copy; mutating it does not touch the graph.
        """
        if not self._graph.has_node(source):
            raise VertexNotFoundError(source)
        return {target: data["weight"]
                for target, data in self._graph[source].items()}

    def edges(self) -> List[Tuple[str, str, int]]:
        return [(u, v, w) for u, v, w in self._graph.edges(data="weight")]

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # ─────────────────────────────────────────────────────────────
    # TRAVERSAL
    # ─────────────────────────────────────────────────────────────

    def implication_view(self) -> nx.DiGraph:
        """Read-only view containing only weight-1 edges."""
        graph = self._graph
        return nx.subgraph_view(
            graph,
            filter_edge=lambda u, v: graph[u][v]["weight"] == 1,
        )

    def shortest_path(self, source: str, target: str,
                      view: Optional[nx.DiGraph] = None) -> List[str]:
        """
        Breadth-first shortest path from source to target.
        Returns [] when the target is unreachable.
        """
        G = self._graph if view is None else view
        for vertex in (source, target):
            if not G.has_node(vertex):
                raise VertexNotFoundError(vertex)
        try:
            return nx.shortest_path(G, source, target)
        except nx.NetworkXNoPath:
            return []

    # ─────────────────────────────────────────────────────────────
    # INSPECTION
    # ─────────────────────────────────────────────────────────────

    def to_frame(self) -> pd.DataFrame:
        """All edges as a DataFrame sorted by (source, target)."""
        frame = pd.DataFrame(self.edges(), columns=["source", "target", "weight"])
        return frame.sort_values(["source", "target"]).reset_index(drop=True)

    def to_networkx(self) -> nx.DiGraph:
        """A copy of the underlying networkx graph."""
        return self._graph.copy()

    def stats(self) -> dict:
        weights = [w for _, _, w in self.edges()]
        return {
            "vertices":          self.get_size(),
            "edges":             self.edge_count(),
            "implication_edges": weights.count(1),
            "exclusion_edges":   weights.count(0),
        }
