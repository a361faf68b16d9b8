"""
Concrete weighted graph backed by an adjacency mapping.

Each vertex maps to an insertion-ordered ``{neighbour: weight}`` dict, so
``neighbours`` yields vertices in the order edges were added and searches
over the graph are reproducible.
"""

from __future__ import annotations

from typing import Dict, Iterable, KeysView, List

from graphpath.graph.base import AbstractGraph
from graphpath.types import V, Weight


class AdjacencyGraph(AbstractGraph[V]):
    """
    Weighted graph over hashable vertices.

    Directed by default; with ``directed=False`` every edge is stored in both
    directions with the same weight.
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self._adj: Dict[V, Dict[V, Weight]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: V) -> None:
        """Ensure ``vertex`` exists in the graph.

        Raises:
            ValueError: If ``vertex`` is None.
        """
        if vertex is None:
            raise ValueError("Vertex must not be None.")
        self._adj.setdefault(vertex, {})

    def add_edge(self, src: V, dst: V, weight: Weight = 1.0) -> None:
        """
        Add or update the edge ``src -> dst`` (and ``dst -> src`` if undirected).
        Missing vertices are added.
        """
        self.add_vertex(src)
        self.add_vertex(dst)
        self._adj[src][dst] = weight
        if not self.directed:
            self._adj[dst][src] = weight

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple], directed: bool = True
    ) -> "AdjacencyGraph":
        """Build a graph from ``(src, dst)`` or ``(src, dst, weight)`` tuples."""
        graph = cls(directed=directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    # --- Queries -------------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def vertices(self) -> KeysView[V]:
        """Return all vertices in insertion order."""
        return self._adj.keys()

    def neighbours(self, vertex: V) -> List[V]:
        # Unknown vertices have no neighbours, so searches from them find nothing
        return list(self._adj.get(vertex, ()))

    def has_edge(self, src: V, dst: V) -> bool:
        return dst in self._adj.get(src, {})

    def weight(self, src: V, dst: V) -> Weight:
        """Return the weight of the edge ``src -> dst``.

        Raises:
            KeyError: If there is no such edge.
        """
        try:
            return self._adj[src][dst]
        except KeyError:
            raise KeyError(f"No edge '{src}' -> '{dst}' in the graph.") from None
