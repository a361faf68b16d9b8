"""Path result returned by the graph searches."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Generic, Iterator, Optional, Set

from graphpath.config import DISPLAY_CONFIG
from graphpath.types import SupportsNeighbours, V, Weight, WeightFunc


@dataclass
class Path(Generic[V]):
    """
    A directed walk of connected vertices discovered by a search.

    Representation invariants:
      1. Consecutive vertices are neighbours in the graph that produced the path,
         i.e. ``vertices[i]`` is in ``graph.neighbours(vertices[i - 1])``.
      2. A path with a single vertex has that vertex as both source and target.
      3. A path without vertices is empty and has neither source nor target.
         Searches never return empty paths; they return None instead.

    Attributes:
        vertices (Deque[V]):
            Ordered vertices from source to target.
        total_weight (float):
            Accumulated weight of the path. Set by weighted searches; can be
            recomputed for any weight function via ``recalculate_total_weight``.
        visited (Set[V]):
            Vertices examined by the search that produced this path. For
            analysis only; it plays no part in the route itself.
    """

    vertices: Deque[V] = field(default_factory=deque)
    total_weight: Weight = 0.0
    visited: Set[V] = field(default_factory=set)

    def __len__(self) -> int:
        """
        Return the number of vertices in the path.

        Returns:
            The length of `vertices`.
        """
        return len(self.vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices)

    def __bool__(self) -> bool:
        return bool(self.vertices)

    @property
    def src_vertex(self) -> Optional[V]:
        """Return the first vertex of the path, or None when empty."""
        return self.vertices[0] if self.vertices else None

    @property
    def dst_vertex(self) -> Optional[V]:
        """Return the last vertex of the path, or None when empty."""
        return self.vertices[-1] if self.vertices else None

    @property
    def edge_count(self) -> int:
        """Number of edges traversed; zero for empty and single-vertex paths."""
        return max(len(self.vertices) - 1, 0)

    def recalculate_total_weight(self, weight: WeightFunc) -> Weight:
        """
        Recompute ``total_weight`` from a function giving the weight of each edge.

        The first vertex has no predecessor and contributes nothing.

        Args:
            weight: Callable ``weight(u, v)`` for the edge ``u -> v``.

        Returns:
            The new total weight, which is also stored on the path.
        """
        total: Weight = 0.0
        previous: Any = None
        for index, vertex in enumerate(self.vertices):
            if index > 0:
                total += weight(previous, vertex)
            previous = vertex
        self.total_weight = total
        return total

    def is_valid(self, graph: SupportsNeighbours[V]) -> bool:
        """
        Check that every consecutive pair of vertices is an edge of ``graph``.

        Args:
            graph: Any object with a ``neighbours(vertex)`` method.

        Returns:
            True for a non-empty path whose hops are all confirmed by ``graph``.
        """
        if not self.vertices:
            return False
        previous: Any = None
        for index, vertex in enumerate(self.vertices):
            if index > 0 and vertex not in set(graph.neighbours(previous)):
                return False
            previous = vertex
        return True

    def __str__(self) -> str:
        """
        Render weight, length, visited count and the vertices, eliding the
        middle of long paths.
        """
        cfg = DISPLAY_CONFIG
        hidden = cfg.hidden_positions(len(self.vertices))
        shown = []
        for index, vertex in enumerate(self.vertices):
            if index not in hidden:
                shown.append(str(vertex))
            elif index == hidden.start:
                shown.append("...")
        return (
            f"Weight={self.total_weight:.{cfg.weight_precision}f} "
            f"Length={len(self.vertices)} visited={len(self.visited)} "
            f"({', '.join(shown)})"
        )
