"""Abstract graph with search algorithms bound as methods.

Subclasses supply ``neighbours``; everything else is inherited. The same
operations are available as plain functions in ``graphpath.algorithms`` for
graphs that do not subclass ``AbstractGraph``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, Set

from graphpath.algorithms.bfs import breadth_first_search
from graphpath.algorithms.dfs import depth_first_search
from graphpath.algorithms.reachability import format_adjacency_list, get_all_vertices
from graphpath.algorithms.spf import dijkstra_shortest_path
from graphpath.paths.path import Path
from graphpath.types import V, WeightFunc


class AbstractGraph(ABC, Generic[V]):
    """Graph over an abstract vertex type, known only through its neighbours.

    Works for directed and undirected graphs alike: a directed graph returns
    only the targets of outgoing edges from ``neighbours``.
    """

    @abstractmethod
    def neighbours(self, vertex: V) -> Iterable[V]:
        """
        Return the neighbours of ``vertex``.

        Returns: a collection of vertices, outgoing neighbours for directed graphs.
        """
        raise NotImplementedError

    def get_all_vertices(self, start: V) -> Set[V]:
        """Return every vertex reachable from ``start``, ``start`` included."""
        return get_all_vertices(self, start)

    def format_adjacency_list(self, start: V) -> str:
        """Format the adjacency list of the subgraph reachable from ``start``."""
        return format_adjacency_list(self, start)

    def depth_first_search(self, start: V, target: V) -> Optional[Path[V]]:
        """Return some path from ``start`` to ``target``, or None."""
        return depth_first_search(self, start, target)

    def breadth_first_search(self, start: V, target: V) -> Optional[Path[V]]:
        """Return a path with the fewest edges from ``start`` to ``target``, or None."""
        return breadth_first_search(self, start, target)

    def dijkstra_shortest_path(
        self, start: V, target: V, weight: Optional[WeightFunc]
    ) -> Optional[Path[V]]:
        """Return the lightest path from ``start`` to ``target`` under ``weight``, or None."""
        return dijkstra_shortest_path(self, start, target, weight)
