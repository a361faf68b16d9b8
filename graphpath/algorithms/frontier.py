"""Priority frontier used by the weighted shortest-path search.

Each vertex discovered by a search owns one ``FrontierNode`` holding its best
known distance from the source and the predecessor on that best route. The
``Frontier`` pairs those nodes with a binary heap of ``(distance, counter,
vertex)`` entries. A vertex is re-pushed whenever its distance improves and
outdated heap entries are skipped on pop, so no decrease-key is needed. The
counter keeps heap comparisons away from the vertices themselves, which only
have to be hashable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Generic, Iterator, List, Optional, Tuple

from graphpath.types import V, Weight


@dataclass
class FrontierNode(Generic[V]):
    """Best known route to one vertex.

    Attributes:
        vertex: The vertex this node describes.
        predecessor: Previous vertex on the best known route; None for the source.
        distance: Cumulative weight of the best known route from the source.
        settled: True once ``distance`` is final.
    """

    vertex: V
    predecessor: Optional[V] = None
    distance: Weight = math.inf
    settled: bool = False


class Frontier(Generic[V]):
    """Min-priority frontier keyed by cumulative distance."""

    def __init__(self, source: V) -> None:
        self._nodes: Dict[V, FrontierNode[V]] = {}
        self._heap: List[Tuple[Weight, int, V]] = []
        self._counter: Iterator[int] = count()
        self.source = source
        self.relax(source, None, 0.0)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._nodes

    def __len__(self) -> int:
        """Number of vertices discovered so far, settled or not."""
        return len(self._nodes)

    def node(self, vertex: V) -> FrontierNode[V]:
        """Return the node of a discovered vertex.

        Raises:
            KeyError: If ``vertex`` has not been discovered.
        """
        return self._nodes[vertex]

    def relax(self, vertex: V, predecessor: Optional[V], distance: Weight) -> bool:
        """Offer a route of ``distance`` to ``vertex`` through ``predecessor``.

        The offer is accepted when ``vertex`` is unknown, or unsettled with a
        larger best distance.

        Returns:
            True if the vertex's node was updated and pushed.
        """
        node = self._nodes.get(vertex)
        if node is None:
            node = self._nodes[vertex] = FrontierNode(vertex)
        elif node.settled or distance >= node.distance:
            return False

        node.predecessor = predecessor
        node.distance = distance
        heappush(self._heap, (distance, next(self._counter), vertex))
        return True

    def pop(self) -> Optional[FrontierNode[V]]:
        """Settle and return the unsettled vertex with the smallest distance.

        Returns:
            The newly settled node, or None once the frontier is exhausted.
        """
        while self._heap:
            distance, _, vertex = heappop(self._heap)
            node = self._nodes[vertex]
            # Skip entries superseded by a later improvement
            if node.settled or distance > node.distance:
                continue
            node.settled = True
            return node
        return None

    def route_to(self, target: V) -> List[V]:
        """Return the best known route from the source to ``target``."""
        route = [target]
        vertex = target
        while vertex != self.source:
            vertex = self._nodes[vertex].predecessor
            route.append(vertex)
        route.reverse()
        return route
