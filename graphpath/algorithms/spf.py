"""Weighted shortest-path-first (SPF) search.

Implements Dijkstra's algorithm over the neighbour capability with a
caller-supplied edge weight function. Vertices are settled in order of
increasing distance from the source and the search stops as soon as the
target is settled.

Notes:
    Edge weights must be non-negative. A negative weight does not raise; the
    search still terminates but the returned route may not be the lightest.
    A warning is logged the first time a search meets one.

    Among routes of equal weight, the one returned depends on the order in
    which vertices reach the frontier and should not be relied upon.
"""

from __future__ import annotations

from typing import Optional

from graphpath.algorithms.frontier import Frontier
from graphpath.logging import get_logger
from graphpath.paths.path import Path
from graphpath.types import SupportsNeighbours, V, WeightFunc

logger = get_logger(__name__)


def dijkstra_shortest_path(
    graph: SupportsNeighbours[V],
    start: V,
    target: V,
    weight: Optional[WeightFunc],
) -> Optional[Path[V]]:
    """Find the lightest path from ``start`` to ``target``.

    Args:
        graph: Any object with a ``neighbours(vertex)`` method.
        start: Source vertex.
        target: Destination vertex.
        weight: Callable ``weight(u, v)`` returning the non-negative weight of
            the edge ``u -> v``.

    Returns:
        Path whose ``total_weight`` is the summed weight of its edges and whose
        ``visited`` set holds ``start`` plus every vertex that was ever placed
        on the frontier. None if any argument is None or ``target`` is
        unreachable.
    """
    if start is None or target is None or weight is None:
        return None

    path: Path[V] = Path()
    path.visited.add(start)

    if start == target:
        path.vertices.append(start)
        path.total_weight = 0.0
        return path

    frontier: Frontier[V] = Frontier(start)
    warned_negative = False

    while True:
        node = frontier.pop()
        if node is None:
            break

        if node.vertex == target:
            path.vertices.extend(frontier.route_to(target))
            path.total_weight = node.distance
            logger.debug(
                "SPF %s -> %s: %d vertices, weight %s, visited %d",
                start,
                target,
                len(path.vertices),
                path.total_weight,
                len(path.visited),
            )
            return path

        for neighbour in graph.neighbours(node.vertex):
            edge_weight = weight(node.vertex, neighbour)
            if edge_weight < 0 and not warned_negative:
                logger.warning(
                    "Negative weight %s on edge %s -> %s; result may not be the shortest path",
                    edge_weight,
                    node.vertex,
                    neighbour,
                )
                warned_negative = True
            if frontier.relax(neighbour, node.vertex, node.distance + edge_weight):
                path.visited.add(neighbour)

    logger.debug(
        "SPF %s -> %s: no path, visited %d", start, target, len(path.visited)
    )
    return None
