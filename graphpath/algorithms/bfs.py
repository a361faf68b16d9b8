from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional, Set

from graphpath.algorithms.paths import reconstruct_path
from graphpath.logging import get_logger
from graphpath.paths.path import Path
from graphpath.types import SupportsNeighbours, V

logger = get_logger(__name__)


def breadth_first_search(
    graph: SupportsNeighbours[V], start: V, target: V
) -> Optional[Path[V]]:
    """
    Breadth-first search for a path with the fewest edges.

    Vertices are marked as soon as they are enqueued, so each one enters the
    queue at most once. When ``target`` is dequeued the route is rebuilt from
    the parent map.

    Args:
        graph: Any object with a ``neighbours(vertex)`` method.
        start: Source vertex.
        target: Destination vertex.

    Returns:
        Path from ``start`` to ``target`` with every enqueued vertex recorded
        in ``path.visited``, or None if either vertex is None or ``target`` is
        unreachable.
    """
    if start is None or target is None:
        return None

    path: Path[V] = Path()
    parents: Dict[V, V] = {}
    visited: Set[V] = {start}
    queue: Deque[V] = deque([start])
    path.visited.add(start)

    while queue:
        vertex = queue.popleft()

        if vertex == target:
            path.vertices.extend(reconstruct_path(parents, start, target))
            logger.debug(
                "BFS %s -> %s: %d vertices, visited %d",
                start,
                target,
                len(path.vertices),
                len(path.visited),
            )
            return path

        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                path.visited.add(neighbour)
                parents[neighbour] = vertex
                queue.append(neighbour)

    logger.debug(
        "BFS %s -> %s: no path, visited %d", start, target, len(path.visited)
    )
    return None
