from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from graphpath.logging import get_logger
from graphpath.paths.path import Path
from graphpath.types import SupportsNeighbours, V

logger = get_logger(__name__)

_EXHAUSTED = object()


def depth_first_search(
    graph: SupportsNeighbours[V], start: V, target: V
) -> Optional[Path[V]]:
    """
    Depth-first search for some path from ``start`` to ``target``.

    Neighbours are explored in the order the graph yields them and the first
    chain that reaches ``target`` is returned; it is not necessarily short.
    A vertex is marked on entry and never entered again during the same
    search, even if it was only reached through an abandoned branch.

    The search keeps an explicit stack of ``(vertex, remaining neighbours)``
    frames, which explores in the same order as the recursive formulation.

    Args:
        graph: Any object with a ``neighbours(vertex)`` method.
        start: Source vertex.
        target: Destination vertex.

    Returns:
        Path from ``start`` to ``target`` with every entered vertex recorded in
        ``path.visited``, or None if either vertex is None or ``target`` is
        unreachable.
    """
    if start is None or target is None:
        return None

    path: Path[V] = Path()
    visited: Set[V] = {start}
    path.visited.add(start)

    if start == target:
        path.vertices.append(start)
        return path

    stack: List[Tuple[V, Iterator[V]]] = [(start, iter(graph.neighbours(start)))]
    while stack:
        _, successors = stack[-1]
        next_vertex = next((n for n in successors if n not in visited), _EXHAUSTED)

        if next_vertex is _EXHAUSTED:
            # Branch exhausted: backtrack
            stack.pop()
            continue

        visited.add(next_vertex)
        path.visited.add(next_vertex)

        if next_vertex == target:
            path.vertices.extend(vertex for vertex, _ in stack)
            path.vertices.append(next_vertex)
            logger.debug(
                "DFS %s -> %s: %d vertices, visited %d",
                start,
                target,
                len(path.vertices),
                len(path.visited),
            )
            return path

        stack.append((next_vertex, iter(graph.neighbours(next_vertex))))

    logger.debug(
        "DFS %s -> %s: no path, visited %d", start, target, len(path.visited)
    )
    return None
