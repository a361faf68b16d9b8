"""Reachability and adjacency rendering over the neighbour capability.

Both operations walk the graph with an explicit stack rather than recursion,
so graphs with very long simple paths do not exhaust the interpreter stack.
"""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from graphpath.config import DISPLAY_CONFIG
from graphpath.logging import get_logger
from graphpath.types import SupportsNeighbours, V

logger = get_logger(__name__)


def _preorder(
    graph: SupportsNeighbours[V], start: V
) -> Iterator[Tuple[V, List[V]]]:
    """Yield ``(vertex, neighbours)`` in pre-order of a spanning tree rooted at ``start``.

    Each reachable vertex is yielded exactly once, in the same order a
    recursive depth-first traversal would visit it.
    """
    visited: Set[V] = set()
    stack: List[V] = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        neighbours = list(graph.neighbours(vertex))
        yield vertex, neighbours
        # Reverse so the first neighbour is expanded first
        stack.extend(n for n in reversed(neighbours) if n not in visited)


def get_all_vertices(graph: SupportsNeighbours[V], start: V) -> Set[V]:
    """
    Return every vertex reachable from ``start``, ``start`` included.

    Only outgoing edges are followed on directed graphs.

    Args:
        graph: Any object with a ``neighbours(vertex)`` method.
        start: Vertex the traversal starts from.

    Returns:
        Set of reachable vertices, or an empty set if ``start`` is None.
    """
    if start is None:
        return set()

    vertices = {vertex for vertex, _ in _preorder(graph, start)}
    logger.debug("Reached %d vertices from %s", len(vertices), start)
    return vertices


def format_adjacency_list(graph: SupportsNeighbours[V], start: V) -> str:
    """
    Format the adjacency list of the subgraph reachable from ``start``.

    Output format::

        Graph adjacency list:
        vertex1: [neighbour11, neighbour12, ...]
        vertex2: [neighbour21, neighbour22, ...]

    Vertices follow a pre-order traversal of a spanning tree rooted at
    ``start``; each appears once however many times it is reachable.

    Args:
        graph: Any object with a ``neighbours(vertex)`` method.
        start: Root of the spanning tree.

    Returns:
        The formatted text, ending with a newline.
    """
    lines = [DISPLAY_CONFIG.adjacency_header]
    if start is not None:
        for vertex, neighbours in _preorder(graph, start):
            lines.append(f"{vertex}: [{', '.join(str(n) for n in neighbours)}]")
    return "\n".join(lines) + "\n"
