from __future__ import annotations

from typing import List, Mapping, Optional

from graphpath.types import V


def reconstruct_path(
    parents: Mapping[V, Optional[V]], start: V, target: V
) -> List[V]:
    """
    Rebuild the route from ``start`` to ``target`` out of a parent map.

    Walks from ``target`` back to ``start`` through ``parents`` and reverses
    the result. The walk is iterative, so route length is not bounded by the
    recursion limit.

    Args:
        parents: Maps each discovered vertex to the vertex it was reached from.
            ``start`` need not be present.
        start: First vertex of the route.
        target: Last vertex of the route.

    Returns:
        Vertices ordered from ``start`` to ``target``.

    Raises:
        KeyError: If the chain of parents breaks before reaching ``start``.
    """
    route = [target]
    vertex = target
    while vertex != start:
        vertex = parents[vertex]
        route.append(vertex)
    route.reverse()
    return route
