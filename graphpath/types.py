"""Shared type aliases and the neighbour capability protocol.

The search algorithms make a single structural assumption about a graph:
it can list the neighbours of a vertex. ``SupportsNeighbours`` captures that
assumption so that any object with a suitable ``neighbours`` method works,
whether it subclasses ``AbstractGraph`` or not.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol, TypeVar, Union

# Vertices are opaque; equality and hashing are all the algorithms rely on.
V = TypeVar("V", bound=Hashable)

Weight = Union[int, float]

# weight(u, v) for an edge u -> v
WeightFunc = Callable[[V, V], Weight]


class SupportsNeighbours(Protocol[V]):
    """Anything that can list the (outgoing) neighbours of a vertex."""

    def neighbours(self, vertex: V) -> Iterable[V]:
        """Return the neighbours of ``vertex``; outgoing ones for directed graphs."""
        ...
