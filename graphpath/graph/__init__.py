"""Graph primitives.

This package provides the abstract graph type `AbstractGraph` and two concrete
graphs: `AdjacencyGraph` (a weighted adjacency mapping) and `NetworkXGraph`
(an adapter over NetworkX graphs).
"""

from graphpath.graph.adjacency import AdjacencyGraph
from graphpath.graph.base import AbstractGraph
from graphpath.graph.nx import NetworkXGraph, from_networkx

__all__ = ["AbstractGraph", "AdjacencyGraph", "NetworkXGraph", "from_networkx"]
