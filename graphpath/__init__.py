"""graphpath: Path search over graphs known only through their neighbours.

graphpath implements reachability, depth-first search, breadth-first search
and Dijkstra's shortest-path search for any graph that can answer one
question: which vertices are the neighbours of ``v``?

Primary API:
    AbstractGraph - Subclass and implement neighbours() to get all searches
    AdjacencyGraph - Ready-made weighted adjacency-mapping graph
    from_networkx() - Wrap a NetworkX graph
    Path - Search result: vertices, total weight, visited vertices

Example:
    from graphpath import AdjacencyGraph

    g = AdjacencyGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 5)
    g.add_edge("B", "D", 1)
    g.add_edge("C", "D", 1)

    g.breadth_first_search("A", "D")            # A, B, D
    g.dijkstra_shortest_path("A", "D", g.weight)  # A, B, D with weight 2
"""

from __future__ import annotations

from graphpath import logging
from graphpath._version import __version__
from graphpath.algorithms import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    format_adjacency_list,
    get_all_vertices,
)
from graphpath.config import DISPLAY_CONFIG, PathDisplayConfig
from graphpath.graph import AbstractGraph, AdjacencyGraph, NetworkXGraph, from_networkx
from graphpath.paths import Path
from graphpath.types import SupportsNeighbours

__all__ = [
    # Version
    "__version__",
    # Graphs
    "AbstractGraph",
    "AdjacencyGraph",
    "NetworkXGraph",
    "SupportsNeighbours",
    "from_networkx",
    # Results
    "Path",
    # Algorithms
    "get_all_vertices",
    "format_adjacency_list",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    # Configuration
    "PathDisplayConfig",
    "DISPLAY_CONFIG",
    # Utilities
    "logging",
]
