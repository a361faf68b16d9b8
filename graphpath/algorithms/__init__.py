"""Search and traversal algorithms over the neighbour capability.

Every function takes the graph as its first argument and needs nothing from
it beyond ``neighbours(vertex)``.
"""

from graphpath.algorithms.bfs import breadth_first_search
from graphpath.algorithms.dfs import depth_first_search
from graphpath.algorithms.frontier import Frontier, FrontierNode
from graphpath.algorithms.paths import reconstruct_path
from graphpath.algorithms.reachability import format_adjacency_list, get_all_vertices
from graphpath.algorithms.spf import dijkstra_shortest_path

__all__ = [
    "breadth_first_search",
    "depth_first_search",
    "dijkstra_shortest_path",
    "format_adjacency_list",
    "get_all_vertices",
    "reconstruct_path",
    "Frontier",
    "FrontierNode",
]
