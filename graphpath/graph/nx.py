"""NetworkX graph adapter.

Exposes any NetworkX graph through the neighbour capability so the
graphpath searches can run over it unchanged.

Example:
    >>> import networkx as nx
    >>> from graphpath.graph.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> G.add_edge("B", "C", weight=1.5)
    >>>
    >>> graph = from_networkx(G)
    >>> path = graph.dijkstra_shortest_path("A", "C", graph.weight)
    >>> list(path.vertices), path.total_weight
    (['A', 'B', 'C'], 3.5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, List, Union

from graphpath.graph.base import AbstractGraph
from graphpath.types import Weight

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


class NetworkXGraph(AbstractGraph[Hashable]):
    """Read-only view of a NetworkX graph as an ``AbstractGraph``.

    Directed graphs expose successors as neighbours; undirected graphs expose
    all adjacent nodes. The wrapped graph is not copied, so later changes to
    it are visible to subsequent searches.

    Attributes:
        G: The wrapped NetworkX graph.
        weight_attr: Edge attribute read by ``weight``.
        default_weight: Weight used when an edge lacks ``weight_attr``.
    """

    def __init__(
        self,
        G: NxGraph,
        weight_attr: str = "weight",
        default_weight: Weight = 1.0,
    ) -> None:
        self.G = G
        self.weight_attr = weight_attr
        self.default_weight = default_weight

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.G

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    def neighbours(self, vertex: Hashable) -> List[Hashable]:
        if vertex not in self.G:
            return []
        # G.adj follows successors on directed graphs and all neighbours otherwise
        return list(self.G.adj[vertex])

    def weight(self, src: Hashable, dst: Hashable) -> Weight:
        """Return the weight of ``src -> dst``; the lightest one for parallel edges.

        Raises:
            KeyError: If there is no such edge.
        """
        if not self.G.has_edge(src, dst):
            raise KeyError(f"No edge '{src}' -> '{dst}' in the graph.")
        if self.G.is_multigraph():
            return min(
                attr.get(self.weight_attr, self.default_weight)
                for attr in self.G[src][dst].values()
            )
        return self.G[src][dst].get(self.weight_attr, self.default_weight)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Weight = 1.0,
) -> NetworkXGraph:
    """Wrap a NetworkX graph for use with the graphpath searches.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute name for weights (default: "weight").
        default_weight: Weight when the attribute is missing (default: 1.0).

    Returns:
        NetworkXGraph adapter around ``G``.
    """
    return NetworkXGraph(G, weight_attr=weight_attr, default_weight=default_weight)
