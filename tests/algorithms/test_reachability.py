import networkx as nx

from graphpath.algorithms.reachability import format_adjacency_list, get_all_vertices
from graphpath.graph.nx import from_networkx


class TestGetAllVertices:
    def test_includes_start(self, diamond):
        assert get_all_vertices(diamond, "A") == {"A", "B", "C", "D"}

    def test_follows_outgoing_edges_only(self, diamond):
        assert get_all_vertices(diamond, "B") == {"B", "D"}
        assert get_all_vertices(diamond, "D") == {"D"}

    def test_terminates_on_cycle(self, cycle):
        assert get_all_vertices(cycle, "B") == {"A", "B", "C"}

    def test_fixed_point(self, cycle):
        first = get_all_vertices(cycle, "A")
        assert get_all_vertices(cycle, "A") == first
        for vertex in first:
            assert get_all_vertices(cycle, vertex) <= first

    def test_other_component_not_reached(self, two_components):
        assert get_all_vertices(two_components, "A") == {"A", "B"}

    def test_unknown_vertex_reaches_only_itself(self, diamond):
        assert get_all_vertices(diamond, "Z") == {"Z"}

    def test_none_start(self, diamond):
        assert get_all_vertices(diamond, None) == set()

    def test_long_chain_without_recursion(self, long_chain):
        assert len(get_all_vertices(long_chain, 0)) == 5000

    def test_matches_networkx_descendants(self):
        G = nx.gnp_random_graph(60, 0.04, seed=7, directed=True)
        graph = from_networkx(G)
        for source in (0, 10, 42):
            expected = nx.descendants(G, source) | {source}
            assert get_all_vertices(graph, source) == expected

    def test_each_vertex_expanded_once(self, diamond, counting):
        graph = counting(diamond)
        get_all_vertices(graph, "A")
        assert graph.calls == {"A": 1, "B": 1, "C": 1, "D": 1}


class TestFormatAdjacencyList:
    def test_preorder_listing(self, diamond):
        assert format_adjacency_list(diamond, "A") == (
            "Graph adjacency list:\n"
            "A: [B, C]\n"
            "B: [D]\n"
            "D: []\n"
            "C: [D]\n"
        )

    def test_cycle_lists_each_vertex_once(self, cycle):
        assert format_adjacency_list(cycle, "A") == (
            "Graph adjacency list:\nA: [B]\nB: [A, C]\nC: []\n"
        )

    def test_subgraph_only(self, two_components):
        assert format_adjacency_list(two_components, "C") == (
            "Graph adjacency list:\nC: [D]\nD: []\n"
        )

    def test_none_start_gives_header_only(self, diamond):
        assert format_adjacency_list(diamond, None) == "Graph adjacency list:\n"

    def test_long_chain(self, long_chain):
        lines = format_adjacency_list(long_chain, 0).splitlines()
        assert len(lines) == 5001
        assert lines[1] == "0: [1]"
        assert lines[-1] == "4999: []"
