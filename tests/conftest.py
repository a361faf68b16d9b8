"""Shared graph fixtures.

Edge insertion order matters: ``AdjacencyGraph`` yields neighbours in the
order edges were added, which fixes the exploration order of DFS and BFS.
"""

from __future__ import annotations

import pytest

from graphpath.graph.adjacency import AdjacencyGraph


@pytest.fixture
def diamond():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [5]        [1]  │
    #   └────────►C─────────┘
    g = AdjacencyGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 5)
    g.add_edge("B", "D", 1)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def detour():
    # DFS takes the long way A-B-C-D because B is listed before D;
    # the direct edge A-D is heavy.
    g = AdjacencyGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("A", "D", 10)
    return g


@pytest.fixture
def cycle():
    # A ⇄ B, B -> C
    g = AdjacencyGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "A", 1)
    g.add_edge("B", "C", 1)
    return g


@pytest.fixture
def two_components():
    # A -> B and C -> D, no edge between the pairs
    g = AdjacencyGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def long_chain():
    """Directed chain 0 -> 1 -> ... -> 4999, far deeper than the recursion limit."""
    g = AdjacencyGraph()
    for i in range(4999):
        g.add_edge(i, i + 1, 1)
    return g


class CountingGraph:
    """Wraps a graph and counts ``neighbours`` calls per vertex."""

    def __init__(self, graph):
        self.graph = graph
        self.calls = {}

    def neighbours(self, vertex):
        self.calls[vertex] = self.calls.get(vertex, 0) + 1
        return self.graph.neighbours(vertex)


@pytest.fixture
def counting():
    return CountingGraph
