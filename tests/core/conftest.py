"""Shared test fixtures."""

import pytest

from digraph.core.config import GraphConfig, NeighborOrder
from digraph.core.graph import DirectedGraph


@pytest.fixture
def chain_graph() -> DirectedGraph:
    """
    Fixture providing a three-vertex chain:
    A -> B -> C
    """
    graph = DirectedGraph()
    for vertex in ("A", "B", "C"):
        graph.add(vertex)
    graph.connect("A", "B")
    graph.connect("B", "C")
    return graph


@pytest.fixture
def sample_graph() -> DirectedGraph:
    """
    Fixture providing a graph with a cycle and an unreachable island:
    A -> B -> D
    |    |    ^
    v    v    |
    C -> E ---+
    E -> B (cycle B -> E -> B)
    F -> G (not reachable from A)
    """
    return DirectedGraph.from_edges(
        [
            ("A", "B"),
            ("A", "C"),
            ("B", "D"),
            ("B", "E"),
            ("C", "E"),
            ("E", "D"),
            ("E", "B"),
            ("F", "G"),
        ]
    )


@pytest.fixture
def sorted_config() -> GraphConfig:
    """Fixture providing a configuration with sorted adjacency order."""
    return GraphConfig(neighbor_order=NeighborOrder.SORTED)
