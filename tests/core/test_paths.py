"""
Tests for shortest path search.
"""

import pytest

from digraph.core.exceptions import VertexNotFoundError
from digraph.core.graph import DirectedGraph
from digraph.core.paths import ShortestPathFinder, reconstruct_path


@pytest.fixture
def diamond_edges():
    """
    Fixture providing two equally short routes from A to D:
    A -> C -> D
    A -> B -> D
    """
    return [("A", "C"), ("A", "B"), ("B", "D"), ("C", "D")]


def test_chain_scenario(chain_graph):
    """Test shortest path, reachability and removal on a simple chain."""
    assert chain_graph.shortest_path("A", "C") == ["A", "B", "C"]
    assert chain_graph.is_connected("A", "C")

    chain_graph.remove("B")

    assert chain_graph.neighbors("A") == []
    assert not chain_graph.contains("B")
    assert chain_graph.shortest_path("A", "C") == []


def test_path_to_self(sample_graph):
    """Test every vertex trivially reaches itself."""
    for vertex in sample_graph.vertices():
        assert sample_graph.shortest_path(vertex, vertex) == [vertex]


def test_path_prefers_fewest_edges(sample_graph):
    """Test the direct route wins over longer detours."""
    # A -> B -> D is shorter than A -> C -> E -> D
    assert sample_graph.shortest_path("A", "D") == ["A", "B", "D"]
    assert sample_graph.shortest_path("C", "D") == ["C", "E", "D"]
    assert sample_graph.shortest_path("E", "B") == ["E", "B"]


def test_path_through_cycle(sample_graph):
    """Test a path can leave a cycle without looping."""
    assert sample_graph.shortest_path("E", "D") == ["E", "D"]
    assert sample_graph.shortest_path("C", "B") == ["C", "E", "B"]


def test_no_path(sample_graph):
    """Test unreachable destinations yield an empty path."""
    assert sample_graph.shortest_path("D", "A") == []
    assert sample_graph.shortest_path("A", "F") == []
    assert sample_graph.shortest_path("G", "F") == []


def test_tie_break_follows_insertion_order(diamond_edges):
    """Test ties are broken by the order edges were connected."""
    graph = DirectedGraph.from_edges(diamond_edges)

    assert graph.shortest_path("A", "D") == ["A", "C", "D"]


def test_tie_break_follows_sorted_order(diamond_edges, sorted_config):
    """Test ties are broken by label order when configured."""
    graph = DirectedGraph.from_edges(diamond_edges, config=sorted_config)

    assert graph.shortest_path("A", "D") == ["A", "B", "D"]


def test_path_is_minimal_on_longer_graph():
    """Test path length on a graph with a long and a short route."""
    graph = DirectedGraph.from_edges(
        [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (1, 7), (7, 6)]
    )

    path = graph.shortest_path(1, 6)

    assert path == [1, 7, 6]
    assert len(path) - 1 == 2


def test_path_missing_vertex(sample_graph):
    """Test path search with an unknown vertex raises."""
    with pytest.raises(VertexNotFoundError):
        sample_graph.shortest_path("A", "Z")
    with pytest.raises(VertexNotFoundError):
        sample_graph.shortest_path("Z", "A")
    with pytest.raises(VertexNotFoundError):
        sample_graph.shortest_path("Z", "Z")


def test_returned_path_is_independent(chain_graph):
    """Test mutating a returned path does not affect later queries."""
    path = chain_graph.shortest_path("A", "C")
    path.append("X")

    assert chain_graph.shortest_path("A", "C") == ["A", "B", "C"]


def test_finder_directly(sample_graph):
    """Test the finder can be used without going through the graph."""
    finder = ShortestPathFinder(sample_graph)

    assert finder.find_path("A", "E") == ["A", "B", "E"]


def test_reconstruct_path():
    """Test rebuilding a path from predecessor links."""
    predecessors = {"B": "A", "C": "B", "D": "A"}

    assert reconstruct_path(predecessors, "A", "C") == ["A", "B", "C"]
    assert reconstruct_path(predecessors, "A", "D") == ["A", "D"]
    assert reconstruct_path(predecessors, "A", "A") == ["A"]
