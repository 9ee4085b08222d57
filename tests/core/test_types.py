"""
Tests for the graph protocol.
"""

from typing import List

from digraph.core.graph import DirectedGraph
from digraph.core.types import GraphProtocol


def build_route(graph: GraphProtocol[str], stops: List[str]) -> List[str]:
    """Chain stops together and return the route from the first to the last."""
    for stop in stops:
        graph.add(stop)
    for start, destination in zip(stops, stops[1:]):
        graph.connect(start, destination)
    return graph.shortest_path(stops[0], stops[-1])


def test_directed_graph_satisfies_protocol():
    """Test a DirectedGraph can be used wherever the protocol is expected."""
    graph = DirectedGraph()

    route = build_route(graph, ["X", "Y", "Z"])

    assert route == ["X", "Y", "Z"]
    assert graph.is_connected("X", "Z")
    subgraph = graph.connected_graph("Y")
    assert list(subgraph.vertices()) == ["Y", "Z"]
