"""
Subgraph extraction operations for the directed graph.

This module builds the subgraph induced by reachability: the vertices that
can be reached from an origin vertex, together with every edge of the source
graph whose two endpoints both belong to that set. The extracted graph is a
new, independent instance; it shares no mutable state with its source.
"""

import logging
from typing import TYPE_CHECKING, Generic, Optional, Set

from .config import TraversalStrategy
from .traversal import reachable
from .types import V

if TYPE_CHECKING:
    from .graph import DirectedGraph

logger = logging.getLogger(__name__)


class SubgraphExtractor(Generic[V]):
    """Extracts subgraphs from a larger graph."""

    def __init__(self, graph: "DirectedGraph[V]"):
        """Initialize extractor with the source graph."""
        self.graph = graph

    def induced(self, vertices: Set[V]) -> "DirectedGraph[V]":
        """
        Build the subgraph induced by a vertex set.

        Edges are copied only when both endpoints are in ``vertices``. The
        adjacency order of each copied vertex is preserved.

        Args:
            vertices: Vertices of the source graph to keep

        Returns:
            DirectedGraph: New graph with the same configuration as the source
        """
        subgraph = self.graph.__class__(config=self.graph.config)
        for vertex in sorted(vertices):
            subgraph.add(vertex)
        for vertex in sorted(vertices):
            for neighbor in self.graph.neighbors(vertex):
                if neighbor in vertices:
                    subgraph.connect(vertex, neighbor)
        return subgraph

    def extract_reachable(
        self, origin: V, strategy: Optional[TraversalStrategy] = None
    ) -> "DirectedGraph[V]":
        """
        Extract the subgraph reachable from an origin vertex.

        Args:
            origin: The vertex to build the graph from
            strategy: Search used to collect the vertex set; defaults to the
                graph's configured traversal

        Returns:
            DirectedGraph: New graph with only the vertices reachable from
            origin (origin included) and the edges between them

        Raises:
            VertexNotFoundError: If origin is not in the graph
        """
        strategy = strategy or self.graph.config.traversal
        vertices = reachable(self.graph, origin, strategy)
        subgraph = self.induced(vertices)
        logger.debug(
            f"Extracted subgraph from {origin}: "
            f"{subgraph.size()} of {self.graph.size()} vertices, "
            f"{subgraph.edge_count()} edge(s)"
        )
        return subgraph
