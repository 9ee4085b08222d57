"""
Core directed graph data structure with adjacency list representation.

This module provides the DirectedGraph class, a mutable container of labeled
vertices and directed edges. Each vertex maps to its outgoing adjacency set,
stored as an insertion-ordered mapping so that duplicate edges never
accumulate and iteration is deterministic. A reverse index of incoming edges
lets vertex removal purge every edge that references the removed vertex
without scanning the whole graph.

The graph is a single-threaded structure. It performs no internal locking;
callers that share an instance across threads must serialize access
themselves. Every query returns a fresh list, so results stay valid after the
graph is mutated.
"""

import logging
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .config import DEFAULT_CONFIG, GraphConfig, NeighborOrder
from .exceptions import VertexNotFoundError
from .models import Edge
from .paths import ShortestPathFinder
from .subgraphs import SubgraphExtractor
from .traversal import reachable
from .types import V

logger = logging.getLogger(__name__)

EdgeLike = Union[Edge[V], Tuple[V, V]]


class DirectedGraph(Generic[V]):
    """
    Directed graph over orderable, hashable vertex labels.

    Vertices are identified by their label; no two vertices share one. Edges
    are directed and carry no attributes, and an edge from a vertex to itself
    is allowed. Labels must be hashable and totally ordered; an unhashable
    value can never be a vertex, so membership checks report it as absent.
    Any operation given a label that is not in the graph raises
    VertexNotFoundError before changing anything.

    Attributes:
        config (GraphConfig): Ordering and traversal configuration
        _adjacency (Dict[V, Dict[V, Edge]]): Outgoing edges keyed by destination
        _reverse_index (Dict[V, Set[V]]): Sources of each vertex's incoming edges
        _edge_count (int): Total number of edges
    """

    def __init__(
        self,
        vertices: Optional[Iterable[V]] = None,
        edges: Optional[Iterable[EdgeLike]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Initialize the graph, optionally seeding vertices and edges.

        Args:
            vertices (Optional[Iterable[V]]): Initial vertex labels
            edges (Optional[Iterable[EdgeLike]]): Initial (start, destination)
                pairs; endpoints not already present are added as vertices
            config (Optional[GraphConfig]): Graph configuration
        """
        self.config = config or DEFAULT_CONFIG
        self._adjacency: Dict[V, Dict[V, Edge[V]]] = {}
        self._reverse_index: Dict[V, Set[V]] = {}
        self._edge_count = 0

        for vertex in vertices or ():
            self.add(vertex)
        for start, destination in edges or ():
            self.add(start)
            self.add(destination)
            self.connect(start, destination)

    @classmethod
    def from_edges(
        cls, edges: Iterable[EdgeLike], config: Optional[GraphConfig] = None
    ) -> "DirectedGraph[V]":
        """Create a graph containing the given edges and their endpoints."""
        return cls(edges=edges, config=config)

    def _require(self, *labels: V) -> None:
        for label in labels:
            if not self.contains(label):
                raise VertexNotFoundError(label)

    # Mutators

    def add(self, label: V) -> None:
        """
        Insert a vertex with the given label if it is not already present.

        Adding an existing label is a no-op; its edges are kept.
        """
        if label in self._adjacency:
            return
        self._adjacency[label] = {}
        self._reverse_index[label] = set()
        logger.debug(f"Added vertex {label}")

    def connect(self, start: V, destination: V) -> None:
        """
        Add the edge start -> destination if it does not yet exist.

        Args:
            start (V): Origin vertex of the edge
            destination (V): Terminal vertex of the edge

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self._require(start, destination)
        outgoing = self._adjacency[start]
        if destination in outgoing:
            return
        outgoing[destination] = Edge(start, destination)
        self._reverse_index[destination].add(start)
        self._edge_count += 1
        logger.debug(f"Connected {start} -> {destination}")

    def disconnect(self, start: V, destination: V) -> None:
        """
        Remove the edge start -> destination if it exists.

        Disconnecting vertices that have no such edge is a no-op.

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self._require(start, destination)
        outgoing = self._adjacency[start]
        if destination not in outgoing:
            return
        del outgoing[destination]
        self._reverse_index[destination].discard(start)
        self._edge_count -= 1
        logger.debug(f"Disconnected {start} -> {destination}")

    def remove(self, label: V) -> None:
        """
        Delete a vertex and every edge using it as a start or destination.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self._require(label)

        outgoing = self._adjacency.pop(label)
        incoming = self._reverse_index.pop(label)
        for destination in outgoing:
            if destination != label:
                self._reverse_index[destination].discard(label)
        for source in incoming:
            if source != label:
                del self._adjacency[source][label]

        # a self-loop is counted in both directions
        self_loops = sum(1 for edge in outgoing.values() if edge.is_self_loop)
        removed = len(outgoing) + len(incoming) - self_loops
        self._edge_count -= removed
        logger.debug(f"Removed vertex {label} and {removed} edge(s)")

    def clear(self) -> None:
        """Reset the graph to zero vertices and edges."""
        self._adjacency.clear()
        self._reverse_index.clear()
        self._edge_count = 0
        logger.debug("Cleared graph")

    # Queries

    def contains(self, label: V) -> bool:
        """Report if a vertex with the given label is in the graph. Never raises."""
        try:
            return label in self._adjacency
        except TypeError:
            # unhashable labels cannot be vertices
            return False

    def size(self) -> int:
        """Get the number of vertices."""
        return len(self._adjacency)

    def vertices(self) -> List[V]:
        """
        Get all vertex labels in ascending label order.

        Returns:
            List[V]: A new list; changing it does not affect the graph
        """
        return sorted(self._adjacency)

    def neighbors(self, label: V) -> List[V]:
        """
        Get the vertices reachable from label through one outgoing edge.

        The order follows ``config.neighbor_order``.

        Returns:
            List[V]: A new, possibly empty list; changing it does not affect
            the graph

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self._require(label)
        if self.config.neighbor_order is NeighborOrder.SORTED:
            return sorted(self._adjacency[label])
        return list(self._adjacency[label])

    def predecessors(self, label: V) -> List[V]:
        """
        Get the vertices with an edge into label, in ascending order.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self._require(label)
        return sorted(self._reverse_index[label])

    def has_edge(self, start: V, destination: V) -> bool:
        """Check if the edge start -> destination exists. Never raises."""
        if not (self.contains(start) and self.contains(destination)):
            return False
        return destination in self._adjacency[start]

    def edges(self) -> List[Edge[V]]:
        """
        Get every edge in the graph.

        Sources are listed in ascending label order and each source's edges in
        adjacency order.
        """
        return [
            self._adjacency[source][destination]
            for source in self.vertices()
            for destination in self.neighbors(source)
        ]

    def edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        return self._edge_count

    def degree(self, label: V, reverse: bool = False) -> int:
        """
        Get the degree (number of edges) of a vertex.

        Args:
            label (V): The vertex to get the degree for
            reverse (bool): If True, get in-degree instead of out-degree

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self._require(label)
        if reverse:
            return len(self._reverse_index[label])
        return len(self._adjacency[label])

    def is_connected(self, start: V, destination: V) -> bool:
        """
        Identify if a path of one or more edges leads from start to destination.

        When start and destination are the same vertex only a self-edge
        counts; the zero-length path does not. The search never mutates the
        graph.

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self._require(start, destination)
        if start == destination:
            return self.has_edge(start, start)
        return destination in reachable(self, start, self.config.traversal)

    def shortest_path(self, start: V, destination: V) -> List[V]:
        """
        Find one path with the fewest edges from start to destination.

        Returns:
            List[V]: Vertices from start (index 0) to destination (last
            index), ``[start]`` when both are the same vertex, or an empty
            list when no path exists

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        return ShortestPathFinder(self).find_path(start, destination)

    def connected_graph(self, origin: V) -> "DirectedGraph[V]":
        """
        Produce a graph of only the vertices and edges reachable from origin.

        The result is a new graph sharing no state with this one and using
        the same configuration.

        Raises:
            VertexNotFoundError: If the origin vertex is not in the graph
        """
        return SubgraphExtractor(self).extract_reachable(origin)

    def copy(self) -> "DirectedGraph[V]":
        """Create an independent copy of this graph."""
        return SubgraphExtractor(self).induced(set(self._adjacency))

    # Python protocols

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, label: object) -> bool:
        return self.contains(label)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectedGraph):
            return NotImplemented
        return {v: set(adj) for v, adj in self._adjacency.items()} == {
            v: set(adj) for v, adj in other._adjacency.items()
        }

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex} -> [{', '.join(str(n) for n in self.neighbors(vertex))}]"
            for vertex in self.vertices()
        )

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.size()}, edges={self.edge_count()})"
