"""
Graph traversal system using iterator pattern.

This module provides breadth-first and depth-first traversal of a directed
graph from a start vertex. Both iterators keep a visited set keyed by vertex
label, so every reachable vertex is yielded exactly once and traversal
terminates on cyclic graphs. Neighbors are expanded in the graph's configured
adjacency order, which makes the discovery order reproducible.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Dict, Generic, Iterator, Set, Tuple, Type

from .config import TraversalStrategy
from .exceptions import VertexNotFoundError
from .types import V

if TYPE_CHECKING:
    from .graph import DirectedGraph


class GraphIterator(ABC, Generic[V]):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: "DirectedGraph[V]", start: V):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start: Starting vertex for traversal

        Raises:
            VertexNotFoundError: If start is not in the graph
        """
        if not graph.contains(start):
            raise VertexNotFoundError(start)
        self.graph = graph
        self.start = start
        self.visited: Set[V] = set()

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[V, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (vertex, depth)
        """


class BFSIterator(GraphIterator[V]):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[V, int]]:
        """
        Traverse graph in breadth-first order.

        Yields:
            Tuples of (vertex, depth) in BFS order, start first at depth 0
        """
        self.visited = {self.start}
        queue = deque([(self.start, 0)])

        while queue:
            vertex, depth = queue.popleft()
            yield vertex, depth

            for neighbor in self.graph.neighbors(vertex):
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    queue.append((neighbor, depth + 1))


class DFSIterator(GraphIterator[V]):
    """Depth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[V, int]]:
        """
        Traverse graph in depth-first (pre-order) order.

        Yields:
            Tuples of (vertex, depth) in DFS order, start first at depth 0
        """
        self.visited = {self.start}
        yield self.start, 0

        stack = [(self.start, 0, iter(self.graph.neighbors(self.start)))]
        while stack:
            vertex, depth, neighbors = stack[-1]
            try:
                neighbor = next(neighbors)
            except StopIteration:
                stack.pop()
                continue
            if neighbor not in self.visited:
                self.visited.add(neighbor)
                yield neighbor, depth + 1
                stack.append((neighbor, depth + 1, iter(self.graph.neighbors(neighbor))))


ITERATORS: Dict[TraversalStrategy, Type[GraphIterator]] = {
    TraversalStrategy.BFS: BFSIterator,
    TraversalStrategy.DFS: DFSIterator,
}


def traverse(
    graph: "DirectedGraph[V]", start: V, strategy: TraversalStrategy = TraversalStrategy.BFS
) -> GraphIterator[V]:
    """Create a traversal iterator for the given strategy."""
    return ITERATORS[strategy](graph, start)


def reachable(
    graph: "DirectedGraph[V]", start: V, strategy: TraversalStrategy = TraversalStrategy.BFS
) -> Set[V]:
    """
    Collect every vertex reachable from start via zero or more edges.

    Args:
        graph: The graph to search
        start: Vertex to search from
        strategy: Search to use; the resulting set is the same either way

    Returns:
        Set of reachable vertex labels, including start

    Raises:
        VertexNotFoundError: If start is not in the graph
    """
    return {vertex for vertex, _ in traverse(graph, start, strategy)}
