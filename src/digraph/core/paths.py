"""Unweighted shortest path search."""

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, Generic, List

from .exceptions import VertexNotFoundError
from .types import V

if TYPE_CHECKING:
    from .graph import DirectedGraph

logger = logging.getLogger(__name__)


def reconstruct_path(predecessors: Dict[V, V], start: V, end: V) -> List[V]:
    """
    Rebuild a path by walking predecessor links back from end to start.

    Args:
        predecessors: Maps each discovered vertex to the vertex that first reached it
        start: First vertex of the path
        end: Last vertex of the path; must be start or a key of predecessors

    Returns:
        List of vertices from start to end, both inclusive
    """
    path = [end]
    current = end
    while current != start:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


class ShortestPathFinder(Generic[V]):
    """
    Breadth-first shortest path implementation.

    Finds a path with the fewest edges. Among equally short paths the winner
    is decided by the graph's adjacency order: vertices on the same BFS level
    are discovered by whichever edge is expanded first.
    """

    def __init__(self, graph: "DirectedGraph[V]"):
        """Initialize finder with graph."""
        self.graph = graph

    def find_path(self, start: V, end: V) -> List[V]:
        """
        Find one shortest path between two vertices.

        Args:
            start: The vertex from which to begin the search
            end: The terminal vertex

        Returns:
            Vertices from start (index 0) to end (last index). A vertex
            trivially reaches itself, so ``find_path(a, a) == [a]``. An empty
            list means end is unreachable from start.

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        if not self.graph.contains(start):
            raise VertexNotFoundError(start)
        if not self.graph.contains(end):
            raise VertexNotFoundError(end)

        if start == end:
            return [start]

        predecessors: Dict[V, V] = {}
        visited = {start}
        queue = deque([start])

        while queue:
            vertex = queue.popleft()
            for neighbor in self.graph.neighbors(vertex):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                predecessors[neighbor] = vertex
                if neighbor == end:
                    path = reconstruct_path(predecessors, start, end)
                    logger.debug(f"Shortest path {start} -> {end}: {len(path) - 1} edge(s)")
                    return path
                queue.append(neighbor)

        logger.debug(f"No path from {start} to {end} after visiting {len(visited)} vertices")
        return []
