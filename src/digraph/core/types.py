"""
Core type definitions and protocols.

This module provides the vertex-label bound and the protocol describing the
operations a directed graph offers, so that callers can type against the
capability rather than a concrete class.
"""

from typing import Any, Iterable, List, Protocol, TypeVar


class Comparable(Protocol):
    """
    Bound for vertex labels.

    Labels must be hashable (they key the adjacency mapping) and totally
    ordered. The ordering is used only to make iteration and display
    deterministic; traversal correctness never depends on it.
    """

    def __hash__(self) -> int:
        ...

    def __lt__(self, other: Any) -> bool:
        ...


V = TypeVar("V", bound=Comparable)


class GraphProtocol(Protocol[V]):
    """Protocol defining required directed graph operations."""

    def add(self, label: V) -> None:
        """Insert a vertex if absent."""
        ...

    def connect(self, start: V, destination: V) -> None:
        """Add the edge start -> destination if absent."""
        ...

    def disconnect(self, start: V, destination: V) -> None:
        """Remove the edge start -> destination if present."""
        ...

    def remove(self, label: V) -> None:
        """Delete a vertex and every edge touching it."""
        ...

    def clear(self) -> None:
        """Remove all vertices and edges."""
        ...

    def contains(self, label: V) -> bool:
        """Check if a vertex exists."""
        ...

    def size(self) -> int:
        """Get the number of vertices."""
        ...

    def vertices(self) -> Iterable[V]:
        """Get all vertex labels in ascending order."""
        ...

    def neighbors(self, label: V) -> Iterable[V]:
        """Get the destinations of a vertex's outgoing edges."""
        ...

    def is_connected(self, start: V, destination: V) -> bool:
        """Check if destination is reachable from start in one or more edges."""
        ...

    def shortest_path(self, start: V, destination: V) -> List[V]:
        """Find one path with the fewest edges."""
        ...

    def connected_graph(self, origin: V) -> "GraphProtocol[V]":
        """Extract the subgraph reachable from origin."""
        ...
