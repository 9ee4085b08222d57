"""
Edge model for the directed graph.

Edges carry no attributes beyond their endpoints; an edge's identity is the
ordered pair (source, destination).
"""

from dataclasses import dataclass
from typing import Generic, Iterator

from .types import V


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    A directed connection between two vertices.

    Attributes:
        source (V): Label of the origin vertex
        destination (V): Label of the terminal vertex
    """

    source: V
    destination: V

    @property
    def is_self_loop(self) -> bool:
        """True when the edge starts and ends at the same vertex."""
        return self.source == self.destination

    def __iter__(self) -> Iterator[V]:
        """Unpack as ``source, destination``."""
        yield self.source
        yield self.destination

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"
