"""
Configuration for directed graph instances.

A graph's configuration fixes the two orderings that make its queries
reproducible: the order in which each vertex's outgoing edges are iterated
(which decides shortest-path tie-breaks) and the search strategy used for
reachability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Type, TypeVar, Union

from .exceptions import ConfigurationError

E = TypeVar("E", bound=Enum)


class NeighborOrder(Enum):
    """
    Iteration order of a vertex's adjacency set.

    INSERTION yields destinations in the order they were connected.
    SORTED yields destinations in ascending label order.

    Breadth-first search expands neighbors in this order, so among several
    equally short paths ``shortest_path`` returns the one whose discovering
    edges come first in this order.
    """

    INSERTION = "insertion"
    SORTED = "sorted"


class TraversalStrategy(Enum):
    """Search used by reachability queries."""

    BFS = "bfs"
    DFS = "dfs"


def _coerce(enum_type: Type[E], value: Union[E, str], field_name: str) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).lower())
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(
            f"Invalid {field_name} {value!r}; expected one of: {choices}"
        ) from e


@dataclass(frozen=True)
class GraphConfig:
    """
    Configuration for a DirectedGraph.

    Attributes:
        neighbor_order (NeighborOrder): Adjacency iteration order
        traversal (TraversalStrategy): Search used by ``is_connected`` and
            ``connected_graph``

    Both fields accept either the enum member or its string value.
    """

    neighbor_order: NeighborOrder = NeighborOrder.INSERTION
    traversal: TraversalStrategy = TraversalStrategy.BFS

    def __post_init__(self):
        """Normalize and validate configuration values."""
        object.__setattr__(
            self, "neighbor_order", _coerce(NeighborOrder, self.neighbor_order, "neighbor_order")
        )
        object.__setattr__(
            self, "traversal", _coerce(TraversalStrategy, self.traversal, "traversal")
        )


DEFAULT_CONFIG = GraphConfig()
