"""Core directed graph functionality."""

from .config import GraphConfig, NeighborOrder, TraversalStrategy
from .exceptions import ConfigurationError, ResourceNotFoundError, VertexNotFoundError
from .graph import DirectedGraph
from .models import Edge
from .paths import ShortestPathFinder
from .subgraphs import SubgraphExtractor
from .traversal import BFSIterator, DFSIterator, GraphIterator, reachable, traverse
from .types import Comparable, GraphProtocol

__all__ = [
    "BFSIterator",
    "Comparable",
    "ConfigurationError",
    "DFSIterator",
    "DirectedGraph",
    "Edge",
    "GraphConfig",
    "GraphIterator",
    "GraphProtocol",
    "NeighborOrder",
    "ResourceNotFoundError",
    "ShortestPathFinder",
    "SubgraphExtractor",
    "TraversalStrategy",
    "VertexNotFoundError",
    "reachable",
    "traverse",
]
