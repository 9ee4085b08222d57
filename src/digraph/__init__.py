"""
Digraph - Generic Directed Graph Container

This package provides a mutable directed graph over orderable vertex labels,
intended as a building block for dependency graphs, routing tables and
similar structures. It includes:

- Vertex and edge management with duplicate-free adjacency sets
- Reachability queries and breadth/depth-first traversal
- Unweighted shortest path search
- Extraction of the subgraph reachable from a vertex
"""

__version__ = "0.1.0"
__author__ = "Digraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Digraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig, NeighborOrder, TraversalStrategy
from .core.exceptions import VertexNotFoundError
from .core.graph import DirectedGraph
from .core.models import Edge

__all__ = [
    "DirectedGraph",
    "Edge",
    "GraphConfig",
    "NeighborOrder",
    "TraversalStrategy",
    "VertexNotFoundError",
]
