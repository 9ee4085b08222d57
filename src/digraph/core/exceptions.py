"""
Custom exceptions for the directed graph package.

This module defines the small hierarchy of exceptions raised by the graph
container and its helpers. Every exception is raised eagerly, before any
mutation of the graph takes place, so a failed call never leaves a graph
partially modified.
"""

from typing import Any


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when an operation references a vertex label absent from the graph.

    The offending label is available as the ``vertex`` attribute.

    Examples:
        * Connecting or disconnecting an edge with an unknown endpoint
        * Removing a vertex that was never added
        * Path or reachability queries from or to an unknown vertex
    """

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"Vertex '{vertex}' not found in the graph")


class ConfigurationError(Exception):
    """
    Raised when graph configuration is invalid.

    Examples:
        * Unknown neighbor ordering
        * Unknown traversal strategy
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"
