"""
Custom exceptions for the maze graph system.

This module defines the hierarchy of custom exceptions raised by the weighted
graph engine and its surrounding tooling. Every graph error is a caller-input
error: it is detected before any state is mutated and surfaced immediately.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as maze layout schema checks or edge weight checks.

    Examples:
        * Negative edge weights
        * Malformed maze layouts
        * Coordinates outside the maze grid
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the weighted graph encounter
    errors, such as referencing unknown vertices or inserting duplicates.

    Examples:
        * Duplicate vertex insertion
        * Edges to or from unknown vertices
        * Traversals started at unknown vertices
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown traversal algorithm name
        * Unknown logging level
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class VertexNotFoundError(ResourceNotFoundError, GraphOperationError):
    """
    Raised when a requested vertex is not present in the graph.

    Examples:
        * Adding an edge whose endpoint was never added
        * Looking up the weight between unknown vertices
        * Starting a traversal at an unknown vertex
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    This exception is raised when attempting to create a resource that
    already exists, violating uniqueness constraints.
    """


class DuplicateVertexError(DuplicateResourceError, GraphOperationError):
    """Raised when a vertex is added to a graph that already contains it."""


class InvalidWeightError(ValidationError, GraphOperationError):
    """Raised when an edge weight is not a non-negative integer."""

    def __str__(self) -> str:
        """Format invalid weight message."""
        return f"Validation Error: {Exception.__str__(self)}"
