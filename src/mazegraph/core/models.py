"""
Data models for the maze graph system.

This module provides the value types produced and consumed by the graph engine:
- Juncture: the maze vertex type, a grid coordinate
- TraversalResult: outcome of a breadth-first or depth-first search
- ShortestPathResult: outcome of a Dijkstra run, including the full
  single-source shortest-path tree

Observers remain the primary way of following a traversal step by step; the
results are a convenience for callers that only need the final outcome.

Example:
    >>> result = graph.dijkstra(Juncture(0, 0), Juncture(1, 1))
    >>> result.total_cost
    2
    >>> len(result.path)
    3
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Juncture:
    """
    A single maze cell identified by its grid coordinates.

    Junctures compare and hash by value, so two instances built from the same
    coordinates are interchangeable as graph vertices.

    Attributes:
        x (int): Column index, growing to the right
        y (int): Row index, growing downwards
    """

    x: int
    y: int

    def __post_init__(self):
        """Validate coordinates after initialization."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class TraversalResult(Generic[T]):
    """
    Container for breadth-first and depth-first search results.

    Attributes:
        algorithm: Name of the algorithm that produced the result
        start: Vertex the search started from
        end: Vertex the search was looking for
        visited: Vertices in the order they were visited
        found: Whether the end vertex was reached
    """

    algorithm: str
    start: T
    end: T
    visited: List[T] = field(default_factory=list)
    found: bool = False

    def __len__(self) -> int:
        """Return the number of visited vertices."""
        return len(self.visited)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-compatible dictionary."""
        return {
            "algorithm": self.algorithm,
            "start": _encode_vertex(self.start),
            "end": _encode_vertex(self.end),
            "visited": [_encode_vertex(vertex) for vertex in self.visited],
            "found": self.found,
        }


@dataclass
class ShortestPathResult(Generic[T]):
    """
    Container for Dijkstra results.

    Attributes:
        start: Source vertex
        end: Destination vertex
        costs: Final cost of every vertex; math.inf when unreachable
        predecessors: Predecessor of every vertex on its shortest path;
            the start maps to itself, unreachable vertices map to None
        finished: Vertices in the order they were finished
        path: Shortest route from start to end, empty when unreachable
    """

    start: T
    end: T
    costs: Dict[T, float] = field(default_factory=dict)
    predecessors: Dict[T, Optional[T]] = field(default_factory=dict)
    finished: List[T] = field(default_factory=list)
    path: List[T] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        """Cost of the end vertex."""
        return self.costs.get(self.end, math.inf)

    @property
    def reachable(self) -> bool:
        """Whether a route from start to end exists."""
        return bool(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-compatible dictionary."""
        return {
            "algorithm": "dijkstra",
            "start": _encode_vertex(self.start),
            "end": _encode_vertex(self.end),
            "reachable": self.reachable,
            "cost": self.total_cost if self.reachable else None,
            "path": [_encode_vertex(vertex) for vertex in self.path],
        }


def _encode_vertex(vertex: Any) -> Any:
    if isinstance(vertex, Juncture):
        return [vertex.x, vertex.y]
    return vertex
