"""
Core weighted graph data structure with an adjacency mapping representation.

This module provides the WeightedGraph class: a generic, directed graph whose
edges carry non-negative integer weights. Vertices are any hashable values with
value equality. The graph is populated once and then traversed with one of
three algorithms (breadth-first search, depth-first search, Dijkstra), each of
which reports its progress to the registered observers as it goes.

Vertex and neighbour iteration follow insertion order, which makes every
traversal deterministic for a given construction order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional, Tuple, Union

from .events import GraphAlgorithmObserver, ObserverRegistry
from .exceptions import (
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    VertexNotFoundError,
)
from .models import ShortestPathResult, TraversalResult
from .traversal import ALGORITHMS, BreadthFirstSearch, DepthFirstSearch, DijkstraShortestPath
from .types import V

logger = logging.getLogger(__name__)


@dataclass
class GraphState(Generic[V]):
    """Encapsulates the state of a graph."""

    adjacency: Dict[V, Dict[V, int]] = field(default_factory=dict)
    edge_count: int = 0


class WeightedGraph(Generic[V]):
    """
    Directed weighted graph with observable traversal algorithms.

    Attributes:
        _state (GraphState): Vertex and edge storage
        _observers (ObserverRegistry): Observers notified during traversals
    """

    def __init__(self) -> None:
        self._state: GraphState[V] = GraphState()
        self._observers: ObserverRegistry[V] = ObserverRegistry()

    def __len__(self) -> int:
        return len(self._state.adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._state.adjacency))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._state.adjacency

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"edges={self._state.edge_count}, observers={len(self._observers)})"
        )

    @property
    def observers(self) -> Tuple[GraphAlgorithmObserver[V], ...]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer for every subsequent traversal."""
        self._observers.add(observer)

    def remove_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Stop notifying an observer."""
        self._observers.remove(observer)

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._observers.clear()

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Args:
            vertex: The vertex to add

        Raises:
            DuplicateVertexError: If the vertex is already present
        """
        if vertex in self._state.adjacency:
            raise DuplicateVertexError(f"Vertex '{vertex}' already exists in the graph")
        self._state.adjacency[vertex] = {}

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._state.adjacency

    def add_edge(self, from_vertex: V, to_vertex: V, weight: int) -> None:
        """
        Add or overwrite the directed edge from_vertex -> to_vertex.

        The reverse edge is not implied. Nothing is modified when validation
        fails.

        Args:
            from_vertex: Source vertex, must already be in the graph
            to_vertex: Target vertex, must already be in the graph
            weight: Non-negative integer cost of the edge

        Raises:
            InvalidWeightError: If weight is not a non-negative integer
            VertexNotFoundError: If either endpoint is unknown
        """
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise InvalidWeightError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise InvalidWeightError(f"Edge weight must be non-negative, got {weight}")
        self._require_vertex(from_vertex, "Source")
        self._require_vertex(to_vertex, "Target")

        edges = self._state.adjacency[from_vertex]
        if to_vertex not in edges:
            self._state.edge_count += 1
        edges[to_vertex] = weight

    def get_weight(self, from_vertex: V, to_vertex: V) -> Optional[int]:
        """
        Get the weight of the edge from_vertex -> to_vertex.

        Returns:
            The edge weight, or None if both vertices exist but are not
            connected in that direction

        Raises:
            VertexNotFoundError: If either endpoint is unknown
        """
        self._require_vertex(from_vertex, "Source")
        self._require_vertex(to_vertex, "Target")
        return self._state.adjacency[from_vertex].get(to_vertex)

    def has_edge(self, from_vertex: V, to_vertex: V) -> bool:
        """Check if an edge exists between two vertices."""
        return to_vertex in self._state.adjacency.get(from_vertex, {})

    def get_neighbors(self, vertex: V) -> Dict[V, int]:
        """
        Get the outgoing neighbours of a vertex and their edge weights.

        Returns:
            A copy of the adjacency mapping, in edge insertion order

        Raises:
            VertexNotFoundError: If the vertex is unknown
        """
        self._require_vertex(vertex)
        return dict(self._state.adjacency[vertex])

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._state.adjacency)

    def get_edges(self) -> Iterator[Tuple[V, V, int]]:
        """Get all edges as (from, to, weight) triples."""
        for from_vertex, edges in self._state.adjacency.items():
            for to_vertex, weight in edges.items():
                yield from_vertex, to_vertex, weight

    def get_edge_count(self) -> int:
        """Get the total number of directed edges in the graph."""
        return self._state.edge_count

    def breadth_first_search(self, start: V, end: V) -> TraversalResult[V]:
        """
        Run a breadth-first search from start, stopping once end is visited.

        Observers receive on_bfs_begun, then on_vertex_visited for each
        vertex in visit order, then on_search_over.

        Raises:
            VertexNotFoundError: If start or end is unknown
        """
        return BreadthFirstSearch(self, self._observers).run(start, end)

    def depth_first_search(self, start: V, end: V) -> TraversalResult[V]:
        """
        Run a depth-first search from start, stopping once end is visited.

        Observers receive on_dfs_begun, then on_vertex_visited for each
        vertex in visit order, then on_search_over.

        Raises:
            VertexNotFoundError: If start or end is unknown
        """
        return DepthFirstSearch(self, self._observers).run(start, end)

    def dijkstra(self, start: V, end: V) -> ShortestPathResult[V]:
        """
        Compute shortest paths from start to every vertex and the route to end.

        Observers receive on_dijkstra_begun, then on_dijkstra_vertex_finished
        for each vertex in finishing order, then on_dijkstra_over with the
        route from start to end.

        Raises:
            VertexNotFoundError: If start or end is unknown
        """
        return DijkstraShortestPath(self, self._observers).run(start, end)

    def traverse(
        self, algorithm: str, start: V, end: V
    ) -> Union[TraversalResult[V], ShortestPathResult[V]]:
        """
        Run the traversal registered under algorithm ("bfs", "dfs" or "dijkstra").

        Raises:
            GraphOperationError: If no traversal is registered under that name
            VertexNotFoundError: If start or end is unknown
        """
        traversal = ALGORITHMS.get(algorithm)
        if traversal is None:
            raise GraphOperationError(
                f"Unknown algorithm '{algorithm}', expected one of {sorted(ALGORITHMS)}"
            )
        return traversal(self, self._observers).run(start, end)

    def _require_vertex(self, vertex: V, role: str = "") -> None:
        if vertex not in self._state.adjacency:
            label = f"{role} vertex" if role else "Vertex"
            raise VertexNotFoundError(f"{label} '{vertex}' not found in the graph")
