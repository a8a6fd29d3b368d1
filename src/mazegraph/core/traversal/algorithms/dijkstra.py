"""
Dijkstra's shortest path implementation.

The minimum-cost vertex is selected by a linear scan over every vertex on each
iteration, giving O(V^2) overall. The scan runs in vertex insertion order and
only a strictly smaller cost replaces the current candidate, so ties go to the
vertex that was added to the graph first.
"""

import logging
import math
from typing import Dict, List, Optional, Set, TypeVar

from mazegraph.core.events import TraversalEvent
from mazegraph.core.exceptions import GraphOperationError
from mazegraph.core.models import ShortestPathResult
from mazegraph.core.traversal.base import GraphTraversal

logger = logging.getLogger(__name__)

V = TypeVar("V")


class DijkstraShortestPath(GraphTraversal[V, ShortestPathResult[V]]):
    """
    Single-source Dijkstra that always finishes every vertex of the graph.

    The loop does not stop once the end vertex is finished: the complete
    shortest-path tree rooted at the start is computed and returned.
    Vertices that cannot be reached are finished last with cost math.inf.
    """

    name = "dijkstra"

    def run(self, start: V, end: V) -> ShortestPathResult[V]:
        """Compute shortest paths from start and the route to end."""
        self.validate_vertices(start, end)
        logger.debug(f"Starting Dijkstra's algorithm from {start} to {end}")

        self.notify(TraversalEvent.DIJKSTRA_BEGUN)

        vertices = self.graph.get_vertices()
        cost: Dict[V, float] = {vertex: math.inf for vertex in vertices}
        predecessor: Dict[V, Optional[V]] = {vertex: None for vertex in vertices}
        cost[start] = 0
        predecessor[start] = start

        finished: Set[V] = set()
        finished_order: List[V] = []

        while len(finished) < len(vertices):
            current = self._select_cheapest(vertices, cost, finished)
            finished.add(current)
            finished_order.append(current)
            self.notify(TraversalEvent.DIJKSTRA_VERTEX_FINISHED, current, cost[current])

            for neighbor, weight in self.graph.get_neighbors(current).items():
                candidate = cost[current] + weight
                if candidate < cost[neighbor]:
                    cost[neighbor] = candidate
                    predecessor[neighbor] = current

        path = self.reconstruct_path(predecessor, start, end)
        self.notify(TraversalEvent.DIJKSTRA_OVER, path)
        logger.debug(f"Dijkstra's algorithm finished with cost {cost[end]} to {end}")

        return ShortestPathResult(
            start=start,
            end=end,
            costs=cost,
            predecessors=predecessor,
            finished=finished_order,
            path=path,
        )

    @staticmethod
    def _select_cheapest(vertices: List[V], cost: Dict[V, float], finished: Set[V]) -> V:
        """
        Pick the unfinished vertex with the smallest cost, earliest first.

        min() keeps the first of several equal candidates, which is the one
        inserted earliest.

        Raises:
            GraphOperationError: If every vertex is already finished
        """
        unfinished = [vertex for vertex in vertices if vertex not in finished]
        if not unfinished:
            raise GraphOperationError("No unfinished vertex left to select")
        return min(unfinished, key=lambda vertex: cost[vertex])

    @staticmethod
    def reconstruct_path(predecessor: Dict[V, Optional[V]], start: V, end: V) -> List[V]:
        """
        Walk predecessors back from end to start.

        Vertices are compared by value equality, never by identity.

        Args:
            predecessor: Predecessor mapping produced by the main loop
            start: Source vertex
            end: Destination vertex

        Returns:
            The route from start to end inclusive, or an empty list when end
            has no predecessor chain back to start
        """
        path = [end]
        while path[0] != start:
            previous = predecessor.get(path[0])
            if previous is None:
                return []
            path.insert(0, previous)
        return path
