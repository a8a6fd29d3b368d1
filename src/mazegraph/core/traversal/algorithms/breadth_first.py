"""Breadth-first search implementation."""

import logging
from collections import deque
from typing import Deque, Set, TypeVar

from mazegraph.core.events import TraversalEvent
from mazegraph.core.models import TraversalResult
from mazegraph.core.traversal.base import GraphTraversal

logger = logging.getLogger(__name__)

V = TypeVar("V")


class BreadthFirstSearch(GraphTraversal[V, TraversalResult[V]]):
    """
    Breadth-first search that stops as soon as the end vertex is visited.

    Every neighbour of a visited vertex is enqueued, including ones that were
    already visited or are already waiting in the queue. Duplicates are only
    discarded when they are dequeued, so the queue may hold redundant entries.
    """

    name = "bfs"

    def run(self, start: V, end: V) -> TraversalResult[V]:
        """Search from start until end is visited or the queue runs dry."""
        self.validate_vertices(start, end)
        logger.debug(f"Starting breadth-first search from {start} to {end}")

        self.notify(TraversalEvent.BFS_BEGUN)
        result: TraversalResult[V] = TraversalResult(self.name, start, end)
        visited: Set[V] = set()
        queue: Deque[V] = deque([start])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue

            visited.add(current)
            result.visited.append(current)
            self.notify(TraversalEvent.VERTEX_VISITED, current)

            if current == end:
                result.found = True
                break

            queue.extend(self.graph.get_neighbors(current))

        self.notify(TraversalEvent.SEARCH_OVER)
        logger.debug(
            f"Breadth-first search visited {len(result.visited)} vertices, "
            f"found end: {result.found}"
        )
        return result
