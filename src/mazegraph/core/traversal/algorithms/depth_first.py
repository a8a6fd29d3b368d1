"""Depth-first search implementation."""

import logging
from typing import List, Set, TypeVar

from mazegraph.core.events import TraversalEvent
from mazegraph.core.models import TraversalResult
from mazegraph.core.traversal.base import GraphTraversal

logger = logging.getLogger(__name__)

V = TypeVar("V")


class DepthFirstSearch(GraphTraversal[V, TraversalResult[V]]):
    """
    Depth-first search that stops as soon as the end vertex is visited.

    Unlike the breadth-first search, neighbours that were already visited are
    never pushed. A neighbour can still be pushed twice when it is reachable
    from two vertices visited before it; the second pop is then skipped.
    """

    name = "dfs"

    def run(self, start: V, end: V) -> TraversalResult[V]:
        """Search from start until end is visited or the stack runs dry."""
        self.validate_vertices(start, end)
        logger.debug(f"Starting depth-first search from {start} to {end}")

        self.notify(TraversalEvent.DFS_BEGUN)
        result: TraversalResult[V] = TraversalResult(self.name, start, end)
        visited: Set[V] = set()
        stack: List[V] = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            result.visited.append(current)
            self.notify(TraversalEvent.VERTEX_VISITED, current)

            if current == end:
                result.found = True
                break

            for neighbor in self.graph.get_neighbors(current):
                if neighbor not in visited:
                    stack.append(neighbor)

        self.notify(TraversalEvent.SEARCH_OVER)
        logger.debug(
            f"Depth-first search visited {len(result.visited)} vertices, "
            f"found end: {result.found}"
        )
        return result
