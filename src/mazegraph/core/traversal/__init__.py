"""Graph traversal functionality."""

from .algorithms import BreadthFirstSearch, DepthFirstSearch, DijkstraShortestPath
from .base import GraphTraversal

ALGORITHMS = {
    BreadthFirstSearch.name: BreadthFirstSearch,
    DepthFirstSearch.name: DepthFirstSearch,
    DijkstraShortestPath.name: DijkstraShortestPath,
}

__all__ = [
    "ALGORITHMS",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraShortestPath",
    "GraphTraversal",
]
