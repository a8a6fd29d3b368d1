"""Traversal algorithm implementations."""

from .breadth_first import BreadthFirstSearch
from .depth_first import DepthFirstSearch
from .dijkstra import DijkstraShortestPath

__all__ = [
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraShortestPath",
]
