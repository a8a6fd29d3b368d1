"""Maze model and maze-to-graph adapter."""

from .graph import MazeGraph
from .grid import GridMaze

__all__ = [
    "GridMaze",
    "MazeGraph",
]
