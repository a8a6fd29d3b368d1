"""
mazegraph - Weighted maze graphs with observable traversals

This package turns grid mazes into directed, weighted graphs and runs
breadth-first search, depth-first search and Dijkstra's shortest path over
them, reporting each step to registered observers. It includes:

- A generic weighted graph engine with the three traversal algorithms
- The observer contract and stock logging/recording observers
- A grid maze model and the maze-to-graph adapter
- JSON layout validation and a small command line front end
"""

__version__ = "0.1.0"
__author__ = "mazegraph contributors"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("mazegraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.events import GraphAlgorithmObserver, LoggingObserver, RecordingObserver
from .core.graph import WeightedGraph
from .core.models import Juncture
from .maze import GridMaze, MazeGraph

__all__ = [
    "GraphAlgorithmObserver",
    "GridMaze",
    "Juncture",
    "LoggingObserver",
    "MazeGraph",
    "RecordingObserver",
    "WeightedGraph",
]
