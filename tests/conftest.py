"""Shared test fixtures."""

import logging

import pytest

from mazegraph.core.events import RecordingObserver
from mazegraph.core.graph import WeightedGraph
from mazegraph.maze import GridMaze, MazeGraph


@pytest.fixture
def recorder() -> RecordingObserver:
    """Fixture providing an empty recording observer."""
    return RecordingObserver()


@pytest.fixture
def diamond_graph() -> WeightedGraph[str]:
    """
    Fixture providing a small weighted graph plus an isolated vertex:

    A --1--> B --5--> D
    |        |        ^
    4        2        |
    v        v        |
    C <------+        |
    +--------1--------+

    E (no edges)
    """
    graph: WeightedGraph[str] = WeightedGraph()
    for vertex in "ABCDE":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 4)
    graph.add_edge("B", "C", 2)
    graph.add_edge("B", "D", 5)
    graph.add_edge("C", "D", 1)
    return graph


@pytest.fixture
def open_maze() -> GridMaze:
    """Fixture providing a 2x2 maze with no internal walls and weight 1."""
    return GridMaze(2, 2)


@pytest.fixture
def open_maze_graph(open_maze) -> MazeGraph:
    """Fixture providing the graph of the open 2x2 maze."""
    return MazeGraph(open_maze)


@pytest.fixture
def corridor_maze() -> GridMaze:
    """
    Fixture providing a 3x2 maze whose rows only connect on the right:

    +--+--+--+
    |        |
    +--+--+  +
    |        |
    +--+--+--+
    """
    return GridMaze.from_rows(
        [
            "+--+--+--+",
            "|        |",
            "+--+--+  +",
            "|        |",
            "+--+--+--+",
        ]
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep MAZEGRAPH_* settings from the outer environment out of tests."""
    for name in ("MAZEGRAPH_ALGORITHM", "MAZEGRAPH_LOG_LEVEL", "MAZEGRAPH_TRACE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by configure_logging."""
    logger = logging.getLogger("mazegraph")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
