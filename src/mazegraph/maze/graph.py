"""
Maze to graph adapter.

MazeGraph turns a maze into a WeightedGraph of Junctures. It reads the maze
once, through the MazeProtocol query contract, and never looks at it again:
later changes to the maze are not reflected in the graph.
"""

import logging
from typing import Callable, Dict, Tuple

from ..core.exceptions import VertexNotFoundError
from ..core.graph import WeightedGraph
from ..core.models import Juncture
from ..core.types import Direction, MazeProtocol

logger = logging.getLogger(__name__)

# Direction -> (wall query, weight query) on MazeProtocol
_QUERIES: Dict[Direction, Tuple[Callable[..., bool], Callable[..., int]]] = {
    Direction.ABOVE: (
        lambda maze, cell: maze.is_wall_above(cell),
        lambda maze, cell: maze.get_weight_above(cell),
    ),
    Direction.BELOW: (
        lambda maze, cell: maze.is_wall_below(cell),
        lambda maze, cell: maze.get_weight_below(cell),
    ),
    Direction.LEFT: (
        lambda maze, cell: maze.is_wall_to_left(cell),
        lambda maze, cell: maze.get_weight_to_left(cell),
    ),
    Direction.RIGHT: (
        lambda maze, cell: maze.is_wall_to_right(cell),
        lambda maze, cell: maze.get_weight_to_right(cell),
    ),
}


class MazeGraph(WeightedGraph[Juncture]):
    """
    Weighted graph with one vertex per maze cell.

    Vertices are added row by row, left to right. Each cell gets at most one
    outgoing edge per direction (above, below, left, right, checked in that
    order): to the orthogonal neighbour inside the grid, when the maze
    reports no wall on that side, weighted with the maze's weight for that
    direction.

    Attributes:
        width (int): Number of columns of the source maze
        height (int): Number of rows of the source maze
    """

    def __init__(self, maze: MazeProtocol):
        super().__init__()
        self.width = maze.width
        self.height = maze.height

        for y in range(self.height):
            for x in range(self.width):
                self.add_vertex(Juncture(x, y))

        for cell in self.get_vertices():
            for direction, (is_wall, weight_of) in _QUERIES.items():
                dx, dy = direction.offset
                neighbor = Juncture(cell.x + dx, cell.y + dy)
                if neighbor in self and not is_wall(maze, cell):
                    self.add_edge(cell, neighbor, weight_of(maze, cell))

        logger.debug(
            f"Built maze graph with {len(self)} vertices and {self.get_edge_count()} edges"
        )

    def juncture(self, x: int, y: int) -> Juncture:
        """
        Look up the vertex for a cell.

        Raises:
            VertexNotFoundError: If the coordinates lie outside the maze
        """
        juncture = Juncture(x, y)
        if juncture not in self:
            raise VertexNotFoundError(
                f"Cell ({x}, {y}) is outside the {self.width}x{self.height} maze"
            )
        return juncture
