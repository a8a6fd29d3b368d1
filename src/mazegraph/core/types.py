"""
Core type definitions and protocols.

This module provides the type variables and protocols shared by the graph
engine and the maze adapter. The maze is consumed only through the narrow
read-only query contract described by MazeProtocol.
"""

from enum import Enum
from typing import Hashable, Protocol, TypeVar

from .models import Juncture

# Vertex identity; must provide value equality and a stable hash
V = TypeVar("V", bound=Hashable)


class Direction(Enum):
    """Orthogonal directions out of a maze cell."""

    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple:
        """(dx, dy) step towards the neighbouring cell."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        """Direction pointing back from the neighbouring cell."""
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.ABOVE: (0, -1),
    Direction.BELOW: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.ABOVE: Direction.BELOW,
    Direction.BELOW: Direction.ABOVE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class MazeProtocol(Protocol):
    """Protocol defining the read-only maze queries used to build a graph."""

    @property
    def width(self) -> int:
        """Number of cells along the x axis."""
        ...

    @property
    def height(self) -> int:
        """Number of cells along the y axis."""
        ...

    def is_wall_above(self, juncture: Juncture) -> bool:
        """Check for a wall between the cell and the one above it."""
        ...

    def is_wall_below(self, juncture: Juncture) -> bool:
        """Check for a wall between the cell and the one below it."""
        ...

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        """Check for a wall between the cell and the one to its left."""
        ...

    def is_wall_to_right(self, juncture: Juncture) -> bool:
        """Check for a wall between the cell and the one to its right."""
        ...

    def get_weight_above(self, juncture: Juncture) -> int:
        """Cost of moving up out of the cell."""
        ...

    def get_weight_below(self, juncture: Juncture) -> int:
        """Cost of moving down out of the cell."""
        ...

    def get_weight_to_left(self, juncture: Juncture) -> int:
        """Cost of moving left out of the cell."""
        ...

    def get_weight_to_right(self, juncture: Juncture) -> int:
        """Cost of moving right out of the cell."""
        ...
