"""
In-memory grid maze model.

GridMaze is a small mutable maze used to feed MazeGraph: a width x height grid
of cells where every cell has a wall flag and a crossing weight in each of
the four orthogonal directions. The outer boundary is always walled. Walls are
shared between neighbouring cells, weights are one-sided so that moving
A -> B may cost something different from moving B -> A.

Layouts can be built programmatically, from a JSON-compatible dictionary, or
from ASCII art:

    +--+--+
    |     |
    +  +--+
    |     |
    +--+--+
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from ..core.exceptions import ValidationError
from ..core.models import Juncture
from ..core.types import Direction
from ..utils.validation import validate_maze_layout

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class GridMaze:
    """
    Rectangular maze with per-direction walls and weights.

    Attributes:
        width (int): Number of columns
        height (int): Number of rows
        default_weight (int): Weight of every direction not set explicitly
        start (Optional[Juncture]): Suggested start cell, if the layout names one
        end (Optional[Juncture]): Suggested end cell, if the layout names one
    """

    def __init__(self, width: int, height: int, default_weight: int = 1):
        if not isinstance(width, int) or not isinstance(height, int):
            raise TypeError("width and height must be integers")
        if width < 1 or height < 1:
            raise ValidationError("maze must be at least 1x1")
        _check_weight(default_weight)

        self.width = width
        self.height = height
        self.default_weight = default_weight
        self.start: Optional[Juncture] = None
        self.end: Optional[Juncture] = None
        self._walls: Set[Tuple[int, int, Direction]] = set()
        self._weights: Dict[Tuple[int, int, Direction], int] = {}

    def __repr__(self) -> str:
        return f"GridMaze(width={self.width}, height={self.height})"

    def contains(self, x: int, y: int) -> bool:
        """Check whether the coordinates lie inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def set_wall(self, x: int, y: int, direction: Direction, present: bool = True) -> None:
        """
        Add or remove the wall on one side of a cell.

        The matching side of the neighbouring cell changes with it. Boundary
        walls cannot be removed.
        """
        self._require_cell(x, y)
        neighbor = self._neighbor(x, y, direction)
        if neighbor is None:
            if not present:
                raise ValidationError(f"cannot open boundary wall {direction.value} of ({x}, {y})")
            return

        nx, ny = neighbor
        if present:
            self._walls.add((x, y, direction))
            self._walls.add((nx, ny, direction.opposite))
        else:
            self._walls.discard((x, y, direction))
            self._walls.discard((nx, ny, direction.opposite))

    def set_weight(self, x: int, y: int, direction: Direction, weight: int) -> None:
        """Set the cost of leaving a cell in the given direction."""
        self._require_cell(x, y)
        _check_weight(weight)
        self._weights[(x, y, direction)] = weight

    def is_wall(self, juncture: Juncture, direction: Direction) -> bool:
        """Check for a wall on the given side of a cell."""
        if self._neighbor(juncture.x, juncture.y, direction) is None:
            return True
        return (juncture.x, juncture.y, direction) in self._walls

    def get_weight(self, juncture: Juncture, direction: Direction) -> int:
        """Cost of leaving a cell in the given direction."""
        return self._weights.get((juncture.x, juncture.y, direction), self.default_weight)

    def is_wall_above(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.ABOVE)

    def is_wall_below(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.BELOW)

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.LEFT)

    def is_wall_to_right(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.RIGHT)

    def get_weight_above(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.ABOVE)

    def get_weight_below(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.BELOW)

    def get_weight_to_left(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.LEFT)

    def get_weight_to_right(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.RIGHT)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridMaze":
        """
        Build a maze from a JSON-compatible layout.

        Args:
            data: Layout with "width", "height" and optional "default_weight",
                "walls", "weights", "start" and "end" entries

        Returns:
            GridMaze: The populated maze

        Raises:
            ValidationError: If the layout does not match the schema or names
                cells outside the grid
        """
        validate_maze_layout(data)
        maze = cls(data["width"], data["height"], data.get("default_weight", 1))

        for wall in data.get("walls", []):
            maze.set_wall(wall["x"], wall["y"], Direction(wall["direction"]))
        for entry in data.get("weights", []):
            maze.set_weight(entry["x"], entry["y"], Direction(entry["direction"]), entry["weight"])

        if "start" in data:
            maze.start = maze._juncture_at(data["start"])
        if "end" in data:
            maze.end = maze._juncture_at(data["end"])

        logger.debug(
            f"Loaded {maze.width}x{maze.height} maze with {len(data.get('walls', []))} walls"
        )
        return maze

    @classmethod
    def from_rows(cls, rows: Sequence[str], default_weight: int = 1) -> "GridMaze":
        """
        Build a maze from ASCII art.

        Even rows hold horizontal walls as "+--+" segments, odd rows hold
        cells separated by "|" walls. Each cell is three characters wide.
        Missing trailing characters count as open space.
        """
        lines: List[str] = [row.rstrip("\n") for row in rows if row.strip()]
        if len(lines) < 3 or len(lines) % 2 == 0:
            raise ValidationError("ASCII maze needs an odd number of at least 3 rows")

        width = (len(lines[0]) - 1) // 3
        height = (len(lines) - 1) // 2
        maze = cls(width, height, default_weight)

        for y in range(height):
            above, cells = lines[2 * y], lines[2 * y + 1]
            for x in range(width):
                if y > 0 and above[3 * x + 1 : 3 * x + 3] == "--":
                    maze.set_wall(x, y, Direction.ABOVE)
                if x > 0 and cells[3 * x : 3 * x + 1] == "|":
                    maze.set_wall(x, y, Direction.LEFT)
        return maze

    def _juncture_at(self, coords: Sequence[int]) -> Juncture:
        x, y = coords
        self._require_cell(x, y)
        return Juncture(x, y)

    def _require_cell(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise ValidationError(
                f"cell ({x}, {y}) is outside the {self.width}x{self.height} maze"
            )

    def _neighbor(self, x: int, y: int, direction: Direction) -> Optional[Cell]:
        dx, dy = direction.offset
        nx, ny = x + dx, y + dy
        if self.contains(nx, ny):
            return nx, ny
        return None


def _check_weight(weight: int) -> None:
    if not isinstance(weight, int) or isinstance(weight, bool):
        raise ValidationError(f"weight must be an integer, got {weight!r}")
    if weight < 0:
        raise ValidationError(f"weight must be non-negative, got {weight}")
