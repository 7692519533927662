"""
Grid model for maze search.

A maze is a rectangular grid of cells addressed ``grid[y][x]``. Each cell
carries four wall flags; a flag set to ``True`` blocks movement *out of*
that cell in the given direction. Only the wall of the cell being left is
consulted when moving, never the wall of the cell being entered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

Coordinate = tuple[int, int]


@dataclass(frozen=True)
class MazeCell:
    """A single maze cell with its four wall flags."""
    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    def has_wall(self, direction: "Direction") -> bool:
        """Check whether movement in direction is blocked from this cell."""
        return getattr(self, direction.value)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
        }


Grid = Sequence[Sequence[MazeCell]]


class Direction(Enum):
    """Movement directions, declared in expansion order."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.NORTH: (0, -1),
            Direction.EAST: (1, 0),
            Direction.SOUTH: (0, 1),
            Direction.WEST: (-1, 0),
        }
        return deltas[self]

    @property
    def opposite(self) -> "Direction":
        """Get the opposite direction."""
        opposites = {
            Direction.NORTH: Direction.SOUTH,
            Direction.EAST: Direction.WEST,
            Direction.SOUTH: Direction.NORTH,
            Direction.WEST: Direction.EAST,
        }
        return opposites[self]


# North, East, South, West
EXPANSION_ORDER: tuple[Direction, ...] = tuple(Direction)


def grid_size(grid: Grid) -> tuple[int, int]:
    """Return (width, height); (0, 0) for an empty grid."""
    if not grid or not grid[0]:
        return 0, 0
    return len(grid[0]), len(grid)


def is_empty(grid: Grid) -> bool:
    """Check for a grid with no rows or a zero-length first row."""
    return grid_size(grid) == (0, 0)


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Check whether (x, y) lies inside a width x height grid."""
    return 0 <= x < width and 0 <= y < height


def is_rectangular(grid: Grid) -> bool:
    """Check that every row has the same length as the first."""
    if not grid:
        return True
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def neighbors(grid: Grid, x: int, y: int) -> Iterator[Coordinate]:
    """
    Yield the open neighbours of (x, y) in North, East, South, West order.

    A neighbour is open when it lies inside the grid and the wall flag of
    the current cell in that direction is clear. Nothing is yielded for an
    out-of-bounds (x, y).
    """
    width, height = grid_size(grid)
    if not in_bounds(x, y, width, height):
        return
    cell = grid[y][x]
    for direction in EXPANSION_ORDER:
        dx, dy = direction.delta
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny, width, height) and not cell.has_wall(direction):
            yield nx, ny


def open_grid(width: int, height: int) -> list[list[MazeCell]]:
    """
    Build a grid with only the outer boundary walls set.

    Handy for callers and tests that carve nothing and want a fully
    connected room.
    """
    return [
        [
            MazeCell(
                north=y == 0,
                east=x == width - 1,
                south=y == height - 1,
                west=x == 0,
            )
            for x in range(width)
        ]
        for y in range(height)
    ]
