"""
Maze Parser for text mazes.

Parses and renders mazes drawn as ASCII wall diagrams.

Maze Format:
    +  = Corner (every 3rd column of every even line)
    -- = Horizontal wall segment between two corners
    |  = Vertical wall between two cells
    ' ' = Open (no wall), or empty cell interior
    *  = Marked cell interior (ignored when parsing, used by render_maze)

A maze of width W and height H has 2*H + 1 lines of 3*W + 1 characters:

    +--+--+--+
    |     |  |
    +  +  +  +
    |  |     |
    +--+--+--+

A wall drawn between two cells blocks movement in both directions.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .grid import Coordinate, Grid, MazeCell, grid_size, is_rectangular


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(Exception):
    """Exception raised when maze validation fails."""

    pass


@dataclass
class ParsedMaze:
    """Parsed maze ready for searching."""

    name: str
    grid: list[list[MazeCell]]
    width: int
    height: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
        }


CORNER = "+"
HORIZONTAL_WALL = "-"
VERTICAL_WALL = "|"
OPEN = " "
MARK = "*"

CELL_CHARS = {OPEN, MARK}


def _check_char(char: str, allowed: set[str], line_no: int, col: int) -> None:
    if char not in allowed:
        raise MazeValidationError(
            f"Invalid character '{char}' at line {line_no + 1}, column {col + 1}. "
            f"Expected one of: {', '.join(repr(c) for c in sorted(allowed))}"
        )


def _split_lines(maze_text: str) -> list[str]:
    # Only blank lines are trimmed; trailing spaces inside a line are significant.
    lines = [line.rstrip("\r") for line in maze_text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> ParsedMaze:
    """
    Parse maze text into a grid of cells.

    Args:
        maze_text: Multi-line ASCII wall diagram.
        name: Name of the maze.

    Returns:
        ParsedMaze with the grid and its dimensions.

    Raises:
        MazeParseError: If the text does not have the shape of a maze.
        MazeValidationError: If the text contains misplaced characters.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = _split_lines(maze_text)

    if len(lines) < 3 or len(lines) % 2 == 0:
        raise MazeParseError(
            f"Maze must have an odd number of lines (at least 3), got {len(lines)}"
        )

    line_width = len(lines[0])
    if line_width < 4 or (line_width - 1) % 3 != 0:
        raise MazeParseError(
            f"Maze lines must be 3 * width + 1 characters long, got {line_width}"
        )

    for line_no, line in enumerate(lines):
        if len(line) != line_width:
            raise MazeParseError(
                f"Line {line_no + 1} has {len(line)} characters, expected {line_width}"
            )

    width = (line_width - 1) // 3
    height = (len(lines) - 1) // 2

    # Check every character is in its proper place
    for line_no, line in enumerate(lines):
        for col, char in enumerate(line):
            if line_no % 2 == 0:
                if col % 3 == 0:
                    _check_char(char, {CORNER}, line_no, col)
                else:
                    _check_char(char, {HORIZONTAL_WALL, OPEN}, line_no, col)
            elif col % 3 == 0:
                _check_char(char, {VERTICAL_WALL, OPEN}, line_no, col)
            else:
                _check_char(char, CELL_CHARS, line_no, col)

        if line_no % 2 == 0:
            for x in range(width):
                segment = line[3 * x + 1:3 * x + 3]
                if segment[0] != segment[1]:
                    raise MazeValidationError(
                        f"Half-drawn wall '{segment}' at line {line_no + 1}, "
                        f"column {3 * x + 2}"
                    )

    grid = [
        [
            MazeCell(
                north=lines[2 * y][3 * x + 1] == HORIZONTAL_WALL,
                east=lines[2 * y + 1][3 * x + 3] == VERTICAL_WALL,
                south=lines[2 * y + 2][3 * x + 1] == HORIZONTAL_WALL,
                west=lines[2 * y + 1][3 * x] == VERTICAL_WALL,
            )
            for x in range(width)
        ]
        for y in range(height)
    ]

    return ParsedMaze(name=name, grid=grid, width=width, height=height)


def render_maze(grid: Grid, marks: Optional[Iterable[Coordinate]] = None) -> str:
    """
    Render a grid as an ASCII wall diagram.

    A wall is drawn between two cells when either of them carries it.

    Args:
        grid: Grid of cells, addressed grid[y][x].
        marks: Optional coordinates to highlight with '*', such as a path.

    Returns:
        Multi-line string in the format accepted by parse_maze_text().

    Raises:
        MazeValidationError: If the grid is not rectangular.
    """
    if not is_rectangular(grid):
        raise MazeValidationError("Maze rows must all have the same length")

    width, height = grid_size(grid)
    if width == 0:
        return ""

    marked = set(marks or ())

    def horizontal(y: int) -> str:
        # Wall line above row y (y == height is the bottom border)
        segments = []
        for x in range(width):
            blocked = (y < height and grid[y][x].north) or (y > 0 and grid[y - 1][x].south)
            segments.append(HORIZONTAL_WALL * 2 if blocked else OPEN * 2)
        return CORNER + CORNER.join(segments) + CORNER

    def cells(y: int) -> str:
        row = grid[y]
        parts = [VERTICAL_WALL if row[0].west else OPEN]
        for x in range(width):
            parts.append(MARK * 2 if (x, y) in marked else OPEN * 2)
            blocked = row[x].east or (x + 1 < width and row[x + 1].west)
            parts.append(VERTICAL_WALL if blocked else OPEN)
        return "".join(parts)

    lines = []
    for y in range(height):
        lines.append(horizontal(y))
        lines.append(cells(y))
    lines.append(horizontal(height))
    return "\n".join(lines)
