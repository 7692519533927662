"""Tests for the text maze parser and renderer."""

import pytest

from pathfinder.core.grid import MazeCell, open_grid
from pathfinder.core.maze_parser import (
    MazeParseError,
    MazeValidationError,
    ParsedMaze,
    parse_maze_text,
    render_maze,
)
from tests.conftest import LOOPY_MAZE, TWO_ROUTE_MAZE


SIMPLE_MAZE = """+--+--+
|     |
+  +--+
|     |
+--+--+"""


class TestMazeParser:
    """Tests for maze parser functionality."""

    def test_parse_simple_maze(self):
        """Test parsing a simple valid maze."""
        result = parse_maze_text(SIMPLE_MAZE, name="Simple")

        assert isinstance(result, ParsedMaze)
        assert result.name == "Simple"
        assert result.width == 2
        assert result.height == 2
        assert len(result.grid) == 2
        assert all(len(row) == 2 for row in result.grid)

    def test_parse_wall_flags(self):
        """Test that each cell picks up the walls drawn around it."""
        grid = parse_maze_text(SIMPLE_MAZE).grid

        assert grid[0][0] == MazeCell(north=True, west=True)
        assert grid[0][1] == MazeCell(north=True, east=True, south=True)
        assert grid[1][0] == MazeCell(south=True, west=True)
        assert grid[1][1] == MazeCell(north=True, east=True, south=True)

    def test_shared_walls_are_consistent(self):
        """Test that a wall between two cells blocks both of them."""
        grid = parse_maze_text(LOOPY_MAZE).grid
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if x + 1 < len(row):
                    assert cell.east == row[x + 1].west
                if y + 1 < len(grid):
                    assert cell.south == grid[y + 1][x].north

    def test_surrounding_blank_lines_ignored(self):
        """Test that leading and trailing blank lines are dropped."""
        result = parse_maze_text("\n\n" + SIMPLE_MAZE + "\n\n")
        assert result.width == 2
        assert result.height == 2

    def test_crlf_line_endings(self):
        result = parse_maze_text(SIMPLE_MAZE.replace("\n", "\r\n"))
        assert result.grid == parse_maze_text(SIMPLE_MAZE).grid

    def test_marks_are_ignored(self):
        """Test that '*' cell interiors parse like open cells."""
        marked = SIMPLE_MAZE.replace("|     |\n+  +--+", "|**   |\n+  +--+")
        assert parse_maze_text(marked).grid == parse_maze_text(SIMPLE_MAZE).grid

    def test_parse_empty_maze_raises_error(self):
        """Test that empty maze raises MazeParseError."""
        with pytest.raises(MazeParseError, match="Maze text is empty"):
            parse_maze_text("")

    def test_parse_whitespace_only_raises_error(self):
        """Test that whitespace-only maze raises MazeParseError."""
        with pytest.raises(MazeParseError, match="Maze text is empty"):
            parse_maze_text("   \n   \n   ")

    def test_even_line_count_raises_error(self):
        with pytest.raises(MazeParseError, match="odd number of lines"):
            parse_maze_text("+--+\n|  |")

    def test_bad_line_width_raises_error(self):
        with pytest.raises(MazeParseError, match="3 \\* width \\+ 1"):
            parse_maze_text("+---+\n|   |\n+---+")

    def test_ragged_lines_raise_error(self):
        with pytest.raises(MazeParseError, match="Line 2 has"):
            parse_maze_text("+--+\n| |\n+--+")

    def test_invalid_char_raises_error(self):
        """Test that maze with invalid character raises error."""
        maze = SIMPLE_MAZE.replace("|     |\n+  +--+", "|  ?  |\n+  +--+")
        with pytest.raises(MazeValidationError, match="Invalid character '\\?'"):
            parse_maze_text(maze)

    def test_missing_corner_raises_error(self):
        maze = SIMPLE_MAZE.replace("+  +--+", "+  ---+")
        with pytest.raises(MazeValidationError, match="Invalid character '-'"):
            parse_maze_text(maze)

    def test_half_drawn_wall_raises_error(self):
        maze = SIMPLE_MAZE.replace("+  +--+", "+ -+--+")
        with pytest.raises(MazeValidationError, match="Half-drawn wall"):
            parse_maze_text(maze)

    def test_to_dict(self):
        """Test ParsedMaze.to_dict() method."""
        d = parse_maze_text(SIMPLE_MAZE, name="Test").to_dict()

        assert d["name"] == "Test"
        assert d["width"] == 2
        assert d["height"] == 2
        assert d["grid"][0][0] == {"north": True, "east": False, "south": False, "west": True}


class TestRenderMaze:
    """Tests for rendering grids back to text."""

    def test_round_trip(self):
        """Test that rendering a parsed maze reproduces the text."""
        text = TWO_ROUTE_MAZE.strip("\n")
        assert render_maze(parse_maze_text(text).grid) == text

    def test_open_grid(self):
        assert render_maze(open_grid(2, 1)) == "+--+--+\n|     |\n+--+--+"

    def test_marks(self):
        """Test that marked cells are drawn with '*'."""
        rendered = render_maze(open_grid(2, 1), marks=[(1, 0)])
        assert rendered.split("\n")[1] == "|   **|"

    def test_one_sided_wall_is_drawn(self):
        """Test that a wall set on only one side is still drawn."""
        grid = [[MazeCell(), MazeCell(west=True)]]
        assert render_maze(grid).split("\n")[1] == "   |   "

    def test_empty_grid(self):
        assert render_maze([]) == ""

    def test_ragged_grid_raises_error(self):
        with pytest.raises(MazeValidationError):
            render_maze([[MazeCell(), MazeCell()], [MazeCell()]])
