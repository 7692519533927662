"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from pathfinder.core.grid import Coordinate, Grid, MazeCell, neighbors
from pathfinder.core.maze_parser import parse_maze_text
from pathfinder.main import app


# Two cells side by side with nothing between them
PAIR_MAZE = """
+--+--+
|     |
+--+--+
"""

# A straight corridor, five cells long
CORRIDOR_MAZE = """
+--+--+--+--+--+
|              |
+--+--+--+--+--+
"""

# From (0, 2) to (2, 2): a 6-move route north-about and a 4-move route east-about
TWO_ROUTE_MAZE = """
+--+--+--+
|        |
+  +--+  +
|  |     |
+  +  +  +
|     |  |
+--+--+--+
"""

# (0, 0) and (1, 0) are sealed off from the bottom row
SEALED_MAZE = """
+--+--+--+
|     |  |
+--+--+  +
|        |
+--+--+--+
"""

# The centre cell (1, 1) is walled in on all four sides
BOXED_MAZE = """
+--+--+--+
|        |
+  +--+  +
|  |  |  |
+  +--+  +
|        |
+--+--+--+
"""

# A 5x5 maze with loops and dead ends
LOOPY_MAZE = """
+--+--+--+--+--+
|        |     |
+  +--+  +  +  +
|  |     |  |  |
+  +  +--+  +  +
|     |        |
+--+  +  +--+  +
|     |  |     |
+  +--+  +  +--+
|              |
+--+--+--+--+--+
"""


def assert_valid_path(grid: Grid, start: Coordinate, path: list[Coordinate]) -> None:
    """Check that each step of path is a legal move from the one before."""
    current = start
    for cell in path:
        assert cell in set(neighbors(grid, *current)), f"Illegal move {current} -> {cell}"
        current = cell


def serpentine_grid(width: int, height: int) -> Grid:
    """
    Build a single corridor that snakes through every cell.

    Rows run from wall to wall. Row y opens into row y + 1 at the east end
    when y is even and at the west end when y is odd, so the only route from
    (0, 0) to the corridor's far end visits every cell.
    """

    def gap(y: int) -> int:
        return width - 1 if y % 2 == 0 else 0

    return [
        [
            MazeCell(
                north=y == 0 or x != gap(y - 1),
                east=x == width - 1,
                south=y == height - 1 or x != gap(y),
                west=x == 0,
            )
            for x in range(width)
        ]
        for y in range(height)
    ]


def serpentine_end(width: int, height: int) -> Coordinate:
    """Far end of serpentine_grid(width, height) when entered at (0, 0)."""
    return (width - 1 if height % 2 == 1 else 0, height - 1)


@pytest.fixture
def pair_grid() -> list[list[MazeCell]]:
    """2x1 grid with an open passage between the cells."""
    return parse_maze_text(PAIR_MAZE).grid


@pytest.fixture
def corridor_grid() -> list[list[MazeCell]]:
    """5x1 straight corridor."""
    return parse_maze_text(CORRIDOR_MAZE).grid


@pytest.fixture
def two_route_grid() -> list[list[MazeCell]]:
    """3x3 grid with a short and a long route between the bottom corners."""
    return parse_maze_text(TWO_ROUTE_MAZE).grid


@pytest.fixture
def sealed_grid() -> list[list[MazeCell]]:
    """3x2 grid whose top-left pair of cells is unreachable from the rest."""
    return parse_maze_text(SEALED_MAZE).grid


@pytest.fixture
def boxed_grid() -> list[list[MazeCell]]:
    """3x3 grid with an isolated centre cell."""
    return parse_maze_text(BOXED_MAZE).grid


@pytest.fixture
def loopy_grid() -> list[list[MazeCell]]:
    """5x5 maze with loops."""
    return parse_maze_text(LOOPY_MAZE).grid


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
