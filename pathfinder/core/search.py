"""
Maze search dispatcher.

Maps a search method to its algorithm:

- DFS / BFS / ASTAR: the path from start to exit
- DFS_EXPLORE / BFS_EXPLORE / ASTAR_EXPLORE: the order in which cells were
  expanded, for animating the search

Searches are pure functions of their arguments. Nothing is cached or
shared between calls, so independent searches over the same grid may run
side by side.
"""

import logging
from enum import Enum
from typing import Callable, Union

from .astar import astar, astar_explore
from .grid import Coordinate, Grid, is_empty, is_rectangular
from .uninformed import bfs, bfs_explore, dfs, dfs_explore

logger = logging.getLogger(__name__)


class SearchMethod(str, Enum):
    """Available search methods, in display order."""
    DFS = "DFS"
    DFS_EXPLORE = "DFS_EXPLORE"
    BFS = "BFS"
    BFS_EXPLORE = "BFS_EXPLORE"
    ASTAR = "ASTAR"
    ASTAR_EXPLORE = "ASTAR_EXPLORE"

    @property
    def is_explore(self) -> bool:
        """Whether this method returns an exploration order."""
        return self.value.endswith("_EXPLORE")


SearchFunction = Callable[[int, int, int, int, Grid], list[Coordinate]]


def _astar_explored(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    return astar_explore(start_x, start_y, end_x, end_y, maze).explored


_ALGORITHMS: dict[SearchMethod, SearchFunction] = {
    SearchMethod.DFS: dfs,
    SearchMethod.DFS_EXPLORE: dfs_explore,
    SearchMethod.BFS: bfs,
    SearchMethod.BFS_EXPLORE: bfs_explore,
    SearchMethod.ASTAR: astar,
    SearchMethod.ASTAR_EXPLORE: _astar_explored,
}


def get_search_methods() -> list[SearchMethod]:
    """Return the search methods in display order."""
    return list(SearchMethod)


def find_path(
    start_x: int,
    start_y: int,
    end_x: int,
    end_y: int,
    method: Union[SearchMethod, str],
    maze: Grid,
) -> list[Coordinate]:
    """
    Search the maze with the given method.

    Args:
        start_x: Starting column index.
        start_y: Starting row index.
        end_x: Exit column index.
        end_y: Exit row index.
        method: A SearchMethod, or its name.
        maze: Grid of cells, addressed maze[y][x].

    Returns:
        (x, y) coordinates after the start. Path methods return [] when the
        exit is unreachable; explore methods return everything expanded.
        An empty or jagged grid, an unknown method or start == exit all
        give [].
    """
    if is_empty(maze):
        return []

    if not is_rectangular(maze):
        logger.debug("Maze rows differ in length; nothing to search")
        return []

    try:
        method = SearchMethod(method)
    except ValueError:
        logger.debug(f"Unknown search method: {method!r}")
        return []

    result = _ALGORITHMS[method](start_x, start_y, end_x, end_y, maze)
    logger.debug(
        f"{method.value} ({start_x}, {start_y}) -> ({end_x}, {end_y}): "
        f"{len(result)} cells"
    )
    return result
