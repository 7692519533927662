# Core module
from .grid import Coordinate, Direction, Grid, MazeCell, neighbors, open_grid
from .astar import AStarResult, astar, astar_explore, heuristic
from .reconstruction import reconstruct_path
from .uninformed import bfs, bfs_explore, dfs, dfs_explore
from .search import SearchMethod, find_path, get_search_methods
from .maze_parser import (
    MazeParseError,
    MazeValidationError,
    ParsedMaze,
    parse_maze_text,
    render_maze,
)

__all__ = [
    "Coordinate",
    "Direction",
    "Grid",
    "MazeCell",
    "neighbors",
    "open_grid",
    "AStarResult",
    "astar",
    "astar_explore",
    "heuristic",
    "reconstruct_path",
    "bfs",
    "bfs_explore",
    "dfs",
    "dfs_explore",
    "SearchMethod",
    "find_path",
    "get_search_methods",
    "MazeParseError",
    "MazeValidationError",
    "ParsedMaze",
    "parse_maze_text",
    "render_maze",
]
