"""
Uninformed maze search: depth-first and breadth-first.

Both strategies come in two flavours:

- path mode (``dfs``/``bfs``) returns the first path found to the goal,
  or an empty list when the goal cannot be reached;
- explore mode (``dfs_explore``/``bfs_explore``) returns every expanded
  cell in expansion order, stopping at the goal, or the whole reachable
  component when the goal cannot be reached.

Every returned sequence excludes the start cell.

Visited bookkeeping differs between the two traversals. DFS marks a cell
when it is popped and skips cells that were already expanded, so the
stack may hold duplicates but no cell is expanded twice. BFS marks a cell
when it is enqueued, so no cell ever enters the queue twice.

Frontier entries carry the cell they were reached from rather than a copy
of the whole path, and the path is rebuilt once from the recorded parents.
"""

from collections import deque
from typing import Iterator, Optional

from .grid import Coordinate, Grid, neighbors
from .reconstruction import reconstruct_path

# An expanded cell and the cell it was reached from (None for the start).
Expansion = tuple[Coordinate, Optional[Coordinate]]


def depth_first(maze: Grid, start: Coordinate) -> Iterator[Expansion]:
    """
    Yield cells in depth-first expansion order.

    Neighbours are pushed West, South, East, North so that North is the
    first to be popped. The parent yielded is the one stored with the stack
    entry that was actually popped. The generator can be abandoned at any
    point; the caller stops it as soon as the goal is expanded.
    """
    stack: list[Expansion] = [(start, None)]
    visited: set[Coordinate] = set()

    while stack:
        current, parent = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        yield current, parent

        for neighbor in reversed(list(neighbors(maze, *current))):
            if neighbor not in visited:
                stack.append((neighbor, current))


def breadth_first(maze: Grid, start: Coordinate) -> Iterator[Expansion]:
    """
    Yield cells in breadth-first expansion order.

    Neighbours are enqueued North, East, South, West. With unit step cost
    the first path reaching any cell has the fewest possible moves.
    """
    queue: deque[Expansion] = deque([(start, None)])
    visited: set[Coordinate] = {start}

    while queue:
        current, parent = queue.popleft()

        yield current, parent

        for neighbor in neighbors(maze, *current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, current))


def _first_path(order: Iterator[Expansion], start: Coordinate, goal: Coordinate) -> list[Coordinate]:
    came_from: dict[Coordinate, Coordinate] = {}
    for current, parent in order:
        if parent is not None:
            came_from[current] = parent
        if current == goal:
            return reconstruct_path(came_from, start, goal)
    return []


def _exploration(order: Iterator[Expansion], goal: Coordinate) -> list[Coordinate]:
    explored: list[Coordinate] = []
    for current, _ in order:
        explored.append(current)
        if current == goal:
            break
    # The start is always expanded first.
    return explored[1:]


def dfs(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    """
    Find a path with depth-first search.

    Args:
        start_x: Starting column index.
        start_y: Starting row index.
        end_x: Exit column index.
        end_y: Exit row index.
        maze: Grid of cells, addressed maze[y][x].

    Returns:
        Coordinates after the start up to and including the goal, or []
        if no path exists.
    """
    start = (start_x, start_y)
    return _first_path(depth_first(maze, start), start, (end_x, end_y))


def bfs(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    """
    Find a shortest path with breadth-first search.

    Same arguments and return value as dfs(); the path returned has the
    minimum number of moves.
    """
    start = (start_x, start_y)
    return _first_path(breadth_first(maze, start), start, (end_x, end_y))


def dfs_explore(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    """Return the depth-first expansion order, excluding the start."""
    return _exploration(depth_first(maze, (start_x, start_y)), (end_x, end_y))


def bfs_explore(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    """Return the breadth-first expansion order, excluding the start."""
    return _exploration(breadth_first(maze, (start_x, start_y)), (end_x, end_y))
