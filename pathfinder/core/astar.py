"""
A* search for 4-connected, unit-cost mazes.

Uses the Manhattan distance as heuristic, which is admissible and
consistent on this kind of grid. The open set is a binary heap ordered by
``(f, insertion order)`` so ties on ``f`` resolve first-in, first-out and
results are reproducible.

Closed cells are never reopened. Under a consistent heuristic the first
expansion of a cell already carries its optimal cost, so reopening would
never improve a path; it would only change which of several equally short
paths is reported.

Improving the cost of a cell that is still open pushes a fresh heap entry
instead of updating the old one in place. The superseded entry has a
larger ``f``, surfaces later and is discarded by the closed check.
"""

import heapq
from dataclasses import dataclass, field
from itertools import count

from .grid import Coordinate, Grid, neighbors
from .reconstruction import reconstruct_path


@dataclass
class AStarResult:
    """Outcome of an exploring A* run. Both sequences exclude the start."""
    explored: list[Coordinate] = field(default_factory=list)
    path: list[Coordinate] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether a path to the goal was reconstructed."""
        return bool(self.path)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "explored": [list(cell) for cell in self.explored],
            "path": [list(cell) for cell in self.path],
        }


def heuristic(x: int, y: int, end_x: int, end_y: int) -> int:
    """Manhattan distance from (x, y) to the exit."""
    return abs(x - end_x) + abs(y - end_y)


def astar(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> list[Coordinate]:
    """
    Find a minimum-move path with A*.

    Each open entry carries the cell it was reached from. The predecessor
    is recorded when a cell is first expanded, so the path rebuilt at the
    goal is the one its winning entry arrived along.

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
    goal = (end_x, end_y)
    tie = count()

    g_score: dict[Coordinate, int] = {start: 0}
    came_from: dict[Coordinate, Coordinate] = {}
    closed: set[Coordinate] = set()
    open_heap = [(heuristic(start_x, start_y, end_x, end_y), next(tie), start, 0, None)]

    while open_heap:
        _, _, current, g, parent = heapq.heappop(open_heap)
        if current in closed:
            continue
        closed.add(current)
        if parent is not None:
            came_from[current] = parent

        if current == goal:
            return reconstruct_path(came_from, start, goal)

        tentative_g = g + 1
        for neighbor in neighbors(maze, *current):
            if neighbor in closed:
                continue
            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                g_score[neighbor] = tentative_g
                f = tentative_g + heuristic(*neighbor, end_x, end_y)
                heapq.heappush(open_heap, (f, next(tie), neighbor, tentative_g, current))

    return []


def astar_explore(start_x: int, start_y: int, end_x: int, end_y: int, maze: Grid) -> AStarResult:
    """
    Run A* recording the expansion order, then rebuild the optimal path.

    Open entries carry only a cell and its cost; predecessors go into a
    separate map and the path is rebuilt once at the end. Expansion stops
    right after the goal is recorded, before its neighbours are examined.
    If the goal is unreachable, ``explored`` holds the whole reachable
    component and ``path`` is empty.
    """
    start = (start_x, start_y)
    goal = (end_x, end_y)
    tie = count()

    g_score: dict[Coordinate, int] = {start: 0}
    came_from: dict[Coordinate, Coordinate] = {}
    closed: set[Coordinate] = set()
    explored: list[Coordinate] = []
    open_heap = [(heuristic(start_x, start_y, end_x, end_y), next(tie), start, 0)]

    while open_heap:
        _, _, current, g = heapq.heappop(open_heap)
        if current in closed:
            continue
        closed.add(current)

        if current != start:
            explored.append(current)

        if current == goal:
            break

        tentative_g = g + 1
        for neighbor in neighbors(maze, *current):
            if neighbor in closed:
                continue
            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                f = tentative_g + heuristic(*neighbor, end_x, end_y)
                heapq.heappush(open_heap, (f, next(tie), neighbor, tentative_g))

    return AStarResult(
        explored=explored,
        path=reconstruct_path(came_from, start, goal),
    )
