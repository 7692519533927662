"""Path reconstruction from predecessor maps."""

from .grid import Coordinate


def reconstruct_path(
    came_from: dict[Coordinate, Coordinate],
    start: Coordinate,
    goal: Coordinate,
) -> list[Coordinate]:
    """
    Walk the predecessor map back from goal to start.

    Returns the path after the start up to and including the goal, or []
    when the goal has no predecessor (unreached, or the goal is the start).
    """
    if goal not in came_from:
        return []

    path: list[Coordinate] = []
    current = goal
    while current != start:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path
