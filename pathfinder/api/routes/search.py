"""Search routes for listing search methods and running searches."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from pathfinder.config import get_settings
from pathfinder.core.astar import astar_explore
from pathfinder.core.grid import MazeCell, grid_size, is_rectangular
from pathfinder.core.maze_parser import MazeParseError, MazeValidationError, parse_maze_text
from pathfinder.core.search import SearchMethod, find_path, get_search_methods
from pathfinder.schemas.search import (
    MazePosition,
    SearchMethodsResponse,
    SearchRequest,
    SearchResponse,
)

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/search", tags=["Search"])


def _build_grid(search_request: SearchRequest) -> list[list[MazeCell]]:
    """Turn the request's maze into a grid, rejecting unusable input."""
    if search_request.maze_text is not None:
        try:
            grid = parse_maze_text(search_request.maze_text).grid
        except (MazeParseError, MazeValidationError) as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid maze text: {e}",
            ) from e
    else:
        grid = [[cell.to_cell() for cell in row] for row in search_request.grid]
        if not is_rectangular(grid):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Maze rows must all have the same length",
            )

    width, height = grid_size(grid)
    if width * height > settings.max_grid_cells:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Maze too large: {width}x{height} exceeds "
                f"{settings.max_grid_cells} cells"
            ),
        )

    return grid


@router.get(
    "/methods",
    response_model=SearchMethodsResponse,
)
async def list_search_methods() -> SearchMethodsResponse:
    """List the available search methods in display order."""
    return SearchMethodsResponse(methods=get_search_methods())


@router.post(
    "",
    response_model=SearchResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
def run_search(
    request: Request,
    search_request: SearchRequest,
) -> SearchResponse:
    """Search a maze from start to end.

    Path methods return the moves from start to end (empty if the end is
    unreachable). Explore methods return the order in which cells were
    expanded. ASTAR_EXPLORE also returns the optimal path.
    """
    grid = _build_grid(search_request)
    start, end = search_request.start, search_request.end
    method = search_request.method

    path = None
    if method == SearchMethod.ASTAR_EXPLORE:
        result = astar_explore(start.x, start.y, end.x, end.y, grid)
        cells = result.explored
        path = [MazePosition.from_coordinate(cell) for cell in result.path]
    else:
        cells = find_path(start.x, start.y, end.x, end.y, method, grid)

    logger.info(
        f"[{getattr(request.state, 'request_id', '-')}] {method.value} "
        f"({start.x}, {start.y}) -> ({end.x}, {end.y}) on "
        f"{'x'.join(str(n) for n in grid_size(grid))} grid: {len(cells)} cells"
    )

    return SearchResponse(
        method=method,
        cells=[MazePosition.from_coordinate(cell) for cell in cells],
        length=len(cells),
        path=path,
    )
