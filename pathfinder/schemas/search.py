"""Search schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from pathfinder.core.grid import Coordinate, MazeCell
from pathfinder.core.search import SearchMethod


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int

    @classmethod
    def from_coordinate(cls, cell: Coordinate) -> "MazePosition":
        """Build from an (x, y) tuple."""
        return cls(x=cell[0], y=cell[1])


class MazeCellSchema(BaseModel):
    """Schema for a maze cell's wall flags."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    def to_cell(self) -> MazeCell:
        """Convert to the core cell type."""
        return MazeCell(north=self.north, east=self.east, south=self.south, west=self.west)


class SearchMethodsResponse(BaseModel):
    """Schema for the list of search methods."""

    methods: list[SearchMethod]


class SearchRequest(BaseModel):
    """Schema for a search request.

    The maze is given either as a grid of wall flags or as an ASCII wall
    diagram, never both.
    """

    start: MazePosition
    end: MazePosition
    method: SearchMethod = SearchMethod.ASTAR
    grid: Optional[list[list[MazeCellSchema]]] = None
    maze_text: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def check_maze_source(self) -> "SearchRequest":
        """Require exactly one of grid and maze_text."""
        if (self.grid is None) == (self.maze_text is None):
            raise ValueError("Provide exactly one of 'grid' or 'maze_text'")
        return self


class SearchResponse(BaseModel):
    """Schema for a search response.

    ``cells`` is the path for path methods and the exploration order for
    explore methods. ``path`` is only set for ASTAR_EXPLORE, where the
    optimal path is available alongside the exploration order.
    """

    method: SearchMethod
    cells: list[MazePosition]
    length: int
    path: Optional[list[MazePosition]] = None
