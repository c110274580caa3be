"""Maze schemas for presenter and CLI output."""

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a (row, col) position in the maze."""

    row: int
    col: int


class MazeInfo(BaseModel):
    """Schema for maze metadata (without cell data)."""

    name: str
    path: str
    rows: int = Field(..., gt=0)
    cols: int = Field(..., gt=0)
    start: MazePosition
    end: MazePosition

    @classmethod
    def from_entry(cls, entry) -> "MazeInfo":
        """Build from a loaded MazeEntry."""
        start_row, start_col = entry.grid.start.coordinates
        end_row, end_col = entry.grid.end.coordinates
        return cls(
            name=entry.name,
            path=str(entry.path),
            rows=entry.rows,
            cols=entry.cols,
            start=MazePosition(row=start_row, col=start_col),
            end=MazePosition(row=end_row, col=end_col),
        )


class MazeListResponse(BaseModel):
    """Schema for maze list output."""

    mazes: list[MazeInfo]
    total: int
