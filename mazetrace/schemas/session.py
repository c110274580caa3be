"""Session schemas exchanged between a play session and its presenter."""

from typing import Optional

from pydantic import BaseModel

from mazetrace.schemas.maze import MazePosition


class MoveResponse(BaseModel):
    """Schema for the result of one input."""

    outcome: str  # noop, moved, solved, unsolvable
    position: MazePosition
    state: str  # playing, solved, unsolvable
    moves: int
    message: Optional[str] = None


class SessionState(BaseModel):
    """Schema for session state."""

    maze_path: str
    rows: int
    cols: int
    position: MazePosition
    state: str
    moves: int
