"""Pydantic schemas package."""

from mazetrace.schemas.maze import MazeInfo, MazeListResponse, MazePosition
from mazetrace.schemas.session import MoveResponse, SessionState

__all__ = [
    "MazeInfo",
    "MazeListResponse",
    "MazePosition",
    "MoveResponse",
    "SessionState",
]
