# Core module
from .cells import Cell, CellKind, DisplayToken, TraversalState
from .exceptions import (
    InvalidMazeError,
    MazeBoundsError,
    MazeError,
    MazeMalformedError,
    MazeReadError,
    MazeSizeMismatchError,
    MazeUnsolvableError,
    SourceNotFoundError,
)
from .grid import Grid
from .maze_engine import Direction, GameState, MazeEngine, MoveOutcome, Player
from .maze_parser import (
    MazeEntry,
    load_all_mazes,
    load_maze_file,
    parse_maze_text,
    serialize_grid,
    validate_maze_text,
)
from .render import render, render_colours, render_text, token_at

__all__ = [
    "Cell",
    "CellKind",
    "DisplayToken",
    "TraversalState",
    "Grid",
    "MazeEngine",
    "Direction",
    "GameState",
    "MoveOutcome",
    "Player",
    "MazeError",
    "SourceNotFoundError",
    "MazeReadError",
    "MazeMalformedError",
    "MazeSizeMismatchError",
    "InvalidMazeError",
    "MazeUnsolvableError",
    "MazeBoundsError",
    "MazeEntry",
    "parse_maze_text",
    "serialize_grid",
    "load_maze_file",
    "load_all_mazes",
    "validate_maze_text",
    "render",
    "render_text",
    "render_colours",
    "token_at",
]
