"""
mazetrace Maze Engine

Core maze navigation logic including:
- Player position tracking
- Move validation and application
- Traversal marking (visited once / visited twice or more)
- Solved and unsolvable detection

Input symbols:
    w = up, s = down, a = left, d = right
    anything else is ignored
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .cells import Cell
from .exceptions import InvalidMazeError, MazeUnsolvableError
from .grid import Grid


class Direction(Enum):
    """Movement directions, keyed by their input symbol."""
    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Direction"]:
        """Map the first character of an input symbol to a direction."""
        if not symbol:
            return None
        try:
            return cls(symbol[0])
        except ValueError:
            return None


class MoveOutcome(Enum):
    """Result of forwarding one input to the engine."""
    NO_OP = "noop"
    MOVED = "moved"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class GameState(Enum):
    """Engine state. SOLVED and UNSOLVABLE are terminal."""
    PLAYING = "playing"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class Player:
    """The player's (row, col) position in the maze."""
    row: int
    col: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def shift(self, d_row: int, d_col: int) -> None:
        """Move by the given offsets."""
        self.row += d_row
        self.col += d_col


class MazeEngine:
    """
    Core maze engine for one play session.

    Owns the grid and the player and runs the move state machine.

    Example usage:
        engine = MazeEngine(parse_maze_text(maze_text))

        outcome = engine.input("d")   # move right
        if outcome is MoveOutcome.SOLVED:
            ...
    """

    def __init__(self, grid: Grid):
        """
        Initialize the engine with a validated grid.

        Args:
            grid: Grid produced by the maze parser or Grid.from_rows.

        Raises:
            InvalidMazeError: If no usable grid is given.
        """
        if not isinstance(grid, Grid):
            raise InvalidMazeError("Maze engine requires a non-empty grid")

        self.grid = grid
        self.player = Player(*grid.start.coordinates)
        self.state = GameState.PLAYING

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "MazeEngine":
        """Build an engine from rows of description characters."""
        return cls(Grid.from_rows(rows))

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.grid.dimensions

    @property
    def is_terminal(self) -> bool:
        return self.state is not GameState.PLAYING

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at a coordinate. Raises MazeBoundsError off the grid."""
        return self.grid.cell_at(row, col)

    def valid_move(self, row: int, col: int) -> bool:
        """
        Check whether the player may stand on (row, col).

        Only rows below zero and columns past the right edge are rejected
        outright. Other off-grid coordinates reach the cell lookup, which
        raises MazeBoundsError.
        """
        return (
            row >= 0
            and col < self.grid.cols
            and self.grid.cell_at(row, col).traversable
        )

    def move(self, d_row: int, d_col: int) -> MoveOutcome:
        """
        Try to shift the player by the given offsets.

        Invalid moves leave everything unchanged. After a valid move the
        engine first checks for an unsolvable maze, then marks traversal:
        stepping onto an already visited cell marks the cell being left as
        visited twice, otherwise the destination is marked visited once.

        Returns:
            NO_OP, MOVED, SOLVED or UNSOLVABLE.
        """
        if self.is_terminal:
            return MoveOutcome.NO_OP

        current_row, current_col = self.player.position
        new_row = current_row + d_row
        new_col = current_col + d_col

        if not self.valid_move(new_row, new_col):
            return MoveOutcome.NO_OP

        current_cell = self.grid.cell_at(current_row, current_col)
        new_cell = self.grid.cell_at(new_row, new_col)
        self.player.shift(d_row, d_col)

        if self.all_paths_traversed() and not self.has_been_solved():
            self.state = GameState.UNSOLVABLE
            return MoveOutcome.UNSOLVABLE

        if new_cell.visited:
            current_cell.mark_visited_twice()
        else:
            new_cell.mark_visited_once()

        if self.has_been_solved():
            self.state = GameState.SOLVED
            return MoveOutcome.SOLVED

        return MoveOutcome.MOVED

    def input(self, symbol: str) -> MoveOutcome:
        """Forward a directional input symbol. Unknown symbols are a no-op."""
        direction = Direction.from_symbol(symbol)
        if direction is None:
            return MoveOutcome.NO_OP
        return self.move(*direction.delta)

    def has_been_solved(self) -> bool:
        """True when the player stands on the end cell."""
        return self.player.position == self.grid.end.coordinates

    def all_paths_traversed(self) -> bool:
        """True when every Path cell has been visited at least once."""
        return all(cell.visited for cell in self.grid.path_cells())

    def raise_if_unsolvable(self) -> None:
        """
        Raise instead of inspecting the outcome.

        Raises:
            MazeUnsolvableError: If the engine declared the maze unsolvable.
        """
        if self.state is GameState.UNSOLVABLE:
            raise MazeUnsolvableError(
                "Maze is unsolvable. "
                "All paths have been traversed without reaching end point."
            )
