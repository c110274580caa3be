"""Play session service: one loaded maze, one player, one presenter."""

import logging
from pathlib import Path

from mazetrace.config import SessionConfig
from mazetrace.core.cells import RGB, DisplayToken
from mazetrace.core.maze_engine import MazeEngine, MoveOutcome
from mazetrace.core.maze_parser import load_maze_file
from mazetrace.core.render import render, render_colours, render_text
from mazetrace.schemas.maze import MazePosition
from mazetrace.schemas.session import MoveResponse, SessionState

logger = logging.getLogger(__name__)

SOLVED_MESSAGE = "Congratulations! You solved the maze!"
UNSOLVABLE_MESSAGE = (
    "Maze is unsolvable. All paths have been traversed without reaching end point."
)


class PlaySession:
    """
    A single play session wrapping a MazeEngine.

    Presenters forward raw input symbols with handle_input() and draw from
    the render methods. The session never knows which presenter is active.
    """

    def __init__(self, engine: MazeEngine, maze_path: Path):
        self.engine = engine
        self.maze_path = maze_path
        self.moves = 0

    @property
    def is_finished(self) -> bool:
        return self.engine.is_terminal

    @property
    def is_solved(self) -> bool:
        return self.engine.has_been_solved()

    def _position(self) -> MazePosition:
        row, col = self.engine.player.position
        return MazePosition(row=row, col=col)

    def handle_input(self, symbol: str) -> MoveResponse:
        """
        Forward one input symbol to the engine.

        Args:
            symbol: Raw input; its first character selects the direction.

        Returns:
            MoveResponse describing the outcome.
        """
        outcome = self.engine.input(symbol)
        message = None

        if outcome is not MoveOutcome.NO_OP:
            self.moves += 1

        if outcome is MoveOutcome.SOLVED:
            message = SOLVED_MESSAGE
            logger.info(f"Maze {self.maze_path} solved in {self.moves} moves")
        elif outcome is MoveOutcome.UNSOLVABLE:
            message = UNSOLVABLE_MESSAGE
            logger.warning(
                f"Maze {self.maze_path} declared unsolvable after {self.moves} moves"
            )

        return MoveResponse(
            outcome=outcome.value,
            position=self._position(),
            state=self.engine.state.value,
            moves=self.moves,
            message=message,
        )

    def get_state(self) -> SessionState:
        """Get the current session state."""
        rows, cols = self.engine.dimensions
        return SessionState(
            maze_path=str(self.maze_path),
            rows=rows,
            cols=cols,
            position=self._position(),
            state=self.engine.state.value,
            moves=self.moves,
        )

    def render(self) -> dict[tuple[int, int], DisplayToken]:
        return render(self.engine)

    def render_text(self, use_ansi: bool = True) -> str:
        return render_text(self.engine, use_ansi=use_ansi)

    def render_colours(self) -> list[list[RGB]]:
        return render_colours(self.engine)


def create_session(config: SessionConfig) -> PlaySession:
    """
    Load the configured maze and start a session on it.

    Raises:
        MazeError: If the maze cannot be loaded or is invalid. No session is
            created in that case.
    """
    grid = load_maze_file(config.maze_path)
    engine = MazeEngine(grid)
    logger.info(
        f"Session started on {config.maze_path} ({grid.rows}x{grid.cols}) "
        f"with {config.presenter.value} presenter"
    )
    return PlaySession(engine, config.maze_path)
