"""Text console presenter."""

import sys
from typing import Optional, TextIO

from mazetrace.core.maze_engine import GameState
from mazetrace.services.session_service import PlaySession

PROMPT = "Move (w/a/s/d): "


class ConsolePresenter:
    """
    Draws the maze as text and reads moves from a text stream.

    Each whitespace-separated token on an input line is one move; only its
    first character counts. End of input abandons the session.
    """

    def __init__(
        self,
        session: PlaySession,
        use_ansi: bool = True,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.session = session
        self.use_ansi = use_ansi
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def draw(self) -> None:
        print(self.session.render_text(use_ansi=self.use_ansi), file=self.stdout)

    def _prompt(self) -> None:
        self.stdout.write(PROMPT)
        self.stdout.flush()

    def run(self) -> GameState:
        """Play until the maze is solved, declared unsolvable, or input ends."""
        self.draw()
        self._prompt()

        for line in self.stdin:
            for token in line.split():
                response = self.session.handle_input(token)
                self.draw()
                if response.message:
                    print(response.message, file=self.stdout)
                if self.session.is_finished:
                    return self.session.engine.state
            self._prompt()

        print(file=self.stdout)
        return self.session.engine.state
