"""
Cell model for mazetrace.

A maze is made of four kinds of cells:
    # = Wall (impassable)
    ' ' = Path (passable, tracks how often it was walked on)
    S = Start position
    E = End position (goal)

A '.' in a maze description is accepted as an alias for Path but is never
written back out.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

RGB = tuple[int, int, int]


class CellKind(Enum):
    """Kinds of cells in the maze."""
    WALL = "#"
    PATH = " "
    START = "S"
    END = "E"

    @classmethod
    def from_char(cls, char: str) -> Optional["CellKind"]:
        """Convert a description character to a CellKind, None if unknown."""
        mapping = {
            "#": cls.WALL,
            " ": cls.PATH,
            ".": cls.PATH,
            "S": cls.START,
            "E": cls.END,
        }
        return mapping.get(char)

    @property
    def traversable(self) -> bool:
        """Whether the player may stand on cells of this kind."""
        return self is not CellKind.WALL


class TraversalState(IntEnum):
    """How often the player has walked over a cell. Never decreases."""
    UNTOUCHED = 0
    VISITED_ONCE = 1
    VISITED_TWICE = 2


@dataclass(frozen=True)
class DisplayToken:
    """
    What a presenter draws for one grid position.

    Carries one value per presentation channel so the engine never has to
    know which presenter is active:
        glyph  - ANSI coloured block for terminals
        plain  - single uncoloured character
        colour - RGB swatch for graphical windows
    """
    glyph: str
    plain: str
    colour: RGB


WALL_TOKEN = DisplayToken(glyph="█", plain="#", colour=(128, 128, 128))
PATH_TOKEN = DisplayToken(glyph=" ", plain=" ", colour=(255, 255, 255))
VISITED_ONCE_TOKEN = DisplayToken(
    glyph="\u001b[96m█\u001b[0m", plain=".", colour=(0, 255, 255)
)
VISITED_TWICE_TOKEN = DisplayToken(
    glyph="\u001b[34m█\u001b[0m", plain=":", colour=(0, 0, 255)
)
START_TOKEN = DisplayToken(
    glyph="\u001b[96m█\u001b[0m", plain="S", colour=(0, 255, 255)
)
END_TOKEN = DisplayToken(
    glyph="\u001b[31m█\u001b[0m", plain="E", colour=(255, 0, 0)
)
PLAYER_TOKEN = DisplayToken(
    glyph="\u001b[32m█\u001b[0m", plain="@", colour=(0, 255, 0)
)

_PATH_TOKENS = {
    TraversalState.UNTOUCHED: PATH_TOKEN,
    TraversalState.VISITED_ONCE: VISITED_ONCE_TOKEN,
    TraversalState.VISITED_TWICE: VISITED_TWICE_TOKEN,
}


class Cell:
    """
    One position in the maze grid.

    Kind and coordinates are fixed at creation; only the traversal state
    changes during play. Start and End cells can be visited once but never
    reach VISITED_TWICE.
    """

    def __init__(self, kind: CellKind, row: int, col: int):
        self._kind = kind
        self._row = row
        self._col = col
        self.traversal_state = TraversalState.UNTOUCHED

    @property
    def kind(self) -> CellKind:
        return self._kind

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coordinates(self) -> tuple[int, int]:
        """(row, col) of this cell."""
        return (self._row, self._col)

    @property
    def traversable(self) -> bool:
        return self._kind.traversable

    @property
    def visited(self) -> bool:
        """True once the player has stepped onto this cell."""
        return self.traversal_state >= TraversalState.VISITED_ONCE

    def mark_visited_once(self) -> None:
        """Record a first visit. Walls are never marked."""
        if self.traversable and self.traversal_state < TraversalState.VISITED_ONCE:
            self.traversal_state = TraversalState.VISITED_ONCE

    def mark_visited_twice(self) -> None:
        """Record a repeat visit. Only Path cells track repeat visits."""
        if self._kind is CellKind.PATH:
            self.traversal_state = TraversalState.VISITED_TWICE

    @property
    def display_token(self) -> DisplayToken:
        """Token for this cell, derived from its kind and traversal state."""
        if self._kind is CellKind.WALL:
            return WALL_TOKEN
        if self._kind is CellKind.START:
            return START_TOKEN
        if self._kind is CellKind.END:
            return END_TOKEN
        return _PATH_TOKENS[self.traversal_state]

    def __repr__(self) -> str:
        return (
            f"<Cell {self._kind.name} ({self._row}, {self._col}) "
            f"{self.traversal_state.name}>"
        )
