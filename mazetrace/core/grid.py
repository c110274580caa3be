"""Rectangular grid of maze cells."""

from typing import Iterator, Optional, Sequence

from .cells import Cell, CellKind
from .exceptions import InvalidMazeError, MazeBoundsError


class Grid:
    """
    A fixed rows x cols mapping from (row, col) to exactly one Cell.

    Holds exactly one Start and one End cell and has no holes.

    Example usage:
        grid = Grid.from_rows([
            "#####",
            "#S E#",
            "#####",
        ])
        grid.start.coordinates  # (1, 1)
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]):
        """
        Build a grid from fully populated rows of cells.

        Raises:
            InvalidMazeError: If the rows are empty or ragged, or the grid does
                not hold exactly one start and one end cell.
        """
        if not cells or not cells[0]:
            raise InvalidMazeError("Maze grid is empty")

        self._rows = len(cells)
        self._cols = len(cells[0])
        self._cells: list[list[Cell]] = []

        start: Optional[Cell] = None
        end: Optional[Cell] = None

        for row, line in enumerate(cells):
            if len(line) != self._cols:
                raise InvalidMazeError(
                    f"Row {row} has {len(line)} cells, expected {self._cols}"
                )
            for cell in line:
                if cell.kind is CellKind.START:
                    if start is not None:
                        raise InvalidMazeError("Maze grid has more than one start point")
                    start = cell
                elif cell.kind is CellKind.END:
                    if end is not None:
                        raise InvalidMazeError("Maze grid has more than one end point")
                    end = cell
            self._cells.append(list(line))

        if start is None or end is None:
            raise InvalidMazeError("Maze grid must have a start point and an end point")

        self._start = start
        self._end = end

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """
        Build a grid from rows of description characters.

        Args:
            rows: Equal-length strings (or character sequences) using the
                maze description characters.

        Raises:
            InvalidMazeError: If the rows do not describe a valid grid.
        """
        if not rows:
            raise InvalidMazeError("Maze grid is empty")

        cells = []
        for row, line in enumerate(rows):
            cell_row = []
            for col, char in enumerate(line):
                kind = CellKind.from_char(char)
                if kind is None:
                    raise InvalidMazeError(
                        f"Invalid character {char!r} at ({row}, {col})"
                    )
                cell_row.append(Cell(kind, row, col))
            cells.append(cell_row)

        return cls(cells)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def dimensions(self) -> tuple[int, int]:
        """(rows, cols) of the grid."""
        return (self._rows, self._cols)

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def end(self) -> Cell:
        return self._end

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the cell at a coordinate.

        Raises:
            MazeBoundsError: If the coordinate is outside the grid.
        """
        if not self.in_bounds(row, col):
            raise MazeBoundsError(
                f"Cell ({row}, {col}) is outside the {self._rows}x{self._cols} grid"
            )
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over cells in row-major order."""
        for line in self._cells:
            yield from line

    def path_cells(self) -> list[Cell]:
        """All cells of kind PATH."""
        return [cell for cell in self if cell.kind is CellKind.PATH]

    def kinds(self) -> tuple[tuple[CellKind, ...], ...]:
        """Cell kinds laid out by row, used for structural comparison."""
        return tuple(tuple(cell.kind for cell in line) for line in self._cells)

    def to_rows(self) -> list[str]:
        """Rows of description characters. Path cells are written as spaces."""
        return ["".join(cell.kind.value for cell in line) for line in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.kinds() == other.kinds()

    def __repr__(self) -> str:
        return f"<Grid {self._rows}x{self._cols} start={self._start.coordinates}>"
