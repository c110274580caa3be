"""
Maze Parser for mazetrace.

Loads and validates maze descriptions from text or the filesystem.

Maze Format:
    First line: "<rows> <cols>"
    Following lines, one per row:
        # = Wall (impassable)
          = Path (space)
        . = Path (alias, never written back)
        S = Start position
        E = End position (goal)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .cells import Cell, CellKind
from .exceptions import (
    MazeError,
    MazeMalformedError,
    MazeReadError,
    MazeSizeMismatchError,
    SourceNotFoundError,
)
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class MazeEntry:
    """A maze description loaded from a file."""

    name: str
    path: Path
    grid: Grid

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols


def _parse_dimensions(dimensions_line: str) -> tuple[int, int]:
    """Parse the "<rows> <cols>" header line."""
    tokens = dimensions_line.split()
    if len(tokens) != 2:
        raise MazeMalformedError(
            f"Maze dimensions not in expected format: {dimensions_line!r}. "
            "Expected '<rows> <cols>'"
        )

    if not all(token.isascii() and token.isdigit() for token in tokens):
        raise MazeMalformedError(
            f"Maze dimensions not in expected format: {dimensions_line!r}. "
            "Dimensions must be integers"
        )

    expected_rows = int(tokens[0])
    expected_cols = int(tokens[1])

    if expected_rows <= 0 or expected_cols <= 0:
        raise MazeMalformedError(
            f"Maze dimensions not in expected format: {dimensions_line!r}. "
            "Dimensions must be positive"
        )

    return expected_rows, expected_cols


def parse_maze_text(maze_text: str) -> Grid:
    """
    Parse a maze description into a validated grid.

    The body is scanned one character at a time. A line break ends the
    current row. Duplicate start/end markers are reported before the
    character is bounds-checked, and a row that is too long is reported at
    the first character past the declared width.

    Args:
        maze_text: Full maze description including the dimensions line.

    Returns:
        Grid with exactly the declared dimensions.

    Raises:
        MazeMalformedError: If the description breaks the text format.
        MazeSizeMismatchError: If the content does not fit the declared size.
    """
    maze_text = maze_text.replace("\r\n", "\n")
    if not maze_text:
        raise MazeMalformedError("Maze description is empty: no dimensions given")

    dimensions_line, _, body = maze_text.partition("\n")
    expected_rows, expected_cols = _parse_dimensions(dimensions_line)

    # Rows grow as the body is scanned
    kinds: list[list[CellKind]] = [[]]
    start_pos: Optional[tuple[int, int]] = None
    end_pos: Optional[tuple[int, int]] = None
    row = 0
    col = 0

    for char in body:
        if char == "\n":
            row += 1
            col = 0
            kinds.append([])
            continue

        kind = CellKind.from_char(char)
        if kind is None:
            raise MazeMalformedError(
                f"Maze has an invalid character {char!r} at ({row}, {col})"
            )

        if kind is CellKind.START:
            if start_pos is not None:
                raise MazeMalformedError(
                    f"Maze has more than one start point: "
                    f"first at {start_pos}, second at ({row}, {col})"
                )
            start_pos = (row, col)
        elif kind is CellKind.END:
            if end_pos is not None:
                raise MazeMalformedError(
                    f"Maze has more than one end point: "
                    f"first at {end_pos}, second at ({row}, {col})"
                )
            end_pos = (row, col)

        if row >= expected_rows or col >= expected_cols:
            raise MazeSizeMismatchError(
                f"Specified dimensions {expected_rows}x{expected_cols} "
                f"incongruent with maze content at ({row}, {col})"
            )

        kinds[row].append(kind)
        col += 1

    if start_pos is None or end_pos is None:
        raise MazeMalformedError("Maze is missing start or end point")

    # Trailing blank lines past the last declared row hold no cells
    kinds = kinds[:expected_rows]
    for r in range(expected_rows):
        filled = len(kinds[r]) if r < len(kinds) else 0
        if filled < expected_cols:
            raise MazeSizeMismatchError(
                f"Specified dimensions {expected_rows}x{expected_cols} "
                f"incongruent with maze content: no cell at ({r}, {filled})"
            )

    grid = Grid(
        [
            [Cell(kind, r, c) for c, kind in enumerate(line)]
            for r, line in enumerate(kinds)
        ]
    )
    logger.debug(f"Parsed maze description ({grid.rows}x{grid.cols})")
    return grid


def serialize_grid(grid: Grid) -> str:
    """
    Write a grid back out as a maze description.

    The result is accepted by parse_maze_text and parses to an equal grid.
    """
    lines = [f"{grid.rows} {grid.cols}", *grid.to_rows()]
    return "\n".join(lines) + "\n"


def load_maze_file(file_path: Path | str) -> Grid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        Validated Grid.

    Raises:
        SourceNotFoundError: If the file doesn't exist.
        MazeReadError: If the path is not a file or cannot be read.
        MazeMalformedError: If the maze breaks the text format.
        MazeSizeMismatchError: If the maze does not fit its declared size.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise SourceNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeReadError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeReadError(f"Failed to read maze file: {e}") from e

    return parse_maze_text(maze_text)


def load_all_mazes(mazes_dir: Path | str) -> list[MazeEntry]:
    """
    Load all maze files from a directory.

    Files that fail to parse are logged and skipped.

    Args:
        mazes_dir: Path to the directory containing maze files.

    Returns:
        List of MazeEntry objects sorted by filename.

    Raises:
        SourceNotFoundError: If the directory doesn't exist.
        MazeReadError: If the path is not a directory.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise SourceNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeReadError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            grid = load_maze_file(maze_file)
        except MazeError as e:
            logger.warning(f"Failed to load {maze_file}: {e}")
            continue
        name = maze_file.stem.replace("_", " ").replace("-", " ")
        mazes.append(MazeEntry(name=name, path=maze_file, grid=grid))

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate a maze description without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeError as e:
        return False, str(e)
