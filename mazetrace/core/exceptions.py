"""Exceptions raised while loading and playing a maze."""


class MazeError(Exception):
    """Base class for all maze errors."""

    pass


class SourceNotFoundError(MazeError, FileNotFoundError):
    """Exception raised when a maze description source does not exist."""

    pass


class MazeReadError(MazeError, OSError):
    """Exception raised when a maze description source cannot be read."""

    pass


class MazeMalformedError(MazeError):
    """Exception raised when a maze description violates the text format."""

    pass


class MazeSizeMismatchError(MazeError):
    """Exception raised when maze content does not fit its declared dimensions."""

    pass


class InvalidMazeError(MazeError):
    """Exception raised when a grid cannot be built from the given rows."""

    pass


class MazeUnsolvableError(MazeError):
    """Exception raised when every path was visited without reaching the end."""

    pass


class MazeBoundsError(MazeError, IndexError):
    """Exception raised when a cell lookup falls outside the grid."""

    pass
