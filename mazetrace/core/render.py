"""
Read-only projection of a maze engine for presenters.

Every grid coordinate maps to a DisplayToken: the player's token where the
player stands, otherwise the cell's own token. Presenters pick the channel
they need (glyph, plain or colour) from the token.
"""

from .cells import PLAYER_TOKEN, RGB, DisplayToken
from .maze_engine import MazeEngine


def token_at(engine: MazeEngine, row: int, col: int) -> DisplayToken:
    """Display token for one coordinate."""
    if engine.player.position == (row, col):
        return PLAYER_TOKEN
    return engine.cell_at(row, col).display_token


def render(engine: MazeEngine) -> dict[tuple[int, int], DisplayToken]:
    """Map every (row, col) in the grid to its display token."""
    rows, cols = engine.dimensions
    return {
        (row, col): token_at(engine, row, col)
        for row in range(rows)
        for col in range(cols)
    }


def render_text(engine: MazeEngine, use_ansi: bool = True) -> str:
    """
    Generate a text visualization of the maze.

    Args:
        engine: Engine to draw.
        use_ansi: Use ANSI coloured blocks, otherwise plain characters.

    Returns:
        One line per grid row, no trailing newline.
    """
    rows, cols = engine.dimensions
    lines = []
    for row in range(rows):
        tokens = (token_at(engine, row, col) for col in range(cols))
        if use_ansi:
            lines.append("".join(token.glyph for token in tokens))
        else:
            lines.append("".join(token.plain for token in tokens))
    return "\n".join(lines)


def render_colours(engine: MazeEngine) -> list[list[RGB]]:
    """RGB colour for every cell, laid out by row."""
    rows, cols = engine.dimensions
    return [
        [token_at(engine, row, col).colour for col in range(cols)]
        for row in range(rows)
    ]
