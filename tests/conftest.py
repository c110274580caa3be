"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from mazetrace.config import PACKAGE_DIR, get_settings
from mazetrace.core.maze_engine import MazeEngine

MAPS_DIR = PACKAGE_DIR / "maps"

# Same layout as mazetrace/maps/SmallMap.txt
SMALL_MAZE_ROWS = [
    "#######",
    "#S#   #",
    "# ### #",
    "# #   #",
    "# # # #",
    "#   #E#",
    "#######",
]

SMALL_MAZE_TEXT = "7 7\n" + "\n".join(SMALL_MAZE_ROWS) + "\n"

# Moves from S to E in the small maze
SMALL_MAZE_SOLUTION = "s s s s d d w w d d s s"

# Every path is reachable from S but E is walled off
WALLED_OFF_ROWS = [
    "######",
    "#S  #E",
    "######",
]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_maze_text() -> str:
    """Sample maze description for testing."""
    return SMALL_MAZE_TEXT


@pytest.fixture
def engine() -> MazeEngine:
    """Engine on the small maze."""
    return MazeEngine.from_rows(SMALL_MAZE_ROWS)


@pytest.fixture
def walled_off_engine() -> MazeEngine:
    """Engine on a maze whose end cannot be reached."""
    return MazeEngine.from_rows(WALLED_OFF_ROWS)


@pytest.fixture
def maze_file(tmp_path) -> Path:
    """The small maze written to a temporary file."""
    path = tmp_path / "small_maze.txt"
    path.write_text(SMALL_MAZE_TEXT, encoding="utf-8")
    return path
