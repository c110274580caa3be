"""Tests for the maze parser and maze file helpers."""

import logging
import tempfile
from pathlib import Path

import pytest

from mazetrace.core.cells import CellKind
from mazetrace.core.exceptions import (
    MazeError,
    MazeMalformedError,
    MazeReadError,
    MazeSizeMismatchError,
    SourceNotFoundError,
)
from mazetrace.core.grid import Grid
from mazetrace.core.maze_parser import (
    MazeEntry,
    load_all_mazes,
    load_maze_file,
    parse_maze_text,
    serialize_grid,
    validate_maze_text,
)

from conftest import MAPS_DIR, SMALL_MAZE_TEXT


class TestMazeParser:
    """Tests for maze parser functionality."""

    def test_parse_simple_maze(self):
        """Test parsing a simple valid maze."""
        grid = parse_maze_text(SMALL_MAZE_TEXT)

        assert isinstance(grid, Grid)
        assert grid.rows == 7
        assert grid.cols == 7
        assert grid.start.coordinates == (1, 1)
        assert grid.end.coordinates == (5, 5)

    def test_parse_start_next_to_end(self):
        """Test a 3x3 maze with start and end side by side."""
        grid = parse_maze_text("3 3\n###\n#SE\n###\n")

        assert grid.dimensions == (3, 3)
        assert grid.start.coordinates == (1, 1)
        assert grid.end.coordinates == (1, 2)
        assert grid.cell_at(1, 1).kind is CellKind.START
        assert grid.cell_at(1, 2).kind is CellKind.END

    def test_parse_types_every_cell(self):
        """Test that every token becomes the matching cell kind."""
        grid = parse_maze_text("2 4\n#S .\n##E#\n")

        assert grid.cell_at(0, 0).kind is CellKind.WALL
        assert grid.cell_at(0, 1).kind is CellKind.START
        assert grid.cell_at(0, 2).kind is CellKind.PATH
        assert grid.cell_at(0, 3).kind is CellKind.PATH
        assert grid.cell_at(1, 2).kind is CellKind.END

    def test_parse_without_trailing_newline(self):
        """Test that the last row does not need a line break."""
        grid = parse_maze_text("3 3\n###\n#SE\n###")
        assert grid.dimensions == (3, 3)

    def test_parse_windows_line_endings(self):
        """Test that CRLF line endings are accepted."""
        grid = parse_maze_text("3 3\r\n###\r\n#SE\r\n###\r\n")
        assert grid.dimensions == (3, 3)

    def test_parse_dimensions_allow_extra_whitespace(self):
        """Test that dimensions may be separated by any whitespace."""
        grid = parse_maze_text("3   3 \n###\n#SE\n###\n")
        assert grid.dimensions == (3, 3)

    def test_empty_text_has_no_dimensions(self):
        """Test that an empty description is malformed."""
        with pytest.raises(MazeMalformedError, match="no dimensions given"):
            parse_maze_text("")

    @pytest.mark.parametrize(
        "dimensions_line",
        ["", "3", "3 3 3", "3 x", "three three", "0 3", "3 -1"],
    )
    def test_bad_dimensions_line(self, dimensions_line):
        """Test that a bad dimensions line is malformed."""
        with pytest.raises(MazeMalformedError, match="dimensions not in expected format"):
            parse_maze_text(f"{dimensions_line}\n###\n#SE\n###\n")

    def test_invalid_character(self):
        """Test that an unknown character is malformed."""
        with pytest.raises(MazeMalformedError, match="invalid character 'X'"):
            parse_maze_text("3 3\n###\n#SX\n#E#\n")

    def test_multiple_starts(self):
        """Test that a second start point is malformed."""
        with pytest.raises(MazeMalformedError, match="more than one start point"):
            parse_maze_text("3 4\n####\n#SS#\n#E##\n")

    def test_multiple_starts_on_different_rows(self):
        """Test that start points are counted across the whole maze."""
        with pytest.raises(MazeMalformedError, match="more than one start point"):
            parse_maze_text("3 3\n#S#\n#E#\n#S#\n")

    def test_multiple_ends(self):
        """Test that a second end point is malformed."""
        with pytest.raises(MazeMalformedError, match="more than one end point"):
            parse_maze_text("3 4\n####\n#SE#\n#E##\n")

    def test_duplicate_start_reported_before_bounds(self):
        """Test that a duplicate start past the declared width is malformed."""
        with pytest.raises(MazeMalformedError, match="more than one start point"):
            parse_maze_text("1 2\nSES\n")

    def test_duplicate_end_reported_before_bounds(self):
        """Test that a duplicate end past the declared width is malformed."""
        with pytest.raises(MazeMalformedError, match="more than one end point"):
            parse_maze_text("1 2\nSEE\n")

    def test_row_too_long(self):
        """Test that a row longer than declared is a size mismatch."""
        with pytest.raises(MazeSizeMismatchError, match=r"at \(1, 3\)"):
            parse_maze_text("3 3\n###\n#SE#\n###\n")

    def test_too_many_rows(self):
        """Test that more rows than declared is a size mismatch."""
        with pytest.raises(MazeSizeMismatchError, match=r"at \(2, 0\)"):
            parse_maze_text("2 3\n###\n#SE\n###\n")

    def test_row_too_long_reported_before_missing_end(self):
        """Test that an overlong row is found before the missing end check."""
        with pytest.raises(MazeSizeMismatchError):
            parse_maze_text("3 3\n###\n#S #\n###\n")

    def test_row_too_short(self):
        """Test that a short row leaves a hole and is a size mismatch."""
        with pytest.raises(MazeSizeMismatchError, match=r"no cell at \(2, 2\)"):
            parse_maze_text("3 3\n###\n#SE\n##\n")

    def test_too_few_rows(self):
        """Test that fewer rows than declared is a size mismatch."""
        with pytest.raises(MazeSizeMismatchError, match=r"no cell at \(2, 0\)"):
            parse_maze_text("3 3\n###\n#SE\n")

    def test_huge_dimensions_with_short_body(self):
        """Test that oversized dimensions are a size mismatch, not an allocation."""
        with pytest.raises(MazeSizeMismatchError, match=r"no cell at \(0, 4\)"):
            parse_maze_text("100000 100000\n#SE#\n")

    @pytest.mark.parametrize("dimensions_line", ["1_0 3", "+3 3", "3 ٣"])
    def test_dimensions_must_be_plain_digits(self, dimensions_line):
        """Test that only ASCII digits are accepted as dimensions."""
        with pytest.raises(MazeMalformedError, match="dimensions not in expected format"):
            parse_maze_text(f"{dimensions_line}\n#SE\n")

    def test_missing_end(self):
        """Test that a maze without an end point is malformed."""
        with pytest.raises(MazeMalformedError, match="missing start or end point"):
            parse_maze_text("3 3\n###\n#S \n###\n")

    def test_missing_start(self):
        """Test that a maze without a start point is malformed."""
        with pytest.raises(MazeMalformedError, match="missing start or end point"):
            parse_maze_text("3 3\n###\n# E\n###\n")

    def test_size_mismatch_is_not_malformed(self):
        """Test that the two content errors stay distinct."""
        assert not issubclass(MazeSizeMismatchError, MazeMalformedError)
        assert not issubclass(MazeMalformedError, MazeSizeMismatchError)
        assert issubclass(MazeSizeMismatchError, MazeError)


class TestSerializeGrid:
    """Tests for writing grids back out."""

    def test_serialize_reproduces_description(self):
        """Test that a description without aliases is reproduced exactly."""
        grid = parse_maze_text(SMALL_MAZE_TEXT)
        assert serialize_grid(grid) == SMALL_MAZE_TEXT

    def test_serialize_writes_path_alias_as_space(self):
        """Test that '.' is never written back."""
        grid = parse_maze_text("3 3\n#S#\n#.#\n#E#\n")
        assert serialize_grid(grid) == "3 3\n#S#\n# #\n#E#\n"

    def test_reparse_yields_equal_grid(self):
        """Test that a serialized grid parses back to an equal grid."""
        grid = parse_maze_text("4 5\n#####\n#S..#\n# #E#\n#####\n")
        assert parse_maze_text(serialize_grid(grid)) == grid


class TestLoadMazeFile:
    """Tests for loading maze files from filesystem."""

    def test_load_maze_file(self):
        """Test loading a maze from a file."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".txt", delete=False
        ) as f:
            f.write(SMALL_MAZE_TEXT)
            f.flush()

            grid = load_maze_file(f.name)

            assert grid.rows == 7
            assert grid.cols == 7
            assert grid.start.coordinates == (1, 1)

        Path(f.name).unlink()

    def test_load_bundled_small_map(self):
        """Test that the default map loads."""
        grid = load_maze_file(MAPS_DIR / "SmallMap.txt")
        assert grid.dimensions == (7, 7)

    def test_load_maze_file_not_found(self):
        """Test that SourceNotFoundError is raised for missing file."""
        with pytest.raises(SourceNotFoundError):
            load_maze_file("/nonexistent/path/maze.txt")

    def test_not_found_is_a_file_not_found_error(self):
        """Test that callers can catch the builtin error."""
        with pytest.raises(FileNotFoundError):
            load_maze_file("/nonexistent/path/maze.txt")

    def test_load_directory_raises_read_error(self, tmp_path):
        """Test that a directory is not a maze source."""
        with pytest.raises(MazeReadError, match="not a file"):
            load_maze_file(tmp_path)

    def test_load_undecodable_file_raises_read_error(self, tmp_path):
        """Test that unreadable content is an I/O failure, not malformed."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"3 3\n\xff\xfe\xfd\n")
        with pytest.raises(MazeReadError):
            load_maze_file(path)

    def test_load_malformed_file(self, tmp_path):
        """Test that content errors pass through unchanged."""
        path = tmp_path / "broken.txt"
        path.write_text("3 3\n###\n#SS\n#E#\n")
        with pytest.raises(MazeMalformedError):
            load_maze_file(path)


class TestLoadAllMazes:
    """Tests for loading all mazes from a directory."""

    def test_load_all_mazes(self):
        """Test loading all mazes from a directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "maze_one.txt").write_text(SMALL_MAZE_TEXT)
            (Path(tmpdir) / "maze-two.txt").write_text(SMALL_MAZE_TEXT)

            result = load_all_mazes(tmpdir)

            assert len(result) == 2
            assert all(isinstance(m, MazeEntry) for m in result)
            assert [m.name for m in result] == ["maze two", "maze one"]

    def test_load_all_mazes_skips_invalid(self, tmp_path, caplog):
        """Test that invalid files are logged and skipped."""
        (tmp_path / "good.txt").write_text(SMALL_MAZE_TEXT)
        (tmp_path / "bad.txt").write_text("3 3\n###\n#S \n###\n")

        with caplog.at_level(logging.WARNING):
            result = load_all_mazes(tmp_path)

        assert [m.name for m in result] == ["good"]
        assert "bad.txt" in caplog.text

    def test_load_all_mazes_empty_directory(self):
        """Test loading from empty directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            result = load_all_mazes(tmpdir)
            assert result == []

    def test_load_all_mazes_nonexistent_directory(self):
        """Test loading from nonexistent directory."""
        with pytest.raises(SourceNotFoundError):
            load_all_mazes("/nonexistent/path")

    def test_bundled_maps_are_valid(self):
        """Test that every bundled map loads."""
        entries = load_all_mazes(MAPS_DIR)
        names = {entry.path.name for entry in entries}
        assert names == {p.name for p in MAPS_DIR.glob("*.txt")}
        assert "SmallMap.txt" in names


class TestValidateMazeText:
    """Tests for maze validation helper."""

    def test_validate_valid_maze(self):
        """Test validation of valid maze returns True."""
        is_valid, error = validate_maze_text(SMALL_MAZE_TEXT)
        assert is_valid is True
        assert error is None

    def test_validate_invalid_maze(self):
        """Test validation of invalid maze returns False with error."""
        is_valid, error = validate_maze_text("3 3\n###\n# E\n###\n")
        assert is_valid is False
        assert "missing start or end point" in error

    def test_validate_size_mismatch(self):
        """Test that size mismatches are reported too."""
        is_valid, error = validate_maze_text("2 3\n###\n#SE\n###\n")
        assert is_valid is False
        assert "incongruent" in error
