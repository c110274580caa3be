"""
mazetrace - command-line entry point.

Usage:
    mazetrace                        Play the default map in the console
    mazetrace play [MAP] [--gui]     Play a map in the console or a window
    mazetrace validate FILE          Check a maze description
    mazetrace list                   List the bundled maps
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from mazetrace.config import (
    PresenterKind,
    SessionConfig,
    Settings,
    get_settings,
    resolve_maze_path,
)
from mazetrace.core.exceptions import MazeError
from mazetrace.core.maze_parser import load_all_mazes, load_maze_file
from mazetrace.schemas.maze import MazeInfo, MazeListResponse

logger = logging.getLogger("mazetrace")


def configure_logging(settings: Settings) -> None:
    """Configure process-wide logging."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="mazetrace - walk a text maze and trace your route",
        prog="mazetrace",
    )
    parser.add_argument("--version", action="version", version=settings.app_version)
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a maze")
    play_parser.add_argument(
        "map",
        nargs="?",
        default=None,
        help=f"Maze file or name inside the maps directory (default: {settings.default_map})",
    )
    play_parser.add_argument("--gui", action="store_true", help="Play in a graphical window")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a maze description")
    validate_parser.add_argument("file", help="Path to maze file")

    # List command
    subparsers.add_parser("list", help="List mazes in the maps directory")

    # No command plays the default map
    parser.set_defaults(command="play", map=None, gui=False)

    return parser


def session_config_from_args(args: argparse.Namespace, settings: Settings) -> SessionConfig:
    """Turn command-line arguments into an explicit session configuration."""
    presenter = PresenterKind.WINDOW if args.gui else settings.presenter
    return SessionConfig(
        maze_path=resolve_maze_path(args.map or settings.default_map, settings),
        presenter=presenter,
    )


def cmd_play(args: argparse.Namespace, settings: Settings) -> int:
    """Play a maze."""
    from mazetrace.presenters import get_presenter
    from mazetrace.services.session_service import create_session

    config = session_config_from_args(args, settings)
    session = create_session(config)
    presenter = get_presenter(config.presenter, session, settings)
    final_state = presenter.run()
    state = session.get_state()
    logger.info(
        f"Session on {state.maze_path} ended in state {final_state.value} "
        f"at ({state.position.row}, {state.position.col}) after {state.moves} moves"
    )
    return 0


def cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    """Validate a maze description."""
    grid = load_maze_file(args.file)
    print(f"OK {grid.rows}x{grid.cols}")
    return 0


def cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    """List mazes in the maps directory."""
    entries = load_all_mazes(settings.maps_dir)
    listing = MazeListResponse(
        mazes=[MazeInfo.from_entry(entry) for entry in entries],
        total=len(entries),
    )
    for maze in listing.mazes:
        print(f"{maze.name}: {maze.rows}x{maze.cols} ({maze.path})")
    print(f"{listing.total} maze(s)")
    return 0


COMMANDS = {
    "play": cmd_play,
    "validate": cmd_validate,
    "list": cmd_list,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    settings = get_settings()
    configure_logging(settings)

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        return COMMANDS[args.command](args, settings)
    except MazeError as e:
        logger.debug(f"{args.command} failed: {type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
