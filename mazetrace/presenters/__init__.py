"""Front ends that draw a play session and forward input to it."""

from mazetrace.config import PresenterKind, Settings
from mazetrace.presenters.console import ConsolePresenter
from mazetrace.presenters.window import WindowPresenter
from mazetrace.services.session_service import PlaySession


def get_presenter(kind: PresenterKind, session: PlaySession, settings: Settings):
    """Build the presenter selected for a session."""
    if kind is PresenterKind.WINDOW:
        return WindowPresenter(session, size=settings.window_size, title=settings.app_name)
    return ConsolePresenter(session, use_ansi=settings.use_ansi)


__all__ = ["ConsolePresenter", "WindowPresenter", "get_presenter"]
