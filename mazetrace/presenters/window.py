"""Graphical presenter drawing one coloured swatch per cell with pygame."""

import logging

from mazetrace.core.maze_engine import GameState
from mazetrace.services.session_service import PlaySession

logger = logging.getLogger(__name__)

FPS = 30
BACKGROUND = (0, 0, 0)


def cell_rects(rows: int, cols: int, size: int) -> list[list[tuple[int, int, int, int]]]:
    """(x, y, w, h) of each cell when a rows x cols grid fills a size x size window."""
    cell_w = max(size // cols, 1)
    cell_h = max(size // rows, 1)
    return [
        [(col * cell_w, row * cell_h, cell_w, cell_h) for col in range(cols)]
        for row in range(rows)
    ]


class WindowPresenter:
    """
    Shows the maze in a pygame window.

    Arrow keys and w/a/s/d are forwarded to the session. The window closes
    once the maze is solved; an unsolvable maze stays on screen until the
    window is closed.
    """

    def __init__(self, session: PlaySession, size: int = 800, title: str = "mazetrace"):
        self.session = session
        self.size = size
        self.title = title
        rows, cols = session.engine.dimensions
        self.rects = cell_rects(rows, cols, size)

    def draw(self, pygame, screen) -> None:
        screen.fill(BACKGROUND)
        for row, colours in enumerate(self.session.render_colours()):
            for col, colour in enumerate(colours):
                pygame.draw.rect(screen, colour, pygame.Rect(*self.rects[row][col]))
        pygame.display.flip()

    def run(self) -> GameState:
        """Run the event loop until the window closes or the maze is solved."""
        import pygame

        arrow_symbols = {
            pygame.K_UP: "w",
            pygame.K_DOWN: "s",
            pygame.K_LEFT: "a",
            pygame.K_RIGHT: "d",
        }

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.size, self.size))
            pygame.display.set_caption(self.title)
            clock = pygame.time.Clock()
            running = True

            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        symbol = arrow_symbols.get(event.key, event.unicode)
                        response = self.session.handle_input(symbol)
                        if response.message:
                            logger.info(response.message)
                            pygame.display.set_caption(f"{self.title} - {response.message}")

                if self.session.is_solved:
                    running = False

                self.draw(pygame, screen)
                clock.tick(FPS)
        finally:
            pygame.quit()

        return self.session.engine.state
