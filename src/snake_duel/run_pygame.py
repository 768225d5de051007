"""Simple pygame front-end for the snake engine.

Run with: `python -m snake_duel.run_pygame`

This module plays the same game as the terminal front-end in a window.  It
reuses :class:`~snake_duel.loop.GameLoop` unchanged; only input polling and
drawing are pygame specific.  Closing the window counts as quitting.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from .config import GameConfig
from .errors import TerminalError
from .game_state import GameState
from .input_map import Key
from .loop import GameLoop
from .render import summary_message
from .utils import APPLE, EMPTY, SNAKE_ONE, SNAKE_TWO, render_grid

# Size of a single board cell in pixels
CELL_SIZE = 24

# Mapping from the codes produced by ``render_grid`` to a colour
CELL_COLORS = {
    EMPTY: (0, 0, 0),
    SNAKE_ONE: (0, 200, 0),
    SNAKE_TWO: (0, 120, 255),
    APPLE: (220, 30, 30),
}

KEY_CODES: Dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
}


LOGGER = logging.getLogger(__name__)


def translate_event(event: pygame.event.Event) -> Optional[Key]:
    """Return the :class:`Key` for ``event`` or ``None`` if it is not bound."""

    if event.type == pygame.QUIT:
        return Key.Q
    if event.type == pygame.KEYDOWN:
        return KEY_CODES.get(event.key)
    return None


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    """Render every cell of the board."""

    for y, row in enumerate(render_grid(state)):
        for x, value in enumerate(row):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, CELL_COLORS[int(value)], rect)
            pygame.draw.rect(screen, (40, 40, 40), rect, 1)


class WindowSession:
    """Own the pygame display for the duration of a ``with`` block."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._screen: Optional[pygame.Surface] = None

    def __enter__(self) -> "WindowSession":
        pygame.init()
        try:
            self._screen = pygame.display.set_mode(
                (self.width * CELL_SIZE, self.height * CELL_SIZE)
            )
        except pygame.error as exc:
            pygame.quit()
            raise TerminalError(f"cannot open window: {exc}") from exc
        pygame.display.set_caption("Snake Duel")
        LOGGER.info("Window opened")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._screen = None
        pygame.quit()
        LOGGER.info("Window closed")
        return False

    def poll(self, timeout: float) -> Optional[Key]:
        """Wait up to ``timeout`` seconds for the next event."""

        return translate_event(pygame.event.wait(int(timeout * 1000)))

    def draw(self, state: GameState) -> None:
        if self._screen is None:
            return
        self._screen.fill(CELL_COLORS[EMPTY])
        draw_board(self._screen, state)
        pygame.display.flip()


def play(config: Optional[GameConfig] = None) -> GameState:
    """Play one game in a window and return the final state."""

    config = (config or GameConfig()).validate()
    with WindowSession(config.width, config.height) as window:
        state = GameState.new(config)
        window.draw(state)
        GameLoop(
            state,
            window.poll,
            window.draw,
            tick_ms=config.tick_ms,
            poll_ms=config.poll_ms,
        ).run()
    return state


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        state = play()
    except TerminalError as exc:
        raise SystemExit(f"snake_duel: {exc}") from exc
    print(summary_message(state))


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
