"""Terminal front-end built on ``curses``.

Run with: `python -m snake_duel`

Player one steers with the arrow keys, player two with ``w``/``a``/``s``/``d``
and ``q`` quits.  The terminal is switched into cbreak mode for the whole game
and restored on every way out, including exceptions raised mid-game.
"""

from __future__ import annotations

import curses
import locale
import logging
import sys
from typing import Dict, Optional

from .board import HEIGHT, WIDTH
from .config import GameConfig
from .errors import TerminalError
from .game_state import GameState
from .input_map import Key
from .loop import GameLoop
from .render import frame_size, render_lines, summary_message


LOGGER = logging.getLogger(__name__)

KEY_CODES: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord("w"): Key.W,
    ord("a"): Key.A,
    ord("s"): Key.S,
    ord("d"): Key.D,
    ord("q"): Key.Q,
}


def translate_key(code: int) -> Optional[Key]:
    """Map a ``curses`` key code to a :class:`Key`, or ``None`` if unbound."""

    return KEY_CODES.get(code)


class TerminalSession:
    """Own the terminal for the duration of a ``with`` block.

    ``width`` and ``height`` are the board size in cells; the terminal must be
    large enough to show the bordered frame or entering the block fails.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.rows, self.cols = frame_size(width, height)
        self.screen: Optional["curses.window"] = None

    def __enter__(self) -> "TerminalSession":
        if not sys.stdin.isatty():
            raise TerminalError("standard input is not a terminal")
        locale.setlocale(locale.LC_ALL, "")
        try:
            screen = curses.initscr()
        except curses.error as exc:
            raise TerminalError(f"cannot initialise terminal: {exc}") from exc
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
        except curses.error as exc:
            self._release(screen)
            raise TerminalError(f"cannot enter cbreak mode: {exc}") from exc
        max_rows, max_cols = screen.getmaxyx()
        if max_rows < self.rows or max_cols < self.cols:
            self._release(screen)
            raise TerminalError(
                f"terminal is {max_cols}x{max_rows}, "
                f"the board needs at least {self.cols}x{self.rows}"
            )
        try:
            curses.curs_set(0)
        except curses.error:
            # Not every terminal can hide its cursor.
            LOGGER.debug("Cursor visibility not supported")
        self.screen = screen
        LOGGER.info("Terminal acquired")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.screen is not None:
            self._release(self.screen)
            self.screen = None
        return False

    @staticmethod
    def _release(screen: "curses.window") -> None:
        screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        LOGGER.info("Terminal released")

    def _acquired(self) -> "curses.window":
        if self.screen is None:
            raise TerminalError("terminal not acquired")
        return self.screen

    def poll(self, timeout: float) -> Optional[Key]:
        """Wait up to ``timeout`` seconds for a key press."""

        screen = self._acquired()
        screen.timeout(int(timeout * 1000))
        code = screen.getch()
        if code == -1:
            return None
        return translate_key(code)

    def draw(self, state: GameState) -> None:
        """Clear the screen and draw the bordered board."""

        screen = self._acquired()
        max_rows, max_cols = screen.getmaxyx()
        screen.erase()
        for row, line in enumerate(render_lines(state)):
            try:
                screen.addstr(row, 0, line)
            except curses.error as exc:
                # Writing the bottom-right cell fails after the text is drawn.
                if row == max_rows - 1 and len(line) == max_cols:
                    continue
                raise TerminalError(f"cannot draw row {row}: {exc}") from exc
        screen.refresh()


def play(config: Optional[GameConfig] = None) -> GameState:
    """Play one game in the terminal and return the final state."""

    config = (config or GameConfig()).validate()
    with TerminalSession(config.width, config.height) as terminal:
        state = GameState.new(config)
        GameLoop(
            state,
            terminal.poll,
            terminal.draw,
            tick_ms=config.tick_ms,
            poll_ms=config.poll_ms,
        ).run()
    return state


def main() -> None:
    state = play()
    print()
    print(summary_message(state))
