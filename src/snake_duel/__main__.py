"""Two-player terminal Snake.

Run with: `python -m snake_duel`

Arrow keys steer player one, ``w``/``a``/``s``/``d`` steer player two and
``q`` quits.
"""

from __future__ import annotations

import logging

from .errors import TerminalError
from .run_terminal import main as run_main


def main() -> None:
    # Anything below WARNING would draw over the curses screen.
    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    try:
        run_main()
    except TerminalError as exc:
        raise SystemExit(f"snake_duel: {exc}") from exc


if __name__ == "__main__":
    main()
