"""Translate key presses into direction changes and quit requests.

Front-ends convert their native key codes into :class:`Key` values; everything
past that point is independent of the terminal or window library in use.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from .direction import Direction, is_opposite
from .game_state import GameState, Outcome


LOGGER = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    Q = "q"


# Player index and direction for every movement key.  Arrow keys drive player
# one (or the only player), WASD drives player two.
BINDINGS: Dict[Key, Tuple[int, Direction]] = {
    Key.UP: (0, Direction.UP),
    Key.DOWN: (0, Direction.DOWN),
    Key.LEFT: (0, Direction.LEFT),
    Key.RIGHT: (0, Direction.RIGHT),
    Key.W: (1, Direction.UP),
    Key.S: (1, Direction.DOWN),
    Key.A: (1, Direction.LEFT),
    Key.D: (1, Direction.RIGHT),
}

QUIT_KEY = Key.Q


def change_direction(state: GameState, player: int, direction: Direction) -> bool:
    """Request ``direction`` for ``player``'s next tick.

    The request is compared with the heading used by the last tick, not with an
    earlier pending request, so a 180 degree reversal is always rejected.
    Later accepted requests overwrite earlier ones until the next tick.

    Returns ``True`` if the pending direction was updated.
    """

    if state.game_over or not 0 <= player < len(state.snakes):
        return False
    snake = state.snakes[player]
    if is_opposite(snake.direction, direction):
        return False
    snake.pending = direction
    return True


def request_quit(state: GameState) -> None:
    """End the game immediately without consulting the engine."""

    if state.game_over:
        return
    state.game_over = True
    state.outcome = Outcome.UNDETERMINED if state.two_player else None
    LOGGER.info("Quit requested after %d ticks", state.ticks)


def handle_key(state: GameState, key: Optional[Key]) -> bool:
    """Apply ``key`` to ``state``.

    Returns ``True`` if the key changed the state.  Unmapped keys, WASD in a
    single-player game and ``None`` (no key pressed) are ignored.
    """

    if key is None:
        return False
    if key is QUIT_KEY:
        was_over = state.game_over
        request_quit(state)
        return not was_over
    binding = BINDINGS.get(key)
    if binding is None:
        return False
    player, direction = binding
    return change_direction(state, player, direction)
