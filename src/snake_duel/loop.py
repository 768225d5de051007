"""Fixed-tick game loop.

Input is polled often with a short, bounded timeout so key presses register
quickly, while the simulation only advances once every ``tick_ms``
milliseconds.  Game speed therefore does not depend on how fast keys arrive.

The loop is single-threaded and knows nothing about terminals or windows: the
front-end supplies a ``poll`` callable returning the next :class:`Key` (or
``None`` after the timeout) and a ``render`` callable drawing a state.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from . import engine
from .config import POLL_MS, TICK_MS
from .game_state import GameState
from .input_map import Key, handle_key


LOGGER = logging.getLogger(__name__)

PollFn = Callable[[float], Optional[Key]]
RenderFn = Callable[[GameState], None]


class GameLoop:
    """Drive a :class:`GameState` until it reaches a terminal state."""

    def __init__(
        self,
        state: GameState,
        poll: PollFn,
        render: RenderFn,
        *,
        tick_ms: int = TICK_MS,
        poll_ms: int = POLL_MS,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.state = state
        self._poll = poll
        self._render = render
        self.tick_ms = tick_ms
        self.poll_ms = poll_ms
        self._clock = clock or time.monotonic
        self._last_tick: Optional[float] = None

    @property
    def tick_interval(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def poll_timeout(self) -> float:
        return self.poll_ms / 1000.0

    def step(self) -> bool:
        """Run one loop iteration and return ``True`` if the engine ticked."""

        if self._last_tick is None:
            self._last_tick = self._clock()
        handle_key(self.state, self._poll(self.poll_timeout))
        if self.state.game_over:
            return False

        now = self._clock()
        if now - self._last_tick < self.tick_interval:
            return False
        engine.tick(self.state)
        self._render(self.state)
        self._last_tick = self._clock()
        return True

    def run(self) -> GameState:
        """Loop until the game ends and return the final state."""

        LOGGER.info(
            "Game started: %dx%d, %d player(s), tick %d ms",
            self.state.width,
            self.state.height,
            len(self.state.snakes),
            self.tick_ms,
        )
        self._last_tick = self._clock()
        while not self.state.game_over:
            self.step()
        LOGGER.info("Game stopped after %d ticks", self.state.ticks)
        return self.state
