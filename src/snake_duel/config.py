"""Game settings.

The defaults reproduce the classic two-player layout: a 20x10 board, a new
simulation step every 150 ms and keyboard polling every 50 ms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import HEIGHT, WIDTH

# Milliseconds between simulation ticks
TICK_MS = 150
# Upper bound on how long a single input poll may block
POLL_MS = 50
# Number of snakes on the board
PLAYERS = 2


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    players: int = PLAYERS
    tick_ms: int = TICK_MS
    poll_ms: int = POLL_MS
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        """Return ``self`` after checking the settings are playable.

        Raises:
            ValueError: If a dimension or interval is not positive, ``players``
                is not 1 or 2, or the board cannot hold the starting snakes.
        """

        if self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.tick_ms <= 0 or self.poll_ms <= 0:
            raise ValueError("Tick and poll intervals must be positive")
        if self.players not in (1, 2):
            raise ValueError(f"Unsupported number of players: {self.players}")
        # Player two spawns two cells left of the centre column.
        if self.players == 2 and self.width < 4:
            raise ValueError("Board too narrow for two players")
        return self
