"""High level game state container."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, List, Optional, Set
import random

from .board import Board, generate_apple
from .config import GameConfig
from .direction import Direction, Position


class Outcome(str, Enum):
    """Result of a two-player game, decided on the tick that ends it."""

    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    TIE = "tie"
    UNDETERMINED = "undetermined"


@dataclass
class Snake:
    """A snake on the board.

    ``body`` runs from the head at index 0 to the tail at the end.
    ``direction`` is the heading used by the last tick while ``pending`` is the
    heading requested for the next one.
    """

    body: Deque[Position]
    direction: Direction
    pending: Direction
    alive: bool = True
    death_reason: Optional[str] = None  # 'wall', 'self' or 'collision'

    @classmethod
    def spawn(cls, positions: Iterable[Position], direction: Direction) -> "Snake":
        return cls(body=deque(positions), direction=direction, pending=direction)

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)


@dataclass
class GameState:
    """Mutable state for one game session.

    The engine mutates the state once per tick and the input mapper only
    touches the pending directions.  Once ``game_over`` is set neither of them
    changes anything any more.
    """

    width: int
    height: int
    snakes: List[Snake]
    apple: Optional[Position] = None
    game_over: bool = False
    outcome: Optional[Outcome] = None
    ticks: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> "GameState":
        """Create the starting position described by ``config``.

        Player one starts in the centre heading right.  In two-player games
        player two starts two cells to its left heading left, so the snakes
        move apart on the first tick.
        """

        config = (config or GameConfig()).validate()
        cx, cy = config.width // 2, config.height // 2
        snakes = [Snake.spawn([(cx, cy)], Direction.RIGHT)]
        if config.players == 2:
            snakes.append(Snake.spawn([(cx - 2, cy)], Direction.LEFT))
        state = cls(
            width=config.width,
            height=config.height,
            snakes=snakes,
            rng=random.Random(config.seed),
        )
        state.apple = generate_apple(
            state.board, (snake.body for snake in state.snakes), state.rng
        )
        return state

    @property
    def board(self) -> Board:
        return Board(self.width, self.height)

    @property
    def two_player(self) -> bool:
        return len(self.snakes) == 2

    def occupied(self) -> Set[Position]:
        """Return every cell covered by any snake."""

        cells: Set[Position] = set()
        for snake in self.snakes:
            cells.update(snake.body)
        return cells
