import random
from typing import Optional, Sequence

from snake_duel.direction import Direction, Position
from snake_duel.game_state import GameState, Snake


def make_state(
    *snakes: Snake,
    apple: Optional[Position] = (0, 0),
    width: int = 20,
    height: int = 10,
    seed: int = 0,
) -> GameState:
    return GameState(
        width=width,
        height=height,
        snakes=list(snakes),
        apple=apple,
        rng=random.Random(seed),
    )


def snake(body: Sequence[Position], direction: Direction) -> Snake:
    return Snake.spawn(body, direction)


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current
