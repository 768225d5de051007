import pytest

from helpers import make_state, snake
from snake_duel.direction import Direction
from snake_duel.game_state import GameState


@pytest.fixture
def duel() -> GameState:
    """Two single-cell snakes in the middle of a 20x10 board moving apart."""

    return make_state(
        snake([(10, 5)], Direction.RIGHT),
        snake([(8, 5)], Direction.LEFT),
    )
