"""Utility helpers shared by the front-ends."""

from __future__ import annotations

import numpy as np

from .board import Grid, create_empty_grid
from .game_state import GameState


EMPTY = 0
SNAKE_ONE = 1
SNAKE_TWO = 2
APPLE = 3

SNAKE_VALUES = (SNAKE_ONE, SNAKE_TWO)


def render_grid(state: GameState) -> Grid:
    """Return a ``(height, width)`` array of cell codes for ``state``.

    Renderers and the headless environment draw from this single array rather
    than walking the snakes themselves.  Snakes are drawn over the apple so a
    stale apple under a head never hides the snake.
    """

    grid = create_empty_grid(state.width, state.height)
    if state.apple is not None:
        ax, ay = state.apple
        grid[ay, ax] = np.uint8(APPLE)
    for value, snake in zip(SNAKE_VALUES, state.snakes):
        for x, y in snake.body:
            if 0 <= x < state.width and 0 <= y < state.height:
                grid[y, x] = np.uint8(value)
    return grid
