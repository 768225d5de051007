"""Gymnasium-compatible wrapper for headless play.

Each ``step`` requests one direction per snake and advances the engine by a
single tick, so agents see exactly the rules the keyboard game uses: requests
go through the same reversal check before the tick is applied.

Observation is a flat ``float32`` vector of ``width * height`` cell codes from
:func:`snake_duel.utils.render_grid`, scaled into ``[0, 1]``.

Action space is ``MultiDiscrete([4] * players)``; index ``i`` picks player
``i``'s direction in :class:`~snake_duel.direction.Direction` order (up, down,
left, right).

Rewards are from player one's point of view: ``apple_reward`` for every apple
it eats, ``win_reward`` or ``-win_reward`` when the game ends with a winner and
``0`` for a tie.  In single-player games crashing costs ``win_reward``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

import numpy as np

import gymnasium as gym
from gymnasium import spaces

from . import engine
from .config import GameConfig
from .direction import Direction
from .game_state import GameState, Outcome
from .input_map import change_direction
from .render import render_text
from .utils import APPLE, render_grid

DIRECTIONS = list(Direction)


class SnakeDuelEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 1000 // 150,
    }

    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        apple_reward: float = 1.0,
        win_reward: float = 10.0,
        max_steps: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.config = (config or GameConfig()).validate()
        self.apple_reward = apple_reward
        self.win_reward = win_reward
        self.action_space = spaces.MultiDiscrete([len(DIRECTIONS)] * self.config.players)
        self._obs_size = self.config.width * self.config.height
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self._obs_size,), dtype=np.float32
        )
        self._state: Optional[GameState] = None
        self._steps = 0
        self._max_steps = max_steps

    @property
    def state(self) -> GameState:
        if self._state is None:
            self._state = GameState.new(self.config)
        return self._state

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        config = self.config
        if seed is not None:
            config = replace(config, seed=seed)
        self._state = GameState.new(config)
        self._steps = 0
        return self._observe(), self._info()

    def step(self, action):
        state = self.state
        if state.game_over:
            return self._observe(), 0.0, True, False, self._info()

        for player, index in enumerate(np.asarray(action).reshape(-1)[: len(state.snakes)]):
            change_direction(state, player, DIRECTIONS[int(index)])

        length_before = len(state.snakes[0])
        engine.tick(state)
        self._steps += 1

        reward = 0.0
        if len(state.snakes[0]) > length_before:
            reward += self.apple_reward
        if state.outcome is Outcome.PLAYER_ONE_WINS:
            reward += self.win_reward
        elif state.outcome is Outcome.PLAYER_TWO_WINS:
            reward -= self.win_reward
        elif state.game_over and not state.two_player:
            reward -= self.win_reward

        terminated = state.game_over
        truncated = False
        if self._max_steps is not None and self._steps >= self._max_steps:
            truncated = True
        return self._observe(), float(reward), terminated, truncated, self._info()

    def render(self):
        return render_text(self.state)

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observe(self) -> np.ndarray:
        grid = render_grid(self.state).astype(np.float32) / float(APPLE)
        return grid.reshape(-1)

    def _info(self) -> Dict:
        state = self.state
        return {
            "lengths": [len(snake) for snake in state.snakes],
            "apple": state.apple,
            "ticks": state.ticks,
            "outcome": state.outcome.value if state.outcome else None,
        }
