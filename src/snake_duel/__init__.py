"""Two-player Snake played in the terminal on a fixed-tick loop."""

from .board import Board, generate_apple
from .config import GameConfig
from .direction import Direction, is_opposite, shift
from .game_state import GameState, Outcome, Snake
from .engine import tick
from .errors import TerminalError
from .input_map import Key, change_direction, handle_key, request_quit
from .loop import GameLoop
from .render import render_lines, summary_message
from .utils import render_grid

__all__ = [
    "Board",
    "GameConfig",
    "Direction",
    "GameState",
    "GameLoop",
    "Key",
    "Outcome",
    "Snake",
    "TerminalError",
    "change_direction",
    "generate_apple",
    "handle_key",
    "is_opposite",
    "render_grid",
    "render_lines",
    "request_quit",
    "shift",
    "summary_message",
    "tick",
]
