"""Text frames and the end-of-game summary."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .game_state import GameState, Outcome
from .utils import APPLE, EMPTY, SNAKE_ONE, SNAKE_TWO, render_grid


# Every cell is two characters wide so the board looks roughly square.
GLYPHS = {
    EMPTY: "  ",
    SNAKE_ONE: "██",
    SNAKE_TWO: "██",
    APPLE: "@@",
}

OUTCOME_MESSAGES: Dict[Outcome, str] = {
    Outcome.PLAYER_ONE_WINS: "Player 1 wins!",
    Outcome.PLAYER_TWO_WINS: "Player 2 wins!",
    Outcome.TIE: "It's a tie!",
    Outcome.UNDETERMINED: "No winner.",
}


def frame_size(width: int, height: int) -> Tuple[int, int]:
    """Return the (rows, columns) taken by the bordered frame of a board."""

    return height + 2, 2 * width + 2


def render_lines(state: GameState) -> List[str]:
    """Return the bordered board as a list of text rows."""

    edge = "+" + "--" * state.width + "+"
    lines = [edge]
    for row in render_grid(state):
        lines.append("|" + "".join(GLYPHS[int(value)] for value in row) + "|")
    lines.append(edge)
    return lines


def render_text(state: GameState) -> str:
    return "\n".join(render_lines(state))


def summary_message(state: GameState) -> str:
    """Return the line printed once the game has ended."""

    if not state.two_player:
        return "Game Over!"
    outcome = state.outcome or Outcome.UNDETERMINED
    return f"Game Over! {OUTCOME_MESSAGES[outcome]}"
