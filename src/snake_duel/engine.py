"""Simulation engine advancing a :class:`GameState` one tick at a time.

A tick resolves in two phases.  First every snake's candidate head is checked
against the board edges and the bodies as they were *before* anyone moved.  If
any candidate is fatal the game ends on the spot: nobody moves and the apple
stays where it is.  Otherwise all snakes advance together, growing when their
new head lands on the apple, and the apple is placed again once.

Game conditions never raise; they are reported through ``state.game_over``,
``state.outcome`` and each snake's ``death_reason``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .board import Board, generate_apple
from .direction import Position, shift
from .game_state import GameState, Outcome, Snake


LOGGER = logging.getLogger(__name__)


def candidate_head(snake: Snake) -> Position:
    """Return the cell ``snake``'s head moves into with its current heading."""

    return shift(snake.head, snake.direction)


def collision_reason(
    board: Board,
    snake: Snake,
    head: Position,
    others: Sequence[Tuple[Snake, Position]],
) -> Optional[str]:
    """Return why ``head`` would kill ``snake``, or ``None`` if it is safe.

    ``others`` pairs each opponent with its own candidate head.  Two snakes
    moving head-on into each other's head cell swap places instead of
    colliding.
    """

    if not board.in_bounds(head):
        return "wall"
    if head in snake.body:
        return "self"
    for other, other_head in others:
        if head == other.head and other_head == snake.head:
            continue
        if head in other.body:
            return "collision"
    return None


def resolve_outcome(snakes: Sequence[Snake], fatal: Sequence[bool]) -> Optional[Outcome]:
    """Decide the two-player result once at least one snake has crashed.

    A single crash hands the win to the other player.  When both crash on the
    same tick the longer snake wins and equal lengths are a tie.  Single-player
    games have no outcome.
    """

    if len(snakes) != 2:
        return None
    one, two = snakes
    if fatal[0] and not fatal[1]:
        return Outcome.PLAYER_TWO_WINS
    if fatal[1] and not fatal[0]:
        return Outcome.PLAYER_ONE_WINS
    if len(one) > len(two):
        return Outcome.PLAYER_ONE_WINS
    if len(two) > len(one):
        return Outcome.PLAYER_TWO_WINS
    return Outcome.TIE


def tick(state: GameState) -> GameState:
    """Advance ``state`` by one simulation step in place and return it."""

    if state.game_over:
        return state

    board = state.board
    for snake in state.snakes:
        snake.direction = snake.pending

    heads: List[Position] = [candidate_head(snake) for snake in state.snakes]
    reasons: List[Optional[str]] = []
    for index, (snake, head) in enumerate(zip(state.snakes, heads)):
        others = [
            (other, other_head)
            for i, (other, other_head) in enumerate(zip(state.snakes, heads))
            if i != index
        ]
        reasons.append(collision_reason(board, snake, head, others))

    fatal = [reason is not None for reason in reasons]
    if any(fatal):
        for snake, reason in zip(state.snakes, reasons):
            if reason is not None:
                snake.alive = False
                snake.death_reason = reason
        state.game_over = True
        state.outcome = resolve_outcome(state.snakes, fatal)
        LOGGER.info(
            "Game over after %d ticks: %s (outcome: %s)",
            state.ticks,
            ", ".join(str(r) for r in reasons),
            state.outcome.value if state.outcome else "none",
        )
        return state

    # Every snake compares against the same pre-tick apple.
    apple = state.apple
    eaten = False
    for snake, head in zip(state.snakes, heads):
        snake.body.appendleft(head)
        if head == apple:
            eaten = True
        else:
            snake.body.pop()

    if eaten:
        state.apple = generate_apple(
            board, (snake.body for snake in state.snakes), state.rng
        )
    state.ticks += 1
    return state
