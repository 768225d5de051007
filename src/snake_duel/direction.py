"""Movement directions and the single-cell step rule.

Coordinates are ``(x, y)`` with ``x`` growing to the right and ``y`` growing
downwards, matching the order in which the terminal draws rows.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Position = Tuple[int, int]


class Direction(str, Enum):
    """Enumeration of the four movement directions."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return ``True`` if ``b`` is the exact 180 degree reversal of ``a``."""

    return OPPOSITE[a] is b


def shift(position: Position, direction: Direction) -> Position:
    """Return ``position`` moved one cell in ``direction``.

    Decreasing a coordinate saturates at ``0``: moving up from ``y == 0`` or
    left from ``x == 0`` leaves the coordinate unchanged.  Increasing a
    coordinate is never clamped, so the result may lie past the right or bottom
    edge of the board and it is up to the caller to treat that as a wall.
    """

    x, y = position
    if direction is Direction.UP:
        return (x, max(y - 1, 0))
    if direction is Direction.DOWN:
        return (x, y + 1)
    if direction is Direction.LEFT:
        return (max(x - 1, 0), y)
    return (x + 1, y)
