"""Board geometry and cell occupancy for the playfield."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .direction import Position


LOGGER = logging.getLogger(__name__)

# Dimensions of the default playfield, in cells.
WIDTH = 20
HEIGHT = 10

Grid = NDArray[np.uint8]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty occupancy grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size rectangle of cells addressed as ``(x, y)``."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height

    def in_bounds(self, position: Position) -> bool:
        """Return ``True`` if ``position`` lies inside ``[0, W) x [0, H)``."""

        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, bodies: Iterable[Sequence[Position]]) -> Grid:
        """Return a grid with ``1`` on every cell covered by one of ``bodies``.

        Cells outside the board are ignored.  The returned array is indexed as
        ``grid[y, x]``.
        """

        grid = create_empty_grid(self.width, self.height)
        for body in bodies:
            for position in body:
                if self.in_bounds(position):
                    x, y = position
                    grid[y, x] = 1
        return grid

    def free_cells(self, grid: Grid) -> List[Position]:
        """Return the ``(x, y)`` coordinates of every zero cell in ``grid``."""

        rows, cols = np.nonzero(grid == 0)
        return [(int(x), int(y)) for y, x in zip(rows, cols)]


def generate_apple(
    board: Board, bodies: Iterable[Sequence[Position]], rng: random.Random
) -> Optional[Position]:
    """Return a cell chosen uniformly among those free of every body.

    Returns ``None`` when the bodies cover the whole board.
    """

    free = board.free_cells(board.occupancy(bodies))
    if not free:
        LOGGER.debug("No free cell left for the apple")
        return None
    apple = rng.choice(free)
    LOGGER.debug("Apple placed at %s", apple)
    return apple
