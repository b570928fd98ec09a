# sweeper/board.py

import logging
import random

from .grid import Grid, validate_dimensions

logger = logging.getLogger(__name__)


class BoardGenerator:
    def __init__(self, seed=None, rng: random.Random | None = None):
        """
        seed:
            Seeds a private random.Random so boards are reproducible without
            touching the module-level generator.
        rng:
            An explicit generator; takes precedence over ``seed``.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, size: int, mine_count: int) -> Grid:
        """
        Build a size x size grid with exactly mine_count mines.

        Mines are placed by rejection sampling: pick a uniformly random cell,
        resample if it already holds a mine. Terminates because at least one
        cell is always left safe, though it slows down as the board fills.
        """
        validate_dimensions(size, mine_count)

        grid = Grid(size, mine_count)
        placed = 0
        while placed < mine_count:
            row = self.rng.randrange(size)
            col = self.rng.randrange(size)
            if grid.cells[row][col].is_mine:
                continue
            grid.place_mine(row, col)
            placed += 1

        logger.debug("Generated %dx%d board with %d mines", size, size, mine_count)
        return grid
