# sweeper/reveal.py

import logging
from enum import Enum

from .grid import Grid, ORTHOGONAL

logger = logging.getLogger(__name__)


class RevealOutcome(Enum):
    SAFE = "safe"
    MINE = "mine"


class RevealEngine:
    def reveal(self, grid: Grid, row: int, col: int) -> RevealOutcome:
        """
        Reveal behavior:
        - already revealed → nothing changes
        - mine → the cell is revealed and MINE is returned
        - number (1-8) → only this cell is revealed
        - blank → flood fill through orthogonally connected blanks, then
          reveal every numbered cell touching (8-way) the opened blanks.
          Flagged cells are never opened by the fill.

        The caller is responsible for refusing clicks on flagged cells.
        """
        target = grid.cells[row][col]
        if target.is_revealed:
            return RevealOutcome.MINE if target.is_mine else RevealOutcome.SAFE

        target.is_revealed = True
        if target.is_mine:
            return RevealOutcome.MINE
        if target.adjacent_mines > 0:
            return RevealOutcome.SAFE

        opened = self._flood(grid, row, col)
        edges = self._open_borders(grid, opened)
        logger.debug("Flood fill from (%d, %d) opened %d blanks and %d edges", row, col, len(opened), edges)
        return RevealOutcome.SAFE

    def _flood(self, grid: Grid, row: int, col: int):
        opened = [(row, col)]
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            for nr, nc in grid.neighbors(r, c, ORTHOGONAL):
                neighbor = grid.cells[nr][nc]
                if neighbor.is_blank and not neighbor.is_revealed and not neighbor.is_flagged:
                    neighbor.is_revealed = True
                    opened.append((nr, nc))
                    stack.append((nr, nc))
        return opened

    def _open_borders(self, grid: Grid, opened) -> int:
        count = 0
        for r, c in opened:
            for nr, nc in grid.neighbors(r, c):
                neighbor = grid.cells[nr][nc]
                if neighbor.is_edge and not neighbor.is_revealed and not neighbor.is_flagged:
                    neighbor.is_revealed = True
                    count += 1
        return count
