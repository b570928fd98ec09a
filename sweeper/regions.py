# sweeper/regions.py

"""
Region analysis and the 3BV score.

3BV ("Bechtel's Board Benchmark Value") is the minimum number of clicks a
perfect player needs to clear a board. Every connected patch of blank cells
opens with one click, together with the numbered cells bordering it; every
numbered cell not bordering any blank patch needs a click of its own.
"""

import logging
from collections import deque
from dataclasses import dataclass

from .grid import Grid, ORTHOGONAL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionAnalysis:
    region_count: int
    dilated_cells: int
    remaining_clicks: int
    bbbv: int


class RegionAnalyzer:
    """
    Partitions a freshly generated grid into blank regions and tags each
    cell with its ``region_id``.

    Regions are discovered in row-major order and each one is fully filled
    and dilated before the scan moves on, so an edge cell touching two
    regions belongs to whichever region the scan reached first.
    """

    def analyze(self, grid: Grid) -> RegionAnalysis:
        for row in grid.cells:
            for cell in row:
                cell.region_id = None

        region_count = 0
        for row, col in grid.coords():
            cell = grid.cells[row][col]
            if cell.region_id is None and cell.is_blank:
                members = self._fill(grid, row, col, region_count)
                self._dilate(grid, members, region_count)
                region_count += 1

        dilated = sum(1 for r, c in grid.coords() if grid.cells[r][c].region_id is not None)
        remaining = grid.safe_cell_count - dilated
        result = RegionAnalysis(
            region_count=region_count,
            dilated_cells=dilated,
            remaining_clicks=remaining,
            bbbv=region_count + remaining,
        )
        logger.debug(
            "Board analysis: %d regions, %d dilated cells, %d single clicks, 3BV=%d",
            result.region_count, result.dilated_cells, result.remaining_clicks, result.bbbv
        )
        return result

    def _fill(self, grid: Grid, row: int, col: int, region: int):
        """Assign ``region`` to every unassigned blank reachable orthogonally from (row, col)."""
        grid.cells[row][col].region_id = region
        members = [(row, col)]
        queue = deque(members)
        while queue:
            r, c = queue.popleft()
            for nr, nc in grid.neighbors(r, c, ORTHOGONAL):
                neighbor = grid.cells[nr][nc]
                if neighbor.region_id is None and neighbor.is_blank:
                    neighbor.region_id = region
                    members.append((nr, nc))
                    queue.append((nr, nc))
        return members

    def _dilate(self, grid: Grid, members, region: int):
        for r, c in members:
            for nr, nc in grid.neighbors(r, c):
                neighbor = grid.cells[nr][nc]
                # first region to reach a shared edge keeps it
                if neighbor.is_edge and neighbor.region_id is None:
                    neighbor.region_id = region
