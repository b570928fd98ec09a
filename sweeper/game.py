# sweeper/game.py

import logging
import threading
import time

from .board import BoardGenerator
from .errors import ConfigurationError
from .grid import Grid, validate_dimensions
from .levels import Level, load_levels
from .regions import RegionAnalyzer
from .reveal import RevealEngine, RevealOutcome
from .snapshot import CellView, SessionSnapshot, Status
from .timer import GameTimer

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns one board and drives it through READY -> PLAYING -> WON / LOST.

    Every action returns a SessionSnapshot. Actions that make no sense in
    the current state (out of bounds, flagged target, finished game, empty
    flag budget) are ignored and simply return the unchanged snapshot.
    """

    def __init__(
        self,
        level=Level.EASY,
        seed: int = None,
        clock=time.monotonic,
        tick_interval: float | None = None,
        levels: dict | None = None,
    ):
        self.levels = levels if levels is not None else load_levels()
        self.generator = BoardGenerator(seed=seed)
        self.analyzer = RegionAnalyzer()
        self.engine = RevealEngine()
        self.timer = GameTimer(clock=clock, interval=tick_interval, on_tick=self.tick)
        self._lock = threading.RLock()

        self.level = None
        self.grid = None
        self.reset(level)

    def reset(self, level=None, size: int | None = None, mines: int | None = None) -> SessionSnapshot:
        """
        Start a new game.

        With no arguments the current level (or custom board) is replayed on
        a fresh board. Passing ``size`` and ``mines`` starts a custom board
        outside the difficulty table. Bad settings raise ConfigurationError
        before the running game is touched.
        """
        if size is not None or mines is not None:
            if size is None or mines is None:
                raise ConfigurationError("A custom board needs both size and mines")
            level = None
        elif level is None:
            level = self.level
            if level is None:
                if self.grid is None:
                    raise ConfigurationError("No level given and no previous game to replay")
                size, mines = self.grid.size, self.grid.mine_count
        if level is not None:
            level = Level.parse(level)
            config = self.levels[level]
            size, mines = config.size, config.mines

        validate_dimensions(size, mines)
        with self._lock:
            grid = self.generator.generate(size, mines)
            self._install(grid, level)
            return self.snapshot()

    def load_grid(self, grid: Grid, level=None) -> SessionSnapshot:
        """
        Start a new game on a prebuilt grid instead of a random one.
        The mine layout is kept; any earlier play on the grid is cleared.
        """
        level = Level.parse(level) if level is not None else None
        with self._lock:
            grid.clear_play_state()
            self._install(grid, level)
            return self.snapshot()

    def _install(self, grid: Grid, level):
        self.timer.stop()

        analysis = self.analyzer.analyze(grid)
        self.grid = grid
        self.level = level
        self.size = grid.size
        self.mine_count = grid.mine_count
        self.bbbv = analysis.bbbv
        self.region_count = analysis.region_count
        self.flags_remaining = grid.mine_count
        self.elapsed_seconds = 0
        self.moves_made = 0
        self.status = Status.READY
        logger.info(
            "New game: level=%s size=%d mines=%d 3BV=%d",
            level.value if level else "custom", grid.size, grid.mine_count, self.bbbv
        )

    def click(self, row: int, col: int) -> SessionSnapshot:
        with self._lock:
            if self.status not in (Status.READY, Status.PLAYING):
                logger.debug("Ignoring click on finished game (%s)", self.status.value)
                return self.snapshot()
            if not self.grid.is_valid_coord(row, col):
                logger.debug("Ignoring click outside the board at (%r, %r)", row, col)
                return self.snapshot()
            cell = self.grid.cell(row, col)
            if cell.is_flagged or cell.is_revealed:
                return self.snapshot()

            if self.status is Status.READY:
                self.status = Status.PLAYING
                self.timer.start()

            outcome = self.engine.reveal(self.grid, row, col)
            self.moves_made += 1

            if outcome is RevealOutcome.MINE:
                self._finish(Status.LOST)
            elif self.grid.is_complete():
                self._finish(Status.WON)
            return self.snapshot()

    def toggle_flag(self, row: int, col: int) -> SessionSnapshot:
        with self._lock:
            if self.status not in (Status.READY, Status.PLAYING):
                return self.snapshot()
            if not self.grid.is_valid_coord(row, col):
                return self.snapshot()
            cell = self.grid.cell(row, col)
            if cell.is_revealed:
                return self.snapshot()

            if cell.is_flagged:
                cell.is_flagged = False
                self.flags_remaining += 1
            elif self.flags_remaining > 0:
                cell.is_flagged = True
                self.flags_remaining -= 1
            else:
                logger.debug("Flag budget exhausted, ignoring flag at (%d, %d)", row, col)
            return self.snapshot()

    def tick(self) -> SessionSnapshot:
        with self._lock:
            if self.status is Status.PLAYING:
                self.elapsed_seconds = self.timer.elapsed_seconds()
            return self.snapshot()

    def _finish(self, status: Status):
        self.elapsed_seconds = self.timer.elapsed_seconds()
        self.timer.stop()
        self.status = status
        logger.info(
            "Game %s after %ds and %d moves (3BV=%d)",
            status.value, self.elapsed_seconds, self.moves_made, self.bbbv
        )

    @property
    def revealed_count(self) -> int:
        return self.grid.revealed_safe_count()

    def get_score(self) -> float | None:
        """
        3BV/s for a won game. A win inside the first second counts as one
        second so the score stays finite.
        """
        if self.status is not Status.WON:
            return None
        return self.bbbv / max(self.elapsed_seconds, 1)

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            game_over = self.status.is_terminal
            cells = tuple(
                tuple(self._view(self.grid.cell(r, c), game_over) for c in range(self.size))
                for r in range(self.size)
            )
            return SessionSnapshot(
                status=self.status,
                level=self.level.value if self.level else None,
                size=self.size,
                mine_count=self.mine_count,
                flags_remaining=self.flags_remaining,
                elapsed_seconds=self.elapsed_seconds,
                bbbv=self.bbbv,
                moves_made=self.moves_made,
                cells=cells,
                score=self.get_score(),
            )

    @staticmethod
    def _view(cell, game_over: bool) -> CellView:
        return CellView(
            revealed=cell.is_revealed,
            flagged=cell.is_flagged,
            mine=cell.is_mine if game_over else None,
            count=cell.adjacent_mines if cell.is_revealed and not cell.is_mine else None,
        )
