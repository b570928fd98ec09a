# sweeper/api.py

import time

from .game import GameSession
from .levels import Level
from .snapshot import SessionSnapshot


class SweeperAPI:
    """
    The surface a view layer talks to. It forwards cell clicks, flag
    toggles, level changes and timer ticks, and gets back snapshots; the
    board itself never leaves the session.
    """

    def __init__(self, level=Level.EASY, seed: int = None, clock=time.monotonic,
                 tick_interval: float | None = None, on_tick=None):
        """
        tick_interval / on_tick:
            When both are set the session ticks itself every ``tick_interval``
            seconds while a game is running and hands each fresh snapshot
            to ``on_tick`` (e.g. to redraw the clock).
        """
        self._on_tick = on_tick
        self.session = GameSession(
            level=level,
            seed=seed,
            clock=clock,
            tick_interval=tick_interval if on_tick is not None else None,
        )
        if on_tick is not None:
            self.session.timer.on_tick = self._scheduled_tick

    def new_game(self, level=None) -> SessionSnapshot:
        return self.session.reset(level)

    def click(self, row: int, col: int) -> SessionSnapshot:
        return self.session.click(row, col)

    def toggle_flag(self, row: int, col: int) -> SessionSnapshot:
        return self.session.toggle_flag(row, col)

    def tick(self) -> SessionSnapshot:
        return self.session.tick()

    def state(self) -> SessionSnapshot:
        return self.session.snapshot()

    def _scheduled_tick(self):
        self._on_tick(self.session.tick())
