# sweeper/timer.py

import logging
import math
import threading
import time

logger = logging.getLogger(__name__)

MAX_DISPLAY_SECONDS = 999


class GameTimer:
    """
    Elapsed-time tracker for one game, optionally driving a periodic tick.

    Every start() bumps ``generation``; a scheduled tick only fires when its
    generation is still current and the timer is running, so a tick that was
    already in flight when the game ended is dropped.
    """

    def __init__(self, clock=time.monotonic, interval: float | None = None, on_tick=None):
        self.clock = clock
        self.interval = interval
        self.on_tick = on_tick
        self.started_at: float | None = None
        self.running = False
        self.generation = 0
        self._handle: threading.Timer | None = None
        self._lock = threading.Lock()

    def start(self):
        with self._lock:
            self._cancel_pending()
            self.generation += 1
            self.started_at = self.clock()
            self.running = True
            self._schedule(self.generation)

    def stop(self):
        with self._lock:
            self.running = False
            self._cancel_pending()

    def elapsed_seconds(self, now: float | None = None) -> int:
        if self.started_at is None:
            return 0
        now = self.clock() if now is None else now
        elapsed = max(0, math.floor(now - self.started_at))
        return min(elapsed, MAX_DISPLAY_SECONDS)

    def _schedule(self, generation: int):
        if self.interval is None or self.on_tick is None:
            return
        handle = threading.Timer(self.interval, self._fire, args=(generation,))
        handle.daemon = True
        self._handle = handle
        handle.start()

    def _cancel_pending(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, generation: int):
        with self._lock:
            if not self.running or generation != self.generation:
                logger.debug("Dropping stale tick from generation %d", generation)
                return
            self._schedule(generation)
        self.on_tick()
