# tests/test_api.py

import threading
import unittest

import numpy as np

from sweeper.api import SweeperAPI
from sweeper.grid import Grid
from sweeper.snapshot import FALSE_FLAG, FLAGGED, HIDDEN, MINE, Status


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class TestSweeperAPI(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.api = SweeperAPI(seed=3, clock=self.clock)
        self.api.session.load_grid(Grid.from_mines(3, [(0, 0)]))

    def test_round_trip_through_api(self):
        state = self.api.click(2, 2)
        self.assertEqual(state.status, Status.WON)
        self.assertEqual(state.bbbv, 1)

    def test_new_game_switches_level(self):
        state = self.api.new_game("medium")
        self.assertEqual(state.level, "medium")
        self.assertEqual(state.flags_remaining, 48)

    def test_encoded_board_while_playing(self):
        self.api.toggle_flag(0, 0)
        state = self.api.click(0, 1)
        board = state.encoded_board()
        self.assertIsInstance(board, np.ndarray)
        self.assertEqual(board.shape, (3, 3))
        self.assertEqual(board[0, 0], FLAGGED)
        self.assertEqual(board[0, 1], 1)
        self.assertEqual(board[2, 2], HIDDEN)

    def test_encoded_board_after_loss(self):
        self.api.toggle_flag(2, 2)
        state = self.api.click(0, 0)
        board = state.encoded_board()
        self.assertEqual(board[0, 0], MINE)
        self.assertEqual(board[2, 2], FALSE_FLAG)

    def test_to_dict(self):
        data = self.api.tick().to_dict()
        self.assertEqual(data["status"], "ready")
        self.assertEqual(data["dimensions"], (3, 3))
        self.assertEqual(data["board"], [[HIDDEN] * 3] * 3)
        self.assertIsNone(data["score"])

    def test_scheduled_ticks_reach_callback(self):
        ticked = threading.Event()
        snapshots = []

        def on_tick(snapshot):
            snapshots.append(snapshot)
            ticked.set()

        api = SweeperAPI(tick_interval=0.01, on_tick=on_tick)
        api.session.load_grid(Grid.from_mines(3, [(0, 0)]))
        api.click(0, 1)
        try:
            self.assertTrue(ticked.wait(2.0))
        finally:
            api.new_game()
        self.assertEqual(snapshots[0].status, Status.PLAYING)
        self.assertFalse(api.session.timer.running)


if __name__ == "__main__":
    unittest.main()
