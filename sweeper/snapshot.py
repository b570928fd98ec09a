# sweeper/snapshot.py

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Status(Enum):
    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (Status.WON, Status.LOST)


# Encoded board values, as consumed by agents and renderers
HIDDEN = -3
FLAGGED = -2
MINE = -1
FALSE_FLAG = -4


@dataclass(frozen=True)
class CellView:
    revealed: bool
    flagged: bool
    mine: bool | None = None   # only known once the game is over
    count: int | None = None   # only known once revealed

    def encode(self) -> int:
        if self.mine is not None:
            if self.flagged:
                return FLAGGED if self.mine else FALSE_FLAG
            if self.mine:
                return MINE
        if self.flagged:
            return FLAGGED
        if not self.revealed:
            return HIDDEN
        return self.count


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Read-only projection of a game session. Renderers consume this and
    nothing else; mutating it has no effect on the game.
    """
    status: Status
    level: str | None
    size: int
    mine_count: int
    flags_remaining: int
    elapsed_seconds: int
    bbbv: int
    moves_made: int
    cells: tuple
    score: float | None = None

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]

    def encoded_board(self) -> np.ndarray:
        """
        Encode the board for numeric consumers:
            -3 hidden, -2 flagged, -1 mine (game over),
            -4 wrongly flagged safe cell (game over), 0-8 revealed counts
        """
        return np.array([[cell.encode() for cell in row] for row in self.cells], dtype=int)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "level": self.level,
            "dimensions": (self.size, self.size),
            "num_mines": self.mine_count,
            "flags_remaining": self.flags_remaining,
            "elapsed_seconds": self.elapsed_seconds,
            "bbbv": self.bbbv,
            "moves_made": self.moves_made,
            "score": self.score,
            "board": self.encoded_board().tolist(),
        }
