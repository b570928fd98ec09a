# sweeper/grid.py

from .errors import ConfigurationError


NEIGHBORS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1), (1, 0), (1, 1)
]

ORTHOGONAL = [(1, 0), (-1, 0), (0, 1), (0, -1)]


class Cell:
    __slots__ = ("is_mine", "adjacent_mines", "is_flagged", "is_revealed", "region_id")

    def __init__(self):
        self.is_mine: bool = False
        self.adjacent_mines: int = 0
        self.is_flagged: bool = False
        self.is_revealed: bool = False
        self.region_id: int | None = None

    @property
    def is_blank(self) -> bool:
        return not self.is_mine and self.adjacent_mines == 0

    @property
    def is_edge(self) -> bool:
        return not self.is_mine and self.adjacent_mines > 0

    def __repr__(self):
        return (
            f"Cell(mine={self.is_mine}, adjacent={self.adjacent_mines}, "
            f"flagged={self.is_flagged}, revealed={self.is_revealed}, region={self.region_id})"
        )


class Grid:
    """
    Square matrix of cells with side ``size`` and exactly ``mine_count`` mines.

    Only the generator writes mines and counts; during play the reveal engine
    and the owning session flip ``is_revealed`` / ``is_flagged``.
    """

    def __init__(self, size: int, mine_count: int):
        validate_dimensions(size, mine_count)
        self.size = size
        self.mine_count = mine_count
        self.cells = [[Cell() for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_mines(cls, size: int, mines) -> "Grid":
        """
        Build a grid with mines at the given (row, col) coordinates.
        Used for deterministic boards in tests and tooling.
        """
        coords = set(mines)
        grid = cls(size, len(coords))
        for row, col in coords:
            if not grid.is_valid_coord(row, col):
                raise ConfigurationError(f"Mine at ({row}, {col}) is outside a {size}x{size} grid")
            grid.place_mine(row, col)
        return grid

    def is_valid_coord(self, row, col) -> bool:
        for value in (row, col):
            if not isinstance(value, int) or isinstance(value, bool):
                return False
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def neighbors(self, row: int, col: int, mask=NEIGHBORS):
        for dr, dc in mask:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield nr, nc

    def coords(self):
        """Row-major iteration over every coordinate."""
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def place_mine(self, row: int, col: int):
        cell = self.cells[row][col]
        cell.is_mine = True
        # counts are commutative, so increment as each mine lands
        for nr, nc in self.neighbors(row, col):
            self.cells[nr][nc].adjacent_mines += 1

    def clear_play_state(self):
        """Hide and unflag every cell and drop region tags, keeping the mine layout."""
        for row in self.cells:
            for cell in row:
                cell.is_revealed = False
                cell.is_flagged = False
                cell.region_id = None

    @property
    def safe_cell_count(self) -> int:
        return self.size * self.size - self.mine_count

    def revealed_safe_count(self) -> int:
        return sum(
            1 for r, c in self.coords()
            if self.cells[r][c].is_revealed and not self.cells[r][c].is_mine
        )

    def is_complete(self) -> bool:
        return self.revealed_safe_count() == self.safe_cell_count

    def debug_string(self) -> str:
        lines = []
        for r in range(self.size):
            row = ""
            for c in range(self.size):
                cell = self.cells[r][c]
                if cell.is_flagged:
                    row += " F "
                elif cell.is_mine:
                    row += " * "
                else:
                    row += f" {cell.adjacent_mines} "
            lines.append(row)
        return "\n".join(lines)


def validate_dimensions(size, mine_count):
    if not isinstance(size, int) or size <= 0:
        raise ConfigurationError(f"Board size must be a positive integer, got {size!r}")
    if not isinstance(mine_count, int) or mine_count < 0:
        raise ConfigurationError(f"Mine count must be a non-negative integer, got {mine_count!r}")
    if mine_count >= size * size:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines on a {size}x{size} board: "
            f"at least one cell must be safe."
        )
