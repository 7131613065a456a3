from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


# (dx, dy) offsets of the eight surrounding cells: NW, N, NE, W, E, SW, S, SE.
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


@dataclass(slots=True)
class Board:
    """Fixed-size toroidal Game of Life grid.

    Cells are addressed as (x, y) with ``0 <= x < cols`` and ``0 <= y < rows``
    and stored row-major in ``cells[y][x]``. The left/right columns and the
    top/bottom rows are adjacent, so every cell has exactly eight neighbours.
    Coordinates are not range-checked; callers wrap pointer-derived indices
    with :meth:`wrap` first.
    """

    cols: int
    rows: int
    cells: List[List[bool]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"board dimensions must be positive, got {self.cols}x{self.rows}")
        self.cells = [[False] * self.cols for _ in range(self.rows)]

    def get(self, x: int, y: int) -> bool:
        return self.cells[y][x]

    def set(self, x: int, y: int, state: bool) -> None:
        self.cells[y][x] = bool(state)

    def invert(self, x: int, y: int) -> None:
        self.set(x, y, not self.get(x, y))

    def wrap(self, x: int, y: int) -> Tuple[int, int]:
        """Map any integer pair onto the torus."""
        return x % self.cols, y % self.rows

    def neighbours(self, x: int, y: int) -> int:
        """Count live cells among the eight wrapped neighbours of (x, y)."""
        cells = self.cells
        cols = self.cols
        rows = self.rows
        count = 0
        for dx, dy in NEIGHBOUR_OFFSETS:
            if cells[(y + dy) % rows][(x + dx) % cols]:
                count += 1
        return count

    def update(self) -> None:
        """Advance one generation.

        Every decision reads the current ``cells``; results go into a fresh
        grid that replaces ``cells`` once the whole pass is done.
        """
        next_cells = [[False] * self.cols for _ in range(self.rows)]
        for y in range(self.rows):
            row = self.cells[y]
            next_row = next_cells[y]
            for x in range(self.cols):
                n = self.neighbours(x, y)
                if row[x]:
                    next_row[x] = n == 2 or n == 3
                else:
                    next_row[x] = n == 3
        self.cells = next_cells

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        for y, row in enumerate(self.cells):
            for x, alive in enumerate(row):
                if alive:
                    yield x, y

    def population(self) -> int:
        return sum(sum(1 for alive in row if alive) for row in self.cells)
