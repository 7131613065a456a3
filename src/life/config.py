from __future__ import annotations

import math
from dataclasses import dataclass

from life.constants import (
    BOARD_COLS,
    BOARD_ROWS,
    CELL_SIZE,
    MAX_STEPS_PER_TICK,
    TICK_INTERVAL,
)


@dataclass(slots=True)
class LifeConfig:
    """Board dimensions and simulation cadence shared by the world and its systems.

    The defaults come from :mod:`life.constants`; callers override any field
    explicitly. Values are coerced on construction and rejected when they
    cannot describe a usable board.
    """

    cols: int = BOARD_COLS
    rows: int = BOARD_ROWS
    cell_size: int = CELL_SIZE
    tick_interval: float = TICK_INTERVAL
    max_steps_per_tick: int = MAX_STEPS_PER_TICK
    start_paused: bool = True

    def __post_init__(self) -> None:
        self.cols = int(self.cols)
        self.rows = int(self.rows)
        self.cell_size = int(self.cell_size)
        self.tick_interval = float(self.tick_interval)
        self.max_steps_per_tick = int(self.max_steps_per_tick)
        self.start_paused = bool(self.start_paused)
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"board dimensions must be positive, got {self.cols}x{self.rows}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if not math.isfinite(self.tick_interval) or self.tick_interval <= 0.0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.max_steps_per_tick <= 0:
            raise ValueError(f"max_steps_per_tick must be positive, got {self.max_steps_per_tick}")

    @property
    def screen_size(self) -> tuple[int, int]:
        return self.cols * self.cell_size, self.rows * self.cell_size
