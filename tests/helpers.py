from __future__ import annotations

from typing import Iterable

from life.components.board import Board


def board_with(cols: int, rows: int, live: Iterable[tuple[int, int]]) -> Board:
    """Build a board with exactly the given cells alive."""
    board = Board(cols=cols, rows=rows)
    for x, y in live:
        board.set(x, y, True)
    return board


def live_set(board: Board) -> set[tuple[int, int]]:
    return set(board.live_cells())
