import math

from life.constants import CELL_PADDING


def pixel_to_cell(x: float, y: float, cell_size: int, cols: int, rows: int):
    """Return board (x, y) for a window pixel.

    None means the pixel is not finite or lies left of or below the window.

    Pixels are integer-divided by the cell size and wrapped onto the board so the
    result is always a valid coordinate for Board.get/set/invert, including clicks
    past the right/top edge when the window is larger than the board.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    if x < 0 or y < 0:
        return None
    col = int(x // cell_size) % cols
    row = int(y // cell_size) % rows
    return col, row


def cell_rect(x: int, y: int, cell_size: int, padding: int = CELL_PADDING):
    """Return (left, bottom, width, height) of the square drawn for board cell (x, y)."""
    if cell_size <= 2 * padding:
        padding = 0
    inner = cell_size - 2 * padding
    return x * cell_size + padding, y * cell_size + padding, inner, inner
