from life.constants import CELL_SIZE, KEY_SPACE, MOUSE_BUTTON_LEFT
from life.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PAUSE_TOGGLE_REQUEST,
)
from life.systems.board import get_board
from life.ui.layout import pixel_to_cell


class InputSystem:
    def __init__(self, event_bus: EventBus, world):
        self.event_bus = event_bus
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button edits cells.
        if button != MOUSE_BUTTON_LEFT:
            return
        board = get_board(self.world)
        if board is None:
            return
        cell = pixel_to_cell(x, y, self._cell_size(), board.cols, board.rows)
        if cell is None:
            return
        col, row = cell
        self.event_bus.emit(EVENT_CELL_CLICK, x=col, y=row)

    def on_key_press(self, sender, **kwargs):
        self.handle_key_press(kwargs.get('symbol'), kwargs.get('modifiers', 0))

    def handle_key_press(self, symbol, modifiers=0):
        if symbol == KEY_SPACE:
            self.event_bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)

    def _cell_size(self) -> int:
        config = getattr(self.world, 'config', None)
        if config is not None:
            return config.cell_size
        return CELL_SIZE
