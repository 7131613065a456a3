import logging

from esper import World

from life.components.board import Board
from life.constants import BOARD_COLS, BOARD_ROWS
from life.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_CELL_TOGGLED
from life.world import get_simulation_state

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(self, world: World, event_bus: EventBus, cols: int | None = None, rows: int | None = None):
        self.world = world
        self.event_bus = event_bus
        config = getattr(world, "config", None)
        if cols is None:
            cols = config.cols if config is not None else BOARD_COLS
        if rows is None:
            rows = config.rows if config is not None else BOARD_ROWS
        # Single board entity; dimensions are fixed for the lifetime of the world.
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(cols=cols, rows=rows))
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def on_cell_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        try:
            xi = int(x)
            yi = int(y)
        except (TypeError, ValueError, OverflowError):
            return
        state = get_simulation_state(self.world)
        # Cells are only editable while paused; ticks own the board while running.
        if state is not None and state.running:
            return
        board = self.board
        x, y = board.wrap(xi, yi)
        board.invert(x, y)
        alive = board.get(x, y)
        logger.debug("cell (%d, %d) toggled -> %s", x, y, alive)
        self.event_bus.emit(EVENT_CELL_TOGGLED, x=x, y=y, alive=alive)


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None
