from esper import World

from life.components.simulation_state import SimulationMode
from life.constants import CELL_SIZE, LIVE_CELL_COLOR, PAUSED_CELL_COLOR
from life.events.bus import EventBus, EVENT_CELL_TOGGLED, EVENT_GENERATION_ADVANCED
from life.systems.board import get_board
from life.ui.layout import cell_rect
from life.world import get_simulation_state


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GENERATION_ADVANCED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_CELL_TOGGLED, self.on_board_changed)
        self.last_cell_rects: list[tuple[float, float, float, float]] = []
        self._dirty = True

    def on_board_changed(self, sender, **kwargs):
        self._dirty = True

    def process(self):
        # Background cleared by the arcade window prior to on_draw.
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if self._dirty:
            self.last_cell_rects = self.build_cell_rects()
            self._dirty = False
        if headless:
            return
        color = self._cell_color()
        for left, bottom, width, height in self.last_cell_rects:
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, color)

    def build_cell_rects(self) -> list[tuple[float, float, float, float]]:
        board = get_board(self.world)
        if board is None:
            return []
        cell_size = self._cell_size()
        return [cell_rect(x, y, cell_size) for x, y in board.live_cells()]

    def _cell_size(self) -> int:
        config = getattr(self.world, 'config', None)
        if config is not None:
            return config.cell_size
        return CELL_SIZE

    def _cell_color(self):
        state = get_simulation_state(self.world)
        if state is not None and state.mode == SimulationMode.PAUSED:
            return PAUSED_CELL_COLOR
        return LIVE_CELL_COLOR
