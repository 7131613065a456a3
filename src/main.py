"""Entry point for the Game of Life window.

Sets up ECS world, event bus, systems, and Arcade window.
Space toggles between paused (click cells to edit) and running.
"""
import logging

from arcade import Window, run, set_background_color

from life.config import LifeConfig
from life.constants import BACKGROUND_COLOR, ICON_PATH, UPDATE_RATE, WINDOW_TITLE
from life.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS_RAW, EVENT_TICK, EventBus
from life.rendering.icon import apply_icon
from life.systems.board import BoardSystem
from life.systems.input import InputSystem
from life.systems.mouse_press_system import MousePressSystem
from life.systems.render import RenderSystem
from life.systems.simulation_system import SimulationSystem
from life.world import create_world

logger = logging.getLogger(__name__)


class LifeWindow(Window):
    def __init__(self, config: LifeConfig | None = None):
        self.config = config or LifeConfig()
        width, height = self.config.screen_size
        super().__init__(width, height, WINDOW_TITLE, vsync=True)
        self.set_update_rate(UPDATE_RATE)
        if not apply_icon(self, ICON_PATH):
            logger.info("running without a custom window icon")
        self.event_bus = EventBus()
        self.world = create_world(self.config)

        # Input systems
        self.mouse_press_system = MousePressSystem(self.event_bus)
        self.input_system = InputSystem(self.event_bus, self.world)

        # Board and simulation systems
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.simulation_system = SimulationSystem(self.world, self.event_bus)

        self.render_system = RenderSystem(self.world, self.event_bus)

        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    LifeWindow()
    run()

if __name__ == "__main__":
    main()
