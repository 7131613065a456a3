from __future__ import annotations

import logging

from esper import World

from life.components.simulation_state import SimulationMode
from life.constants import MAX_STEPS_PER_TICK, TICK_INTERVAL
from life.events.bus import (
    EVENT_GENERATION_ADVANCED,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_SIMULATION_MODE_CHANGED,
    EVENT_TICK,
    EventBus,
)
from life.systems.board import get_board
from life.utils.tick_timer import TickTimer
from life.world import get_simulation_state

logger = logging.getLogger(__name__)


class SimulationSystem:
    """Advances the board on a fixed cadence while the simulation is running."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        timer: TickTimer | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        if timer is None:
            config = getattr(world, "config", None)
            interval = config.tick_interval if config is not None else TICK_INTERVAL
            max_steps = config.max_steps_per_tick if config is not None else MAX_STEPS_PER_TICK
            timer = TickTimer(interval=interval, max_steps=max_steps)
        self._timer = timer
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_PAUSE_TOGGLE_REQUEST, self.on_pause_toggle)

    @property
    def timer(self) -> TickTimer:
        return self._timer

    def on_tick(self, sender, **payload) -> None:
        state = get_simulation_state(self.world)
        if state is None or not state.running:
            return
        steps = self._timer.advance(payload.get("dt", 0.0))
        for _ in range(steps):
            self.step()

    def step(self) -> None:
        """Advance exactly one generation regardless of mode."""
        board = get_board(self.world)
        state = get_simulation_state(self.world)
        if board is None or state is None:
            return
        board.update()
        state.generation += 1
        population = board.population()
        logger.debug("generation %d, population %d", state.generation, population)
        self.event_bus.emit(
            EVENT_GENERATION_ADVANCED,
            generation=state.generation,
            population=population,
        )

    def on_pause_toggle(self, sender, **payload) -> None:
        state = get_simulation_state(self.world)
        if state is None:
            return
        previous = state.mode
        state.mode = SimulationMode.PAUSED if state.running else SimulationMode.RUNNING
        # Time spent paused must not release a burst of generations on resume.
        self._timer.reset()
        logger.info("simulation %s at generation %d", state.mode.name.lower(), state.generation)
        self.event_bus.emit(
            EVENT_SIMULATION_MODE_CHANGED,
            previous_mode=previous,
            new_mode=state.mode,
        )
