"""Simulation state resource describing whether generations are advancing."""
from dataclasses import dataclass
from enum import Enum, auto


class SimulationMode(Enum):
    """Running advances generations on the timer; paused accepts cell toggles."""
    RUNNING = auto()
    PAUSED = auto()


@dataclass
class SimulationState:
    """Singleton component storing the active mode and generation counter."""
    mode: SimulationMode = SimulationMode.PAUSED
    generation: int = 0

    @property
    def running(self) -> bool:
        return self.mode == SimulationMode.RUNNING
