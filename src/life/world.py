from esper import World

from life.components.simulation_state import SimulationMode, SimulationState
from life.config import LifeConfig


def create_world(config: LifeConfig | None = None) -> World:
    """Build the ECS world holding the simulation state resource.

    The board entity itself is owned by BoardSystem; the config is attached
    to the world so systems created later share the same dimensions and cadence.
    """
    config = config or LifeConfig()
    world = World()
    setattr(world, "config", config)

    initial_mode = SimulationMode.PAUSED if config.start_paused else SimulationMode.RUNNING
    state_entity = world.create_entity()
    world.add_component(state_entity, SimulationState(mode=initial_mode))
    return world


def get_simulation_state(world: World) -> SimulationState | None:
    for _, state in world.get_component(SimulationState):
        return state
    return None
