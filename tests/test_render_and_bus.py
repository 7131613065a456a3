from life.config import LifeConfig
from life.events.bus import EventBus, EVENT_CELL_CLICK
from life.systems.board import BoardSystem, get_board
from life.systems.render import RenderSystem
from life.systems.simulation_system import SimulationSystem
from life.world import create_world


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_event_bus_emit_without_subscribers_is_noop():
    EventBus().emit("nobody_listens", value=1)


def test_board_system_creates_board_from_config():
    bus = EventBus()
    world = create_world(LifeConfig(cols=6, rows=7))
    board_system = BoardSystem(world, bus)
    board = get_board(world)
    assert board is board_system.board
    assert (board.cols, board.rows) == (6, 7)


def test_board_system_explicit_dimensions_override_config():
    bus = EventBus()
    world = create_world(LifeConfig(cols=6, rows=7))
    board_system = BoardSystem(world, bus, 4, 3)
    assert (board_system.board.cols, board_system.board.rows) == (4, 3)


def test_board_system_wraps_click_coordinates():
    bus = EventBus()
    world = create_world(LifeConfig(cols=4, rows=4))
    board_system = BoardSystem(world, bus)
    bus.emit(EVENT_CELL_CLICK, x=-1, y=5)
    assert board_system.board.get(3, 1) is True


def test_render_system_builds_rects_for_live_cells():
    bus = EventBus()
    world = create_world(LifeConfig(cols=5, rows=5, cell_size=10))
    board_system = BoardSystem(world, bus)
    render = RenderSystem(world, bus)
    assert render.build_cell_rects() == []
    board_system.board.set(1, 2, True)
    board_system.board.set(4, 0, True)
    assert render.build_cell_rects() == [(41, 1, 8, 8), (11, 21, 8, 8)]


def test_render_process_refreshes_rects_after_board_events():
    bus = EventBus()
    world = create_world(LifeConfig(cols=5, rows=5, cell_size=10))
    BoardSystem(world, bus)
    simulation = SimulationSystem(world, bus)
    render = RenderSystem(world, bus)

    render.process()
    assert render.last_cell_rects == []

    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    render.process()
    assert render.last_cell_rects == [(11, 11, 8, 8)]

    # A lone cell dies on the next generation.
    simulation.step()
    render.process()
    assert render.last_cell_rects == []


def test_render_process_reuses_rects_until_board_changes():
    bus = EventBus()
    world = create_world(LifeConfig(cols=5, rows=5, cell_size=10))
    board_system = BoardSystem(world, bus)
    render = RenderSystem(world, bus)

    render.process()
    board_system.board.set(2, 2, True)
    render.process()
    assert render.last_cell_rects == []

    bus.emit(EVENT_CELL_CLICK, x=0, y=0)
    render.process()
    assert render.last_cell_rects == [(1, 1, 8, 8), (21, 21, 8, 8)]
