from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of systems alive even when nobody holds the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"    # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"  # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"            # payload: x, y (board coordinates)


# ============================================================================
# BOARD & SIMULATION
# ============================================================================
EVENT_CELL_TOGGLED = "cell_toggled"                        # payload: x, y, alive=bool
EVENT_PAUSE_TOGGLE_REQUEST = "pause_toggle_request"        # payload: None
EVENT_SIMULATION_MODE_CHANGED = "simulation_mode_changed"  # payload: previous_mode=SimulationMode, new_mode=SimulationMode
EVENT_GENERATION_ADVANCED = "generation_advanced"          # payload: generation=int, population=int
