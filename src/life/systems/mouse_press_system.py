from __future__ import annotations

from typing import Any

from life.events.bus import (
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EventBus,
)


class MousePressSystem:
    """Bridges raw mouse input to sanitized press events shared by all systems."""

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        self._press_count = 0
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self._on_mouse_press_raw)

    def _on_mouse_press_raw(self, sender: Any, **payload: Any) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        try:
            xf = float(x)
            yf = float(y)
            button_int = int(button)
        except (TypeError, ValueError):
            return
        self._press_count += 1
        sanitized = dict(payload)
        sanitized["x"] = xf
        sanitized["y"] = yf
        sanitized["button"] = button_int
        sanitized.setdefault("press_id", self._press_count)
        self.event_bus.emit(EVENT_MOUSE_PRESS, **sanitized)
