from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(slots=True)
class TickTimer:
	"""Converts per-frame deltas into whole simulation steps.

	Frame time is accumulated and every full ``interval`` yields one step, so
	the generation rate stays independent of the display refresh rate.
	``max_steps`` bounds how many steps a single stalled frame can release;
	the surplus time is dropped rather than carried over.

	"""

	interval: float
	max_steps: int = 4

	_accumulated: float = field(init=False, default=0.0, repr=False)

	def __post_init__(self) -> None:
		self.interval = float(self.interval)
		if not math.isfinite(self.interval) or self.interval <= 0.0:
			raise ValueError(f"interval must be positive, got {self.interval}")
		self.max_steps = max(1, int(self.max_steps))

	def advance(self, dt: float) -> int:
		try:
			delta = float(dt)
		except (TypeError, ValueError):
			return 0
		if not math.isfinite(delta) or delta <= 0.0:
			return 0
		self._accumulated += delta
		steps = int(self._accumulated // self.interval)
		if steps <= 0:
			return 0
		if steps > self.max_steps:
			steps = self.max_steps
			self._accumulated = 0.0
		else:
			self._accumulated -= steps * self.interval
		return steps

	def reset(self) -> None:
		self._accumulated = 0.0

	@property
	def pending(self) -> float:
		return self._accumulated
