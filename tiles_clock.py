"""Frame clock: external timestamps -> clamped deltas"""
import math
from typing import Optional


def clamp_dt(dt) -> float:
    try:
        dt = float(dt)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return dt


class SimulationClock:
    def __init__(self):
        self.last: Optional[float] = None

    def reset(self):
        self.last = None

    def tick(self, ts_ms: float) -> float:
        """Seconds since the previous timestamp; 0 on the first tick."""
        if self.last is None or not math.isfinite(self.last):
            self.last = ts_ms
            return 0.0
        dt = clamp_dt((ts_ms - self.last) / 1000)
        # a corrected (earlier) timestamp becomes the new baseline
        self.last = ts_ms
        return dt
