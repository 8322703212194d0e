"""Difficulty profiles and escalation policies"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = "normal"


@dataclass(frozen=True)
class DifficultyProfile:
    spawn_interval_ms: float
    base_fall_speed: float      # px / s
    starting_lives: int
    speed_multiplier_range: Tuple[float, float]

    def __post_init__(self):
        lo, hi = self.speed_multiplier_range
        if self.spawn_interval_ms <= 0 or self.base_fall_speed <= 0:
            raise ValueError("spawn interval and fall speed must be positive")
        if self.starting_lives <= 0:
            raise ValueError("starting lives must be positive")
        if not 0 < lo <= hi:
            raise ValueError(f"bad multiplier range {self.speed_multiplier_range}")


@dataclass(frozen=True)
class Escalation:
    """Permanent difficulty step: faster falls, tighter spawns down to a floor."""
    speed_factor: float
    interval_factor: float
    interval_floor_ms: float

    def __post_init__(self):
        if self.speed_factor <= 1 or not 0 < self.interval_factor < 1:
            raise ValueError("escalation must speed up and tighten spawns")

    def apply(self, state):
        state.fall_speed_base *= self.speed_factor
        if state.spawn_interval_ms > self.interval_floor_ms:
            state.spawn_interval_ms = max(self.interval_floor_ms,
                                          state.spawn_interval_ms * self.interval_factor)


PROFILES: Dict[str, DifficultyProfile] = {
    "easy":   DifficultyProfile(1300, 70, 5, (0.85, 1.15)),
    "normal": DifficultyProfile(900, 110, 3, (0.95, 1.45)),
    "hard":   DifficultyProfile(650, 160, 2, (1.05, 1.9)),
}
DIFFICULTY_NAMES = tuple(PROFILES)

# punishment pacing: every miss
MISS_ESCALATION = Escalation(1.06, 0.92, 280)
# reward pacing: every timed key hit
HIT_ESCALATION = Escalation(1.002, 0.998, 380)


def resolve_name(name: Optional[str]) -> str:
    if name in PROFILES:
        return name
    logger.debug("unknown difficulty %r, using %s", name, DEFAULT_DIFFICULTY)
    return DEFAULT_DIFFICULTY


def lookup(name: Optional[str]) -> DifficultyProfile:
    return PROFILES[resolve_name(name)]


def cycle(name: str, step: int) -> str:
    i = DIFFICULTY_NAMES.index(resolve_name(name))
    return DIFFICULTY_NAMES[(i + step) % len(DIFFICULTY_NAMES)]
