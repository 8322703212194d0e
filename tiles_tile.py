"""Tile model and spawn placement"""
import random
from dataclasses import dataclass
from tiles_difficulty import DifficultyProfile

MIN_W, MAX_W = 40, 100
MIN_H = 24
SPAWN_GAP = 10  # px kept between a fresh tile and the top edge


@dataclass
class Tile:
    id: int
    x: float
    y: float
    width: float
    height: float
    fall_speed: float  # px / s

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def update(self, dt: float):
        self.y += self.fall_speed * dt

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.bottom

    @staticmethod
    def spawn(tile_id: int, field_w: float, base_speed: float,
              profile: DifficultyProfile, margin: float = 16, rng=random):
        w = max(MIN_W, min(MAX_W, field_w * (0.08 + rng.random() * 0.07)))
        h = max(MIN_H, round(w * (0.5 + rng.random() * 0.6)))
        x = margin + rng.random() * max(0.0, field_w - w - margin * 2)
        lo, hi = profile.speed_multiplier_range
        mult = lo + rng.random() * (hi - lo)
        return Tile(tile_id, x, -h - SPAWN_GAP, w, h, base_speed * mult)
