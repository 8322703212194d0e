# tiles_layout.py
from dataclasses import dataclass
from typing import Optional
from tiles_config import CONFIG

MIN_W, MIN_H = 320, 240


@dataclass
class Dims:
    hud_h: int
    field_w: int
    field_h: int
    total_w: int
    total_h: int
    field_x: int
    field_y: int

    def to_field(self, px, py):
        return px - self.field_x, py - self.field_y


def compute_dims(total_w: Optional[int] = None, total_h: Optional[int] = None) -> Dims:
    total_w = max(MIN_W, int(total_w or CONFIG["WINDOW_W"]))
    total_h = max(MIN_H, int(total_h or CONFIG["WINDOW_H"]))
    hud_h = int(CONFIG["HUD_H"])

    return Dims(
        hud_h=hud_h,
        field_w=total_w, field_h=total_h - hud_h,
        total_w=total_w, total_h=total_h,
        field_x=0, field_y=hud_h,
    )
