"""
Rendering helpers for Hitting Tiles.

- Pre-render the static background (space colour, star field, hit-zone band)
  whenever the layout or the hit-zone height changes.
- Cache HUD text surfaces; re-render only when values change.
- Tile colours are cosmetic: picked once per tile id and cached here, so the
  simulation never carries them.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

from tiles_config import CONFIG
from tiles_layout import Dims
from tiles_state import Snapshot
from tiles_tile import Tile

BG = (10, 13, 34)
HUD_BG = (21, 25, 53)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


def flash_alpha(alarm_ms: float) -> int:
    """Red flash opacity: fades out over the last 225 ms of the alarm."""
    return int(255 * min(0.45, max(0.0, alarm_ms) / 1000 * 2))


def tile_color(rng=random) -> Tuple[int, int, int]:
    c = pygame.Color(0)
    c.hsla = (rng.random() * 60 + 180, 70, rng.random() * 20 + 40, 100)
    return c.r, c.g, c.b


@dataclass
class HudCache:
    score: int = -1
    lives: int = -1
    difficulty: str = ""
    muted: Optional[bool] = None
    score_s: Optional[pygame.Surface] = None
    lives_s: Optional[pygame.Surface] = None
    diff_s: Optional[pygame.Surface] = None
    mute_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self.colors: Dict[int, Tuple[int, int, int]] = {}
        self._zone_h = None
        self._make_static()

    # ---------- Static background (stars + hit zone) ----------
    def _make_static(self):
        d = self.dims
        self._zone_h = CONFIG["HIT_ZONE_HEIGHT"]
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, HUD_BG, (0, 0, d.total_w, d.hud_h))
        stars = pygame.Surface((d.field_w, d.field_h), pygame.SRCALPHA)
        for i in range(30):
            x = (i * 73) % d.field_w
            y = (i * 47) % d.field_h
            pygame.draw.circle(stars, (255, 255, 255, 40), (x, y), (i % 3) + 1)
        self.bg.blit(stars, (d.field_x, d.field_y))
        line_y = d.field_y + d.field_h - self._zone_h
        band = pygame.Surface((d.field_w, max(1, self._zone_h - 10)), pygame.SRCALPHA)
        band.fill((200, 220, 255, 12))
        self.bg.blit(band, (d.field_x, line_y + 2))
        line = pygame.Surface((d.field_w, 2), pygame.SRCALPHA)
        line.fill((255, 255, 255, 24))
        self.bg.blit(line, (d.field_x, line_y))
        self.flash = pygame.Surface((d.field_w, d.field_h), pygame.SRCALPHA)

    def resize(self, dims: Dims):
        self.dims = dims
        self._make_static()

    # ---------- Tiles ----------
    def color_for(self, tile: Tile) -> Tuple[int, int, int]:
        if tile.id not in self.colors:
            self.colors[tile.id] = tile_color()
        return self.colors[tile.id]

    def forget_missing(self, snap: Snapshot):
        live = {t.id for t in snap.tiles}
        for tid in [k for k in self.colors if k not in live]:
            del self.colors[tid]

    def draw_tile(self, screen: pygame.Surface, t: Tile):
        d = self.dims
        rect = pygame.Rect(int(d.field_x + t.x), int(d.field_y + t.y), int(t.width), int(t.height))
        pygame.draw.rect(screen, self.color_for(t), rect, border_radius=6)
        hl = pygame.Surface((max(0, min(12, rect.w - 12)), 6), pygame.SRCALPHA)
        hl.fill((255, 255, 255, 30))
        screen.blit(hl, (rect.x + 6, rect.y + 6))

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, snap: Snapshot, muted: bool):
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.lives != self.hud.lives:
            self.hud.lives = snap.lives
            self.hud.lives_s = f.render(f"Lives: {snap.lives}", True, TEXT)
        if snap.difficulty != self.hud.difficulty:
            self.hud.difficulty = snap.difficulty
            self.hud.diff_s = f.render(f"Difficulty: {snap.difficulty}  (1/2/3)", True, DIM_TEXT)
        if muted != self.hud.muted:
            self.hud.muted = muted
            self.hud.mute_s = f.render("M: sound off" if muted else "M: sound on", True, DIM_TEXT)
        y = (self.dims.hud_h - self.hud.score_s.get_height()) // 2
        screen.blit(self.hud.score_s, (12, y))
        screen.blit(self.hud.lives_s, (140, y))
        screen.blit(self.hud.diff_s, (260, y))
        screen.blit(self.hud.mute_s, (self.dims.total_w - self.hud.mute_s.get_width() - 12, y))

    # ---------- Overlays ----------
    def draw_center_panel(self, screen: pygame.Surface, lines):
        d = self.dims
        shade = pygame.Surface((d.field_w, d.field_h), pygame.SRCALPHA)
        shade.fill((5, 8, 20, 200))
        screen.blit(shade, (d.field_x, d.field_y))
        cx = d.field_x + d.field_w // 2
        y = d.field_y + d.field_h // 2 - 60
        for i, text in enumerate(lines):
            font = self.big_font if i == 0 else self.font
            s = font.render(text, True, (255, 220, 220) if i == 0 else TEXT)
            screen.blit(s, s.get_rect(center=(cx, y)))
            y += s.get_height() + 14

    def draw(self, screen: pygame.Surface, snap: Snapshot, muted: bool = False):
        if CONFIG["HIT_ZONE_HEIGHT"] != self._zone_h:
            self._make_static()
        screen.blit(self.bg, (0, 0))
        self.forget_missing(snap)
        clip = screen.get_clip()
        d = self.dims
        screen.set_clip(pygame.Rect(d.field_x, d.field_y, d.field_w, d.field_h))
        for t in snap.tiles:
            self.draw_tile(screen, t)
        screen.set_clip(clip)
        alpha = flash_alpha(snap.miss_alarm_ms)
        if snap.miss_alarm_active and alpha:
            self.flash.fill((255, 40, 40, alpha))
            screen.blit(self.flash, (d.field_x, d.field_y))
        self.draw_hud(screen, snap, muted)
