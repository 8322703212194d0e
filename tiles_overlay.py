import pygame
from tiles_config import CONFIG
from tiles_difficulty import cycle, resolve_name


class Overlay:
    """F1 tuning overlay: edits CONFIG live."""
    def __init__(self):
        self.active = False
        self.items = [
            ("HIT_ZONE_HEIGHT", "Hit zone", 30, 200, 10),
            ("MISS_ALARM_MS", "Miss flash ms", 0, 600, 20),
            ("TILE_MARGIN", "Tile margin", 0, 64, 4),
        ]
        self.index = 0

    def toggle(self): self.active = not self.active

    def handle(self, key):
        if key in (pygame.K_ESCAPE, pygame.K_F1): self.toggle(); return
        if key == pygame.K_UP: self.index = (self.index - 1) % len(self.items); return
        if key == pygame.K_DOWN: self.index = (self.index + 1) % len(self.items); return
        name, label, lo, hi, step = self.items[self.index]
        val = CONFIG[name]
        if key == pygame.K_LEFT: CONFIG[name] = max(lo, val - step)
        if key == pygame.K_RIGHT: CONFIG[name] = min(hi, val + step)

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w - 80, h - 80), pygame.SRCALPHA); s.fill((20, 25, 40, 230))
        screen.blit(s, (40, 40))
        y = 80
        for i, (name, label, lo, hi, step) in enumerate(self.items):
            col = (255, 255, 255) if i == self.index else (200, 210, 235)
            screen.blit(font.render(f"{label}: {CONFIG[name]}", True, col), (60, 40 + y)); y += 30


class DifficultyChooser:
    """Left/Right chooser shown on the idle and game-over panels."""
    def __init__(self, current="normal"):
        self.value = resolve_name(current)

    def handle(self, key) -> bool:
        """True when the key was consumed."""
        if key == pygame.K_LEFT: self.value = cycle(self.value, -1); return True
        if key == pygame.K_RIGHT: self.value = cycle(self.value, 1); return True
        return False

    def label(self):
        return f"< {self.value} >"
