CONFIG = {
    "WINDOW_W": 800,
    "WINDOW_H": 640,
    "HUD_H": 40,
    "FPS": 60,
    "HIT_ZONE_HEIGHT": 90,
    "MISS_ALARM_MS": 220,
    "TILE_MARGIN": 16,
    "AUTO_START": True,
    "PREFS_PATH": None,
}
