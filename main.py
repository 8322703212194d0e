import argparse
import logging
import sys

import pygame

from tiles_audio import SAMPLE_RATE, AudioSink
from tiles_config import CONFIG
from tiles_difficulty import DIFFICULTY_NAMES
from tiles_layout import compute_dims
from tiles_lifecycle import LifecycleController, Phase
from tiles_overlay import DifficultyChooser, Overlay
from tiles_prefs import load_prefs, save_prefs
from tiles_render import RenderAssets

logger = logging.getLogger("hitting_tiles")

DIFFICULTY_KEYS = {pygame.K_1: "easy", pygame.K_2: "normal", pygame.K_3: "hard"}
HIT_KEYS = (pygame.K_SPACE, pygame.K_DOWN)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Hitting Tiles - Space Edition")
    p.add_argument("--difficulty", choices=DIFFICULTY_NAMES, default="normal")
    p.add_argument("--muted", action="store_true", help="start muted (saved)")
    p.add_argument("--no-autostart", action="store_true", help="wait for Enter on launch")
    p.add_argument("--debug", action="store_true")
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF | pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def panel_lines(phase, snap, chooser):
    if phase is Phase.GAME_OVER:
        return ["GAME OVER", f"Final score: {snap.score}",
                f"Difficulty: {chooser.label()}", "Enter to restart"]
    return ["HITTING TILES", "Click tiles, or Space / Down in the hit zone",
            f"Difficulty: {chooser.label()}", "Enter to start"]


def handle_event(e, game, chooser, overlay, audio, prefs, dims):
    """Route one mouse or key event to the game, the menus and the mute toggle."""
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and not overlay.active:
        game.pointer(*dims.to_field(*e.pos))
        return
    if e.type != pygame.KEYDOWN:
        return
    if e.key == pygame.K_F1:
        overlay.toggle(); return
    if overlay.active:
        overlay.handle(e.key); return
    if e.key == pygame.K_m:
        prefs["muted"] = audio.toggle_mute()
        save_prefs(prefs)
    if e.key in DIFFICULTY_KEYS:
        chooser.value = game.select_difficulty(DIFFICULTY_KEYS[e.key])
    if game.phase is Phase.RUNNING:
        if e.key in HIT_KEYS:
            game.key_hit()
    elif chooser.handle(e.key):
        game.select_difficulty(chooser.value)
    elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        game.restart(chooser.value)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.no_autostart:
        CONFIG["AUTO_START"] = False

    prefs = load_prefs()
    if args.muted:
        prefs["muted"] = True
        save_prefs(prefs)

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.VIDEORESIZE])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Hitting Tiles - Space Edition")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font, big_font)
    audio = AudioSink(muted=prefs["muted"])
    clock = pygame.time.Clock()

    game = LifecycleController(dims.field_w, dims.field_h, args.difficulty, sinks=[audio])
    chooser = DifficultyChooser(game.difficulty)
    overlay = Overlay()
    logger.info("window %dx%d, audio %s", dims.total_w, dims.total_h,
                "on" if audio.available else "unavailable")

    if CONFIG["AUTO_START"]:
        game.start()

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.VIDEORESIZE:
                dims = compute_dims(e.w, e.h)
                screen = recreate_window(dims)
                render.resize(dims)
                game.resize(dims.field_w, dims.field_h)
            handle_event(e, game, chooser, overlay, audio, prefs, dims)

        if overlay.active:
            game.hold()
            snap = None
        else:
            snap = game.tick(pygame.time.get_ticks())
        if snap is None:
            snap = game.snapshot()
        render.draw(screen, snap, audio.muted)
        if game.phase is not Phase.RUNNING:
            render.draw_center_panel(screen, panel_lines(game.phase, snap, chooser))
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
