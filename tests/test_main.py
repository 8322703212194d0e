import random

import pygame
import pytest
from conftest import make_tile

from main import handle_event
from tiles_audio import AudioSink
from tiles_config import CONFIG
from tiles_layout import compute_dims
from tiles_lifecycle import LifecycleController, Phase
from tiles_overlay import DifficultyChooser, Overlay
from tiles_prefs import load_prefs


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class Host:
    def __init__(self, prefs_file):
        CONFIG["PREFS_PATH"] = str(prefs_file)
        self.dims = compute_dims(800, 640)
        self.game = LifecycleController(self.dims.field_w, self.dims.field_h,
                                        rng=random.Random(2))
        self.chooser = DifficultyChooser(self.game.difficulty)
        self.overlay = Overlay()
        self.audio = AudioSink(enabled=False)
        self.prefs = {"muted": False}

    def send(self, e):
        handle_event(e, self.game, self.chooser, self.overlay, self.audio, self.prefs, self.dims)


@pytest.fixture
def host(tmp_path):
    return Host(tmp_path / "prefs.json")


def lose(game):
    while game.phase is Phase.RUNNING:
        game.pointer(-1, -1)


def test_enter_starts_with_chooser_value(host):
    host.send(key(pygame.K_RIGHT))
    assert host.chooser.value == "hard"
    host.send(key(pygame.K_RETURN))
    assert host.game.phase is Phase.RUNNING
    assert host.game.difficulty == "hard"
    assert host.game.state.lives == 2


def test_enter_restarts_after_game_over_with_chosen_difficulty(host):
    host.game.start()
    lose(host.game)
    host.send(key(pygame.K_LEFT))
    host.send(key(pygame.K_RETURN))
    assert host.game.phase is Phase.RUNNING
    assert host.game.difficulty == "easy"
    assert host.game.state.lives == 5


def test_enter_while_running_does_not_reset(host):
    host.game.start()
    host.game.state.score = 3
    host.send(key(pygame.K_RETURN))
    assert host.game.state.score == 3


def test_number_keys_sync_chooser_and_game(host):
    host.send(key(pygame.K_1))
    assert host.chooser.value == host.game.difficulty == "easy"
    host.game.start()
    host.send(key(pygame.K_3))
    assert host.chooser.value == host.game.difficulty == "hard"
    assert host.game.state.lives == 5


def test_hit_keys_only_act_while_running(host):
    host.send(key(pygame.K_SPACE))
    assert host.game.phase is Phase.IDLE
    assert host.game.state.lives == 3
    host.game.start()
    make_tile(host.game.state, y=host.dims.field_h - 40, h=40)
    host.send(key(pygame.K_DOWN))
    assert host.game.state.score == 1
    host.send(key(pygame.K_SPACE))
    assert host.game.state.lives == 2


def test_arrows_do_not_change_difficulty_mid_run(host):
    host.game.start()
    host.send(key(pygame.K_RIGHT))
    assert host.chooser.value == host.game.difficulty == "normal"


def test_click_uses_field_coordinates(host):
    host.game.start()
    make_tile(host.game.state, x=100, y=100, w=60, h=40)
    host.send(click((120, 100 + host.dims.field_y + 5)))
    assert host.game.state.score == 1
    host.send(click((120, 120), button=3))
    assert host.game.state.lives == 3


def test_mute_key_toggles_and_saves(host, tmp_path):
    host.send(key(pygame.K_m))
    assert host.audio.muted and host.prefs["muted"]
    assert load_prefs(tmp_path / "prefs.json")["muted"] is True
    host.send(key(pygame.K_m))
    assert load_prefs(tmp_path / "prefs.json")["muted"] is False


def test_overlay_swallows_game_keys(host):
    host.game.start()
    host.send(key(pygame.K_F1))
    assert host.overlay.active
    host.send(key(pygame.K_SPACE))
    host.send(click((5, 200)))
    assert host.game.state.lives == 3
    host.send(key(pygame.K_RIGHT))
    assert CONFIG["HIT_ZONE_HEIGHT"] == 100
    host.send(key(pygame.K_ESCAPE))
    assert not host.overlay.active
