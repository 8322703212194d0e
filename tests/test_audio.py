import numpy as np
import pytest

import tiles_audio
from tiles_audio import (
    SAMPLE_RATE, AudioSink, envelope, game_over_samples, hit_samples, miss_samples, to_pcm,
)
from tiles_state import GAME_OVER, HIT


@pytest.mark.parametrize("make, seconds", [
    (hit_samples, 0.2), (miss_samples, 0.14), (game_over_samples, 0.95),
])
def test_voices_are_bounded_mono_buffers(make, seconds):
    s = make()
    assert s.ndim == 1
    assert len(s) == int(seconds * SAMPLE_RATE)
    assert np.max(np.abs(s)) <= 0.2
    assert np.max(np.abs(s)) > 0.01


def test_envelope_shape():
    env = envelope(SAMPLE_RATE, SAMPLE_RATE, 0.01, 0.12, 0.18)
    peak = int(0.01 * SAMPLE_RATE)
    assert env[0] == pytest.approx(0.0001)
    assert env[peak] == pytest.approx(0.12, rel=0.05)
    assert env[int(0.5 * SAMPLE_RATE)] == 0


def test_to_pcm_channels():
    s = np.array([0.0, 0.5, -1.5])
    mono = to_pcm(s)
    assert mono.dtype == np.int16 and mono.shape == (3,)
    assert mono[2] == -32767
    stereo = to_pcm(s, 2)
    assert stereo.shape == (3, 2)
    assert stereo.flags["C_CONTIGUOUS"]


class FakeSound:
    played = []

    def __init__(self, arr):
        self.arr = arr

    def play(self):
        FakeSound.played.append(self.arr)


@pytest.fixture
def fake_mixer(monkeypatch):
    FakeSound.played = []
    monkeypatch.setattr(tiles_audio.pygame.sndarray, "make_sound", FakeSound)
    sink = AudioSink(enabled=False)
    sink.channels = 1
    return sink


def test_sink_plays_known_signals(fake_mixer):
    fake_mixer(HIT, 1)
    fake_mixer(GAME_OVER, 1)
    fake_mixer("unknown", 1)
    assert len(FakeSound.played) == 2


def test_muted_sink_is_silent(fake_mixer, monkeypatch):
    monkeypatch.setattr(tiles_audio.pygame.mixer, "pause", lambda: None)
    monkeypatch.setattr(tiles_audio.pygame.mixer, "unpause", lambda: None)
    fake_mixer.set_muted(True)
    fake_mixer(HIT, 1)
    assert FakeSound.played == []
    assert fake_mixer.toggle_mute() is False


def test_disabled_sink_never_touches_mixer():
    sink = AudioSink(enabled=False)
    assert not sink.available
    sink(HIT, 3)
    sink.set_muted(True)
    assert sink.muted
