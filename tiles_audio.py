"""
Audio sink: tiny synthesised effects for hit / miss / game over.

Tones are generated with numpy and handed to pygame.mixer through
pygame.sndarray, so the game ships without any sound files:

- hit:      short sine blip, 880-1000 Hz
- miss:     short triangle click, 420-620 Hz
- gameOver: sawtooth sweep falling from 220 Hz to 35 Hz
"""
from __future__ import annotations
import logging
import random
from typing import Callable, Dict, Optional

import numpy as np
import pygame

from tiles_state import GAME_OVER, HIT, MISS

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
FLOOR_GAIN = 0.0001


def envelope(n: int, sr: int, attack: float, peak: float, release_end: float) -> np.ndarray:
    """Exponential attack to ``peak`` then exponential decay until ``release_end`` (s)."""
    t = np.arange(n) / sr
    rise = FLOOR_GAIN * (peak / FLOOR_GAIN) ** np.clip(t / attack, 0, 1)
    span = max(release_end - attack, 1e-6)
    fall = peak * (FLOOR_GAIN / peak) ** np.clip((t - attack) / span, 0, 1)
    env = np.where(t < attack, rise, fall)
    env[t > release_end] = 0.0
    return env


def phase_for(n: int, sr: int, f_start: float, f_end: Optional[float] = None,
              sweep: float = 0.0) -> np.ndarray:
    t = np.arange(n) / sr
    if f_end is None or sweep <= 0:
        freq = np.full(n, float(f_start))
    else:
        freq = f_start * (f_end / f_start) ** np.clip(t / sweep, 0, 1)
    return 2 * np.pi * np.cumsum(freq) / sr


WAVES: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "sine": np.sin,
    "triangle": lambda ph: (2 / np.pi) * np.arcsin(np.sin(ph)),
    "sawtooth": lambda ph: 2 * ((ph / (2 * np.pi)) % 1.0) - 1,
}


def synth(wave: str, duration: float, f_start: float, attack: float, peak: float,
          release_end: float, f_end: Optional[float] = None, sweep: float = 0.0,
          sr: int = SAMPLE_RATE) -> np.ndarray:
    """Mono float samples in [-1, 1]."""
    n = int(duration * sr)
    ph = phase_for(n, sr, f_start, f_end, sweep)
    return WAVES[wave](ph) * envelope(n, sr, attack, peak, release_end)


def hit_samples(rng=random) -> np.ndarray:
    return synth("sine", 0.2, 880 + rng.random() * 120, 0.01, 0.12, 0.18)


def miss_samples(rng=random) -> np.ndarray:
    return synth("triangle", 0.14, 420 + rng.random() * 200, 0.01, 0.14, 0.12)


def game_over_samples(rng=random) -> np.ndarray:
    return synth("sawtooth", 0.95, 220, 0.02, 0.18, 0.9, f_end=35, sweep=0.7)


def to_pcm(samples: np.ndarray, channels: int = 1) -> np.ndarray:
    pcm = (np.clip(samples, -1, 1) * 32767).astype(np.int16)
    if channels > 1:
        pcm = np.repeat(pcm[:, None], channels, axis=1)
    return np.ascontiguousarray(pcm)


class AudioSink:
    VOICES = {HIT: hit_samples, MISS: miss_samples, GAME_OVER: game_over_samples}

    def __init__(self, muted: bool = False, enabled: bool = True):
        self.muted = muted
        self.channels = 0
        if enabled:
            self._open()

    @property
    def available(self) -> bool:
        return self.channels > 0

    def _open(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            freq, size, channels = pygame.mixer.get_init()
        except pygame.error as e:
            logger.warning("audio disabled: %s", e)
            return
        if freq != SAMPLE_RATE or abs(size) != 16:
            logger.warning("mixer opened as %d Hz / %d bit; tones will be pitched", freq, size)
        self.channels = channels

    def set_muted(self, muted: bool):
        self.muted = bool(muted)
        if self.available:
            if self.muted:
                pygame.mixer.pause()
            else:
                pygame.mixer.unpause()

    def toggle_mute(self) -> bool:
        self.set_muted(not self.muted)
        return self.muted

    def __call__(self, signal: str, score: int):
        if self.muted or not self.available:
            return
        voice = self.VOICES.get(signal)
        if voice is None:
            return
        pygame.sndarray.make_sound(to_pcm(voice(), self.channels)).play()
