"""Run lifecycle: idle -> running -> game over -> running ..."""
import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional
from tiles_clock import SimulationClock
from tiles_difficulty import resolve_name
from tiles_engine import advance
from tiles_input import resolve_key_hit, resolve_pointer
from tiles_state import GameState, Snapshot

logger = logging.getLogger(__name__)

Sink = Callable[[str, int], None]


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class LifecycleController:
    """Owns the GameState and the tick subscription.

    Ticks and input events are expected on the same thread (the pygame loop),
    so each call runs to completion before the next one starts.
    """

    def __init__(self, width: float, height: float, difficulty: str = "normal",
                 sinks: Iterable[Sink] = (), rng=None):
        self.width = width
        self.height = height
        self.state = GameState.idle(difficulty)
        self.phase = Phase.IDLE
        self.clock = SimulationClock()
        self.subscribed = False
        self.sinks: List[Sink] = list(sinks)
        self.rng = rng

    @property
    def difficulty(self) -> str:
        return self.state.difficulty

    def add_sink(self, sink: Sink):
        self.sinks.append(sink)

    def emit(self, signal: str, score: int):
        logger.debug("signal %s (score=%d)", signal, score)
        for sink in self.sinks:
            try:
                sink(signal, score)
            except Exception:
                logger.warning("sink %r failed on %s", sink, signal, exc_info=True)

    # ---------- transitions ----------
    def start(self, difficulty: Optional[str] = None) -> bool:
        if self.phase is Phase.RUNNING:
            return False
        self.state.reset(difficulty if difficulty is not None else self.state.difficulty)
        self.clock.reset()
        self.subscribed = True
        self.phase = Phase.RUNNING
        logger.info("run started: difficulty=%s lives=%d",
                    self.state.difficulty, self.state.lives)
        return True

    def restart(self, difficulty: Optional[str] = None) -> bool:
        return self.start(difficulty)

    def _sync(self):
        if self.phase is Phase.RUNNING and not self.state.running:
            self.phase = Phase.GAME_OVER
            self.subscribed = False

    # ---------- per-frame + input ----------
    def tick(self, ts_ms: float) -> Optional[Snapshot]:
        if not self.subscribed:
            return None
        dt = self.clock.tick(ts_ms)
        advance(self.state, dt, self.width, self.height, self.emit, self.rng)
        self._sync()
        return self.state.snapshot()

    def pointer(self, x: float, y: float) -> bool:
        if self.phase is not Phase.RUNNING:
            return False
        hit = resolve_pointer(self.state, x, y, self.emit)
        self._sync()
        return hit

    def key_hit(self) -> bool:
        if self.phase is not Phase.RUNNING:
            return False
        hit = resolve_key_hit(self.state, self.height, emit=self.emit)
        self._sync()
        return hit

    # ---------- host inputs ----------
    def select_difficulty(self, name: Optional[str]) -> str:
        name = resolve_name(name)
        if name == self.state.difficulty:
            return name
        if self.phase is Phase.RUNNING:
            # lives stay; only pacing follows the new profile
            self.state.apply_profile(name)
        elif self.phase is Phase.IDLE:
            self.state.apply_profile(name, reset_lives=True)
        else:
            self.state.difficulty = name
        logger.info("difficulty -> %s", name)
        return name

    def hold(self):
        """Skip the time until the next tick (e.g. while a menu is open)."""
        self.clock.reset()

    def resize(self, width: float, height: float):
        self.width, self.height = width, height

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()
