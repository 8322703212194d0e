"""Game state, render snapshot and the side-effect signal names"""
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple
from tiles_difficulty import DEFAULT_DIFFICULTY, lookup, resolve_name
from tiles_tile import Tile

HIT = "hit"
MISS = "miss"
GAME_OVER = "gameOver"

Emit = Callable[[str, int], None]


def no_emit(signal: str, score: int):
    pass


@dataclass(frozen=True)
class Snapshot:
    tiles: Tuple[Tile, ...]
    score: int
    lives: int
    miss_alarm_active: bool
    difficulty: str
    running: bool
    miss_alarm_ms: float = 0.0


@dataclass
class GameState:
    tiles: List[Tile] = field(default_factory=list)
    score: int = 0
    lives: int = 0
    running: bool = False
    difficulty: str = DEFAULT_DIFFICULTY
    spawn_interval_ms: float = 0.0
    fall_speed_base: float = 0.0
    spawn_accumulator_ms: float = 0.0
    miss_alarm_ms: float = 0.0
    next_id: int = 0

    @classmethod
    def idle(cls, difficulty: Optional[str] = None) -> "GameState":
        s = cls()
        s.apply_profile(difficulty, reset_lives=True)
        return s

    def apply_profile(self, difficulty: Optional[str], reset_lives: bool = False):
        self.difficulty = resolve_name(difficulty)
        p = lookup(self.difficulty)
        self.spawn_interval_ms = p.spawn_interval_ms
        self.fall_speed_base = p.base_fall_speed
        if reset_lives:
            self.lives = p.starting_lives

    def reset(self, difficulty: Optional[str] = None):
        """Fresh run: empty field, score 0, profile values, running."""
        self.tiles = []
        self.score = 0
        self.apply_profile(difficulty if difficulty is not None else self.difficulty,
                           reset_lives=True)
        self.spawn_accumulator_ms = 0.0
        self.miss_alarm_ms = 0.0
        self.running = True

    def take_id(self) -> int:
        tid = self.next_id
        self.next_id += 1
        return tid

    def remove(self, tile: Tile):
        self.tiles = [t for t in self.tiles if t.id != tile.id]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tiles=tuple(replace(t) for t in self.tiles),
            score=self.score,
            lives=self.lives,
            miss_alarm_active=self.miss_alarm_ms > 0,
            difficulty=self.difficulty,
            running=self.running,
            miss_alarm_ms=self.miss_alarm_ms,
        )
