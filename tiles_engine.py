"""Per-frame simulation: spawn, move, miss detection, end of run"""
import logging
import random
from typing import Optional
from tiles_clock import clamp_dt
from tiles_config import CONFIG
from tiles_difficulty import MISS_ESCALATION, lookup
from tiles_state import GAME_OVER, MISS, Emit, GameState, no_emit
from tiles_tile import Tile

logger = logging.getLogger(__name__)


def spawn_tile(state: GameState, field_w: float, rng=random) -> Tile:
    t = Tile.spawn(state.take_id(), field_w, state.fall_speed_base,
                   lookup(state.difficulty), CONFIG["TILE_MARGIN"], rng)
    state.tiles.append(t)
    logger.debug("spawned tile %d at x=%.0f speed=%.1f", t.id, t.x, t.fall_speed)
    return t


def raise_alarm(state: GameState):
    state.miss_alarm_ms = CONFIG["MISS_ALARM_MS"]


def end_run(state: GameState, emit: Emit = no_emit):
    """Stop the run once; repeated calls after the first do nothing."""
    if not state.running:
        return
    state.running = False
    logger.info("game over: score=%d difficulty=%s", state.score, state.difficulty)
    emit(GAME_OVER, state.score)


def lose_life(state: GameState, emit: Emit = no_emit):
    state.lives = max(0, state.lives - 1)
    raise_alarm(state)
    emit(MISS, state.score)


def penalize_miss(state: GameState, emit: Emit = no_emit):
    """Shared penalty for a click or key hit that removes nothing."""
    lose_life(state, emit)
    MISS_ESCALATION.apply(state)
    if state.lives <= 0:
        end_run(state, emit)


def advance(state: GameState, dt: float, width: float, height: float,
            emit: Optional[Emit] = None, rng=None):
    if not state.running:
        return
    emit = emit or no_emit
    rng = rng or random
    dt = clamp_dt(dt)

    if state.miss_alarm_ms > 0:
        state.miss_alarm_ms = max(0.0, state.miss_alarm_ms - dt * 1000)

    state.spawn_accumulator_ms += dt * 1000
    if state.spawn_accumulator_ms > state.spawn_interval_ms:
        state.spawn_accumulator_ms = 0.0
        spawn_tile(state, width, rng)

    for t in state.tiles:
        t.update(dt)

    missed = [t for t in state.tiles if t.y > height]
    if missed:
        state.tiles = [t for t in state.tiles if t.y <= height]
        for t in missed:
            logger.debug("tile %d passed the bottom", t.id)
            lose_life(state, emit)

    if state.lives <= 0:
        end_run(state, emit)
