"""Pointer and key-hit resolution"""
import logging
from typing import Optional
from tiles_config import CONFIG
from tiles_difficulty import HIT_ESCALATION
from tiles_engine import penalize_miss
from tiles_state import HIT, Emit, GameState, no_emit

logger = logging.getLogger(__name__)


def _score(state: GameState, tile, emit: Emit):
    state.remove(tile)
    state.score += 1
    emit(HIT, state.score)


def resolve_pointer(state: GameState, x: float, y: float, emit: Emit = no_emit) -> bool:
    if not state.running:
        return False
    for t in reversed(state.tiles):
        if t.contains(x, y):
            _score(state, t, emit)
            return True
    logger.debug("pointer miss at (%.0f, %.0f)", x, y)
    penalize_miss(state, emit)
    return False


def resolve_key_hit(state: GameState, height: float, hit_zone: Optional[float] = None,
                    emit: Emit = no_emit) -> bool:
    if not state.running:
        return False
    zone_top = height - (CONFIG["HIT_ZONE_HEIGHT"] if hit_zone is None else hit_zone)
    best = None
    for t in state.tiles:
        if t.bottom >= zone_top and t.y <= height:
            if best is None or t.bottom > best.bottom:
                best = t
    if best is None:
        logger.debug("key hit with empty hit zone")
        penalize_miss(state, emit)
        return False
    _score(state, best, emit)
    HIT_ESCALATION.apply(state)
    return True
