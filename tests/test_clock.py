import math

import pytest

from tiles_clock import SimulationClock, clamp_dt


def test_first_tick_is_zero_then_deltas_in_seconds():
    c = SimulationClock()
    assert c.tick(1000) == 0
    assert c.tick(1016) == pytest.approx(0.016)
    assert c.tick(1116) == pytest.approx(0.1)


def test_backwards_timestamp_clamps_and_rebases():
    c = SimulationClock()
    c.tick(5000)
    assert c.tick(4000) == 0
    assert c.tick(4050) == pytest.approx(0.05)


def test_reset_forgets_baseline():
    c = SimulationClock()
    c.tick(100)
    c.reset()
    assert c.tick(9000) == 0


@pytest.mark.parametrize("bad", [-1, math.nan, math.inf, -math.inf, None, "x"])
def test_clamp_dt(bad):
    assert clamp_dt(bad) == 0.0
