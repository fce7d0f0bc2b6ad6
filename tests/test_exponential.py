# tests/test_exponential.py
import math

import numpy as np
import pytest

from stream_smoother import Method, SmootherPhase

def test_get_and_next_with_initial_state(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.5, 0.0)
    assert s.get() == 0.0
    assert s.next(1.0) == 0.5

def test_get_before_first_sample_is_nan(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.5)
    assert math.isnan(s.get())
    assert s.tick_count == 0
    assert s.phase is SmootherPhase.FRESH

@pytest.mark.parametrize("alpha", [0.0, 0.1, 0.5, 1.0, 2.5])
def test_first_sample_seeds_state(smoother_factory, alpha):
    s = smoother_factory(Method.EXPONENTIAL, alpha)
    assert s.next(4.25) == 4.25
    assert s.phase is SmootherPhase.RUNNING

def test_blending_after_seed(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.5)
    assert [s.next(x) for x in (4.0, 0.0, 2.0)] == [4.0, 2.0, 2.0]
    assert s.tick_count == 3

def test_constant_input_converges_monotonically(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.3, 0.0)
    outputs = [s.next(5.0) for _ in range(200)]
    assert all(b >= a for a, b in zip(outputs, outputs[1:]))
    assert outputs[-1] == pytest.approx(5.0)

def test_constant_input_after_seed_stays_exact(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.3)
    assert all(s.next(5.0) == 5.0 for _ in range(20))

def test_output_stays_within_observed_bounds(smoother_factory):
    rng = np.random.default_rng(7)
    samples = rng.uniform(-3.0, 8.0, size=500)
    s = smoother_factory(Method.EXPONENTIAL, 0.2)
    lo, hi = math.inf, -math.inf
    for x in samples:
        lo, hi = min(lo, x), max(hi, x)
        y = s.next(float(x))
        assert lo - 1e-12 <= y <= hi + 1e-12

def test_alpha_outside_unit_interval_is_applied_as_is(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 1.5, 0.0)
    assert s.next(2.0) == 3.0

def test_nan_sample_propagates(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.5, 0.0)
    assert math.isnan(s.next(float("nan")))
    assert math.isnan(s.next(1.0))

def test_infinite_sample_propagates(smoother_factory):
    s = smoother_factory(Method.EXPONENTIAL, 0.5, 0.0)
    assert s.next(math.inf) == math.inf
