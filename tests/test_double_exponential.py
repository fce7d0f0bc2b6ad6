# tests/test_double_exponential.py
import math

import pytest

from stream_smoother import Method

def test_first_sample_seeds_state_and_trend(smoother_factory):
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, (0.3, 0.9))
    assert s.next(7.5) == 7.5
    assert s.coefficients.trend == 0.0

def test_holt_recurrence(smoother_factory):
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, (0.5, 0.5))
    assert s.next(1.0) == 1.0
    assert s.next(2.0) == 1.5
    assert s.coefficients.trend == 0.25
    assert s.next(3.0) == 2.375
    assert s.coefficients.trend == 0.5625

def test_trend_uses_new_state(smoother_factory):
    # beta=1: trend equals the last level change
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, [0.5, 1.0], 0.0)
    s.next(4.0)
    assert s.get() == 2.0
    assert s.coefficients.trend == 2.0
    s.next(4.0)
    assert s.get() == 4.0
    assert s.coefficients.trend == 2.0

def test_alpha_and_beta_are_fixed(smoother_factory):
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, (0.4, 0.2))
    for x in (1.0, 3.0, -2.0, 8.0):
        s.next(x)
    assert s.coefficients.alpha == 0.4
    assert s.coefficients.beta == 0.2

def test_tracks_linear_ramp(smoother_factory):
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, (0.5, 0.5))
    for t in range(300):
        y = s.next(float(t))
    assert y == pytest.approx(299.0, abs=1e-6)
    assert s.coefficients.trend == pytest.approx(1.0, abs=1e-6)

def test_nan_contaminates_trend(smoother_factory):
    s = smoother_factory(Method.DOUBLE_EXPONENTIAL, (0.5, 0.5), 0.0)
    s.next(float("nan"))
    assert math.isnan(s.get())
    assert math.isnan(s.coefficients.trend)
