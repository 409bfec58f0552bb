import math

import pytest

from liqq.stepper import clamp_dt, clamp_dt_seconds


def test_in_range_passes_through():
    assert clamp_dt(16.6) == 16.6


def test_floor_and_ceiling():
    assert clamp_dt(1) == 8
    assert clamp_dt(0) == 8
    assert clamp_dt(500) == 100


def test_bad_samples_are_total():
    assert clamp_dt(-20) == 8
    assert clamp_dt(math.nan) == 8
    assert clamp_dt(math.inf) == 100


def test_custom_bounds():
    assert clamp_dt(40, min_dt_ms=10, max_dt_ms=33) == 33


def test_seconds():
    assert clamp_dt_seconds(50) == pytest.approx(0.05)
    assert clamp_dt_seconds(1000) == pytest.approx(0.1)
