"""
stepper.py: Converts free-running frame callbacks into bounded time steps.
"""

import math

from .constants import MIN_DT_MS, MAX_DT_MS


def clamp_dt(raw_dt_ms: float, min_dt_ms: float = MIN_DT_MS, max_dt_ms: float = MAX_DT_MS) -> float:
    """
    Clamps a raw frame time (ms) into [min_dt_ms, max_dt_ms].
    A long frame would otherwise tunnel the body through an obstacle,
    a near-zero one would stall motion. NaN is treated as the floor.
    """
    if math.isnan(raw_dt_ms):
        return min_dt_ms
    return max(min_dt_ms, min(raw_dt_ms, max_dt_ms))


def clamp_dt_seconds(raw_dt_ms: float, min_dt_ms: float = MIN_DT_MS, max_dt_ms: float = MAX_DT_MS) -> float:
    """Same as clamp_dt, returned in seconds for the integrators."""
    return clamp_dt(raw_dt_ms, min_dt_ms, max_dt_ms) / 1000.0
