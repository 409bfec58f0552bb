"""
Liqq: flappy-style obstacle-dodging game simulation.
"""

from .config import GameConfig
from .data_models import GameState, SessionSnapshot
from .errors import ConfigurationError
from .reporting import (
    ScoreReporter, NullScoreReporter, RecordingScoreReporter, UdpScoreReporter,
)
from .session import GameSession
from .stepper import clamp_dt

__all__ = [
    "GameConfig",
    "GameState",
    "SessionSnapshot",
    "ConfigurationError",
    "ScoreReporter",
    "NullScoreReporter",
    "RecordingScoreReporter",
    "UdpScoreReporter",
    "GameSession",
    "clamp_dt",
]
