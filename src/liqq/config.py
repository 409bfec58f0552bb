"""
config.py: Session configuration, validation and loading.
"""

import dataclasses
import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .constants import (
    GAME_WIDTH, GAME_HEIGHT, GROUND_LEVEL, CEILING_LEVEL, PLAYER_X_FRACTION,
    GRAVITY, FLY_FORCE, MAX_FALL_SPEED, MOVE_SPEED, BLOCK_SIZE,
    OBSTACLE_WIDTH, MIN_GAP_SIZE, SPAWN_INTERVAL_MS,
    MIN_DT_MS, MAX_DT_MS, HOVER_SPEED, HOVER_AMPLITUDE, HOVER_BASE_OFFSET,
    BOUNDARY_IS_FATAL,
)
from .errors import ConfigurationError

# Original game config names -> field names
LEGACY_KEYS = {
    "FLY_FORCE": "fly_force",
    "GRAVITY": "gravity",
    "MOVE_SPEED": "move_speed",
    "GROUND_LEVEL": "ground_level_fraction",
    "CEILING_LEVEL": "ceiling_level_fraction",
    "BLOCK_SIZE": "block_size",
    "MIN_GAP_SIZE": "min_gap_size",
    "CANDLE_SPAWN_INTERVAL": "spawn_interval_ms",
    "HOVER_SPEED": "hover_speed",
    "HOVER_AMPLITUDE": "hover_amplitude",
    "GAME_WIDTH": "world_width",
    "GAME_HEIGHT": "world_height",
}


@dataclass(frozen=True)
class GameConfig:
    """All tuning constants a session is built from."""
    gravity: float = GRAVITY
    fly_force: float = FLY_FORCE
    move_speed: float = MOVE_SPEED
    min_gap_size: float = MIN_GAP_SIZE
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    ground_level_fraction: float = GROUND_LEVEL
    ceiling_level_fraction: float = CEILING_LEVEL
    world_width: float = GAME_WIDTH
    world_height: float = GAME_HEIGHT

    block_size: float = BLOCK_SIZE
    max_fall_speed: float = MAX_FALL_SPEED
    obstacle_width: float = OBSTACLE_WIDTH
    player_x_fraction: float = PLAYER_X_FRACTION
    min_dt_ms: float = MIN_DT_MS
    max_dt_ms: float = MAX_DT_MS
    hover_speed: float = HOVER_SPEED
    hover_amplitude: float = HOVER_AMPLITUDE
    hover_base_offset: float = HOVER_BASE_OFFSET
    boundary_is_fatal: bool = BOUNDARY_IS_FATAL

    # -------- Derived geometry --------

    @property
    def ceiling_y(self) -> float:
        return self.world_height * self.ceiling_level_fraction

    @property
    def ground_y(self) -> float:
        return self.world_height * self.ground_level_fraction

    @property
    def size_radius(self) -> float:
        return self.block_size / 2

    @property
    def player_x(self) -> float:
        return self.world_width * self.player_x_fraction

    @property
    def spawn_x(self) -> float:
        """Pairs enter just past the right edge of the play field."""
        return self.world_width + self.obstacle_width / 2

    @property
    def retire_threshold(self) -> float:
        return -self.obstacle_width

    @property
    def idle_y(self) -> float:
        return self.ground_y - self.hover_base_offset

    # -------- Validation --------

    def validate(self) -> "GameConfig":
        """
        Raises ConfigurationError if the world cannot be played.
        Returns self so it can be chained after construction.
        """
        for name in ("ground_level_fraction", "ceiling_level_fraction", "player_x_fraction"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must lie in [0, 1], got {value}")

        for name in ("world_width", "world_height", "block_size", "obstacle_width",
                     "min_gap_size", "spawn_interval_ms", "move_speed",
                     "max_fall_speed", "min_dt_ms", "max_dt_ms"):
            value = getattr(self, name)
            if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

        if self.min_dt_ms > self.max_dt_ms:
            raise ConfigurationError(
                f"min_dt_ms ({self.min_dt_ms}) exceeds max_dt_ms ({self.max_dt_ms})")

        span = self.ground_y - self.ceiling_y
        if span <= 0:
            raise ConfigurationError(
                f"ceiling ({self.ceiling_y}) must lie above ground ({self.ground_y})")
        if span < self.min_gap_size:
            raise ConfigurationError(
                f"min_gap_size ({self.min_gap_size}) exceeds the play field "
                f"height ({span})")
        if span < self.block_size:
            raise ConfigurationError(
                f"block_size ({self.block_size}) does not fit the play field "
                f"height ({span})")
        return self

    # -------- Loading --------

    def replace(self, **changes: Any) -> "GameConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GameConfig":
        """
        Builds a config from field names or the original UPPER_CASE names.
        Missing keys keep their defaults.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = LEGACY_KEYS.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown configuration key: {key!r}")
            values[name] = value
        return cls(**values)

    @classmethod
    def from_json_file(cls, path: str) -> "GameConfig":
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")
        return cls.from_mapping(data)
