"""
obstacles.py: Obstacle pair generation and the live obstacle field.
"""

import itertools
import logging
import random
from typing import Iterator, List, Optional

from .data_models import ObstaclePair
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ObstacleGenerator:
    """
    Pure factory for obstacle pairs. The random source is injected so runs
    can be replayed from a seed.
    """

    def __init__(self, spawn_x: float, rng: Optional[random.Random] = None):
        self.spawn_x = spawn_x
        self.rng = rng if rng is not None else random.Random()
        self._ids = itertools.count(1)

    def gap_range(self, ceiling_y: float, ground_y: float, min_gap_size: float):
        """Feasible (low, high) for the gap center, inclusive."""
        low = ceiling_y + min_gap_size / 2
        high = ground_y - min_gap_size / 2
        if low > high:
            raise ConfigurationError(
                f"min_gap_size ({min_gap_size}) does not fit between "
                f"ceiling ({ceiling_y}) and ground ({ground_y})")
        return low, high

    def generate(self, world_height: float, ceiling_y: float, ground_y: float,
                 min_gap_size: float) -> ObstaclePair:
        """Creates a pair just off the right edge. Gap size is fixed, only its position varies."""
        if not 0 <= ceiling_y <= ground_y <= world_height:
            raise ConfigurationError(
                f"ceiling ({ceiling_y}) and ground ({ground_y}) must lie "
                f"inside the world height ({world_height})")
        low, high = self.gap_range(ceiling_y, ground_y, min_gap_size)
        gap_center_y = self.rng.uniform(low, high)

        pair = ObstaclePair(
            id=next(self._ids),
            x=float(self.spawn_x),
            gap_center_y=gap_center_y,
            gap_size=min_gap_size,
            ceiling_y=ceiling_y,
            ground_y=ground_y,
        )
        logger.debug("Spawned pair %d at x=%.1f gap_y=%.1f", pair.id, pair.x, gap_center_y)
        return pair


class ObstacleField:
    """Owns the live pairs, ordered by creation."""

    def __init__(self, generator: ObstacleGenerator, world_height: float,
                 ceiling_y: float, ground_y: float, min_gap_size: float,
                 retire_threshold: float):
        self.generator = generator
        self.world_height = world_height
        self.ceiling_y = ceiling_y
        self.ground_y = ground_y
        self.min_gap_size = min_gap_size
        self.retire_threshold = retire_threshold
        self.pairs: List[ObstaclePair] = []

    def __iter__(self) -> Iterator[ObstaclePair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def advance(self, dt: float, move_speed: float) -> List[ObstaclePair]:
        """
        Scrolls every pair left by move_speed * dt and retires those past
        the left margin. Returns the retired pairs.
        """
        delta_x = move_speed * dt
        for pair in self.pairs:
            pair.x -= delta_x

        retired = [p for p in self.pairs if p.x < self.retire_threshold]
        if retired:
            self.pairs = [p for p in self.pairs if p.x >= self.retire_threshold]
        return retired

    def maybe_spawn(self, elapsed_since_last_spawn: float, spawn_interval_ms: float) -> Optional[ObstaclePair]:
        """
        Spawns a pair once the accumulated tick time exceeds the interval.
        The caller resets its accumulator when a pair is returned.
        """
        if elapsed_since_last_spawn <= spawn_interval_ms:
            return None
        pair = self.generator.generate(
            self.world_height, self.ceiling_y, self.ground_y, self.min_gap_size)
        self.pairs.append(pair)
        return pair

    def clear(self):
        self.pairs = []
