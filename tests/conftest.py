import random

import pytest

from liqq.config import GameConfig
from liqq.data_models import ObstaclePair


class MidpointRandom(random.Random):
    """Always places the gap in the middle of its feasible range."""

    def uniform(self, a, b):
        return (a + b) / 2


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def open_config():
    """A world whose single gap spans the whole play field, so nothing can be hit."""
    return GameConfig(
        world_width=360,
        world_height=600,
        ceiling_level_fraction=0.0,
        ground_level_fraction=1.0,
        min_gap_size=600,
        hover_base_offset=300,
    )


def make_pair(pair_id=1, x=108.0, gap_center_y=300.0, gap_size=180.0,
              ceiling_y=32.0, ground_y=544.0):
    return ObstaclePair(id=pair_id, x=x, gap_center_y=gap_center_y, gap_size=gap_size,
                        ceiling_y=ceiling_y, ground_y=ground_y)
