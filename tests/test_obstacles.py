import random

import pytest

from liqq.errors import ConfigurationError
from liqq.obstacles import ObstacleGenerator, ObstacleField

from conftest import make_pair


def make_field(config, rng):
    return ObstacleField(
        ObstacleGenerator(config.spawn_x, rng),
        world_height=config.world_height,
        ceiling_y=config.ceiling_y,
        ground_y=config.ground_y,
        min_gap_size=config.min_gap_size,
        retire_threshold=config.retire_threshold,
    )


# -------- Generator --------

def test_gap_range():
    gen = ObstacleGenerator(spawn_x=385)
    assert gen.gap_range(30, 470, 180) == (120, 380)


def test_generated_gaps_are_feasible(rng):
    gen = ObstacleGenerator(spawn_x=385, rng=rng)

    for _ in range(500):
        pair = gen.generate(500, 30, 470, 180)
        assert 120 <= pair.gap_center_y <= 380
        assert pair.gap_size == 180
        assert pair.x == 385
        assert pair.gap_top >= 30
        assert pair.gap_bottom <= 470
        assert pair.top_span[1] - pair.top_span[0] >= 0
        assert pair.bottom_span[1] - pair.bottom_span[0] >= 0
        assert not pair.scored


def test_inverted_range_raises():
    gen = ObstacleGenerator(spawn_x=385)
    with pytest.raises(ConfigurationError):
        gen.generate(500, 30, 200, 180)


def test_bounds_outside_world_raise():
    gen = ObstacleGenerator(spawn_x=385)
    with pytest.raises(ConfigurationError):
        gen.generate(400, 30, 470, 180)


def test_gap_filling_the_field_has_no_collidable_spans():
    gen = ObstacleGenerator(spawn_x=385)
    pair = gen.generate(500, 30, 210, 180)

    assert pair.gap_center_y == 120
    assert pair.top_span == (30, 30)
    assert pair.bottom_span == (210, 210)
    assert pair.collidable_spans() == ()


def test_ids_are_unique(rng):
    gen = ObstacleGenerator(spawn_x=385, rng=rng)
    ids = [gen.generate(640, 32, 544, 180).id for _ in range(50)]
    assert len(set(ids)) == 50


def test_same_seed_same_gaps():
    a = ObstacleGenerator(spawn_x=385, rng=random.Random(7))
    b = ObstacleGenerator(spawn_x=385, rng=random.Random(7))
    assert ([a.generate(640, 32, 544, 180).gap_center_y for _ in range(20)]
            == [b.generate(640, 32, 544, 180).gap_center_y for _ in range(20)])


# -------- Field --------

def test_advance_moves_pairs(config, rng):
    field = make_field(config, rng)
    field.pairs = [make_pair(1, x=300.0), make_pair(2, x=100.0)]

    retired = field.advance(0.1, 200)

    assert retired == []
    assert [p.x for p in field] == pytest.approx([280.0, 80.0])


def test_advance_retires_past_left_margin(config, rng):
    field = make_field(config, rng)
    field.pairs = [make_pair(1, x=-40.0), make_pair(2, x=200.0)]

    retired = field.advance(0.1, 200)

    assert [p.id for p in retired] == [1]
    assert [p.id for p in field] == [2]


def test_retired_pairs_never_come_back(config, rng):
    field = make_field(config, rng)
    retired_ids = set()
    elapsed = config.spawn_interval_ms

    for _ in range(600):
        for pair in field.advance(0.05, config.move_speed):
            retired_ids.add(pair.id)
        elapsed += 50
        if field.maybe_spawn(elapsed, config.spawn_interval_ms) is not None:
            elapsed = 0
        live = {p.id for p in field}
        assert not live & retired_ids
        assert all(p.x >= config.retire_threshold for p in field)

    assert retired_ids


def test_maybe_spawn_waits_for_interval(config, rng):
    field = make_field(config, rng)

    assert field.maybe_spawn(3000, 3000) is None
    assert len(field) == 0

    pair = field.maybe_spawn(3001, 3000)
    assert pair is not None
    assert list(field) == [pair]
    assert pair.x == config.spawn_x


def test_clear(config, rng):
    field = make_field(config, rng)
    field.maybe_spawn(5000, 3000)
    field.clear()
    assert len(field) == 0
