import random

import pytest

from liqq.config import GameConfig
from liqq.data_models import PlayerBody, BoundaryContact
from liqq.physics_core import PhysicsCore


def make_body(y=300.0, v=0.0, radius=25.0):
    return PlayerBody(x=108.0, position_y=y, size_radius=radius, velocity_y=v)


def test_gravity_step(config):
    core = PhysicsCore(config)
    body = make_body()

    contact = core.step_body(body, thrust=False, dt=0.1)

    assert contact is BoundaryContact.NONE
    assert body.velocity_y == pytest.approx(90.0)
    assert body.position_y == pytest.approx(309.0)


def test_thrust_sets_velocity(config):
    core = PhysicsCore(config)
    body = make_body(v=300.0)

    core.step_body(body, thrust=True, dt=0.1)

    assert body.velocity_y == pytest.approx(-350.0)
    assert body.position_y == pytest.approx(265.0)


def test_fall_speed_is_capped(config):
    core = PhysicsCore(config)
    body = make_body(v=395.0)

    core.step_body(body, thrust=False, dt=0.1)

    assert body.velocity_y == pytest.approx(400.0)


def test_ground_clamp_kills_velocity():
    cfg = GameConfig(world_height=500, ground_level_fraction=1.0, ceiling_level_fraction=0.06)
    core = PhysicsCore(cfg)
    body = make_body(y=505.0)

    contact = core.step_body(body, thrust=False, dt=0.1)

    assert contact is BoundaryContact.GROUND
    assert body.position_y == pytest.approx(475.0)
    assert body.velocity_y == 0.0


def test_clamp_to_bounds_ground_scenario():
    cfg = GameConfig(world_height=500, ground_level_fraction=1.0, ceiling_level_fraction=0.06)
    core = PhysicsCore(cfg)

    assert core.clamp_to_bounds(510.0, 25.0) == (475.0, BoundaryContact.GROUND)


def test_ceiling_clamp(config):
    core = PhysicsCore(config)
    body = make_body(y=60.0)

    contact = core.step_body(body, thrust=True, dt=0.1)

    assert contact is BoundaryContact.CEILING
    assert body.position_y == pytest.approx(config.ceiling_y + 25.0)
    assert body.velocity_y == 0.0


def test_body_never_leaves_play_field(config):
    core = PhysicsCore(config)
    body = make_body(y=config.idle_y)
    rng = random.Random(99)
    low = config.ceiling_y + body.size_radius
    high = config.ground_y - body.size_radius

    for _ in range(2000):
        contact = core.step_body(body, thrust=rng.random() < 0.2, dt=rng.uniform(0.008, 0.1))
        assert low <= body.position_y <= high
        if contact is not BoundaryContact.NONE:
            assert body.velocity_y == 0.0
