"""
physics_core.py: Deterministic kinematics for the player body.
"""

from typing import Tuple

from .config import GameConfig
from .data_models import PlayerBody, BoundaryContact


class PhysicsCore:
    """
    Forward-Euler integrator for the body's vertical motion.
    The Stepper bounds dt, so the explicit scheme stays stable.
    """

    def __init__(self, config: GameConfig):
        self.gravity = config.gravity
        self.fly_force = config.fly_force
        self.max_fall_speed = config.max_fall_speed
        self.ceiling_y = config.ceiling_y
        self.ground_y = config.ground_y

    def flap(self) -> float:
        """Returns the velocity after a flap. Set, not added, so every flap has the same height."""
        return self.fly_force

    def apply_gravity(self, velocity: float, dt: float) -> float:
        return min(velocity + self.gravity * dt, self.max_fall_speed)

    def clamp_to_bounds(self, y: float, radius: float) -> Tuple[float, BoundaryContact]:
        """Keeps the body inside [ceiling + r, ground - r]."""
        low = self.ceiling_y + radius
        high = self.ground_y - radius
        if y > high:
            return high, BoundaryContact.GROUND
        if y < low:
            return low, BoundaryContact.CEILING
        return y, BoundaryContact.NONE

    def step_body(self, body: PlayerBody, thrust: bool, dt: float) -> BoundaryContact:
        """
        Advances the body by dt seconds. Mutates the body.
        Returns the bound it was clamped against, if any.
        """
        # 1. Flap or fall
        if thrust:
            body.velocity_y = self.flap()
        else:
            body.velocity_y = self.apply_gravity(body.velocity_y, dt)

        # 2. Move
        body.position_y += body.velocity_y * dt

        # 3. Clamp, killing momentum on contact
        body.position_y, contact = self.clamp_to_bounds(body.position_y, body.size_radius)
        if contact is not BoundaryContact.NONE:
            body.velocity_y = 0.0
        return contact
