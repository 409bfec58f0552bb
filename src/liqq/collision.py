"""
collision.py: Collision and pass-through scoring checks.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .data_models import PlayerBody, ObstaclePair, BoundaryContact


class Status(enum.Enum):
    CONTINUE = "continue"
    SCORED = "scored"
    COLLIDED = "collided"


@dataclass
class Evaluation:
    """Outcome of one tick. pair_id is None for a boundary collision."""
    status: Status
    pair_id: Optional[int] = None
    scored_pair_ids: List[int] = field(default_factory=list)

    @property
    def points(self) -> int:
        return len(self.scored_pair_ids)


class CollisionJudge:
    def __init__(self, obstacle_width: float, boundary_is_fatal: bool = False):
        self.obstacle_width = obstacle_width
        self.boundary_is_fatal = boundary_is_fatal

    def overlaps_horizontally(self, body: PlayerBody, pair: ObstaclePair) -> bool:
        return abs(body.x - pair.x) < (self.obstacle_width + body.size_radius * 2) / 2

    def hits(self, body: PlayerBody, pair: ObstaclePair) -> bool:
        if not self.overlaps_horizontally(body, pair):
            return False
        return body.bottom > pair.gap_bottom or body.top < pair.gap_top

    def has_passed(self, body: PlayerBody, pair: ObstaclePair) -> bool:
        return body.x > pair.x + self.obstacle_width / 2

    def evaluate(self, body: PlayerBody, obstacles: Iterable[ObstaclePair],
                 contact: BoundaryContact = BoundaryContact.NONE) -> Evaluation:
        """
        Checks the body against the world bounds and every live pair.
        Collisions are resolved for all pairs before any scoring, so a pair
        that is exited and hit in the same tick reports COLLIDED and stays
        unscored.
        """
        # 1. Boundary
        if self.boundary_is_fatal and contact is not BoundaryContact.NONE:
            return Evaluation(Status.COLLIDED)

        pairs = list(obstacles)

        # 2. Obstacles, terminal for the tick
        for pair in pairs:
            if self.hits(body, pair):
                return Evaluation(Status.COLLIDED, pair_id=pair.id)

        # 3. Pass-through scoring, one point per pair
        scored = []
        for pair in pairs:
            if not pair.scored and self.has_passed(body, pair):
                pair.scored = True
                scored.append(pair.id)

        if scored:
            return Evaluation(Status.SCORED, pair_id=scored[0], scored_pair_ids=scored)
        return Evaluation(Status.CONTINUE)
