"""
data_models.py: Data structures for the simulation state.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

Span = Tuple[float, float]


class GameState(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class BoundaryContact(enum.Enum):
    """Which world bound, if any, the body was clamped against this tick."""
    NONE = "none"
    CEILING = "ceiling"
    GROUND = "ground"


@dataclass
class PlayerBody:
    """The player-controlled object. X is fixed, only Y moves."""
    x: float
    position_y: float
    size_radius: float
    velocity_y: float = 0.0

    @property
    def top(self) -> float:
        return self.position_y - self.size_radius

    @property
    def bottom(self) -> float:
        return self.position_y + self.size_radius


@dataclass
class ObstaclePair:
    """
    A top/bottom obstacle sharing one X and one gap.
    Only x and scored change over the pair's lifetime.
    """
    id: int
    x: float
    gap_center_y: float
    gap_size: float
    ceiling_y: float
    ground_y: float
    scored: bool = False

    @property
    def gap_top(self) -> float:
        return self.gap_center_y - self.gap_size / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_center_y + self.gap_size / 2

    @property
    def top_span(self) -> Span:
        return (self.ceiling_y, self.gap_top)

    @property
    def bottom_span(self) -> Span:
        return (self.gap_bottom, self.ground_y)

    def collidable_spans(self) -> Tuple[Span, ...]:
        """Spans with positive length. A gap flush with a bound leaves that side empty."""
        return tuple(s for s in (self.top_span, self.bottom_span) if s[1] - s[0] > 0)


# -------- Read-only views for renderers --------

@dataclass(frozen=True)
class BodyView:
    x: float
    y: float
    radius: float
    velocity: float


@dataclass(frozen=True)
class ObstacleView:
    id: int
    x: float
    gap_center_y: float
    gap_size: float
    top_span: Span
    bottom_span: Span
    collidable_spans: Tuple[Span, ...]
    scored: bool

    @classmethod
    def of(cls, pair: ObstaclePair) -> "ObstacleView":
        return cls(
            id=pair.id,
            x=pair.x,
            gap_center_y=pair.gap_center_y,
            gap_size=pair.gap_size,
            top_span=pair.top_span,
            bottom_span=pair.bottom_span,
            collidable_spans=pair.collidable_spans(),
            scored=pair.scored,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs for one frame."""
    state: GameState
    score: int
    best_score: int
    body: BodyView
    obstacles: Tuple[ObstacleView, ...]
    ceiling_y: float
    ground_y: float
    last_collided_pair: Optional[int] = None

