"""
session.py: The game session state machine. The only object glue code talks to.
"""

import logging
import math
import random
from typing import Callable, Optional

from .collision import CollisionJudge, Status
from .config import GameConfig
from .data_models import (
    GameState, PlayerBody, BodyView, ObstacleView, SessionSnapshot,
)
from .obstacles import ObstacleGenerator, ObstacleField
from .physics_core import PhysicsCore
from .reporting import NullScoreReporter, ScoreReporter
from .stepper import clamp_dt

logger = logging.getLogger(__name__)

ScoreCallback = Callable[[int], None]


class GameSession:
    """
    Idle -> Playing -> GameOver -> Idle.

    Driven by a single writer calling tick(raw_dt_ms) once per frame.
    submit_thrust() may be called between ticks; calls collapse into one
    pending flap consumed by the next tick.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None,
                 on_score_changed: Optional[ScoreCallback] = None,
                 on_game_over: Optional[ScoreCallback] = None,
                 reporter: Optional[ScoreReporter] = None):
        self.config = (config or GameConfig()).validate()
        if rng is None:
            rng = random.Random(seed)

        self.on_score_changed = on_score_changed
        self.on_game_over = on_game_over
        self.reporter = reporter if reporter is not None else NullScoreReporter()

        cfg = self.config
        self.physics = PhysicsCore(cfg)
        self.judge = CollisionJudge(cfg.obstacle_width, cfg.boundary_is_fatal)
        self.field = ObstacleField(
            ObstacleGenerator(cfg.spawn_x, rng),
            world_height=cfg.world_height,
            ceiling_y=cfg.ceiling_y,
            ground_y=cfg.ground_y,
            min_gap_size=cfg.min_gap_size,
            retire_threshold=cfg.retire_threshold,
        )
        self.body = PlayerBody(x=cfg.player_x, position_y=cfg.idle_y, size_radius=cfg.size_radius)

        self._state = GameState.IDLE
        self._score = 0
        self._pending_thrust = False
        self._hover_phase = 0.0
        self._last_collided_pair: Optional[int] = None
        self.elapsed_since_last_spawn = 0.0
        self.ticks_played = 0
        self.runs_completed = 0
        self.best_score = 0
        self._reset()

    # -------- Read-only accessors --------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def thrust_pending(self) -> bool:
        return self._pending_thrust

    def snapshot(self) -> SessionSnapshot:
        body = self.body
        return SessionSnapshot(
            state=self._state,
            score=self._score,
            best_score=self.best_score,
            body=BodyView(x=body.x, y=body.position_y, radius=body.size_radius,
                          velocity=body.velocity_y),
            obstacles=tuple(ObstacleView.of(p) for p in self.field),
            ceiling_y=self.config.ceiling_y,
            ground_y=self.config.ground_y,
            last_collided_pair=self._last_collided_pair,
        )

    # -------- Inputs --------

    def submit_thrust(self):
        """Buffers one flap for the next tick. Repeated calls are not counted."""
        self._pending_thrust = True

    def tick(self, raw_dt_ms: float):
        """Advances the session by one frame of raw_dt_ms milliseconds."""
        dt_ms = clamp_dt(raw_dt_ms, self.config.min_dt_ms, self.config.max_dt_ms)
        thrust = self._pending_thrust
        self._pending_thrust = False

        if self._state is GameState.IDLE:
            if thrust:
                self._transition(GameState.PLAYING)
            else:
                self._hover(dt_ms / 1000.0)
        elif self._state is GameState.PLAYING:
            self._play(dt_ms, thrust)
        elif thrust:
            self._reset()
            self._transition(GameState.IDLE)

    # -------- Internals --------

    def _transition(self, new_state: GameState):
        logger.debug("Session %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def _hover(self, dt: float):
        """Idle bobbing, visual only. No physics runs while idle."""
        cfg = self.config
        self._hover_phase += cfg.hover_speed * dt
        y = cfg.idle_y + math.sin(self._hover_phase) * cfg.hover_amplitude
        self.body.position_y, _ = self.physics.clamp_to_bounds(y, self.body.size_radius)
        self.body.velocity_y = 0.0

    def _play(self, dt_ms: float, thrust: bool):
        cfg = self.config
        dt = dt_ms / 1000.0
        self.ticks_played += 1

        # 1. Body
        contact = self.physics.step_body(self.body, thrust, dt)

        # 2. Obstacles
        self.field.advance(dt, cfg.move_speed)
        self.elapsed_since_last_spawn += dt_ms
        if self.field.maybe_spawn(self.elapsed_since_last_spawn, cfg.spawn_interval_ms) is not None:
            self.elapsed_since_last_spawn = 0.0

        # 3. Judge
        result = self.judge.evaluate(self.body, self.field, contact)
        if result.status is Status.COLLIDED:
            self._last_collided_pair = result.pair_id
            self._game_over()
            return

        for _ in result.scored_pair_ids:
            self._score += 1
            if self.on_score_changed is not None:
                self.on_score_changed(self._score)

    def _game_over(self):
        self._transition(GameState.GAME_OVER)
        final_score = self._score
        self.runs_completed += 1
        self.best_score = max(self.best_score, final_score)
        logger.info("Game over after %d ticks, final score %d", self.ticks_played, final_score)

        if self.on_game_over is not None:
            self.on_game_over(final_score)
        self.reporter.report(final_score)

    def _reset(self):
        """Fresh run: score 0, no obstacles, body at rest, spawn timer armed for the first tick."""
        self._score = 0
        self.ticks_played = 0
        self._hover_phase = 0.0
        self._last_collided_pair = None
        self.field.clear()
        self.body.position_y, _ = self.physics.clamp_to_bounds(
            self.config.idle_y, self.body.size_radius)
        self.body.velocity_y = 0.0
        self.elapsed_since_last_spawn = float(self.config.spawn_interval_ms)
