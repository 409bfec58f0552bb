#!/usr/bin/env python3
"""
client.py

pygame front end: feeds frame times and flap input into a GameSession and
draws whatever its snapshot says. Holds no game state of its own.
"""

import argparse
import logging
from typing import List, Optional

import pygame

from .config import GameConfig
from .data_models import GameState, SessionSnapshot
from .errors import ConfigurationError
from .reporting import NullScoreReporter, UdpScoreReporter, parse_address
from .session import GameSession

RENDER_FPS = 60

BACKGROUND_COLOR = (26, 26, 26)
BLOCK_COLOR = (0, 191, 255)
BOTTOM_OBSTACLE_COLOR = (0, 255, 0)
TOP_OBSTACLE_COLOR = (255, 0, 0)
BOUNDARY_COLOR = (102, 102, 102)
WHITE = (255, 255, 255)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)

logger = logging.getLogger(__name__)


class GameClient:
    def __init__(self, session: GameSession):
        pygame.init()
        self.session = session
        cfg = session.config
        self.width = int(cfg.world_width)
        self.height = int(cfg.world_height)
        self.obstacle_width = cfg.obstacle_width
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Liqq")

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client loop. One session tick per rendered frame."""
        running = True
        while running:
            raw_dt_ms = self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif self.is_flap(event):
                    self.session.submit_thrust()

            self.session.tick(raw_dt_ms)
            self.draw(self.session.snapshot())

        pygame.quit()

    @staticmethod
    def is_flap(event) -> bool:
        if event.type == pygame.KEYDOWN:
            return event.key in FLAP_KEYS
        return event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)

    def draw(self, snap: SessionSnapshot):
        """Renders one frame from the snapshot."""
        screen = self.screen
        screen.fill(BACKGROUND_COLOR)

        # Bounds
        pygame.draw.rect(screen, BOUNDARY_COLOR, (0, snap.ceiling_y - 2, self.width, 2))
        pygame.draw.rect(screen, BOUNDARY_COLOR, (0, snap.ground_y, self.width, 2))

        # Obstacles
        half_w = self.obstacle_width / 2
        for obstacle in snap.obstacles:
            for start, end in obstacle.collidable_spans:
                color = TOP_OBSTACLE_COLOR if start < obstacle.gap_center_y else BOTTOM_OBSTACLE_COLOR
                pygame.draw.rect(screen, color, (obstacle.x - half_w, start, self.obstacle_width, end - start))

        # Body
        body = snap.body
        pygame.draw.rect(screen, BLOCK_COLOR,
                         (body.x - body.radius, body.y - body.radius, body.radius * 2, body.radius * 2))

        # HUD
        score_text = self.large_font.render(str(snap.score), True, WHITE)
        screen.blit(score_text, (self.width // 2 - score_text.get_width() // 2, int(self.height * 0.1)))

        if snap.state is GameState.IDLE:
            self._blit_centered(["Press Space", "or Tap to Start"], int(self.height * 0.4))
        elif snap.state is GameState.GAME_OVER:
            self._blit_centered(
                ["Game Over", f"Score: {snap.score}  Best: {snap.best_score}", "Tap to continue"],
                int(self.height * 0.4))

        pygame.display.flip()

    def _blit_centered(self, lines: List[str], top: int):
        for i, line in enumerate(lines):
            surf = self.large_font.render(line, True, WHITE)
            screen_x = self.width // 2 - surf.get_width() // 2
            self.screen.blit(surf, (screen_x, top + i * 40))


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Liqq.")
    parser.add_argument("--config", help="JSON file with game constants.")
    parser.add_argument("--seed", type=int, help="Seed for obstacle placement.")
    parser.add_argument("--fatal-boundaries", action="store_true",
                        help="End the run when the block touches ceiling or ground.")
    parser.add_argument("--report", metavar="HOST:PORT",
                        help="Send final scores as UDP datagrams to this address.")
    parser.add_argument("--player", default="player", help="Name sent with reported scores.")
    parser.add_argument("--log-level", default="info")
    return parser.parse_args(argv)


def build_session(args: argparse.Namespace) -> GameSession:
    config = GameConfig.from_json_file(args.config) if args.config else GameConfig()
    if args.fatal_boundaries:
        config = config.replace(boundary_is_fatal=True)

    reporter = NullScoreReporter()
    if args.report:
        reporter = UdpScoreReporter(parse_address(args.report), args.player)

    return GameSession(
        config,
        seed=args.seed,
        reporter=reporter,
        on_score_changed=lambda score: logger.debug("Score: %d", score),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        session = build_session(args)
    except (ConfigurationError, ValueError) as e:
        logger.error("Cannot start: %s", e)
        return 2

    GameClient(session).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
