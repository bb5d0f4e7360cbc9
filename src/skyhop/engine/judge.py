"""
judge.py
--------
Pass and collision detection between the avatar and the obstacles.

Responsibilities
----------------
- Mark an obstacle passed the first time its trailing edge clears the
  avatar's leading edge, and count it toward the score.
- Detect the avatar touching the solid part of any horizontally
  overlapping obstacle.

Obstacles are checked in sequence order. The first collision ends the
check; obstacles after it are returned unchanged.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.engine.state import Obstacle


@dataclass(frozen=True)
class Verdict:
    """Outcome of judging one tick."""
    obstacles: Tuple[Obstacle, ...]
    passed: int = 0
    collided: bool = False


class Judge:
    """Stateless checker bound to the avatar and obstacle geometry."""

    def __init__(self, config):
        self.config = config

    # ===========================================================
    # Geometry
    # ===========================================================

    def overlaps_horizontally(self, obstacle: Obstacle) -> bool:
        cfg = self.config
        return (cfg.avatar_x < obstacle.x + cfg.obstacle_width
                and cfg.avatar_x + cfg.avatar_width > obstacle.x)

    def has_cleared(self, obstacle: Obstacle) -> bool:
        """Trailing edge of the obstacle is behind the avatar's leading edge."""
        cfg = self.config
        return obstacle.x + cfg.obstacle_width < cfg.avatar_x + cfg.avatar_width

    def hits(self, obstacle: Obstacle, avatar_y: float) -> bool:
        if not self.overlaps_horizontally(obstacle):
            return False
        return avatar_y < obstacle.gap_top or \
            avatar_y + self.config.avatar_height > obstacle.gap_bottom

    # ===========================================================
    # Judging
    # ===========================================================

    def judge(self, obstacles: Tuple[Obstacle, ...], avatar_y: float) -> Verdict:
        """
        Check every obstacle against the avatar at avatar_y.

        Args:
            obstacles: Sequence in spawn order
            avatar_y: Avatar top edge to test

        Returns:
            Verdict: Updated obstacles, newly passed count, collision flag
        """
        judged = []
        passed = 0

        for index, obstacle in enumerate(obstacles):
            if not obstacle.passed and self.has_cleared(obstacle):
                obstacle = replace(obstacle, passed=True)
                passed += 1

            judged.append(obstacle)

            if self.hits(obstacle, avatar_y):
                DebugLogger.trace(
                    f"Collision at x={obstacle.x:.1f} avatar_y={avatar_y:.1f}",
                    category="collision"
                )
                judged.extend(obstacles[index + 1:])
                return Verdict(tuple(judged), passed, True)

        return Verdict(tuple(judged), passed, False)
