"""
obstacle_manager.py
-------------------
Spawns, scrolls and retires the gap obstacles.

Responsibilities
----------------
- Scroll every obstacle left by speed * dt.
- Drop obstacles that have fully left the playfield.
- Append a new obstacle at the right edge once the newest one has
  moved spawn_threshold pixels in.

Obstacles are values; each call returns a new tuple in spawn order.
"""

from typing import Tuple

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.engine.state import Obstacle


class ObstacleManager:
    """Pure obstacle stepper bound to one engine configuration and random source."""

    def __init__(self, config, rng):
        """
        Args:
            config: EngineConfig
            rng: random.Random used for gap placement
        """
        self.config = config
        self.rng = rng

    # ===========================================================
    # Update
    # ===========================================================

    def advance(self, obstacles: Tuple[Obstacle, ...], dt: float, speed: float,
                gap_size: float, playfield_width: float, playfield_height: float) -> Tuple[Obstacle, ...]:
        """
        Produce the next obstacle sequence.

        Args:
            obstacles: Current sequence, oldest first
            dt: Step length in ticks
            speed: Horizontal scroll speed
            gap_size: Opening for a newly spawned obstacle
            playfield_width: Current playfield width
            playfield_height: Current playfield height

        Returns:
            tuple[Obstacle]: Moved, culled and possibly extended sequence
        """
        width = self.config.obstacle_width
        shift = speed * dt

        moved = [
            Obstacle(o.x - shift, o.gap_top, o.gap_size, o.passed)
            for o in obstacles
            if o.x - shift > -width
        ]

        removed = len(obstacles) - len(moved)
        if removed:
            DebugLogger.trace(f"Retired {removed} obstacle(s)", category="obstacle")

        if self.should_spawn(obstacles, playfield_width):
            moved.append(self.spawn(gap_size, playfield_width, playfield_height))

        return tuple(moved)

    # ===========================================================
    # Spawning
    # ===========================================================

    def should_spawn(self, obstacles, playfield_width: float) -> bool:
        """Spawn when empty or when the newest obstacle has scrolled far enough in."""
        if not obstacles:
            return True
        return obstacles[-1].x < playfield_width - self.config.spawn_threshold

    def spawn(self, gap_size: float, playfield_width: float, playfield_height: float) -> Obstacle:
        """Create an obstacle at the right edge with a randomly placed gap."""
        margin = self.config.gap_margin
        highest = max(margin, playfield_height - gap_size - margin)
        gap_top = self.rng.uniform(margin, highest)

        DebugLogger.trace(
            f"Spawned obstacle gap_top={gap_top:.1f} gap={gap_size:.1f}",
            category="obstacle"
        )
        return Obstacle(x=playfield_width, gap_top=gap_top, gap_size=gap_size)
