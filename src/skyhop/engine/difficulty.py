"""
difficulty.py
-------------
Difficulty levers behind one DifficultyPolicy interface.

Two independent levers:
- Gap lever: the gap narrows by gap_decrease_step every
  score_step_interval points, down to min_gap.
- Speed lever: obstacles speed up by speed_ramp_step every
  speed_ramp_interval simulated seconds, up to max_obstacle_speed.

The difficulty tier is 1 plus the number of steps each active lever has
actually applied, so it stops rising once both levers hit their caps.
"""

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.engine.config import DifficultyMode

# Absorbs float drift in accumulated elapsed time at step boundaries
TIME_EPSILON = 1e-9


class DifficultyPolicy:
    """Base policy: both levers disabled."""

    mode = DifficultyMode.NONE

    def __init__(self, config):
        self.config = config

    # ===========================================================
    # Lever Steps
    # ===========================================================

    def gap_steps(self, score: int) -> int:
        return 0

    def speed_steps(self, elapsed: float) -> int:
        return 0

    # ===========================================================
    # Derived Parameters
    # ===========================================================

    def gap_size(self, score: int) -> float:
        cfg = self.config
        return max(cfg.min_gap, cfg.initial_gap - cfg.gap_decrease_step * self.gap_steps(score))

    def obstacle_speed(self, elapsed: float) -> float:
        cfg = self.config
        return min(cfg.max_obstacle_speed,
                   cfg.initial_obstacle_speed + cfg.speed_ramp_step * self.speed_steps(elapsed))

    def level(self, score: int, elapsed: float) -> int:
        return 1 + self.gap_steps(score) + self.speed_steps(elapsed)


class FixedDifficulty(DifficultyPolicy):
    """Constant gap and speed for the whole game."""


class ScoreBasedDifficulty(DifficultyPolicy):
    """Gap narrows as the score climbs."""

    mode = DifficultyMode.SCORE_BASED

    def gap_steps(self, score: int) -> int:
        return min(self.config.gap_steps_cap, int(score // self.config.score_step_interval))


class TimeBasedDifficulty(DifficultyPolicy):
    """Obstacles speed up on a fixed simulated-time interval."""

    mode = DifficultyMode.TIME_BASED

    def speed_steps(self, elapsed: float) -> int:
        ramps = int((elapsed + TIME_EPSILON) // self.config.speed_ramp_interval)
        return min(self.config.speed_steps_cap, ramps)


class CombinedDifficulty(ScoreBasedDifficulty, TimeBasedDifficulty):
    """Both levers active."""

    mode = DifficultyMode.COMBINED


# ===========================================================
# Policy Registry
# ===========================================================

POLICY_TYPES = {
    DifficultyMode.NONE: FixedDifficulty,
    DifficultyMode.SCORE_BASED: ScoreBasedDifficulty,
    DifficultyMode.TIME_BASED: TimeBasedDifficulty,
    DifficultyMode.COMBINED: CombinedDifficulty,
}


def make_policy(config) -> DifficultyPolicy:
    """Instantiate the policy selected by config.difficulty_mode."""
    policy = POLICY_TYPES[config.difficulty_mode](config)
    DebugLogger.system(f"Difficulty policy: {type(policy).__name__}", category="engine")
    return policy
