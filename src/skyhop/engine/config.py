"""
config.py
---------
Engine configuration: a frozen, validated parameter set supplied at
engine construction.

Responsibilities
----------------
- Declare every tunable engine parameter with its default.
- Build configurations from engine.json, difficulty.yaml presets and
  caller overrides, layered in that order.
- Reject inconsistent parameter sets with ConfigurationError.

Units are pixels and ticks: speeds are pixels per tick, gravity is
pixels per tick squared, and speed_ramp_interval is simulated seconds.
"""

import math
import numbers
from dataclasses import asdict, dataclass, fields
from enum import Enum

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.services.config_manager import load_config


class ConfigurationError(ValueError):
    """Raised when an engine configuration is inconsistent."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("Invalid engine configuration: " + "; ".join(self.problems))


class DifficultyMode(str, Enum):
    """Which difficulty levers are active."""
    NONE = "none"
    SCORE_BASED = "score_based"
    TIME_BASED = "time_based"
    COMBINED = "combined"


# ===========================================================
# Engine Configuration
# ===========================================================

@dataclass(frozen=True)
class EngineConfig:
    # Kinematics
    gravity: float = 0.5
    jump_impulse: float = -8.0

    # Lives
    initial_lives: int = 3

    # Gap lever
    initial_gap: float = 150.0
    min_gap: float = 90.0
    gap_decrease_step: float = 10.0
    score_step_interval: int = 5
    gap_margin: float = 50.0

    # Speed lever
    initial_obstacle_speed: float = 2.0
    max_obstacle_speed: float = 5.0
    speed_ramp_interval: float = 10.0
    speed_ramp_step: float = 0.5

    # Geometry
    avatar_width: float = 38.0
    avatar_height: float = 28.0
    avatar_x: float = 50.0
    avatar_start_ratio: float = 0.5
    obstacle_width: float = 52.0
    spawn_threshold: float = 200.0
    playfield_width: float = 500.0
    playfield_height: float = 500.0

    # Timing / cosmetics
    tick_rate: int = 50
    decoration_spawn_chance: float = 0.02

    # Policies
    difficulty_mode: DifficultyMode = DifficultyMode.COMBINED
    # A boundary loss rolls the avatar back to its pre-tick height; with this
    # set and lives remaining, the soft reset then moves it to the start height.
    # Turn it off to keep the rolled-back height on every boundary loss.
    reset_avatar_on_life_loss: bool = True
    judge_after_move: bool = True

    def __post_init__(self):
        if not isinstance(self.difficulty_mode, DifficultyMode):
            try:
                mode = DifficultyMode(str(self.difficulty_mode).lower())
            except ValueError:
                raise ConfigurationError(
                    [f"unknown difficulty_mode '{self.difficulty_mode}'"]
                ) from None
            object.__setattr__(self, "difficulty_mode", mode)

        problems = validate(self)
        if problems:
            raise ConfigurationError(problems)

    # ===========================================================
    # Construction Helpers
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Build from a flat dict; unknown keys are a configuration error."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError([f"unknown key '{key}'" for key in unknown])
        return cls(**data)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["difficulty_mode"] = self.difficulty_mode.value
        return data

    @property
    def gap_steps_cap(self) -> int:
        """Number of gap decreases before min_gap is reached."""
        if self.gap_decrease_step <= 0:
            return 0
        return max(0, math.ceil((self.initial_gap - self.min_gap) / self.gap_decrease_step))

    @property
    def speed_steps_cap(self) -> int:
        """Number of speed ramps before max_obstacle_speed is reached."""
        if self.speed_ramp_step <= 0:
            return 0
        return max(0, math.ceil((self.max_obstacle_speed - self.initial_obstacle_speed) / self.speed_ramp_step))


# ===========================================================
# Validation
# ===========================================================

def type_problems(config: EngineConfig) -> list:
    """Fields whose value does not match the declared int, float or bool type."""
    problems = []
    for f in fields(config):
        value = getattr(config, f.name)
        if f.type is bool:
            ok = isinstance(value, bool)
        elif f.type is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif f.type is float:
            ok = isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)
        else:
            continue
        if not ok:
            problems.append(f"{f.name} must be {f.type.__name__}, got {value!r}")
    return problems


def validate(config: EngineConfig) -> list:
    """Return a list of human-readable problems; empty when valid."""
    # Range checks below assume numbers
    problems = type_problems(config)
    if problems:
        return problems

    def require(condition, message):
        if not condition:
            problems.append(message)

    require(config.playfield_width > 0, "playfield_width must be positive")
    require(config.playfield_height > 0, "playfield_height must be positive")
    require(config.avatar_width > 0, "avatar_width must be positive")
    require(config.avatar_height > 0, "avatar_height must be positive")
    require(config.avatar_height < config.playfield_height,
            "avatar_height must be smaller than playfield_height")
    require(config.avatar_x >= 0, "avatar_x must not be negative")
    require(config.avatar_x + config.avatar_width <= config.playfield_width,
            "avatar must fit horizontally inside the playfield")
    require(0.0 <= config.avatar_start_ratio <= 1.0, "avatar_start_ratio must be within [0, 1]")
    require(config.obstacle_width > 0, "obstacle_width must be positive")

    require(config.gravity >= 0, "gravity must not be negative")
    require(config.jump_impulse < 0, "jump_impulse must be negative (upward)")
    require(config.initial_lives >= 1, "initial_lives must be at least 1")

    require(config.min_gap > 0, "min_gap must be positive")
    require(config.initial_gap >= config.min_gap, "initial_gap must be >= min_gap")
    require(config.min_gap > config.avatar_height, "min_gap must leave room for the avatar")
    require(config.gap_decrease_step >= 0, "gap_decrease_step must not be negative")
    require(config.score_step_interval >= 1, "score_step_interval must be at least 1")
    require(config.gap_margin >= 0, "gap_margin must not be negative")
    require(config.initial_gap + 2 * config.gap_margin <= config.playfield_height,
            "initial_gap plus margins must fit in playfield_height")

    require(config.initial_obstacle_speed > 0, "initial_obstacle_speed must be positive")
    require(config.max_obstacle_speed >= config.initial_obstacle_speed,
            "max_obstacle_speed must be >= initial_obstacle_speed")
    require(config.speed_ramp_interval > 0, "speed_ramp_interval must be positive")
    require(config.speed_ramp_step >= 0, "speed_ramp_step must not be negative")
    require(config.spawn_threshold > config.obstacle_width,
            "spawn_threshold must exceed obstacle_width")

    require(config.tick_rate > 0, "tick_rate must be positive")
    require(0.0 <= config.decoration_spawn_chance <= 1.0,
            "decoration_spawn_chance must be within [0, 1]")

    return problems


# ===========================================================
# Loading
# ===========================================================

def load_engine_config(preset=None, overrides=None, filename="engine.json",
                       presets_file="difficulty.yaml") -> EngineConfig:
    """
    Build an EngineConfig from the shipped files.

    Args:
        preset: Optional preset name from difficulty.yaml
        overrides: Optional dict applied last
        filename: Base engine parameter file
        presets_file: YAML file holding a "presets" mapping

    Returns:
        EngineConfig: Validated configuration
    """
    data = load_config(filename, EngineConfig().to_dict())

    if preset:
        presets = load_config(presets_file, {"presets": {}}).get("presets", {})
        if preset not in presets:
            raise ConfigurationError(
                [f"unknown preset '{preset}' (available: {', '.join(sorted(presets))})"]
            )
        data.update(presets[preset] or {})
        DebugLogger.system(f"Applied difficulty preset '{preset}'", category="loading")

    if overrides:
        data.update(overrides)

    return EngineConfig.from_dict(data)
