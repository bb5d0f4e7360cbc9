"""
state.py
--------
Value types for the simulation: the game state snapshot, its entities,
the per-tick input, and the per-tick result.

Every type here is a frozen dataclass. A tick never mutates a snapshot;
it builds a new one with dataclasses.replace().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Phase(str, Enum):
    """Top-level lifecycle of a play session."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


# ===========================================================
# Entities
# ===========================================================

@dataclass(frozen=True)
class Obstacle:
    """Paired top/bottom barrier with an opening from gap_top to gap_top + gap_size."""
    x: float
    gap_top: float
    gap_size: float
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_size


@dataclass(frozen=True)
class Decoration:
    """Background cloud. Cosmetic only."""
    x: float
    y: float
    size: float
    speed: float
    opacity: float


# ===========================================================
# Game State
# ===========================================================

@dataclass(frozen=True)
class GameState:
    phase: Phase
    avatar_y: float
    avatar_velocity: float
    score: int
    lives: int
    level: int
    obstacle_speed: float
    playfield_width: float
    playfield_height: float
    obstacles: Tuple[Obstacle, ...] = ()
    decorations: Tuple[Decoration, ...] = ()
    elapsed: float = 0.0  # simulated seconds spent Running
    tick: int = 0  # Running ticks

    @classmethod
    def fresh(cls, config, playfield_width=None, playfield_height=None) -> "GameState":
        """
        Build a NOT_STARTED state with every counter at its default.

        Args:
            config: EngineConfig supplying defaults
            playfield_width: Current width (defaults to config)
            playfield_height: Current height (defaults to config)
        """
        width = config.playfield_width if playfield_width is None else playfield_width
        height = config.playfield_height if playfield_height is None else playfield_height
        return cls(
            phase=Phase.NOT_STARTED,
            avatar_y=start_height(config, height),
            avatar_velocity=0.0,
            score=0,
            lives=config.initial_lives,
            level=1,
            obstacle_speed=config.initial_obstacle_speed,
            playfield_width=width,
            playfield_height=height,
        )

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.OVER


def start_height(config, playfield_height) -> float:
    """Safe avatar position for a new game or after a life loss."""
    ceiling = playfield_height - config.avatar_height
    return min(max(playfield_height * config.avatar_start_ratio, 0.0), ceiling)


# ===========================================================
# Tick Boundary Types
# ===========================================================

@dataclass(frozen=True)
class TickInput:
    """Commands captured between two ticks, applied atomically at the next one."""
    jump: bool = False
    reset: bool = False
    resize: Optional[Tuple[float, float]] = None


NO_INPUT = TickInput()


@dataclass(frozen=True)
class TickResult:
    """New snapshot plus the ordered events raised while producing it."""
    state: GameState
    events: tuple = ()
