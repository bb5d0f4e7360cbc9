"""
session_stats.py
----------------
Tracks statistics for the current play session.
Fed by engine events; kept in memory only.
"""

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.services.event_manager import (
    GameOverEvent,
    LevelUpEvent,
    LifeLostEvent,
    ScoredEvent,
)


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Best score survives resets."""

    def __init__(self):
        self.score = 0
        self.best_score = 0
        self.games_played = 0
        self.obstacles_passed = 0
        self.lives_lost = 0
        self.max_level_reached = 1
        self.running_ticks = 0

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def bind(self, events):
        """Subscribe to the engine's tick events on an EventManager."""
        events.subscribe(ScoredEvent, self.on_scored)
        events.subscribe(LifeLostEvent, self.on_life_lost)
        events.subscribe(GameOverEvent, self.on_game_over)
        events.subscribe(LevelUpEvent, self.on_level_up)

    def on_scored(self, event: ScoredEvent):
        self.score = event.score
        self.obstacles_passed += 1
        if self.score > self.best_score:
            self.best_score = self.score

    def on_life_lost(self, event: LifeLostEvent):
        self.lives_lost += 1

    def on_game_over(self, event: GameOverEvent):
        self.games_played += 1
        self.set_level(event.level)
        DebugLogger.state(
            f"Game {self.games_played} over: score={event.final_score} best={self.best_score}",
            category="session"
        )

    def on_level_up(self, event: LevelUpEvent):
        self.set_level(event.level)

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_tick(self, count: int = 1):
        """Count simulated Running ticks."""
        self.running_ticks += count

    def set_level(self, level: int):
        """Update max level if higher."""
        if level > self.max_level_reached:
            self.max_level_reached = level

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset per-run stats for a new game. Preserves best score."""
        self.score = 0

    def full_reset(self):
        """Reset everything including best score."""
        self.reset()
        self.best_score = 0
        self.games_played = 0
        self.obstacles_passed = 0
        self.lives_lost = 0
        self.max_level_reached = 1
        self.running_ticks = 0


# ===========================================================
# Singleton Access
# ===========================================================

_SESSION_STATS = None


def get_session_stats() -> SessionStats:
    """Get or create the session stats singleton."""
    global _SESSION_STATS
    if _SESSION_STATS is None:
        _SESSION_STATS = SessionStats()
    return _SESSION_STATS


def reset_session_stats() -> None:
    """Reset the singleton. Call on full game restart."""
    global _SESSION_STATS
    _SESSION_STATS = None
