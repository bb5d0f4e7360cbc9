"""
test_session_stats.py
---------------------
Unit tests for session statistics fed by engine events.
"""

from skyhop.core.runtime.session_stats import get_session_stats
from skyhop.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    LevelUpEvent,
    LifeLostEvent,
    ScoredEvent,
)


def bound_stats():
    events = EventManager()
    stats = get_session_stats()
    stats.bind(events)
    return stats, events


def test_scores_track_current_and_best():
    stats, events = bound_stats()
    events.dispatch_all([ScoredEvent(score=1), ScoredEvent(score=2)])

    assert stats.score == 2
    assert stats.best_score == 2
    assert stats.obstacles_passed == 2


def test_best_score_survives_reset():
    stats, events = bound_stats()
    events.dispatch_all([ScoredEvent(score=1), ScoredEvent(score=2), ScoredEvent(score=3)])
    stats.reset()
    events.dispatch(ScoredEvent(score=1))

    assert stats.score == 1
    assert stats.best_score == 3


def test_life_and_game_counters():
    stats, events = bound_stats()
    events.dispatch_all([
        LifeLostEvent(lives_remaining=1, cause="collision"),
        LifeLostEvent(lives_remaining=0, cause="boundary"),
        GameOverEvent(final_score=4, level=2),
    ])

    assert stats.lives_lost == 2
    assert stats.games_played == 1
    assert stats.max_level_reached == 2


def test_level_only_rises():
    stats, events = bound_stats()
    events.dispatch(LevelUpEvent(level=4))
    stats.set_level(2)
    assert stats.max_level_reached == 4


def test_full_reset_clears_everything():
    stats, events = bound_stats()
    events.dispatch(ScoredEvent(score=5))
    stats.add_tick(10)

    stats.full_reset()

    assert stats.best_score == 0
    assert stats.obstacles_passed == 0
    assert stats.running_ticks == 0
