"""
test_integration_run.py
-----------------------
Long seeded runs checking the invariants that must hold on every tick.
"""

import random

import pytest

from skyhop.core.services.event_manager import GameOverEvent, LifeLostEvent, ScoredEvent
from skyhop.engine.config import DifficultyMode, EngineConfig
from skyhop.engine.simulation import SimulationEngine
from skyhop.engine.state import NO_INPUT, Phase, TickInput


def autopilot(state, cfg):
    """Jump when the avatar sinks below the middle of the next unpassed gap."""
    upcoming = [o for o in state.obstacles if not o.passed]
    target = upcoming[0].gap_top + upcoming[0].gap_size / 2 if upcoming else state.playfield_height / 2
    return state.avatar_y + cfg.avatar_height / 2 > target + 10 and state.avatar_velocity > 0


@pytest.mark.integration
@pytest.mark.slow
@pytest.mark.parametrize("mode", list(DifficultyMode))
def test_invariants_hold_over_long_run(mode):
    cfg = EngineConfig(difficulty_mode=mode, initial_lives=5)
    engine = SimulationEngine(cfg, seed=77)
    chaos = random.Random(5)

    state = engine.advance(engine.new_game(), TickInput(jump=True)).state

    for _ in range(6000):
        jump = autopilot(state, cfg) or chaos.random() < 0.01
        result = engine.advance(state, TickInput(jump=jump))
        new = result.state
        events = result.events
        lost = [e for e in events if isinstance(e, LifeLostEvent)]
        scored = [e for e in events if isinstance(e, ScoredEvent)]

        # Score and level never go down
        assert new.score >= state.score
        assert new.score - state.score == len(scored)
        assert new.level >= state.level

        # At most one life per tick, OVER exactly when lives run out
        assert len(lost) <= 1
        assert new.lives == state.lives - len(lost)
        assert (new.phase is Phase.OVER) == (new.lives == 0)
        assert any(isinstance(e, GameOverEvent) for e in events) == (state.lives > 0 and new.lives == 0)

        # Avatar never persists outside the playfield
        assert 0 <= new.avatar_y <= new.playfield_height - cfg.avatar_height

        # Surviving obstacles only move left, and never linger off-screen
        if not lost and new.phase is Phase.RUNNING:
            before = {o.gap_top: o for o in state.obstacles}
            for o in new.obstacles:
                assert o.x > -cfg.obstacle_width
                if o.gap_top in before:
                    assert o.x < before[o.gap_top].x
                    assert o.passed or not before[o.gap_top].passed

        state = new
        if state.phase is Phase.OVER:
            assert engine.advance(state, NO_INPUT).state == state
            break
