"""
life_controller.py
------------------
Phase transitions, life accounting and difficulty tier tracking.

State machine
-------------
    NOT_STARTED --jump--> RUNNING --last life lost--> OVER --reset--> NOT_STARTED

A life loss with lives remaining keeps the game RUNNING and soft-resets
the playfield: obstacles and clouds are cleared, velocity is zeroed, and
the avatar returns to its start height when reset_avatar_on_life_loss is
set. Score and level carry over.
"""

from dataclasses import replace

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.services.event_manager import GameOverEvent, LevelUpEvent, LifeLostEvent
from skyhop.engine.state import GameState, Phase, start_height


class LifeController:

    def __init__(self, config):
        self.config = config

    # ===========================================================
    # Phase Transitions
    # ===========================================================

    def start(self, state: GameState) -> GameState:
        """Leave NOT_STARTED with the first jump impulse applied."""
        DebugLogger.state("Game started", category="lives")
        return replace(state, phase=Phase.RUNNING, avatar_velocity=self.config.jump_impulse)

    def reset(self, state: GameState) -> GameState:
        """Fresh NOT_STARTED state on the current playfield."""
        DebugLogger.state(f"Reset from {state.phase.value}", category="lives")
        return GameState.fresh(self.config, state.playfield_width, state.playfield_height)

    # ===========================================================
    # Life Loss
    # ===========================================================

    def lose_life(self, state: GameState, cause: str):
        """
        Apply one life loss.

        Args:
            state: Snapshot at the moment of failure
            cause: "collision" or "boundary"

        Returns:
            (GameState, list[BaseEvent])
        """
        lives = max(state.lives - 1, 0)
        events = [LifeLostEvent(lives_remaining=lives, cause=cause)]

        if lives == 0:
            DebugLogger.state(
                f"Game over ({cause}): score={state.score} level={state.level}",
                category="lives"
            )
            events.append(GameOverEvent(final_score=state.score, level=state.level))
            return replace(state, lives=0, phase=Phase.OVER), events

        DebugLogger.state(f"Life lost ({cause}), {lives} remaining", category="lives")

        avatar_y = state.avatar_y
        if self.config.reset_avatar_on_life_loss:
            avatar_y = start_height(self.config, state.playfield_height)

        return replace(
            state,
            lives=lives,
            avatar_y=avatar_y,
            avatar_velocity=0.0,
            obstacles=(),
            decorations=(),
        ), events

    # ===========================================================
    # Difficulty Tier
    # ===========================================================

    def update_level(self, state: GameState, policy):
        """Raise the level to match the policy; never lowers it."""
        level = max(state.level, policy.level(state.score, state.elapsed))
        if level == state.level:
            return state, []

        DebugLogger.state(f"Level up: {state.level} -> {level}", category="lives")
        return replace(state, level=level), [LevelUpEvent(level=level)]
