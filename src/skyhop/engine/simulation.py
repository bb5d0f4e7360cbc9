"""
simulation.py
-------------
The simulation engine: one pure state transition per tick.

Responsibilities
----------------
- Apply the tick's commands (reset, resize, jump) before anything moves.
- Run kinematics, obstacle scrolling, clouds and judging while RUNNING.
- Route failures through the LifeController and collect the tick's
  events in the order they happened.

Tick order (RUNNING, judge_after_move=True)
-------------------------------------------
jump -> integrate avatar -> scroll/spawn obstacles -> drift clouds
-> boundary check (rollback) or judge -> level -> life loss

With judge_after_move=False the judge runs against the pre-tick positions
before anything moves.
"""

import random
from dataclasses import replace

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.services.event_manager import ScoredEvent
from skyhop.engine.config import EngineConfig
from skyhop.engine.decoration import DecorationField
from skyhop.engine.difficulty import make_policy
from skyhop.engine.judge import Judge
from skyhop.engine.kinematics import apply_jump, integrate, out_of_bounds
from skyhop.engine.life_controller import LifeController
from skyhop.engine.obstacle_manager import ObstacleManager
from skyhop.engine.state import NO_INPUT, GameState, Phase, TickInput, TickResult


class SimulationEngine:
    """
    Fixed-step simulation of one play session.

    The engine holds only configuration and its random source; every
    snapshot is passed in and a new one is returned. Two engines built
    with the same config and seed produce identical state sequences for
    identical inputs.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: EngineConfig = None, seed=None, rng: random.Random = None):
        """
        Args:
            config: Validated EngineConfig (defaults if None)
            seed: Seed for a private random.Random
            rng: Explicit random source; takes precedence over seed
        """
        self.config = config or EngineConfig()
        self.rng = rng or random.Random(seed)

        self.policy = make_policy(self.config)
        self.obstacle_manager = ObstacleManager(self.config, self.rng)
        self.decoration_field = DecorationField(self.config, self.rng)
        self.judge = Judge(self.config)
        self.lives = LifeController(self.config)

        DebugLogger.init_entry("SimulationEngine")
        DebugLogger.init_sub(
            f"Playfield {self.config.playfield_width:g}x{self.config.playfield_height:g}, "
            f"{self.config.initial_lives} lives, {self.config.difficulty_mode.value} difficulty"
        )

    def new_game(self) -> GameState:
        """Initial NOT_STARTED snapshot at the configured playfield size."""
        return GameState.fresh(self.config)

    # ===========================================================
    # Tick
    # ===========================================================

    def advance(self, state: GameState, tick_input: TickInput = NO_INPUT, dt: float = 1.0) -> TickResult:
        """
        Produce the next snapshot.

        Args:
            state: Current snapshot
            tick_input: Commands drained at this tick boundary
            dt: Step length in ticks

        Returns:
            TickResult: New snapshot and ordered events
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        if tick_input.reset:
            state = self.lives.reset(state)

        if tick_input.resize is not None:
            state = self.resize(state, *tick_input.resize)

        if state.is_over:
            return TickResult(state)

        if state.phase is Phase.NOT_STARTED:
            if tick_input.jump:
                state = self.lives.start(state)
            return TickResult(state)

        return self._run_tick(state, tick_input.jump, dt)

    def _run_tick(self, state: GameState, jump: bool, dt: float) -> TickResult:
        cfg = self.config
        events = []

        speed = self.policy.obstacle_speed(state.elapsed)
        gap_size = self.policy.gap_size(state.score)
        velocity = apply_jump(state.avatar_velocity, jump, cfg.jump_impulse)

        obstacles = state.obstacles
        passed = 0
        collided = False

        if not cfg.judge_after_move:
            verdict = self.judge.judge(obstacles, state.avatar_y)
            obstacles, passed, collided = verdict.obstacles, verdict.passed, verdict.collided

        avatar_y, velocity = integrate(state.avatar_y, velocity, cfg.gravity, dt)
        obstacles = self.obstacle_manager.advance(
            obstacles, dt, speed, gap_size, state.playfield_width, state.playfield_height
        )
        decorations = self.decoration_field.advance(
            state.decorations, dt, state.playfield_width, state.playfield_height
        )

        left_playfield = out_of_bounds(avatar_y, cfg.avatar_height, state.playfield_height)
        if left_playfield:
            avatar_y = state.avatar_y
        elif cfg.judge_after_move:
            verdict = self.judge.judge(obstacles, avatar_y)
            obstacles, passed, collided = verdict.obstacles, verdict.passed, verdict.collided

        for n in range(1, passed + 1):
            events.append(ScoredEvent(score=state.score + n))

        state = replace(
            state,
            avatar_y=avatar_y,
            avatar_velocity=velocity,
            obstacles=obstacles,
            decorations=decorations,
            score=state.score + passed,
            obstacle_speed=speed,
            elapsed=state.elapsed + dt / cfg.tick_rate,
            tick=state.tick + 1,
        )

        state, level_events = self.lives.update_level(state, self.policy)
        events.extend(level_events)

        cause = "collision" if collided else "boundary" if left_playfield else None
        if cause:
            state, loss_events = self.lives.lose_life(state, cause)
            events.extend(loss_events)

        DebugLogger.trace(
            f"tick={state.tick} y={state.avatar_y:.1f} v={state.avatar_velocity:.2f} "
            f"obstacles={len(state.obstacles)} score={state.score}",
            category="kinematics"
        )
        return TickResult(state, tuple(events))

    # ===========================================================
    # Playfield
    # ===========================================================

    def resize(self, state: GameState, width: float, height: float) -> GameState:
        """
        Adopt a new playfield size, keeping the avatar at the same relative height.

        Sizes that cannot hold the avatar are ignored with a warning. A finished
        game only adopts the new size; its avatar stays frozen until Reset.
        """
        cfg = self.config
        if width < cfg.avatar_x + cfg.avatar_width or height <= cfg.avatar_height:
            DebugLogger.warn(f"Ignoring unusable playfield size {width}x{height}", category="input")
            return state

        if state.is_over:
            return replace(state, playfield_width=width, playfield_height=height)

        ceiling = height - cfg.avatar_height
        avatar_y = state.avatar_y * height / state.playfield_height
        avatar_y = min(max(avatar_y, 0.0), ceiling)

        DebugLogger.state(
            f"Playfield resized {state.playfield_width:g}x{state.playfield_height:g} -> {width:g}x{height:g}",
            category="engine"
        )
        return replace(state, playfield_width=width, playfield_height=height, avatar_y=avatar_y)
