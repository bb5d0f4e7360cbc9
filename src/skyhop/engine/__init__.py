"""
Simulation engine exports.

The engine is importable and runnable without pygame or any display.
"""

from skyhop.engine.config import (
    ConfigurationError,
    DifficultyMode,
    EngineConfig,
    load_engine_config,
)
from skyhop.engine.input_queue import InputQueue
from skyhop.engine.simulation import SimulationEngine
from skyhop.engine.state import (
    NO_INPUT,
    Decoration,
    GameState,
    Obstacle,
    Phase,
    TickInput,
    TickResult,
)

__all__ = [
    # Configuration
    'ConfigurationError',
    'DifficultyMode',
    'EngineConfig',
    'load_engine_config',
    # Engine
    'SimulationEngine',
    'InputQueue',
    # State
    'NO_INPUT',
    'Decoration',
    'GameState',
    'Obstacle',
    'Phase',
    'TickInput',
    'TickResult',
]
