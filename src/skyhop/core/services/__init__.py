"""
Core services exports.

Provides the event system and configuration loading.
"""

from skyhop.core.services.config_manager import load_config
from skyhop.core.services.event_manager import (
    get_events,
    reset_events,
    EventManager,
    BaseEvent,
    ScoredEvent,
    LifeLostEvent,
    GameOverEvent,
    LevelUpEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'reset_events',
    'EventManager',
    'BaseEvent',
    'ScoredEvent',
    'LifeLostEvent',
    'GameOverEvent',
    'LevelUpEvent',
]
