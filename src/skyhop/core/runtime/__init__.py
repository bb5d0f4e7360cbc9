"""
Runtime configuration exports.

Provides host-wide constants and session statistics. All constants are
lightweight class attributes with no initialization overhead.
"""

from skyhop.core.runtime.game_settings import (
    Display,
    Physics,
    Clouds,
    Palette,
)
from skyhop.core.runtime.session_stats import get_session_stats, reset_session_stats

__all__ = [
    # Display & Rendering
    'Display',
    'Palette',
    # Timing
    'Physics',
    # Decoration
    'Clouds',
    # Session
    'get_session_stats',
    'reset_session_stats',
]
