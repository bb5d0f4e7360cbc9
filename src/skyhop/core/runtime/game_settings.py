"""
game_settings.py
----------------
Centralized constants for the host and engine defaults that are not
part of the tunable engine configuration.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Window configuration for the pygame host."""
    WIDTH: int = 500
    HEIGHT: int = 500
    CAPTION: str = "Skyhop"
    FPS: int = 60


# ===========================================================
# Timing
# ===========================================================

class Physics:
    """Tick cadence. Engine units are pixels per tick."""
    TICK_RATE: int = 50
    TICK_MS: int = 1000 // TICK_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Decoration
# ===========================================================

class Clouds:
    """Spawn ranges for background clouds."""
    SPAWN_OFFSET: float = 50.0
    CULL_X: float = -100.0
    EDGE_MARGIN: float = 50.0
    MIN_SIZE: float = 60.0
    SIZE_RANGE: float = 40.0
    MIN_SPEED: float = 0.5
    SPEED_RANGE: float = 0.5
    MIN_OPACITY: float = 0.7
    OPACITY_RANGE: float = 0.3


# ===========================================================
# Colors
# ===========================================================

class Palette:
    """Flat colors used by the host renderer."""
    SKY = (112, 197, 206)
    CLOUD = (255, 255, 255)
    AVATAR = (247, 214, 61)
    OBSTACLE = (115, 191, 46)
    OBSTACLE_EDGE = (84, 56, 71)
    TEXT = (255, 255, 255)
    OVERLAY = (0, 0, 0, 140)
