"""
decoration.py
-------------
Background clouds. Purely cosmetic: no gameplay entity reads them.
"""

from typing import Tuple

from skyhop.core.runtime.game_settings import Clouds
from skyhop.engine.state import Decoration


class DecorationField:
    """Spawns and drifts clouds with its own per-instance speeds."""

    def __init__(self, config, rng):
        self.config = config
        self.rng = rng

    def advance(self, decorations: Tuple[Decoration, ...], dt: float,
                playfield_width: float, playfield_height: float) -> Tuple[Decoration, ...]:
        """Drift clouds left, cull off-screen ones, maybe spawn one more."""
        drifted = [
            Decoration(d.x - d.speed * dt, d.y, d.size, d.speed, d.opacity)
            for d in decorations
            if d.x - d.speed * dt > Clouds.CULL_X
        ]

        # Short-circuit keeps the random stream untouched while the sky is empty
        if not decorations or self.rng.random() < self.config.decoration_spawn_chance:
            drifted.append(self.spawn(playfield_width, playfield_height))

        return tuple(drifted)

    def spawn(self, playfield_width: float, playfield_height: float) -> Decoration:
        rng = self.rng
        span = max(playfield_height - 2 * Clouds.EDGE_MARGIN, 0.0)
        return Decoration(
            x=playfield_width + Clouds.SPAWN_OFFSET,
            y=Clouds.EDGE_MARGIN + rng.random() * span,
            size=Clouds.MIN_SIZE + rng.random() * Clouds.SIZE_RANGE,
            speed=Clouds.MIN_SPEED + rng.random() * Clouds.SPEED_RANGE,
            opacity=Clouds.MIN_OPACITY + rng.random() * Clouds.OPACITY_RANGE,
        )
