"""
kinematics.py
-------------
Vertical motion of the avatar.

Semi-implicit update: the new position is computed from the velocity as it
stood at the start of the tick, then gravity is added to the velocity for
the next tick.
"""

from typing import Tuple


def integrate(avatar_y: float, avatar_velocity: float, gravity: float, dt: float) -> Tuple[float, float]:
    """
    Advance the avatar one step.

    Args:
        avatar_y: Top edge of the avatar
        avatar_velocity: Vertical speed, negative is upward
        gravity: Downward acceleration
        dt: Step length in ticks

    Returns:
        (new_y, new_velocity)
    """
    return avatar_y + avatar_velocity * dt, avatar_velocity + gravity * dt


def apply_jump(avatar_velocity: float, jump: bool, jump_impulse: float) -> float:
    """Replace the accumulated velocity with the jump impulse when jumping."""
    return jump_impulse if jump else avatar_velocity


def out_of_bounds(avatar_y: float, avatar_height: float, playfield_height: float) -> bool:
    """True when the avatar has left [0, playfield_height - avatar_height]."""
    return avatar_y < 0 or avatar_y > playfield_height - avatar_height
