"""
input_queue.py
--------------
Collects commands between ticks and hands them over as one TickInput.

The host writes to the queue from its event handler; the tick driver
drains it exactly once at the start of each tick, so the engine never
observes a command mid-tick.
"""

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.engine.state import TickInput


class InputQueue:

    def __init__(self):
        self._jump = False
        self._reset = False
        self._resize = None

    # ===========================================================
    # Producers
    # ===========================================================

    def jump(self):
        """Queue a jump. Repeated jumps before the next tick collapse into one."""
        self._jump = True

    def reset(self):
        """Queue a return to a fresh NOT_STARTED game."""
        self._reset = True
        DebugLogger.action("Reset requested", category="input")

    def resize(self, width, height):
        """Queue a playfield resize. The latest size before a tick wins."""
        self._resize = (float(width), float(height))
        DebugLogger.action(f"Resize requested: {width}x{height}", category="input")

    # ===========================================================
    # Consumer
    # ===========================================================

    @property
    def pending(self) -> bool:
        return self._jump or self._reset or self._resize is not None

    def drain(self) -> TickInput:
        """Return everything queued since the last drain and clear the queue."""
        tick_input = TickInput(jump=self._jump, reset=self._reset, resize=self._resize)
        self._jump = False
        self._reset = False
        self._resize = None
        return tick_input
