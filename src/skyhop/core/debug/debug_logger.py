"""
debug_logger.py
---------------
Console logger for the engine and host.

Every message carries a category (engine, collision, lives, input, host...)
and a level. A message prints only when logging is enabled, its category
is switched on in LoggerConfig.CATEGORIES and its level is within
LoggerConfig.LOG_LEVEL. Per-tick traces use VERBOSE so the default INFO
level keeps the console readable at 50 ticks per second.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Switches for which parts of skyhop talk, and how much."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core services
        "system": True,
        "loading": False,
        "event_manager": False,
        "session": True,

        # Simulation
        "engine": True,
        "kinematics": False,
        "obstacle": False,
        "collision": True,
        "lives": True,
        "decoration": False,
        "input": True,

        # Host
        "host": True,
        "audio": False,
    }

    SHOW_TIMESTAMP = True
    SHOW_CATEGORY = True
    SHOW_LEVEL = True


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; call sites never hold an instance."""

    RESET = "\033[0m"
    WHITE = "\033[97m"

    LINE_LENGTH = 59
    ENTRY_COLUMN = 30

    # tag -> (level, ANSI color)
    TAGS = {
        "INIT": ("INFO", "\033[97m"),
        "SYSTEM": ("INFO", "\033[95m"),
        "STATE": ("INFO", "\033[96m"),
        "ACTION": ("INFO", "\033[92m"),
        "TRACE": ("VERBOSE", "\033[94m"),
        "WARN": ("WARN", "\033[93m"),
    }

    LEVELS = ("NONE", "WARN", "INFO", "VERBOSE")

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """True when a message of this category and level would print."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        levels = DebugLogger.LEVELS
        threshold = levels.index(LoggerConfig.LOG_LEVEL) if LoggerConfig.LOG_LEVEL in levels else 2
        return 0 < levels.index(level) <= threshold

    # ===========================================================
    # Formatting
    # ===========================================================

    @staticmethod
    def _source() -> str:
        """Name of the class (or module, in PascalCase) that called the public method."""
        try:
            frame = sys._getframe(4)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if owner is not None:
            return owner.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in module[:-3].split("_"))

    @staticmethod
    def _prefix(tag: str, category: str) -> str:
        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        parts.append(f"[{DebugLogger._source()}]")
        if LoggerConfig.SHOW_CATEGORY:
            parts.append(f"[{category}]")
        if LoggerConfig.SHOW_LEVEL:
            parts.append(f"[{tag}]")
        return "".join(parts) + " "

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        level, color = DebugLogger.TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return
        print(f"{color}{DebugLogger._prefix(tag, category)}{message}{DebugLogger.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup message. An empty message prints a blank line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "engine"):
        """Phase, lives, level and playfield changes."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "input"):
        """Player or host commands."""
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "engine"):
        """Per-tick detail, VERBOSE only."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        """Recoverable problem: ignored input, missing file, failed callback."""
        DebugLogger._emit("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{DebugLogger.WHITE}{rule}\n{heading}{DebugLogger.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Dotted "> Module ....... [OK]" line for the startup report."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {DebugLogger.WHITE}{detail}{DebugLogger.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        label = f"> {module}"
        badge = f"[{status}]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - pad - 1 - len(badge), 1)
        color = "\033[92m" if status.upper() == "OK" else DebugLogger.WHITE
        return (
            f"{DebugLogger.WHITE}{label}{' ' * pad}{'.' * dots} "
            f"{color}{badge}{DebugLogger.RESET}"
        )
