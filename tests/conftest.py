"""
conftest.py
-----------
Shared pytest configuration and fixtures for skyhop tests.

Contains:
- Engine and configuration fixtures used across test modules
- Snapshot helpers for building RUNNING states by hand
- Pytest configuration and hooks
"""

import os
import sys
from dataclasses import replace

import pytest

# Add src directory to Python path for imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from skyhop.core.debug.debug_logger import LoggerConfig  # noqa: E402
from skyhop.core.runtime.session_stats import reset_session_stats  # noqa: E402
from skyhop.core.services.event_manager import reset_events  # noqa: E402
from skyhop.engine.config import DifficultyMode, EngineConfig  # noqa: E402
from skyhop.engine.simulation import SimulationEngine  # noqa: E402
from skyhop.engine.state import GameState, Obstacle, Phase  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging during tests."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Drop event manager and session stats singletons between tests."""
    reset_events()
    reset_session_stats()
    yield
    reset_events()
    reset_session_stats()


# Common engine fixtures
@pytest.fixture
def config():
    """Default engine configuration (500x500, gravity 0.5, jump -8)."""
    return EngineConfig()


@pytest.fixture
def still_config():
    """No gravity, fixed difficulty, no clouds: the avatar hovers in place."""
    return EngineConfig(
        gravity=0.0,
        difficulty_mode=DifficultyMode.NONE,
        decoration_spawn_chance=0.0,
    )


@pytest.fixture
def engine(config):
    return SimulationEngine(config, seed=1234)


@pytest.fixture
def still_engine(still_config):
    return SimulationEngine(still_config, seed=1234)


# Test utilities
@pytest.fixture
def running_state():
    """Factory for a RUNNING snapshot at the start height with field overrides."""
    def build(config, **overrides):
        state = replace(GameState.fresh(config), phase=Phase.RUNNING)
        return replace(state, **overrides)
    return build


@pytest.fixture
def gap_obstacle():
    """Factory for an obstacle at x whose gap comfortably contains the avatar."""
    def build(config, x, avatar_y=250.0, gap_size=150.0, passed=False):
        gap_top = avatar_y - (gap_size - config.avatar_height) / 2
        return Obstacle(x=x, gap_top=gap_top, gap_size=gap_size, passed=passed)
    return build


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration modules as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
