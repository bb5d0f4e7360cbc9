"""
test_game_loop.py
-----------------
Unit tests for the pygame host: event routing and per-tick stepping.
pygame itself is mocked so no window or display is needed.
"""

from dataclasses import replace
from unittest.mock import MagicMock, patch

import pygame
import pytest

from skyhop.engine.state import Phase


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def mock_pygame():
    with patch("skyhop.host.game_loop.pygame") as mocked:
        yield mocked


@pytest.fixture
def make_loop(mock_pygame):
    from skyhop.host.game_loop import GameLoop

    def build(config=None):
        return GameLoop(config, seed=3, audio=False)
    return build


def key_event(mock_pygame, key):
    return MagicMock(type=mock_pygame.KEYDOWN, key=key)


# ===========================================================
# Event Routing
# ===========================================================

def test_space_queues_jump(make_loop, mock_pygame):
    loop = make_loop()
    loop.handle_event(key_event(mock_pygame, pygame.K_SPACE))
    loop.handle_event(key_event(mock_pygame, pygame.K_SPACE))
    assert loop.inputs.drain().jump is True


def test_reset_key_only_after_game_over(make_loop, mock_pygame):
    loop = make_loop()
    loop.handle_event(key_event(mock_pygame, pygame.K_r))
    assert loop.inputs.pending is False

    loop.state = replace(loop.state, phase=Phase.OVER, lives=0)
    loop.handle_event(key_event(mock_pygame, pygame.K_r))
    assert loop.inputs.drain().reset is True


def test_click_jumps_or_resets(make_loop, mock_pygame):
    loop = make_loop()
    click = MagicMock(type=mock_pygame.MOUSEBUTTONDOWN)

    loop.handle_event(click)
    assert loop.inputs.drain().jump is True

    loop.state = replace(loop.state, phase=Phase.OVER, lives=0)
    loop.handle_event(click)
    drained = loop.inputs.drain()
    assert drained.reset is True
    assert drained.jump is False


def test_window_resize_queues_playfield_resize(make_loop, mock_pygame):
    loop = make_loop()
    loop.handle_event(MagicMock(type=mock_pygame.VIDEORESIZE, w=640, h=480))
    assert loop.inputs.drain().resize == (640.0, 480.0)


def test_quit_stops_loop(make_loop, mock_pygame):
    loop = make_loop()
    loop.handle_event(MagicMock(type=mock_pygame.QUIT))
    assert loop.running is False


# ===========================================================
# Stepping
# ===========================================================

def test_step_drains_queue_once_per_tick(make_loop):
    loop = make_loop()
    loop.inputs.jump()

    loop.step()
    assert loop.state.phase is Phase.RUNNING
    assert loop.state.avatar_velocity == -8.0

    loop.step()
    assert loop.state.avatar_y == pytest.approx(242.0)
    assert loop.stats.running_ticks == 2


def test_step_dispatches_events_to_session_stats(make_loop, still_config, running_state, gap_obstacle):
    loop = make_loop(still_config)
    loop.state = running_state(still_config, obstacles=(gap_obstacle(still_config, x=37.0),))

    result = loop.step()

    assert result.state.score == 1
    assert loop.stats.score == 1
    assert loop.stats.best_score == 1


def test_draw_renders_every_phase(make_loop, mock_pygame, running_state, config, gap_obstacle):
    loop = make_loop()
    loop._draw()

    loop.state = running_state(config, obstacles=(gap_obstacle(config, x=200.0),))
    loop._draw()

    assert mock_pygame.display.flip.call_count == 2
