"""
test_config.py
--------------
Unit tests for EngineConfig validation and file-based loading.

Responsibilities
----------------
- Verify defaults are valid and mirror engine.json.
- Verify inconsistent parameter sets fail fast with ConfigurationError.
- Verify preset layering from difficulty.yaml and caller overrides.
"""

import pytest

from skyhop.engine.config import (
    ConfigurationError,
    DifficultyMode,
    EngineConfig,
    load_engine_config,
)
from skyhop.engine.simulation import SimulationEngine


# ===========================================================
# Validation
# ===========================================================

def test_defaults_are_valid():
    cfg = EngineConfig()
    assert cfg.difficulty_mode is DifficultyMode.COMBINED
    assert cfg.gap_steps_cap == 6
    assert cfg.speed_steps_cap == 6


@pytest.mark.parametrize("overrides", [
    {"min_gap": 0},
    {"min_gap": -10},
    {"playfield_width": -1},
    {"playfield_height": 0},
    {"avatar_width": 0},
    {"obstacle_width": -52},
    {"spawn_threshold": 40},
    {"initial_lives": 0},
    {"jump_impulse": 8.0},
    {"initial_gap": 80.0},
    {"max_obstacle_speed": 1.0},
    {"speed_ramp_interval": 0},
    {"score_step_interval": 0},
    {"decoration_spawn_chance": 1.5},
    {"tick_rate": 0},
    {"initial_gap": 450.0},
    {"gravity": "0.5"},
    {"initial_lives": 2.5},
    {"score_step_interval": 5.0},
    {"tick_rate": True},
    {"avatar_width": None},
    {"playfield_height": float("nan")},
    {"reset_avatar_on_life_loss": "false"},
    {"judge_after_move": 1},
])
def test_inconsistent_config_rejected(overrides):
    with pytest.raises(ConfigurationError):
        EngineConfig(**overrides)


def test_configuration_error_lists_every_problem():
    with pytest.raises(ConfigurationError) as excinfo:
        EngineConfig(min_gap=0, initial_lives=0)

    problems = excinfo.value.problems
    assert "min_gap must be positive" in problems
    assert "initial_lives must be at least 1" in problems
    assert isinstance(excinfo.value, ValueError)


def test_wrongly_typed_values_are_configuration_errors():
    with pytest.raises(ConfigurationError) as excinfo:
        EngineConfig.from_dict({"gravity": "0.5", "reset_avatar_on_life_loss": "false"})

    problems = excinfo.value.problems
    assert "gravity must be float, got '0.5'" in problems
    assert "reset_avatar_on_life_loss must be bool, got 'false'" in problems


def test_integer_values_accepted_for_float_fields():
    cfg = EngineConfig(gravity=1, playfield_width=600)
    assert cfg.gravity == 1


def test_engine_construction_rejects_bad_config():
    with pytest.raises(ConfigurationError):
        SimulationEngine(EngineConfig.from_dict({"min_gap": 0}))


def test_difficulty_mode_accepts_strings():
    assert EngineConfig(difficulty_mode="score_based").difficulty_mode is DifficultyMode.SCORE_BASED
    assert EngineConfig(difficulty_mode="TIME_BASED").difficulty_mode is DifficultyMode.TIME_BASED


def test_unknown_difficulty_mode_rejected():
    with pytest.raises(ConfigurationError):
        EngineConfig(difficulty_mode="nightmare")


def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError) as excinfo:
        EngineConfig.from_dict({"gravty": 0.4})
    assert "unknown key 'gravty'" in excinfo.value.problems


def test_dict_round_trip():
    cfg = EngineConfig(initial_lives=5, difficulty_mode=DifficultyMode.TIME_BASED)
    data = cfg.to_dict()
    assert data["difficulty_mode"] == "time_based"
    assert EngineConfig.from_dict(data) == cfg


# ===========================================================
# Loading
# ===========================================================

def test_shipped_engine_file_matches_defaults():
    assert load_engine_config() == EngineConfig()


@pytest.mark.parametrize("preset, mode, lives", [
    ("classic", DifficultyMode.NONE, 1),
    ("easy", DifficultyMode.SCORE_BASED, 5),
    ("normal", DifficultyMode.COMBINED, 3),
    ("hard", DifficultyMode.COMBINED, 1),
])
def test_presets_layer_over_defaults(preset, mode, lives):
    cfg = load_engine_config(preset=preset)
    assert cfg.difficulty_mode is mode
    assert cfg.initial_lives == lives
    assert cfg.gravity == 0.5


def test_overrides_apply_after_preset():
    cfg = load_engine_config(preset="easy", overrides={"initial_lives": 2})
    assert cfg.initial_lives == 2
    assert cfg.initial_gap == 170.0


def test_unknown_preset_rejected():
    with pytest.raises(ConfigurationError):
        load_engine_config(preset="impossible")


def test_missing_engine_file_falls_back_to_defaults():
    assert load_engine_config(filename="no_such_engine.json") == EngineConfig()
