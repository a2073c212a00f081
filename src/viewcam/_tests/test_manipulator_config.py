from __future__ import annotations

import json
import logging

import pytest

from viewcam.config import ManipulatorConfig, load_manipulator_config
from viewcam.manipulator.inputs import NavigationMode


def test_config_defaults() -> None:
    cfg = load_manipulator_config({})
    assert cfg == ManipulatorConfig()
    assert cfg.mode is NavigationMode.EXAMINE
    assert cfg.speed == 3.0
    assert cfg.animation_duration == 0.5
    assert cfg.window_size == (1, 1)
    assert cfg.key_rate == 50.0
    assert cfg.wheel_step == 3.0
    assert cfg.logging.debug_orbit is False


def test_config_env_values() -> None:
    env = {
        "VIEWCAM_MODE": "fly",
        "VIEWCAM_SPEED": "4.5",
        "VIEWCAM_ANIM_DURATION": "0.25",
        "VIEWCAM_WINDOW": "1920x1080",
        "VIEWCAM_KEY_RATE": "30",
        "VIEWCAM_WHEEL_STEP": "1",
        "VIEWCAM_DEBUG_ANIM": "1",
    }
    cfg = load_manipulator_config(env)
    assert cfg.mode is NavigationMode.FLY
    assert cfg.speed == 4.5
    assert cfg.animation_duration == 0.25
    assert cfg.window_size == (1920, 1080)
    assert cfg.key_rate == 30.0
    assert cfg.wheel_step == 1.0
    assert cfg.logging.debug_anim is True


def test_json_bundle_overrides_env() -> None:
    env = {
        "VIEWCAM_MODE": "fly",
        "VIEWCAM_SPEED": "4.5",
        "VIEWCAM_CONFIG": json.dumps(
            {"mode": "walk", "speed": 2, "anim_duration": "1.5", "window": [800, 600], "wheel_step": 6}
        ),
    }
    cfg = load_manipulator_config(env)
    assert cfg.mode is NavigationMode.WALK
    assert cfg.speed == 2.0
    assert cfg.animation_duration == 1.5
    assert cfg.window_size == (800, 600)
    assert cfg.wheel_step == 6.0


@pytest.mark.parametrize(
    "env",
    [
        {"VIEWCAM_MODE": "hover"},
        {"VIEWCAM_SPEED": "fast"},
        {"VIEWCAM_WINDOW": "0x100"},
        {"VIEWCAM_WINDOW": "wide"},
        {"VIEWCAM_CONFIG": json.dumps({"mode": 9, "speed": True, "window": "axb"})},
    ],
)
def test_bad_values_fall_back_to_defaults(env) -> None:
    assert load_manipulator_config(env) == ManipulatorConfig()


def test_bad_json_bundle_is_ignored(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="viewcam.config")
    cfg = load_manipulator_config({"VIEWCAM_CONFIG": "{not json", "VIEWCAM_SPEED": "2"})
    assert cfg.speed == 2.0
    assert any("VIEWCAM_CONFIG" in rec.getMessage() for rec in caplog.records)


def test_non_object_json_bundle_is_ignored(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="viewcam.config")
    assert load_manipulator_config({"VIEWCAM_CONFIG": "[1, 2]"}) == ManipulatorConfig()
    assert caplog.records


def test_negative_duration_resets_to_default(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="viewcam.config")
    cfg = load_manipulator_config({"VIEWCAM_ANIM_DURATION": "-2"})
    assert cfg.animation_duration == 0.5
    assert caplog.records
