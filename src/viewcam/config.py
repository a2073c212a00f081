"""Manipulator configuration.

Typed configuration for a camera manipulator plus a loader that resolves it
from the environment once. Individual ``VIEWCAM_*`` variables set the
defaults; a JSON bundle in ``VIEWCAM_CONFIG`` overrides them field by field.
Nothing here raises: unreadable values fall back to defaults with a warning.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from viewcam.logging_policy import CameraLogging, load_logging_policy
from viewcam.manipulator.inputs import NavigationMode, coerce_mode
from viewcam.shared.constants import DEFAULT_ANIMATION_DURATION
from viewcam.utils.env import coerce_float, env_choice, env_float, env_str

logger = logging.getLogger(__name__)


# ---- Helpers -----------------------------------------------------------------

def _parse_window(value: object, default: tuple[int, int]) -> tuple[int, int]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        parts = list(value)
    elif isinstance(value, str) and "x" in value.lower():
        parts = value.lower().split("x", 1)
    else:
        return default
    try:
        width, height = int(str(parts[0]).strip()), int(str(parts[1]).strip())
    except ValueError:
        return default
    if width <= 0 or height <= 0:
        return default
    return width, height


def _load_json_config(env: Mapping[str, str], name: str) -> dict[str, object]:
    raw = env.get(name)
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse %s; ignoring", name, exc_info=True)
        return {}
    if isinstance(data, dict):
        return data
    logger.warning("%s must be a JSON object; ignoring", name)
    return {}


# ---- Types -------------------------------------------------------------------

@dataclass(frozen=True)
class ManipulatorConfig:
    """Settings applied to a new :class:`CameraManipulator`."""

    mode: NavigationMode = NavigationMode.EXAMINE
    speed: float = 3.0
    animation_duration: float = DEFAULT_ANIMATION_DURATION
    window_size: tuple[int, int] = (1, 1)

    # Frame driver: keyboard factor per second of frame time and wheel multiplier
    key_rate: float = 50.0
    wheel_step: float = 3.0

    logging: CameraLogging = field(default_factory=CameraLogging)


def load_manipulator_config(env: Optional[Mapping[str, str]] = None) -> ManipulatorConfig:
    """Resolve a :class:`ManipulatorConfig` from *env* (defaults to ``os.environ``)."""

    if env is None:
        env = os.environ

    mode_name = env_choice("VIEWCAM_MODE", [m.name for m in NavigationMode], NavigationMode.EXAMINE.name, env)
    mode = NavigationMode[mode_name]
    speed = env_float("VIEWCAM_SPEED", 3.0, env)
    duration = env_float("VIEWCAM_ANIM_DURATION", DEFAULT_ANIMATION_DURATION, env)
    window = _parse_window(env_str("VIEWCAM_WINDOW", None, env), (1, 1))
    key_rate = env_float("VIEWCAM_KEY_RATE", 50.0, env)
    wheel_step = env_float("VIEWCAM_WHEEL_STEP", 3.0, env)

    bundle = _load_json_config(env, "VIEWCAM_CONFIG")
    mode = coerce_mode(bundle.get("mode"), mode)
    speed = coerce_float(bundle.get("speed"), speed)
    duration = coerce_float(bundle.get("anim_duration"), duration)
    window = _parse_window(bundle.get("window"), window)
    key_rate = coerce_float(bundle.get("key_rate"), key_rate)
    wheel_step = coerce_float(bundle.get("wheel_step"), wheel_step)

    if duration < 0.0:
        logger.warning("animation duration %.3f is negative; using %.3f", duration, DEFAULT_ANIMATION_DURATION)
        duration = DEFAULT_ANIMATION_DURATION

    return ManipulatorConfig(
        mode=mode,
        speed=speed,
        animation_duration=duration,
        window_size=window,
        key_rate=key_rate,
        wheel_step=wheel_step,
        logging=load_logging_policy(env),
    )


__all__ = ["ManipulatorConfig", "load_manipulator_config"]
