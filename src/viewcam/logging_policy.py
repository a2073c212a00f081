"""Centralised logging toggles for the camera manipulator.

All env var parsing for per-event camera logs happens here so the
manipulator depends on a structured policy rather than scattered
``os.getenv`` calls.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from viewcam.utils.env import env_bool


@dataclass(frozen=True)
class CameraLogging:
    """Per-event logging flags."""

    log_camera_info: bool = False
    debug_orbit: bool = False
    debug_pan: bool = False
    debug_dolly: bool = False
    debug_anim: bool = False


def load_logging_policy(env: Optional[Mapping[str, str]] = None) -> CameraLogging:
    """Read logging flags from the provided environment mapping."""

    if env is None:
        env = os.environ

    return CameraLogging(
        log_camera_info=env_bool("VIEWCAM_LOG_CAMERA_INFO", False, env),
        debug_orbit=env_bool("VIEWCAM_DEBUG_ORBIT", False, env),
        debug_pan=env_bool("VIEWCAM_DEBUG_PAN", False, env),
        debug_dolly=env_bool("VIEWCAM_DEBUG_DOLLY", False, env),
        debug_anim=env_bool("VIEWCAM_DEBUG_ANIM", False, env),
    )


__all__ = ["CameraLogging", "load_logging_policy"]
