"""Camera manipulation: input mapping, motion math, animation and framing."""

from __future__ import annotations

from .animator import AnimationIdle, Animating, AnimationState
from .controller import HELP_TEXT, CameraManipulator
from .fit import fit_distance, fit_eye
from .frame_input import FrameInput, drive_frame
from .inputs import Action, Inputs, NavigationMode, classify_action
from .ops import (
    CameraFrame,
    apply_dolly,
    apply_key_motion,
    apply_orbit,
    apply_pan,
    camera_frame,
)
from .presets import CameraPresetStore, PresetRegistry
from .projection import look_at_matrix, projection_matrix

__all__ = [
    "Action",
    "AnimationIdle",
    "AnimationState",
    "Animating",
    "CameraFrame",
    "CameraManipulator",
    "CameraPresetStore",
    "FrameInput",
    "HELP_TEXT",
    "Inputs",
    "NavigationMode",
    "PresetRegistry",
    "apply_dolly",
    "apply_key_motion",
    "apply_orbit",
    "apply_pan",
    "camera_frame",
    "classify_action",
    "drive_frame",
    "fit_distance",
    "fit_eye",
    "look_at_matrix",
    "projection_matrix",
]
