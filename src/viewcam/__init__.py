"""
viewcam: interactive camera manipulation for 3D viewers

Orbit, pan, dolly and look-around from mouse, wheel and keyboard input,
animated transitions between poses, box framing and projection conversion.
"""

__version__ = "0.1.0"

from viewcam.config import ManipulatorConfig, load_manipulator_config
from viewcam.logging_policy import CameraLogging, load_logging_policy
from viewcam.manipulator import (
    Action,
    CameraManipulator,
    CameraPresetStore,
    FrameInput,
    Inputs,
    NavigationMode,
    PresetRegistry,
    drive_frame,
)
from viewcam.shared import (
    CameraPose,
    ProjectionType,
    ValidationWarning,
    format_pose,
    parse_pose,
    validate_pose,
)

__all__ = [
    "Action",
    "CameraLogging",
    "CameraManipulator",
    "CameraPose",
    "CameraPresetStore",
    "FrameInput",
    "Inputs",
    "ManipulatorConfig",
    "NavigationMode",
    "PresetRegistry",
    "ProjectionType",
    "ValidationWarning",
    "__version__",
    "drive_frame",
    "format_pose",
    "load_logging_policy",
    "load_manipulator_config",
    "parse_pose",
    "validate_pose",
]
