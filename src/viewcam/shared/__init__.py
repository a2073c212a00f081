"""Pose model shared by the manipulator and its collaborators."""

from .pose import (
    CameraPose,
    ProjectionType,
    ValidationWarning,
    validate_pose,
)
from .pose_text import format_pose, parse_pose

__all__ = [
    "CameraPose",
    "ProjectionType",
    "ValidationWarning",
    "format_pose",
    "parse_pose",
    "validate_pose",
]
