"""Numeric limits shared by the pose model and the manipulator."""

from __future__ import annotations

# Distance thresholds
EPSILON = 1e-6
MIN_DISTANCE = 0.000001

# FOV limits (degrees)
MIN_FOV = 0.01
MAX_FOV = 179.0

# Orthographic limits
MIN_ORTHOGRAPHIC_SIZE = 0.01

# Input scaling
MAX_DOLLY_DISPLACEMENT = 0.99  # never reach the center of interest

# Animation (seconds)
DEFAULT_ANIMATION_DURATION = 0.5

MIN_ASPECT_RATIO = EPSILON


__all__ = [
    "DEFAULT_ANIMATION_DURATION",
    "EPSILON",
    "MAX_DOLLY_DISPLACEMENT",
    "MAX_FOV",
    "MIN_ASPECT_RATIO",
    "MIN_DISTANCE",
    "MIN_FOV",
    "MIN_ORTHOGRAPHIC_SIZE",
]
