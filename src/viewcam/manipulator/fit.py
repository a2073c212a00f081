"""Distance computation for framing an axis-aligned box."""

from __future__ import annotations

import math

import numpy as np

from viewcam.manipulator.ops import camera_frame
from viewcam.manipulator.projection import look_at_matrix
from viewcam.shared.constants import EPSILON
from viewcam.shared.pose import CameraPose


def _box_corners(half: np.ndarray) -> list[np.ndarray]:
    return [
        np.array([
            half[0] if i & 1 else -half[0],
            half[1] if i & 2 else -half[1],
            half[2] if i & 4 else -half[2],
        ])
        for i in range(8)
    ]


def fit_distance(pose: CameraPose, box_min, box_max, *, tight: bool = False, aspect: float = 1.0) -> float:
    """Eye-to-center distance at which the box is fully visible.

    The loose fit uses the bounding sphere. The tight fit rotates the box
    corners into view space and keeps the largest distance any corner in
    front of the center needs, horizontally or vertically.
    """

    lo = np.asarray(box_min, dtype=float)
    hi = np.asarray(box_max, dtype=float)
    half = 0.5 * (hi - lo)
    center = 0.5 * (lo + hi)

    yfov = math.tan(math.radians(pose.fov * 0.5))
    xfov = yfov * float(aspect)

    if not tight:
        radius = float(np.linalg.norm(half))
        return max(radius / xfov, radius / yfov)

    rotation = look_at_matrix(pose.eye, center, pose.up)[:3, :3]
    ideal = 0.0
    for corner in _box_corners(half):
        x, y, z = rotation @ corner
        if z < 0.0:
            ideal = max(abs(y) / yfov + abs(z), ideal)
            ideal = max(abs(x) / xfov + abs(z), ideal)
    return ideal


def fit_eye(pose: CameraPose, box_min, box_max, *, tight: bool = False, aspect: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """New (eye, center) framing the box along the current viewing direction."""

    lo = np.asarray(box_min, dtype=float)
    hi = np.asarray(box_max, dtype=float)
    center = 0.5 * (lo + hi)
    distance = fit_distance(pose, lo, hi, tight=tight, aspect=aspect)

    direction = center - np.asarray(pose.eye, dtype=float)
    length = float(np.linalg.norm(direction))
    if length < EPSILON:
        direction = camera_frame(pose).forward
    else:
        direction = direction / length
    return center - distance * direction, center


__all__ = ["fit_distance", "fit_eye"]
