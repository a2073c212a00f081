"""View/projection matrices and projection-type conversion.

Matrices are 4x4 numpy arrays in the column-vector convention
(``clip = P @ V @ world``), right-handed, with zero-to-one depth and the Y
axis flipped for Vulkan-style clip space.
"""

from __future__ import annotations

import math
from dataclasses import replace

import numpy as np

from viewcam.manipulator.ops import frame_from_points
from viewcam.shared.constants import MAX_FOV, MIN_FOV
from viewcam.shared.pose import CameraPose, ProjectionType


def look_at_matrix(eye, center, up) -> np.ndarray:
    """Right-handed look-at view matrix."""

    frame = frame_from_points(eye, center, up)
    eye_vec = np.asarray(eye, dtype=float)
    view = np.eye(4, dtype=float)
    view[0, :3] = frame.right
    view[1, :3] = frame.up
    view[2, :3] = -frame.forward
    view[0, 3] = -float(np.dot(frame.right, eye_vec))
    view[1, 3] = -float(np.dot(frame.up, eye_vec))
    view[2, 3] = float(np.dot(frame.forward, eye_vec))
    return view


def perspective_matrix(fov_rad: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fov_rad * 0.5)
    proj = np.zeros((4, 4), dtype=float)
    proj[0, 0] = 1.0 / (aspect * tan_half)
    proj[1, 1] = 1.0 / tan_half
    proj[2, 2] = far / (near - far)
    proj[2, 3] = -(far * near) / (far - near)
    proj[3, 2] = -1.0
    return proj


def orthographic_matrix(half_width: float, half_height: float, near: float, far: float) -> np.ndarray:
    proj = np.eye(4, dtype=float)
    proj[0, 0] = 1.0 / half_width
    proj[1, 1] = 1.0 / half_height
    proj[2, 2] = -1.0 / (far - near)
    proj[2, 3] = -near / (far - near)
    return proj


def projection_matrix(pose: CameraPose, aspect: float) -> np.ndarray:
    near, far = pose.near_far
    if pose.projection_type is ProjectionType.ORTHOGRAPHIC:
        proj = orthographic_matrix(pose.orth_mag[0], pose.orth_mag[1], near, far)
    else:
        proj = perspective_matrix(math.radians(pose.fov), aspect, near, far)
    proj[1, 1] *= -1.0
    return proj


def convert_to_perspective(pose: CameraPose) -> CameraPose:
    """Switch to perspective keeping the visible height at the center."""

    if pose.projection_type is ProjectionType.PERSPECTIVE:
        return pose
    distance = pose.distance
    fov = pose.fov
    if distance > 0.0 and pose.orth_mag[1] > 0.0:
        fov = math.degrees(2.0 * math.atan(pose.orth_mag[1] / distance))
        fov = min(max(fov, MIN_FOV), MAX_FOV)
    return replace(pose, fov=fov, projection_type=ProjectionType.PERSPECTIVE)


def convert_to_orthographic(pose: CameraPose, aspect: float) -> CameraPose:
    """Switch to orthographic keeping the visible height at the center."""

    if pose.projection_type is ProjectionType.ORTHOGRAPHIC:
        return pose
    distance = pose.distance
    orth_mag = pose.orth_mag
    if distance > 0.0:
        ymag = distance * math.tan(math.radians(pose.fov * 0.5))
        orth_mag = (ymag * aspect, ymag)
    return replace(pose, orth_mag=orth_mag, projection_type=ProjectionType.ORTHOGRAPHIC)


__all__ = [
    "convert_to_orthographic",
    "convert_to_perspective",
    "look_at_matrix",
    "orthographic_matrix",
    "perspective_matrix",
    "projection_matrix",
]
