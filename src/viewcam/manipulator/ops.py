"""Camera motion algorithms (free functions).

Each helper takes the current :class:`CameraPose`, applies one kind of user
motion and returns the updated pose. Displacements are screen deltas already
normalized by the window size. The manipulator owns state; these functions
only do the math so they can be tested directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np
from vispy.util.quaternion import Quaternion

from viewcam.manipulator.inputs import Action, NavigationMode
from viewcam.shared.constants import (
    EPSILON,
    MAX_DOLLY_DISPLACEMENT,
    MIN_ASPECT_RATIO,
    MIN_DISTANCE,
    MIN_ORTHOGRAPHIC_SIZE,
)
from viewcam.shared.pose import CameraPose, ProjectionType


@dataclass(frozen=True)
class CameraFrame:
    """Orthonormal camera basis in world space."""

    forward: np.ndarray
    right: np.ndarray
    up: np.ndarray


def _vec(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _is_zero(displacement: tuple[float, float]) -> bool:
    return float(displacement[0]) == 0.0 and float(displacement[1]) == 0.0


def frame_from_points(eye, ctr, up) -> CameraFrame:
    """Build forward/right/up looking from *eye* to *ctr*, substituting a safe up when needed."""

    view_delta = _vec(ctr) - _vec(eye)
    if np.linalg.norm(view_delta) < EPSILON:
        return CameraFrame(
            forward=np.array([0.0, 0.0, -1.0]),
            right=np.array([1.0, 0.0, 0.0]),
            up=np.array([0.0, 1.0, 0.0]),
        )

    forward = view_delta / np.linalg.norm(view_delta)
    right = np.cross(forward, _vec(up))
    if float(np.dot(right, right)) < EPSILON:
        fallback_up = np.array([0.0, 1.0, 0.0]) if abs(forward[1]) < 0.99 else np.array([1.0, 0.0, 0.0])
        right = np.cross(forward, fallback_up)
    right = right / np.linalg.norm(right)
    return CameraFrame(forward=forward, right=right, up=np.cross(right, forward))


def camera_frame(pose: CameraPose) -> CameraFrame:
    return frame_from_points(pose.eye, pose.ctr, pose.up)


def view_dimensions(pose: CameraPose, aspect: float) -> tuple[float, float]:
    """Visible (width, height) at the center of interest."""

    if pose.projection_type is ProjectionType.ORTHOGRAPHIC:
        return pose.orth_mag[0] * 2.0, pose.orth_mag[1] * 2.0
    distance = pose.distance
    view_height = 2.0 * distance * math.tan(math.radians(pose.fov) * 0.5)
    view_width = view_height * max(float(aspect), MIN_ASPECT_RATIO)
    return view_width, view_height


def project_to_ground_plane(vec: np.ndarray, up) -> np.ndarray:
    """Remove the component of *vec* along *up* (walk mode stays level)."""

    up_vec = _vec(up)
    up_len2 = float(np.dot(up_vec, up_vec))
    if up_len2 < EPSILON:
        return vec
    return vec - (float(np.dot(vec, up_vec)) / up_len2) * up_vec


def zoom_orthographic(pose: CameraPose, factor: float) -> CameraPose:
    xmag = max(pose.orth_mag[0] * factor, MIN_ORTHOGRAPHIC_SIZE)
    ymag = max(pose.orth_mag[1] * factor, MIN_ORTHOGRAPHIC_SIZE)
    return replace(pose, orth_mag=(xmag, ymag))


def rotate_about_axis(vec: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    """Right-handed rotation of *vec* by *angle* radians around a unit *axis*."""

    q = Quaternion.create_from_axis_angle(float(angle), float(axis[0]), float(axis[1]), float(axis[2]))
    return _vec(q.rotate_point(vec))


def apply_pan(
    pose: CameraPose,
    displacement: tuple[float, float],
    *,
    mode: NavigationMode,
    aspect: float,
) -> CameraPose:
    """Translate eye and center parallel to the view plane."""

    if _is_zero(displacement):
        return pose
    dx, dy = float(displacement[0]), float(displacement[1])
    if mode is NavigationMode.FLY:
        dx, dy = -dx, -dy

    frame = camera_frame(pose)
    width, height = view_dimensions(pose, aspect)
    offset = (-dx * frame.right * width) + (dy * frame.up * height)
    return replace(pose, eye=_vec(pose.eye) + offset, ctr=_vec(pose.ctr) + offset)


def apply_orbit(pose: CameraPose, displacement: tuple[float, float], invert: bool = False) -> CameraPose:
    """Orbit the eye around the center (or the center around the eye if *invert*).

    A full window-width drag is one revolution. The horizontal step turns
    around world up; the vertical step turns around ``up x direction`` and is
    dropped when it would carry the direction over a pole.
    """

    if _is_zero(displacement):
        return pose
    dx = float(displacement[0]) * 2.0 * math.pi
    dy = float(displacement[1]) * 2.0 * math.pi

    origin = _vec(pose.eye if invert else pose.ctr)
    position = _vec(pose.ctr if invert else pose.eye)

    center_to_eye = position - origin
    radius = float(np.linalg.norm(center_to_eye))
    if radius < EPSILON:
        return pose
    center_to_eye = center_to_eye / radius

    up = _vec(pose.up)
    up_len = float(np.linalg.norm(up))
    if up_len < EPSILON:
        return pose
    up = up / up_len

    center_to_eye = rotate_about_axis(center_to_eye, -dx, up)

    axis_x = np.cross(up, center_to_eye)
    if float(np.dot(axis_x, axis_x)) < EPSILON:
        return pose
    axis_x = axis_x / np.linalg.norm(axis_x)
    rotated = rotate_about_axis(center_to_eye, -dy, axis_x)

    # pole guard
    if np.sign(rotated[0]) == np.sign(center_to_eye[0]):
        center_to_eye = rotated

    new_position = center_to_eye * radius + origin
    if invert:
        return replace(pose, ctr=new_position)
    return replace(pose, eye=new_position)


def apply_dolly(
    pose: CameraPose,
    displacement: tuple[float, float],
    *,
    mode: NavigationMode,
    keep_center_fixed: bool = False,
) -> CameraPose:
    """Move the eye toward the center, never crossing it.

    Orthographic poses zoom the view volume instead.
    """

    if _is_zero(displacement):
        return pose
    dx, dy = float(displacement[0]), float(displacement[1])
    larger = dx if abs(dx) > abs(dy) else -dy

    if pose.projection_type is ProjectionType.ORTHOGRAPHIC:
        return zoom_orthographic(pose, 1.0 - larger)

    direction = _vec(pose.ctr) - _vec(pose.eye)
    length = float(np.linalg.norm(direction))
    if length < MIN_DISTANCE:
        return pose
    if larger >= MAX_DOLLY_DISPLACEMENT:
        return pose

    direction = direction * larger
    if mode is NavigationMode.WALK:
        direction = project_to_ground_plane(direction, pose.up)

    eye = _vec(pose.eye) + direction
    ctr = _vec(pose.ctr)
    if mode in (NavigationMode.FLY, NavigationMode.WALK) and not keep_center_fixed:
        ctr = ctr + direction
    elif float(np.linalg.norm(ctr - eye)) < MIN_DISTANCE:
        return pose
    return replace(pose, eye=eye, ctr=ctr)


def apply_key_motion(
    pose: CameraPose,
    delta: tuple[float, float],
    action: Action,
    *,
    mode: NavigationMode,
    speed: float,
) -> CameraPose:
    """Keyboard movement: dolly along forward or pan along right/up."""

    if _is_zero(delta):
        return pose
    dx = float(delta[0]) * float(speed)
    dy = float(delta[1]) * float(speed)

    frame = camera_frame(pose)
    if action is Action.DOLLY:
        movement = frame.forward * dx
        if mode is NavigationMode.WALK:
            movement = project_to_ground_plane(movement, pose.up)
    elif action is Action.PAN:
        movement = frame.right * dx + frame.up * dy
    else:
        return pose
    return replace(pose, eye=_vec(pose.eye) + movement, ctr=_vec(pose.ctr) + movement)


__all__ = [
    "CameraFrame",
    "apply_dolly",
    "apply_key_motion",
    "apply_orbit",
    "apply_pan",
    "camera_frame",
    "frame_from_points",
    "project_to_ground_plane",
    "rotate_about_axis",
    "view_dimensions",
    "zoom_orthographic",
]
