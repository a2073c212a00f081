"""Timed transition between two camera poses.

The eye travels along a quadratic Bezier arc around the point of interest
while the field of view is adjusted so an object at the center keeps its
apparent size (dolly-zoom compensation). Everything that only depends on the
start and goal poses is computed once in :func:`start_animation`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

from viewcam.shared.constants import EPSILON, MAX_FOV, MIN_FOV
from viewcam.shared.pose import CameraPose, Vec3, as_vec3


@dataclass(frozen=True)
class AnimationIdle:
    """No transition in progress."""


@dataclass(frozen=True)
class Animating:
    """Transition from ``snapshot`` to ``goal`` started at ``start_ms``."""

    snapshot: CameraPose
    goal: CameraPose
    start_ms: float
    bezier: tuple[Vec3, Vec3, Vec3]
    dolly_zoom: tuple[float, float]


AnimationState = Union[AnimationIdle, Animating]
IDLE = AnimationIdle()


def smootherstep(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a, b, t: float):
    return (1.0 - t) * np.asarray(a, dtype=float) + t * np.asarray(b, dtype=float)


def quadratic_bezier(t: float, p0, p1, p2) -> np.ndarray:
    u = 1.0 - t
    return (
        (u * u) * np.asarray(p0, dtype=float)
        + (2.0 * u * t) * np.asarray(p1, dtype=float)
        + (t * t) * np.asarray(p2, dtype=float)
    )


def bezier_control_points(snapshot: CameraPose, goal: CameraPose) -> tuple[Vec3, Vec3, Vec3]:
    """Control points for an outward arc from the snapshot eye to the goal eye.

    The curve passes through a point at the average eye radius around the
    midpoint of both centers at t=0.5, and the middle control point is pulled
    onto the plane through the eye midpoint perpendicular to the averaged up
    vector so the arc stays level.
    """

    p0 = np.asarray(snapshot.eye, dtype=float)
    p2 = np.asarray(goal.eye, dtype=float)
    interest = (np.asarray(goal.ctr, dtype=float) + np.asarray(snapshot.ctr, dtype=float)) * 0.5
    mid = (p0 + p2) * 0.5

    radius = 0.5 * (float(np.linalg.norm(p0 - interest)) + float(np.linalg.norm(p2 - interest)))
    to_mid = mid - interest
    if float(np.dot(to_mid, to_mid)) < EPSILON:
        to_mid = np.array([0.0, 0.0, 1.0])
    pass_through = interest + radius * (to_mid / np.linalg.norm(to_mid))
    p1 = 2.0 * pass_through - 0.5 * (p0 + p2)

    up_sum = np.asarray(snapshot.up, dtype=float) + np.asarray(goal.up, dtype=float)
    up_len = float(np.linalg.norm(up_sum))
    if up_len > EPSILON:
        avg_up = up_sum / up_len
        p1 = p1 + float(np.dot(mid - p1, avg_up)) * avg_up

    return as_vec3(p0), as_vec3(p1), as_vec3(p2)


def dolly_zoom_constant(pose: CameraPose) -> float:
    """Half visible height at the center: ``distance * tan(fov / 2)``."""

    return pose.distance * math.tan(math.radians(pose.fov * 0.5))


def start_animation(current: CameraPose, goal: CameraPose, start_ms: float) -> Animating:
    return Animating(
        snapshot=current,
        goal=goal,
        start_ms=float(start_ms),
        bezier=bezier_control_points(current, goal),
        dolly_zoom=(dolly_zoom_constant(current), dolly_zoom_constant(goal)),
    )


def linear_progress(state: Animating, now_ms: float, duration_s: float) -> float:
    """Raw progress in ``[0, 1]`` before easing."""

    if duration_s <= 0.0:
        return 1.0
    elapsed_s = (float(now_ms) - state.start_ms) / 1000.0
    return min(max(elapsed_s / duration_s, 0.0), 1.0)


def interpolate_pose(state: Animating, t: float) -> CameraPose:
    """Pose at eased progress *t* (strictly below 1)."""

    snapshot, goal = state.snapshot, state.goal
    ctr = _lerp(snapshot.ctr, goal.ctr, t)
    up = _lerp(snapshot.up, goal.up, t)
    eye = quadratic_bezier(t, *state.bezier)

    distance = float(np.linalg.norm(eye - ctr))
    k0, k1 = state.dolly_zoom
    k = (1.0 - t) * k0 + t * k1
    if distance > EPSILON and k > 0.0:
        fov = math.degrees(2.0 * math.atan(k / distance))
        fov = min(max(fov, MIN_FOV), MAX_FOV)
    else:
        fov = (1.0 - t) * snapshot.fov + t * goal.fov

    return CameraPose(
        eye=eye,
        ctr=ctr,
        up=up,
        fov=fov,
        near_far=_lerp(snapshot.near_far, goal.near_far, t),
        orth_mag=_lerp(snapshot.orth_mag, goal.orth_mag, t),
        projection_type=goal.projection_type,
    )


def step_animation(state: Animating, now_ms: float, duration_s: float) -> tuple[CameraPose, bool]:
    """Advance one frame; returns the new pose and whether the goal was reached."""

    t = smootherstep(linear_progress(state, now_ms, duration_s))
    if t >= 1.0:
        return state.goal, True
    return interpolate_pose(state, t), False


__all__ = [
    "IDLE",
    "AnimationIdle",
    "AnimationState",
    "Animating",
    "bezier_control_points",
    "dolly_zoom_constant",
    "interpolate_pose",
    "linear_progress",
    "quadratic_bezier",
    "smootherstep",
    "start_animation",
    "step_animation",
]
