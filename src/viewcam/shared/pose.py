"""Camera pose value type and its validation rules."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from viewcam.shared.constants import EPSILON, MAX_FOV, MIN_DISTANCE, MIN_FOV

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class ProjectionType(Enum):
    """Projection used by the renderer for the current pose."""

    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


def as_vec3(values: Iterable[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def as_vec2(values: Iterable[float]) -> Vec2:
    a, b = (float(v) for v in values)
    return (a, b)


@dataclass(frozen=True)
class CameraPose:
    """Complete camera configuration.

    Vectors are stored as float tuples so poses compare field-wise and can be
    copied freely; the manipulator converts to numpy arrays for the math.
    ``orth_mag`` holds the orthographic half-width/half-height.
    """

    eye: Vec3 = (10.0, 10.0, 10.0)
    ctr: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    fov: float = 60.0
    near_far: Vec2 = (0.001, 100000.0)
    orth_mag: Vec2 = (5.0, 5.0)
    projection_type: ProjectionType = ProjectionType.PERSPECTIVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "eye", as_vec3(self.eye))
        object.__setattr__(self, "ctr", as_vec3(self.ctr))
        object.__setattr__(self, "up", as_vec3(self.up))
        object.__setattr__(self, "fov", float(self.fov))
        object.__setattr__(self, "near_far", as_vec2(self.near_far))
        object.__setattr__(self, "orth_mag", as_vec2(self.orth_mag))
        object.__setattr__(self, "projection_type", ProjectionType(self.projection_type))

    @property
    def distance(self) -> float:
        return math.dist(self.eye, self.ctr)


@dataclass(frozen=True)
class ValidationWarning:
    """Notification emitted when an entry point declines invalid input."""

    operation: str
    message: str


def _finite(values: Iterable[float]) -> bool:
    return all(math.isfinite(v) for v in values)


def is_valid_direction(vec: Vec3) -> bool:
    return _finite(vec) and math.hypot(*vec) > EPSILON


def validate_pose(pose: CameraPose) -> bool:
    """Return True when *pose* can safely become the current camera."""

    if not _finite(pose.eye) or not _finite(pose.ctr) or not is_valid_direction(pose.up):
        return False
    if pose.distance < MIN_DISTANCE:
        return False
    if not (MIN_FOV <= pose.fov <= MAX_FOV):
        return False
    near, far = pose.near_far
    if not _finite(pose.near_far) or near <= 0.0 or far <= near:
        return False
    if not _finite(pose.orth_mag) or min(pose.orth_mag) <= 0.0:
        return False
    return True


__all__ = [
    "CameraPose",
    "ProjectionType",
    "ValidationWarning",
    "Vec2",
    "Vec3",
    "as_vec2",
    "as_vec3",
    "is_valid_direction",
    "validate_pose",
]
