from __future__ import annotations

import math

import pytest

from viewcam.shared.pose import CameraPose, ProjectionType, is_valid_direction, validate_pose


def test_default_pose_is_valid() -> None:
    pose = CameraPose()
    assert validate_pose(pose)
    assert pose.eye == (10.0, 10.0, 10.0)
    assert pose.ctr == (0.0, 0.0, 0.0)
    assert pose.up == (0.0, 1.0, 0.0)
    assert pose.fov == 60.0
    assert pose.near_far == (0.001, 100000.0)
    assert pose.orth_mag == (5.0, 5.0)
    assert pose.projection_type is ProjectionType.PERSPECTIVE
    assert pose.distance == pytest.approx(math.sqrt(300.0))


def test_pose_coerces_sequences_and_projection_values() -> None:
    pose = CameraPose(eye=[1, 2, 3], ctr=(0, 0, 0), up=[0, 0, 1], projection_type=1)
    assert pose.eye == (1.0, 2.0, 3.0)
    assert isinstance(pose.eye, tuple)
    assert pose.projection_type is ProjectionType.ORTHOGRAPHIC
    assert pose == CameraPose(eye=(1.0, 2.0, 3.0), up=(0.0, 0.0, 1.0), projection_type=ProjectionType.ORTHOGRAPHIC)


@pytest.mark.parametrize(
    "changes",
    [
        {"eye": (math.nan, 0.0, 0.0)},
        {"eye": (math.inf, 0.0, 0.0)},
        {"ctr": (0.0, -math.inf, 0.0)},
        {"up": (0.0, math.nan, 0.0)},
        {"up": (0.0, 0.0, 0.0)},
        {"eye": (0.0, 0.0, 0.0)},
        {"fov": 0.0},
        {"fov": 180.0},
        {"near_far": (0.0, 10.0)},
        {"near_far": (5.0, 1.0)},
        {"orth_mag": (0.0, 1.0)},
    ],
)
def test_validate_pose_rejects(changes) -> None:
    base = CameraPose()
    fields = {
        "eye": base.eye,
        "ctr": base.ctr,
        "up": base.up,
        "fov": base.fov,
        "near_far": base.near_far,
        "orth_mag": base.orth_mag,
    }
    fields.update(changes)
    assert validate_pose(CameraPose(**fields)) is False


@pytest.mark.parametrize("fov", [0.01, 179.0])
def test_validate_pose_accepts_fov_bounds(fov: float) -> None:
    assert validate_pose(CameraPose(fov=fov))


def test_is_valid_direction() -> None:
    assert is_valid_direction((0.0, 1.0, 0.0))
    assert not is_valid_direction((0.0, 0.0, 0.0))
    assert not is_valid_direction((math.nan, 1.0, 0.0))
