from __future__ import annotations

import math

import numpy as np
import pytest

from viewcam.manipulator.fit import fit_distance, fit_eye
from viewcam.shared.pose import CameraPose


def _direction(eye, ctr) -> np.ndarray:
    vec = np.subtract(ctr, eye)
    return vec / np.linalg.norm(vec)


def test_sphere_fit_distance() -> None:
    pose = CameraPose()
    distance = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert distance == pytest.approx(math.sqrt(3.0) / math.tan(math.radians(30.0)))


def test_sphere_fit_uses_narrower_axis() -> None:
    pose = CameraPose()
    wide = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0), aspect=2.0)
    narrow = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0), aspect=0.5)
    square = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0), aspect=1.0)
    assert wide == pytest.approx(square)
    assert narrow == pytest.approx(2.0 * square)


def test_fit_eye_keeps_direction() -> None:
    pose = CameraPose()
    eye, center = fit_eye(pose, (2.0, 2.0, 2.0), (4.0, 4.0, 4.0))
    assert center == pytest.approx([3.0, 3.0, 3.0])
    before = _direction(pose.eye, center)
    assert _direction(eye, center) == pytest.approx(before)
    assert np.linalg.norm(center - eye) == pytest.approx(3.0)


def test_fit_eye_at_box_center_uses_view_direction() -> None:
    pose = CameraPose(eye=(0.0, 0.0, 0.0), ctr=(0.0, 0.0, -5.0))
    eye, center = fit_eye(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert center == pytest.approx([0.0, 0.0, 0.0])
    assert eye == pytest.approx([0.0, 0.0, 3.0])


def test_tight_fit_is_closer_than_sphere_fit() -> None:
    pose = CameraPose(eye=(0.0, 0.0, 10.0))
    tight = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0), tight=True)
    loose = fit_distance(pose, (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert tight == pytest.approx(1.0 + math.sqrt(3.0))
    assert tight < loose
