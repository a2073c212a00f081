from __future__ import annotations

import pytest

from viewcam.manipulator.inputs import Action, Inputs, NavigationMode, classify_action, coerce_mode

EXAMINE = NavigationMode.EXAMINE
FLY = NavigationMode.FLY
WALK = NavigationMode.WALK


@pytest.mark.parametrize(
    "inputs, mode, expected",
    [
        (Inputs(), EXAMINE, Action.NO_ACTION),
        (Inputs(lmb=True), EXAMINE, Action.ORBIT),
        (Inputs(lmb=True), FLY, Action.LOOK_AROUND),
        (Inputs(lmb=True), WALK, Action.LOOK_AROUND),
        (Inputs(lmb=True, alt=True), EXAMINE, Action.LOOK_AROUND),
        (Inputs(lmb=True, alt=True), FLY, Action.ORBIT),
        (Inputs(lmb=True, ctrl=True, shift=True), EXAMINE, Action.LOOK_AROUND),
        (Inputs(lmb=True, ctrl=True, shift=True), WALK, Action.ORBIT),
        (Inputs(lmb=True, shift=True), EXAMINE, Action.DOLLY),
        (Inputs(lmb=True, shift=True), FLY, Action.DOLLY),
        (Inputs(lmb=True, ctrl=True), EXAMINE, Action.PAN),
        (Inputs(lmb=True, shift=True, alt=True), EXAMINE, Action.LOOK_AROUND),
        (Inputs(mmb=True), EXAMINE, Action.PAN),
        (Inputs(mmb=True, shift=True), FLY, Action.PAN),
        (Inputs(rmb=True), EXAMINE, Action.DOLLY),
        (Inputs(rmb=True, ctrl=True), WALK, Action.DOLLY),
        (Inputs(lmb=True, mmb=True, rmb=True), EXAMINE, Action.ORBIT),
        (Inputs(mmb=True, rmb=True), EXAMINE, Action.PAN),
        (Inputs(shift=True, ctrl=True, alt=True), EXAMINE, Action.NO_ACTION),
    ],
)
def test_classify_action_table(inputs: Inputs, mode: NavigationMode, expected: Action) -> None:
    assert classify_action(inputs, mode) is expected


def test_inputs_flags() -> None:
    assert Inputs().any_button is False
    assert Inputs(rmb=True).any_button is True
    assert Inputs().any_modifier is False
    assert Inputs(alt=True).any_modifier is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (FLY, FLY),
        (2, WALK),
        ("fly", FLY),
        (" Walk ", WALK),
        ("hover", EXAMINE),
        (7, EXAMINE),
        (True, EXAMINE),
        (None, EXAMINE),
    ],
)
def test_coerce_mode(value, expected: NavigationMode) -> None:
    assert coerce_mode(value, EXAMINE) is expected
