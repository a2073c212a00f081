"""Per-frame input driver.

The host application polls its windowing layer once per frame, packs the
result into a :class:`FrameInput` and hands it to :func:`drive_frame`, which
advances the animation and routes keyboard, pointer and wheel input to the
manipulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from viewcam.manipulator.controller import CameraManipulator
from viewcam.manipulator.inputs import Action, Inputs

# (keys, (dx, dy, action)) per unit of key factor; each group moves once per frame
_KEY_BINDINGS: tuple[tuple[tuple[str, ...], tuple[float, float, Action]], ...] = (
    (("w",), (1.0, 0.0, Action.DOLLY)),
    (("s",), (-1.0, 0.0, Action.DOLLY)),
    (("d", "right"), (1.0, 0.0, Action.PAN)),
    (("a", "left"), (-1.0, 0.0, Action.PAN)),
    (("up",), (0.0, 1.0, Action.PAN)),
    (("down",), (0.0, -1.0, Action.PAN)),
)


@dataclass(frozen=True)
class FrameInput:
    """Input state sampled for one frame.

    ``clicked`` is true on the frame a button went down; ``dragging`` while a
    held button moves. ``keys`` holds lower-case key names (``"w"``,
    ``"left"``...). ``dt`` is the frame time in seconds.
    """

    lmb: bool = False
    mmb: bool = False
    rmb: bool = False
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    mouse_pos: tuple[float, float] = (0.0, 0.0)
    clicked: bool = False
    dragging: bool = False
    wheel: float = 0.0
    keys: FrozenSet[str] = frozenset()
    dt: float = 0.0
    hovered: bool = True

    @property
    def inputs(self) -> Inputs:
        return Inputs(
            lmb=self.lmb,
            mmb=self.mmb,
            rmb=self.rmb,
            shift=self.shift,
            ctrl=self.ctrl,
            alt=self.alt,
        )


def drive_frame(
    manip: CameraManipulator,
    frame: FrameInput,
    key_rate: float = 50.0,
    wheel_step: float = 3.0,
) -> None:
    manip.update_anim()
    if not frame.hovered:
        return

    inputs = frame.inputs
    if not inputs.any_modifier:
        factor = float(frame.dt) * float(key_rate)
        held = {key.lower() for key in frame.keys}
        for keys, (dx, dy, action) in _KEY_BINDINGS:
            if held.isdisjoint(keys):
                continue
            manip.key_motion((dx * factor, dy * factor), action)

    if frame.clicked:
        manip.set_mouse_position(frame.mouse_pos)
    if frame.dragging:
        manip.mouse_move(frame.mouse_pos, inputs)

    if frame.wheel != 0.0:
        manip.wheel(int(frame.wheel * wheel_step), inputs)


__all__ = ["FrameInput", "drive_frame"]
