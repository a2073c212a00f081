"""Mouse button/modifier state and its mapping to camera actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NavigationMode(Enum):
    """How the camera reacts to motion input."""

    EXAMINE = 0  # orbit around the point of interest
    FLY = 1  # free camera, the interest moves with it
    WALK = 2  # like fly, but stays on the plane perpendicular to up


class Action(Enum):
    NO_ACTION = "none"
    ORBIT = "orbit"
    DOLLY = "dolly"
    PAN = "pan"
    LOOK_AROUND = "look-around"


@dataclass(frozen=True)
class Inputs:
    """Buttons and modifiers held during a pointer event."""

    lmb: bool = False
    mmb: bool = False
    rmb: bool = False
    shift: bool = False
    ctrl: bool = False
    alt: bool = False

    @property
    def any_button(self) -> bool:
        return self.lmb or self.mmb or self.rmb

    @property
    def any_modifier(self) -> bool:
        return self.shift or self.ctrl or self.alt


def classify_action(inputs: Inputs, mode: NavigationMode) -> Action:
    """Pick the camera action for a drag with *inputs* held.

    Left-button chords are resolved in priority order: ctrl+shift or alt,
    then shift, then ctrl, then the bare button. Examine mode orbits on the
    bare button and looks around on the chord; fly/walk swap the two.
    """

    if inputs.lmb:
        examine = mode is NavigationMode.EXAMINE
        if (inputs.ctrl and inputs.shift) or inputs.alt:
            return Action.LOOK_AROUND if examine else Action.ORBIT
        if inputs.shift:
            return Action.DOLLY
        if inputs.ctrl:
            return Action.PAN
        return Action.ORBIT if examine else Action.LOOK_AROUND
    if inputs.mmb:
        return Action.PAN
    if inputs.rmb:
        return Action.DOLLY
    return Action.NO_ACTION


def coerce_mode(value: object, default: NavigationMode) -> NavigationMode:
    """Navigation mode from an enum, its integer value or its name."""

    if isinstance(value, NavigationMode):
        return value
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        try:
            return NavigationMode(value)
        except ValueError:
            return default
    if isinstance(value, str):
        key = value.strip().upper()
        if key in NavigationMode.__members__:
            return NavigationMode[key]
    return default


__all__ = ["Action", "Inputs", "NavigationMode", "classify_action", "coerce_mode"]
