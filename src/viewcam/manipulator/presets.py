"""Saved camera presets.

A :class:`CameraPresetStore` keeps the HOME camera at index 0 followed by
user-saved cameras. Stores are handed out by a :class:`PresetRegistry`
keyed by a configuration path; the registry is an ordinary object owned by
the caller.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterator, Mapping, Optional

from viewcam.manipulator.controller import CameraManipulator
from viewcam.manipulator.inputs import coerce_mode
from viewcam.shared.pose import CameraPose, as_vec3
from viewcam.utils.env import coerce_float

logger = logging.getLogger(__name__)


def _pose_entry(pose: CameraPose) -> dict[str, Any]:
    return {
        "eye": list(pose.eye),
        "ctr": list(pose.ctr),
        "up": list(pose.up),
        "fov": pose.fov,
    }


def _pose_from_entry(entry: Mapping[str, Any]) -> CameraPose:
    pose = CameraPose()
    for key in ("eye", "ctr", "up"):
        value = entry.get(key)
        if value is None:
            continue
        try:
            pose = replace(pose, **{key: as_vec3(value)})
        except (TypeError, ValueError):
            logger.warning("preset field %s=%r is not a 3-vector; keeping default", key, value)
    if "fov" in entry:
        pose = replace(pose, fov=coerce_float(entry.get("fov"), pose.fov))
    return pose


class CameraPresetStore:
    """HOME camera plus saved cameras for one configuration."""

    def __init__(self, home: Optional[CameraPose] = None) -> None:
        self._cameras: list[CameraPose] = [home or CameraPose()]
        self.dirty = False

    @property
    def home(self) -> CameraPose:
        return self._cameras[0]

    @home.setter
    def home(self, pose: CameraPose) -> None:
        self._cameras[0] = pose

    def __len__(self) -> int:
        return len(self._cameras)

    def __getitem__(self, index: int) -> CameraPose:
        return self._cameras[index]

    def __iter__(self) -> Iterator[CameraPose]:
        return iter(self._cameras)

    @property
    def saved(self) -> list[CameraPose]:
        return list(self._cameras[1:])

    def add(self, pose: CameraPose) -> bool:
        """Append *pose* unless an identical camera is already stored."""

        if pose in self._cameras:
            return False
        self._cameras.append(pose)
        self.dirty = True
        return True

    def remove(self, index: int) -> None:
        if index == 0:
            raise IndexError("the home camera cannot be removed")
        if index < 0 or index >= len(self._cameras):
            raise IndexError(f"preset index {index} out of range")
        del self._cameras[index]
        self.dirty = True

    def clear_saved(self) -> None:
        if len(self._cameras) > 1:
            del self._cameras[1:]
            self.dirty = True

    def to_settings(self, manip: CameraManipulator) -> dict[str, Any]:
        """Snapshot of manipulator settings and saved cameras, JSON-friendly."""

        return {
            "mode": manip.mode.value,
            "speed": manip.speed,
            "anim_duration": manip.animation_duration,
            "cameras": [_pose_entry(pose) for pose in self._cameras[1:]],
        }

    def apply_settings(self, settings: Mapping[str, Any], manip: CameraManipulator) -> None:
        """Restore settings produced by :meth:`to_settings`.

        Missing keys keep the manipulator's values; cameras are appended
        (duplicates skipped) with missing fields taken from the default pose.
        """

        if "mode" in settings:
            manip.set_mode(coerce_mode(settings["mode"], manip.mode))
        if "speed" in settings:
            manip.set_speed(coerce_float(settings["speed"], manip.speed))
        if "anim_duration" in settings:
            manip.set_animation_duration(coerce_float(settings["anim_duration"], manip.animation_duration))

        cameras = settings.get("cameras") or []
        for entry in cameras:
            if not isinstance(entry, Mapping):
                logger.warning("ignoring preset entry %r", entry)
                continue
            self.add(_pose_from_entry(entry))
        self.dirty = False


class PresetRegistry:
    """Preset stores keyed by configuration path."""

    def __init__(self) -> None:
        self._stores: dict[str, CameraPresetStore] = {}

    def store_for(self, path: str) -> CameraPresetStore:
        store = self._stores.get(path)
        if store is None:
            store = CameraPresetStore()
            self._stores[path] = store
        return store

    def __contains__(self, path: object) -> bool:
        return path in self._stores

    def paths(self) -> list[str]:
        return list(self._stores)


__all__ = ["CameraPresetStore", "PresetRegistry"]
