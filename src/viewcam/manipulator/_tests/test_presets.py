from __future__ import annotations

import pytest

from viewcam.manipulator.controller import CameraManipulator
from viewcam.manipulator.inputs import NavigationMode
from viewcam.manipulator.presets import CameraPresetStore, PresetRegistry
from viewcam.shared.pose import CameraPose

FRONT = CameraPose(eye=(0.0, 0.0, 10.0))
SIDE = CameraPose(eye=(10.0, 0.0, 0.0), fov=40.0)


def test_store_starts_with_home() -> None:
    store = CameraPresetStore()
    assert len(store) == 1
    assert store.home == CameraPose()
    assert store[0] == store.home
    assert store.saved == []
    assert store.dirty is False


def test_home_can_be_replaced() -> None:
    store = CameraPresetStore()
    store.home = FRONT
    assert store[0] == FRONT
    assert len(store) == 1


def test_add_only_unique() -> None:
    store = CameraPresetStore()
    assert store.add(FRONT) is True
    assert store.add(FRONT) is False
    assert store.add(CameraPose()) is False
    assert store.add(SIDE) is True
    assert list(store) == [CameraPose(), FRONT, SIDE]
    assert store.dirty is True


def test_remove_protects_home() -> None:
    store = CameraPresetStore()
    store.add(FRONT)
    with pytest.raises(IndexError):
        store.remove(0)
    with pytest.raises(IndexError):
        store.remove(5)
    store.remove(1)
    assert len(store) == 1


def test_clear_saved_keeps_home() -> None:
    store = CameraPresetStore(home=FRONT)
    store.add(SIDE)
    store.clear_saved()
    assert list(store) == [FRONT]


def test_settings_round_trip() -> None:
    manip = CameraManipulator(clock=lambda: 0.0)
    manip.set_mode(NavigationMode.FLY)
    manip.set_speed(5.0)
    manip.set_animation_duration(1.25)
    store = CameraPresetStore()
    store.add(SIDE)

    settings = store.to_settings(manip)
    assert settings == {
        "mode": 1,
        "speed": 5.0,
        "anim_duration": 1.25,
        "cameras": [{"eye": [10.0, 0.0, 0.0], "ctr": [0.0, 0.0, 0.0], "up": [0.0, 1.0, 0.0], "fov": 40.0}],
    }

    other = CameraManipulator(clock=lambda: 0.0)
    restored = CameraPresetStore()
    restored.apply_settings(settings, other)
    assert other.mode is NavigationMode.FLY
    assert other.speed == 5.0
    assert other.animation_duration == 1.25
    assert restored.saved == [SIDE]
    assert restored.dirty is False


def test_apply_settings_fills_missing_fields() -> None:
    manip = CameraManipulator(clock=lambda: 0.0)
    store = CameraPresetStore()
    store.apply_settings({"cameras": [{"eye": [1, 2, 3]}, {"fov": 20}, "junk", {"up": "bad"}]}, manip)
    assert store.saved == [CameraPose(eye=(1.0, 2.0, 3.0)), CameraPose(fov=20.0)]
    assert manip.mode is NavigationMode.EXAMINE
    assert manip.speed == 3.0


def test_registry_keys_stores_by_path() -> None:
    registry = PresetRegistry()
    first = registry.store_for("/tmp/a.json")
    assert registry.store_for("/tmp/a.json") is first
    second = registry.store_for("/tmp/b.json")
    assert second is not first
    assert "/tmp/a.json" in registry
    assert registry.paths() == ["/tmp/a.json", "/tmp/b.json"]


def test_registries_are_independent() -> None:
    one, two = PresetRegistry(), PresetRegistry()
    one.store_for("cfg").add(FRONT)
    assert len(two.store_for("cfg")) == 1
