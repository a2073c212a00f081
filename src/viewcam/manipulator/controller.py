"""Stateful camera manipulator.

:class:`CameraManipulator` owns the authoritative ``current`` pose read by
the renderer every frame. Pointer, wheel and keyboard input mutate it
through the motion helpers in :mod:`viewcam.manipulator.ops`; programmatic
pose requests either apply instantly or start an animation that
:meth:`CameraManipulator.update_anim` advances once per frame. User input
always cancels a running animation.

Entry points never raise on bad input: they log a warning, notify the
optional ``on_warning`` callback with a :class:`ValidationWarning` and leave
the state untouched.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

import numpy as np

from viewcam.logging_policy import CameraLogging
from viewcam.manipulator import ops
from viewcam.manipulator.animator import (
    IDLE,
    AnimationState,
    Animating,
    linear_progress,
    start_animation,
    step_animation,
)
from viewcam.manipulator.fit import fit_eye
from viewcam.manipulator.inputs import Action, Inputs, NavigationMode, classify_action
from viewcam.manipulator.projection import (
    convert_to_orthographic,
    convert_to_perspective,
    look_at_matrix,
    projection_matrix,
)
from viewcam.shared.constants import (
    DEFAULT_ANIMATION_DURATION,
    EPSILON,
    MAX_FOV,
    MIN_FOV,
)
from viewcam.shared.pose import (
    CameraPose,
    ProjectionType,
    ValidationWarning,
    Vec3,
    validate_pose,
)

if TYPE_CHECKING:
    from viewcam.config import ManipulatorConfig


logger = logging.getLogger(__name__)

HELP_TEXT = (
    "LMB: rotate around the target\n"
    "RMB: Dolly in/out\n"
    "MMB: Pan along view plane\n"
    "LMB + Shift: Dolly in/out\n"
    "LMB + Ctrl: Pan\n"
    "LMB + Alt: Look around\n"
    "Mouse wheel: Dolly in/out\n"
    "Mouse wheel + Shift: Zoom in/out\n"
    "W/S: Move forward/backward\n"
    "A/D, Arrows: Move along the view plane\n"
)


class CameraManipulator:
    """Orbit/pan/dolly camera with animated transitions.

    Parameters
    ----------
    clock : callable, optional
        Monotonic clock returning seconds, used when :meth:`update_anim` is
        called without a timestamp and to stamp animation starts.
    on_warning : callable, optional
        Receives a :class:`ValidationWarning` whenever input is declined.
    logging_policy : CameraLogging, optional
        Per-event log toggles.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.perf_counter,
        on_warning: Optional[Callable[[ValidationWarning], None]] = None,
        logging_policy: Optional[CameraLogging] = None,
    ) -> None:
        self._clock = clock
        self._on_warning = on_warning
        self._log = logging_policy or CameraLogging()

        self._current = CameraPose()
        self._anim: AnimationState = IDLE
        self._duration = DEFAULT_ANIMATION_DURATION
        self._window_size: tuple[int, int] = (1, 1)
        self._speed = 3.0
        self._mouse: tuple[float, float] = (0.0, 0.0)
        self._mode = NavigationMode.EXAMINE
        self._view_matrix = np.eye(4)
        self._update_view_matrix()

    @classmethod
    def from_config(
        cls,
        cfg: ManipulatorConfig,
        *,
        clock: Callable[[], float] = time.perf_counter,
        on_warning: Optional[Callable[[ValidationWarning], None]] = None,
    ) -> CameraManipulator:
        manip = cls(clock=clock, on_warning=on_warning, logging_policy=cfg.logging)
        manip.set_mode(cfg.mode)
        manip.set_speed(cfg.speed)
        manip.set_animation_duration(cfg.animation_duration)
        manip.set_window_size(cfg.window_size)
        return manip

    # ---- internals -----------------------------------------------------------

    def _now_ms(self) -> float:
        return float(self._clock()) * 1000.0

    def _warn(self, operation: str, message: str) -> None:
        logger.warning("CameraManipulator.%s: %s", operation, message)
        if self._on_warning is not None:
            self._on_warning(ValidationWarning(operation=operation, message=message))

    def _update_view_matrix(self) -> None:
        self._view_matrix = look_at_matrix(self._current.eye, self._current.ctr, self._current.up)

    def _apply_instant(self, pose: CameraPose) -> None:
        self._current = pose
        self._anim = IDLE
        self._update_view_matrix()

    def _start_animation(self, pose: CameraPose) -> None:
        self._anim = start_animation(self._current, pose, self._now_ms())
        if self._log.debug_anim and logger.isEnabledFor(logging.INFO):
            logger.info(
                "animation start eye=(%.3f,%.3f,%.3f) -> (%.3f,%.3f,%.3f) duration=%.3fs",
                *self._current.eye,
                *pose.eye,
                self._duration,
            )

    def _apply_user_change(self, update_matrix: bool = True) -> None:
        self._anim = IDLE
        if update_matrix:
            self._update_view_matrix()

    def _set_camera(self, pose: CameraPose, instant: bool, operation: str) -> None:
        if not validate_pose(pose):
            self._warn(operation, "invalid camera parameters")
            return

        up = np.asarray(pose.up, dtype=float)
        pose = replace(pose, up=up / np.linalg.norm(up))

        if pose.projection_type != self._current.projection_type:
            instant = True

        if instant or self._duration == 0.0:
            self._apply_instant(pose)
        elif pose != self._current:
            self._start_animation(pose)
        else:
            self._anim = IDLE

    # ---- pose setting --------------------------------------------------------

    def set_camera(self, pose: CameraPose, instant: bool = True) -> None:
        """Make *pose* the target; jump there or animate depending on *instant*."""

        self._set_camera(pose, instant, "set_camera")

    def set_lookat(self, eye, center, up, instant: bool = True) -> None:
        """Change eye/center/up, keeping projection, clip planes and extents."""

        try:
            pose = replace(self._current, eye=eye, ctr=center, up=up)
        except (TypeError, ValueError):
            self._warn("set_lookat", "eye, center and up must be 3-vectors")
            return
        self._set_camera(pose, instant, "set_lookat")

    def set_matrix(self, transform, instant: bool = True, center_distance: float = 1.0) -> None:
        """Set the pose from a camera-to-world transform.

        The center is placed *center_distance* along the transform's -Z axis
        and up is reset to +Y.
        """

        matrix = np.asarray(transform, dtype=float)
        if matrix.shape != (4, 4):
            self._warn("set_matrix", f"expected a 4x4 matrix, got shape {matrix.shape}")
            return
        eye = matrix[:3, 3]
        forward = matrix[:3, :3] @ np.array([0.0, 0.0, -float(center_distance)])
        pose = replace(self._current, eye=eye, ctr=eye + forward, up=(0.0, 1.0, 0.0))
        self._set_camera(pose, instant, "set_matrix")

    def set_eye(self, eye, instant: bool = True) -> None:
        self.set_lookat(eye, self._current.ctr, self._current.up, instant)

    def set_center(self, center, instant: bool = True) -> None:
        self.set_lookat(self._current.eye, center, self._current.up, instant)

    def set_up(self, up, instant: bool = True) -> None:
        self.set_lookat(self._current.eye, self._current.ctr, up, instant)

    def fit(self, box_min, box_max, instant: bool = True, tight: bool = False, aspect: float = 1.0) -> None:
        """Move the eye along the current direction until the box is fully visible."""

        eye, center = fit_eye(self._current, box_min, box_max, tight=tight, aspect=aspect)
        if self._log.log_camera_info and logger.isEnabledFor(logging.INFO):
            logger.info("fit tight=%s distance=%.4f", tight, float(np.linalg.norm(center - eye)))
        self.set_lookat(eye, center, self._current.up, instant)

    # ---- animation -----------------------------------------------------------

    def update_anim(self, now_ms: Optional[float] = None) -> None:
        """Advance a running animation. Call once per frame; no-op when idle."""

        state = self._anim
        if not isinstance(state, Animating):
            return
        if now_ms is None:
            now_ms = self._now_ms()

        pose, done = step_animation(state, now_ms, self._duration)
        self._current = pose
        if done:
            self._anim = IDLE
            if self._log.debug_anim and logger.isEnabledFor(logging.INFO):
                logger.info("animation done")
        self._update_view_matrix()

    def animation_progress(self, now_ms: Optional[float] = None) -> float:
        state = self._anim
        if not isinstance(state, Animating):
            return 1.0
        if now_ms is None:
            now_ms = self._now_ms()
        return linear_progress(state, now_ms, self._duration)

    @property
    def is_animating(self) -> bool:
        return isinstance(self._anim, Animating)

    @property
    def animation_state(self) -> AnimationState:
        return self._anim

    @property
    def animation_duration(self) -> float:
        return self._duration

    def set_animation_duration(self, seconds: float) -> None:
        seconds = float(seconds)
        if not math.isfinite(seconds) or seconds < 0.0:
            self._warn("set_animation_duration", "duration must be non-negative")
            return
        self._duration = seconds

    # ---- input ---------------------------------------------------------------

    def mouse_move(self, screen_pos: tuple[float, float], inputs: Inputs) -> Action:
        """Apply the drag action selected by *inputs*; returns the action taken."""

        if not inputs.any_button:
            self.set_mouse_position(screen_pos)
            return Action.NO_ACTION

        action = classify_action(inputs, self._mode)
        if action is not Action.NO_ACTION:
            self.motion(screen_pos, action)
        return action

    def motion(self, screen_pos: tuple[float, float], action: Action = Action.NO_ACTION) -> None:
        """Apply *action* for the pointer moving from the last position to *screen_pos*."""

        x, y = float(screen_pos[0]), float(screen_pos[1])
        width, height = self._window_size
        displacement = ((x - self._mouse[0]) / width, (y - self._mouse[1]) / height)

        if action is Action.ORBIT:
            self._current = ops.apply_orbit(self._current, displacement, invert=False)
            if self._log.debug_orbit and logger.isEnabledFor(logging.INFO):
                logger.info("orbit dx=%.4f dy=%.4f", *displacement)
        elif action is Action.DOLLY:
            self._current = ops.apply_dolly(self._current, displacement, mode=self._mode)
            if self._log.debug_dolly and logger.isEnabledFor(logging.INFO):
                logger.info("dolly dx=%.4f dy=%.4f", *displacement)
        elif action is Action.PAN:
            self._current = ops.apply_pan(self._current, displacement, mode=self._mode, aspect=self.aspect_ratio)
            if self._log.debug_pan and logger.isEnabledFor(logging.INFO):
                logger.info("pan dx=%.4f dy=%.4f", *displacement)
        elif action is Action.LOOK_AROUND:
            self._current = ops.apply_orbit(self._current, (displacement[0], -displacement[1]), invert=True)
            if self._log.debug_orbit and logger.isEnabledFor(logging.INFO):
                logger.info("look-around dx=%.4f dy=%.4f", *displacement)

        self._apply_user_change()
        self._mouse = (x, y)

    def key_motion(self, delta: tuple[float, float], action: Action) -> None:
        """Keyboard movement; *delta* is already scaled by frame time."""

        if float(delta[0]) == 0.0 and float(delta[1]) == 0.0:
            return
        self._current = ops.apply_key_motion(self._current, delta, action, mode=self._mode, speed=self._speed)
        self._apply_user_change()

    def wheel(self, value: float, inputs: Inputs) -> None:
        """Dolly on wheel; with shift, change the FOV or orthographic size instead."""

        value = float(value)
        if value == 0.0:
            return

        delta = (value * abs(value)) / float(self._window_size[0])
        if inputs.shift:
            if self._current.projection_type is ProjectionType.ORTHOGRAPHIC:
                self._current = ops.zoom_orthographic(self._current, 1.0 + delta)
                self._apply_user_change()
            else:
                self.set_fov(self._current.fov + value)
                self._apply_user_change(update_matrix=False)
            return

        # ctrl keeps the center fixed, which also adjusts the fly/walk step
        self._current = ops.apply_dolly(
            self._current,
            (delta, delta),
            mode=self._mode,
            keep_center_fixed=inputs.ctrl,
        )
        self._apply_user_change()

    # ---- configuration -------------------------------------------------------

    def set_window_size(self, size: tuple[int, int]) -> None:
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            self._warn("set_window_size", f"invalid window size {width}x{height}")
            return
        self._window_size = (width, height)

    @property
    def window_size(self) -> tuple[int, int]:
        return self._window_size

    @property
    def aspect_ratio(self) -> float:
        return float(self._window_size[0]) / float(self._window_size[1])

    def set_mode(self, mode: NavigationMode) -> None:
        try:
            self._mode = NavigationMode(mode)
        except ValueError:
            self._warn("set_mode", f"unknown navigation mode {mode!r}")

    @property
    def mode(self) -> NavigationMode:
        return self._mode

    def set_speed(self, speed: float) -> None:
        self._speed = float(speed)

    @property
    def speed(self) -> float:
        return self._speed

    def set_mouse_position(self, pos: tuple[float, float]) -> None:
        self._mouse = (float(pos[0]), float(pos[1]))

    @property
    def mouse_position(self) -> tuple[float, float]:
        return self._mouse

    def set_fov(self, fov_degrees: float) -> None:
        """Set the field of view, clamped to the valid range."""

        self._current = replace(self._current, fov=min(max(float(fov_degrees), MIN_FOV), MAX_FOV))

    def set_clip_planes(self, near_far: tuple[float, float]) -> None:
        near, far = float(near_far[0]), float(near_far[1])
        if not (math.isfinite(near) and math.isfinite(far)) or near <= 0.0 or far <= near:
            self._warn("set_clip_planes", f"invalid clip planes ({near}, {far})")
            return
        self._current = replace(self._current, near_far=(near, far))

    def set_orthographic_magnitudes(self, mag: tuple[float, float]) -> None:
        xmag, ymag = float(mag[0]), float(mag[1])
        if not (math.isfinite(xmag) and math.isfinite(ymag)) or xmag <= 0.0 or ymag <= 0.0:
            self._warn("set_orthographic_magnitudes", "magnitudes must be positive")
            return
        self._current = replace(self._current, orth_mag=(xmag, ymag))

    def set_projection_type(self, projection_type: ProjectionType) -> None:
        try:
            projection_type = ProjectionType(projection_type)
        except ValueError:
            self._warn("set_projection_type", f"unknown projection type {projection_type!r}")
            return
        self._current = replace(self._current, projection_type=projection_type)

    def convert_to_perspective(self) -> None:
        self._current = convert_to_perspective(self._current)

    def convert_to_orthographic(self) -> None:
        self._current = convert_to_orthographic(self._current, self.aspect_ratio)

    def adjust_orthographic_aspect(self) -> None:
        """Match the orthographic width to the window aspect, keeping the height."""

        if self._current.projection_type is not ProjectionType.ORTHOGRAPHIC:
            return
        height = self._current.orth_mag[1]
        width = height * self.aspect_ratio
        if width <= 0.0:
            return
        if abs(width - self._current.orth_mag[0]) > EPSILON:
            self._current = replace(self._current, orth_mag=(width, height))

    # ---- accessors -----------------------------------------------------------

    @property
    def camera(self) -> CameraPose:
        return self._current

    @property
    def eye(self) -> Vec3:
        return self._current.eye

    @property
    def center(self) -> Vec3:
        return self._current.ctr

    @property
    def up(self) -> Vec3:
        return self._current.up

    @property
    def fov(self) -> float:
        return self._current.fov

    @property
    def clip_planes(self) -> tuple[float, float]:
        return self._current.near_far

    @property
    def orthographic_magnitudes(self) -> tuple[float, float]:
        return self._current.orth_mag

    @property
    def projection_type(self) -> ProjectionType:
        return self._current.projection_type

    def get_lookat(self) -> tuple[Vec3, Vec3, Vec3]:
        return self._current.eye, self._current.ctr, self._current.up

    @property
    def view_direction(self) -> np.ndarray:
        return ops.camera_frame(self._current).forward

    @property
    def distance_to_center(self) -> float:
        return self._current.distance

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix.copy()

    def projection_matrix(self) -> np.ndarray:
        return projection_matrix(self._current, self.aspect_ratio)

    @staticmethod
    def help_text() -> str:
        return HELP_TEXT


__all__ = ["HELP_TEXT", "CameraManipulator"]
