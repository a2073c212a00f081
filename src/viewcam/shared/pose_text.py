"""Text round trip for camera poses (copy/paste and legacy settings)."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Optional

from viewcam.shared.pose import CameraPose, ProjectionType

logger = logging.getLogger(__name__)

# Field groups in serialization order: eye, ctr, up, fov, near/far, orth mag, projection.
_GROUP_SIZES = (3, 3, 3, 1, 2, 2, 1)
_GROUP_RE = re.compile(r"\{([^{}]*)\}")


def _fmt(value: float) -> str:
    return repr(float(value))


def format_pose(pose: CameraPose) -> str:
    """Serialize every pose field as brace-delimited float groups."""

    groups = (
        pose.eye,
        pose.ctr,
        pose.up,
        (pose.fov,),
        pose.near_far,
        pose.orth_mag,
        (pose.projection_type.value,),
    )
    return ", ".join("{" + ", ".join(_fmt(v) for v in group) + "}" for group in groups)


def _scan_values(text: str) -> list[float]:
    """Read floats group by group and stop at the first malformed token."""

    values: list[float] = []
    groups = _GROUP_RE.findall(text)
    for size, body in zip(_GROUP_SIZES, groups):
        tokens = [tok.strip() for tok in body.split(",")]
        for tok in tokens[:size]:
            try:
                values.append(float(tok))
            except ValueError:
                return values
        if len(tokens) < size:
            return values
    return values


def parse_pose(text: str, base: Optional[CameraPose] = None) -> Optional[CameraPose]:
    """Parse *text* produced by :func:`format_pose`.

    Older encodings stopped after ``up`` (or after ``fov``, ...). Only the
    groups that are fully present are applied; everything else comes from
    *base*. Returns ``None`` when not even eye/center/up can be read.
    """

    if not text or not text.strip():
        return None
    values = _scan_values(text)
    count = len(values)
    if count < 9:
        logger.debug("parse_pose: only %d value(s) found in %r", count, text)
        return None

    pose = base if base is not None else CameraPose()
    updates: dict[str, object] = {
        "eye": values[0:3],
        "ctr": values[3:6],
        "up": values[6:9],
    }
    if count >= 10:
        updates["fov"] = values[9]
    if count >= 12:
        updates["near_far"] = values[10:12]
    if count >= 14:
        updates["orth_mag"] = values[12:14]
    if count >= 15:
        try:
            updates["projection_type"] = ProjectionType(int(values[14]))
        except (ValueError, OverflowError):
            logger.debug("parse_pose: unknown projection type %r", values[14])
    return replace(pose, **updates)


__all__ = ["format_pose", "parse_pose"]
