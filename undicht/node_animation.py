"""Keyframe animation of a single node: positions, rotations and scales."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

# quaternions are stored as (w, x, y, z)
_IDENTITY_QUAT = (1.0, 0.0, 0.0, 0.0)
_ONES = (1.0, 1.0, 1.0)
_SLERP_EPSILON = np.finfo(np.float32).eps


def slerp(q0, q1, t) -> np.ndarray:
    """Spherical linear interpolation between two (w, x, y, z) quaternions."""
    x = np.asarray(q0, dtype=float)
    z = np.asarray(q1, dtype=float)
    cos_theta = float(np.dot(x, z))
    if cos_theta < 0.0:
        z = -z
        cos_theta = -cos_theta
    if cos_theta > 1.0 - _SLERP_EPSILON:
        return x * (1.0 - t) + z * t
    angle = math.acos(cos_theta)
    return (math.sin((1.0 - t) * angle) * x + math.sin(t * angle) * z) / math.sin(angle)


def quat_to_matrix(q) -> np.ndarray:
    """4x4 rotation matrix for a (w, x, y, z) quaternion."""
    w, x, y, z = (float(c) for c in q)
    m = np.identity(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def translation_matrix(v) -> np.ndarray:
    """4x4 matrix translating by the 3-vector v."""
    m = np.identity(4)
    m[:3, 3] = np.asarray(v, dtype=float)
    return m


def _bracket(keys: dict, time: float, default):
    """The keyframes just before and just after ``time``.

    Keys exactly at ``time`` are skipped; missing neighbours fall back to
    ``(0.0, default)``, and a missing later key repeats the earlier one.
    """
    before = (0.0, default)
    after = (0.0, default)
    for key_time in sorted(keys):
        if key_time < time:
            before = (key_time, keys[key_time])
        if key_time > time:
            after = (key_time, keys[key_time])
            break
    if after[0] < before[0]:
        after = before
    return before, after


def _factor(before, after, time) -> float | None:
    span = after[0] - before[0]
    if span == 0.0:
        return None
    return (time - before[0]) / span


@dataclass(eq=False)
class NodeAnimation:
    """Keyframes for one node, sorted by their timestamp on evaluation."""

    node: str = ""
    position_keys: dict[float, np.ndarray] = field(default_factory=dict)
    rotation_keys: dict[float, np.ndarray] = field(default_factory=dict)
    scale_keys: dict[float, np.ndarray] = field(default_factory=dict)

    def add_position_key(self, time, position) -> None:
        self.position_keys[float(time)] = np.asarray(position, dtype=float)

    def add_rotation_key(self, time, rotation) -> None:
        self.rotation_keys[float(time)] = np.asarray(rotation, dtype=float)

    def add_scale_key(self, time, scale) -> None:
        self.scale_keys[float(time)] = np.asarray(scale, dtype=float)

    def position(self, time) -> np.ndarray:
        """Position linearly interpolated between the surrounding keyframes."""
        before, after = _bracket(self.position_keys, time, np.array(_ONES))
        inter = _factor(before, after, time)
        if inter is None:
            return np.array(before[1], dtype=float)
        return (1.0 - inter) * before[1] + inter * after[1]

    def rotation(self, time) -> np.ndarray:
        """Rotation spherically interpolated between the surrounding keyframes."""
        before, after = _bracket(self.rotation_keys, time, np.array(_IDENTITY_QUAT))
        inter = _factor(before, after, time)
        if inter is None:
            return np.array(before[1], dtype=float)
        return slerp(before[1], after[1], inter)

    def scale(self, time) -> np.ndarray:
        """Scale at ``time``; scale keys are stored but always evaluate to one."""
        return np.array(_ONES)

    def transform_matrix(self, time) -> np.ndarray:
        """Translation times rotation at ``time``; scale is not applied."""
        return translation_matrix(self.position(time)) @ quat_to_matrix(self.rotation(time))