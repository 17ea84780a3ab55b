"""Homogeneous frames from 6-parameter poses.

A pose ``[cx, cy, cz, ax, ay, az]`` maps to ``T @ M1 @ M2 @ M3`` where ``T``
is the translation and ``M1..M3`` are elementary rotations about the axes
named by the angle order. Angles bind to slots, not to axes: ``ax`` always
drives the first matrix of the order, ``ay`` the second, ``az`` the third.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import numpy as np

from .errors import InvalidOrderToken, InvalidPoseShape
from .logging import get_logger
from .types import Frame, Pose

logger = get_logger(__name__)

POSE_SIZE = 6


class AngleOrder(str, Enum):
    """Rotation composition order."""

    # Tait-Bryan
    XYZ = "xyz"
    XZY = "xzy"
    YXZ = "yxz"
    YZX = "yzx"
    ZXY = "zxy"
    ZYX = "zyx"
    # Proper Euler
    XYX = "xyx"
    XZX = "xzx"
    YXY = "yxy"
    YZY = "yzy"
    ZXZ = "zxz"
    ZYZ = "zyz"

    @property
    def axes(self) -> tuple[str, str, str]:
        """Axis letters for the three rotation slots."""
        first, second, third = self.value
        return first, second, third

    @property
    def is_proper_euler(self) -> bool:
        """True when the first and third axes coincide."""
        return self.value[0] == self.value[2]

    @property
    def is_tait_bryan(self) -> bool:
        return not self.is_proper_euler


DEFAULT_ORDER = AngleOrder.XYZ


def rot_x(angle: float) -> Frame:
    """4x4 rotation about the x-axis, angle in radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rot_y(angle: float) -> Frame:
    """4x4 rotation about the y-axis, angle in radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rot_z(angle: float) -> Frame:
    """4x4 rotation about the z-axis, angle in radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translation(x: float, y: float, z: float) -> Frame:
    """4x4 pure translation."""
    T = np.eye(4)
    T[:3, 3] = (x, y, z)
    return T


_AXIS_ROTATIONS: dict[str, Callable[[float], Frame]] = {
    "x": rot_x,
    "y": rot_y,
    "z": rot_z,
}


def validate_pose(pose: Pose | None) -> np.ndarray:
    """Return the pose as a fresh float64 6-vector.

    ``None``, ``""`` or an empty sequence yields the zero pose.

    Raises:
        InvalidPoseShape: If the pose is not exactly six numeric values
    """
    if pose is None or (isinstance(pose, str) and not pose):
        return np.zeros(POSE_SIZE)
    if isinstance(pose, (list, tuple)) and any(isinstance(v, (bool, np.bool_)) for v in pose):
        raise InvalidPoseShape("Pose values must be numbers, not booleans")

    try:
        values = np.asarray(pose)
    except (TypeError, ValueError) as exc:
        raise InvalidPoseShape(f"Pose must be a sequence of {POSE_SIZE} numbers") from exc

    if values.size == 0:
        return np.zeros(POSE_SIZE)
    if values.dtype.kind not in "iuf":
        raise InvalidPoseShape(f"Pose must contain numeric values, got dtype {values.dtype}")
    if values.shape != (POSE_SIZE,):
        raise InvalidPoseShape(
            f"Pose must have exactly {POSE_SIZE} values, got shape {values.shape}"
        )

    return values.astype(np.float64)


def validate_order(
    order: AngleOrder | str | None, default: AngleOrder = DEFAULT_ORDER
) -> AngleOrder:
    """Resolve an order token, falling back to ``default`` when missing or empty.

    Raises:
        InvalidOrderToken: If the token is not one of the twelve conventions
    """
    if order is None or (isinstance(order, str) and not order):
        return default
    try:
        return AngleOrder(order)
    except ValueError:
        raise InvalidOrderToken(order) from None


def frame(pose: Pose | None = None, order: AngleOrder | str | None = None) -> Frame:
    """Build the 4x4 homogeneous transform for a pose.

    Args:
        pose: ``[cx, cy, cz, ax, ay, az]``, angles in radians (default: zeros)
        order: One of the twelve angle orders (default: ``xyz``)

    Returns:
        New (4, 4) float64 array ``T @ M1 @ M2 @ M3``

    Raises:
        InvalidPoseShape: If pose is not six numeric values
        InvalidOrderToken: If order is not a recognized token
    """
    values = validate_pose(pose)
    resolved = validate_order(order)

    result = translation(*values[:3])
    for axis, angle in zip(resolved.axes, values[3:]):
        result = result @ _AXIS_ROTATIONS[axis](angle)

    logger.debug("Built frame", {"order": resolved.value, "pose": values.tolist()})
    return result


def rotation_block(matrix: Frame) -> np.ndarray:
    """Copy of the 3x3 rotation part of a frame."""
    return np.array(matrix[:3, :3], dtype=np.float64)


def translation_vector(matrix: Frame) -> np.ndarray:
    """Copy of the translation column of a frame."""
    return np.array(matrix[:3, 3], dtype=np.float64)


class FrameBuilder:
    """Builds frames with a fixed default angle order.

    Example:
        >>> builder = FrameBuilder("zyz")
        >>> builder.build([0, 0, 10, 0.1, 0.2, 0.3]).shape
        (4, 4)
    """

    def __init__(self, order: AngleOrder | str | None = DEFAULT_ORDER):
        self.order = validate_order(order)

    def build(self, pose: Pose | None = None, order: AngleOrder | str | None = None) -> Frame:
        """Build a frame, falling back to the builder's order when none is given."""
        return frame(pose, validate_order(order, self.order))

    def __repr__(self) -> str:
        return f"FrameBuilder(order={self.order.value!r})"


__all__ = [
    "POSE_SIZE",
    "AngleOrder",
    "DEFAULT_ORDER",
    "rot_x",
    "rot_y",
    "rot_z",
    "translation",
    "validate_pose",
    "validate_order",
    "frame",
    "rotation_block",
    "translation_vector",
    "FrameBuilder",
]
