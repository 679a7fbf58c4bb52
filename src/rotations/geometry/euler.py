"""
Euler-order composition.

Three single-axis rotations can be combined in six orders, and each order
can be read intrinsically (every rotation about the body's already-rotated
axes) or extrinsically (every rotation about the fixed world axes). The
two readings differ only in multiplication direction:

    extrinsic:  q_last * q_mid * q_first
    intrinsic:  q_first * q_mid * q_last

Both the axis sequence and the multiplication direction are looked up in
tables rather than branched on.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple

from .primitives import Vector3D
from .quaternion import Quaternion


class RotationOrder(str, Enum):
    """Axis application order (first letter is applied first)."""
    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"


_AXIS_INDEX = {"X": 0, "Y": 1, "Z": 2}

_AXES = (Vector3D.right(), Vector3D.up(), Vector3D.forward())

# order -> axis indices in application order
_APPLICATION_ORDER: Dict[RotationOrder, Tuple[int, int, int]] = {
    order: tuple(_AXIS_INDEX[c] for c in order.value) for order in RotationOrder
}

# intrinsic flag -> product of the three rotations given in application order
_COMPOSERS: Dict[bool, Callable[[Sequence[Quaternion]], Quaternion]] = {
    False: lambda q: q[2] * q[1] * q[0],
    True: lambda q: q[0] * q[1] * q[2],
}


def axis_rotation(axis_index: int, angle_deg: float) -> Quaternion:
    """Single rotation about world axis 0 (X), 1 (Y) or 2 (Z)."""
    return Quaternion.from_axis_angle(_AXES[axis_index], angle_deg)


def application_order(order: RotationOrder) -> Tuple[int, int, int]:
    """Axis indices of order, in the sequence the rotations are applied."""
    return _APPLICATION_ORDER[RotationOrder(order)]


def compose(order: RotationOrder, intrinsic: bool,
            rx: float, ry: float, rz: float) -> Quaternion:
    """
    Combine rotations about X, Y and Z (degrees) in the given order.

    Args:
        order: Application order of the three axes
        intrinsic: Rotate about body axes (True) or world axes (False)
        rx, ry, rz: Angle about each axis in degrees

    Returns:
        Composite quaternion

    Example:
        compose(RotationOrder.ZXY, False, x, y, z) equals
        Quaternion.from_euler(x, y, z).
    """
    angles = (rx, ry, rz)
    rotations = [axis_rotation(i, angles[i]) for i in application_order(order)]
    return _COMPOSERS[bool(intrinsic)](rotations)
