"""
Look rotation derived from first principles.

Turning one point onto another has infinitely many solutions (any extra
spin about the target direction still lands on it), so the rotation is
solved in two stages:

1. Aim: pitch and yaw Euler angles that swing local +Z onto the target,
   with no roll.
2. Spin: a rotation about the target direction that carries the aimed
   local up onto the up hint, projected into the plane orthogonal to the
   target.

The result is spin * aim. Spin is applied in world space after aiming
because roll about an arbitrary direction is not a single extra Euler term
once pitch and yaw are fixed.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np
from typing import Tuple

from .primitives import (
    Vector3D,
    VectorLike,
    as_vector,
    is_parallel,
    orthonormalize,
    signed_angle,
)
from .quaternion import Quaternion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookAngles:
    """Stage angles of a look rotation, in degrees."""
    pitch: float  # about local X, positive tilts forward downward
    yaw: float    # about world Y, measured from +Z towards +X
    roll: float   # about the target direction

    def aim_rotation(self) -> Quaternion:
        return Quaternion.from_euler(self.pitch, self.yaw, 0.0)

    def __repr__(self) -> str:
        return f"LookAngles(pitch={self.pitch:.4f}, yaw={self.yaw:.4f}, roll={self.roll:.4f})"


def aim_angles(forward: VectorLike) -> Tuple[float, float]:
    """
    Pitch and yaw (degrees) that point local +Z along forward.

    Args:
        forward: Target direction (need not be normalized, must be non-zero)

    Returns:
        (pitch, yaw). When forward.x is exactly 0 the yaw is 0 for
        forward.z >= 0 and 180 otherwise, so a vertical forward gets yaw 0.
    """
    f = as_vector(forward)
    pitch = float(np.degrees(np.arctan2(-f.y, np.hypot(f.x, f.z))))
    if f.x == 0.0:
        yaw = 0.0 if f.z >= 0.0 else 180.0
    else:
        yaw = float(np.degrees(np.arctan2(f.x, f.z)))
    return pitch, yaw


def look_angles(forward: VectorLike, up: VectorLike = Vector3D.up()) -> LookAngles:
    """
    Pitch, yaw and roll of the look rotation for (forward, up).

    Degenerate input falls back instead of raising:
        - zero forward: all angles 0
        - zero up, or up parallel to forward: roll 0

    "Parallel" is is_parallel's relative 1e-6 cross-product test, so a hint
    within about 6e-5 degrees of forward (or of -forward) also gets roll 0
    rather than the roll its tiny perpendicular component would imply.
    """
    forward = as_vector(forward)
    up = as_vector(up)

    if forward.is_zero():
        logger.warning("look rotation: forward vector is zero, returning identity")
        return LookAngles(0.0, 0.0, 0.0)

    pitch, yaw = aim_angles(forward)

    if is_parallel(forward, up):
        logger.warning(
            "look rotation: up hint %r is zero or parallel to forward %r, roll left at 0",
            up, forward
        )
        return LookAngles(pitch, yaw, 0.0)

    # Where the aim stage sends local up. World up projected onto the plane
    # orthogonal to forward is the same vector, but cannot be projected when
    # forward is vertical.
    if is_parallel(forward, Vector3D.up()):
        aimed_up = Quaternion.from_euler(pitch, yaw, 0.0) * Vector3D.up()
    else:
        _, aimed_up = orthonormalize(forward, Vector3D.up())

    f, hint = orthonormalize(forward, up)
    roll = signed_angle(aimed_up, hint, f)
    return LookAngles(pitch, yaw, roll)


def derive_look_rotation(forward: VectorLike, up: VectorLike = Vector3D.up()) -> Quaternion:
    """
    Rotation that points local +Z along forward and local +Y towards up.

    Args:
        forward: Direction the local forward axis should take (non-zero)
        up: Hint for the local up axis, not parallel to forward

    Returns:
        Unit quaternion spin * aim. See look_angles for the fallbacks used
        on degenerate input.

    Example:
        >>> q = derive_look_rotation((1, 0, 0), (0, 1, 0))
        >>> np.allclose((q * Vector3D.forward()).to_array(), [1.0, 0.0, 0.0])
        True
    """
    forward = as_vector(forward)
    angles = look_angles(forward, up)
    aim = angles.aim_rotation()
    if angles.roll == 0.0:
        return aim
    spin = Quaternion.from_axis_angle(forward, angles.roll)
    return spin * aim
