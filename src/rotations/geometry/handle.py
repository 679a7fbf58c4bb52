"""
Handle rig: an axis swung around by spin, pitch and orbit angles.

The rig applies spin about Z, then pitch about X, then orbit about Y, all
about the fixed world axes. The handle vector is the rotated base vector;
spinning an object about that vector gives the axis-angle rotation the
rig visualizes.
"""

from __future__ import annotations

from .primitives import Vector3D, VectorLike, as_vector
from .quaternion import Quaternion


def handle_rotation(spin: float, pitch: float, orbit: float) -> Quaternion:
    """Orbit * pitch * spin, each in degrees."""
    return (
        Quaternion.from_euler(0.0, orbit, 0.0)
        * Quaternion.from_euler(pitch, 0.0, 0.0)
        * Quaternion.from_euler(0.0, 0.0, spin)
    )


def handle_vector(spin: float, pitch: float, orbit: float,
                  base: VectorLike = Vector3D.forward()) -> Vector3D:
    """Direction of the handle after the rig rotation."""
    return handle_rotation(spin, pitch, orbit) * as_vector(base)


def axis_spin_rotation(spin: float, pitch: float, orbit: float,
                       base: VectorLike = Vector3D.forward()) -> Quaternion:
    """Rotation of spin degrees about the current handle direction."""
    axis = handle_vector(spin, pitch, orbit, base)
    return Quaternion.from_axis_angle(axis, spin)
