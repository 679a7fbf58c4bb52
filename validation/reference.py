"""
Reference rotations from scipy.spatial.transform.

These are the trusted implementations the derived rotations are checked
against. They are strict: degenerate input raises instead of falling
back, since the harness only feeds them well-posed cases.
"""

from __future__ import annotations
import numpy as np
from scipy.spatial.transform import Rotation, Slerp

from rotations.geometry import Quaternion, RotationOrder, VectorLike, as_vector


def _to_quaternion(rotation: Rotation) -> Quaternion:
    # scipy's default quaternion layout is scalar-last, same as Quaternion
    return Quaternion.from_array(rotation.as_quat())


def _to_rotation(q: Quaternion) -> Rotation:
    return Rotation.from_quat(q.to_array())


def reference_look_rotation(forward: VectorLike, up: VectorLike) -> Quaternion:
    """
    Rotation whose columns are (right, up', forward).

    forward is normalized, up' is up made orthogonal to it, and
    right = up' x forward completes a right-handed frame, so the matrix
    sends +Z to forward and +Y to up'.

    Raises:
        ValueError: If forward is zero or up is parallel to it
    """
    f = as_vector(forward).to_array()
    u = as_vector(up).to_array()

    f_norm = np.linalg.norm(f)
    if f_norm < 1e-12:
        raise ValueError("Reference look rotation needs a non-zero forward vector")
    f = f / f_norm

    u = u - np.dot(u, f) * f
    u_norm = np.linalg.norm(u)
    if u_norm < 1e-9:
        raise ValueError("Reference look rotation needs up not parallel to forward")
    u = u / u_norm

    r = np.cross(u, f)
    matrix = np.column_stack([r, u, f])
    return _to_quaternion(Rotation.from_matrix(matrix))


def reference_compose(order: RotationOrder, intrinsic: bool,
                      rx: float, ry: float, rz: float) -> Quaternion:
    """
    scipy Euler composition.

    scipy names intrinsic sequences in upper case and extrinsic ones in
    lower case, with angles listed in application order.
    """
    order = RotationOrder(order)
    by_axis = {"X": rx, "Y": ry, "Z": rz}
    angles = [by_axis[axis] for axis in order.value]
    seq = order.value if intrinsic else order.value.lower()
    return _to_quaternion(Rotation.from_euler(seq, angles, degrees=True))


def reference_engine_euler(x: float, y: float, z: float) -> Quaternion:
    """Engine Euler angles: extrinsic Z, X, Y."""
    return reference_compose(RotationOrder.ZXY, False, x, y, z)


def reference_axis_angle(axis: VectorLike, angle_deg: float) -> Quaternion:
    """Rotation vector construction of an axis-angle rotation."""
    a = as_vector(axis).to_array()
    norm = np.linalg.norm(a)
    if norm < 1e-12:
        raise ValueError("Reference axis-angle needs a non-zero axis")
    return _to_quaternion(Rotation.from_rotvec(a / norm * np.deg2rad(angle_deg)))


def reference_slerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """scipy Slerp between two key rotations at progress t in [0, 1]."""
    keys = Rotation.from_quat(np.vstack([start.to_array(), end.to_array()]))
    slerp = Slerp([0.0, 1.0], keys)
    return _to_quaternion(slerp([float(np.clip(t, 0.0, 1.0))])[0])


def reference_rotate(q: Quaternion, v: VectorLike) -> np.ndarray:
    """Apply q to a vector with scipy."""
    return _to_rotation(q).apply(as_vector(v).to_array())
