"""
Unit quaternion for 3D rotations.

Components are stored scalar-last, q = (x, y, z, w), the same layout the
engine and scipy use, so values can be compared component by component.

Composition follows the usual operator convention:

    a * b      apply b first, then a
    q * v      rotate vector v by q

Euler angles use the engine convention: Z (roll) first, then X (pitch),
then Y (yaw), all about the fixed world axes, i.e. q = qy * qx * qz.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np
from numpy.typing import NDArray
from typing import Optional, Tuple, Union

from .primitives import Vector3D, VectorLike, as_vector, wrap_angle

logger = logging.getLogger(__name__)

_AXES = (Vector3D.right(), Vector3D.up(), Vector3D.forward())


@dataclass(frozen=True)
class Quaternion:
    """
    Rotation quaternion (x, y, z, w).

    Attributes:
        x, y, z: Vector part
        w: Scalar part
    """
    x: float
    y: float
    z: float
    w: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Quaternion:
        """Create from NumPy array (4,) in (x, y, z, w) order."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Expected array of shape (4,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    @classmethod
    def from_axis_angle(cls, axis: VectorLike, angle_deg: float) -> Quaternion:
        """
        Rotation of angle_deg about axis (right-hand rule).

        Args:
            axis: Rotation axis, normalized internally
            angle_deg: Rotation angle in degrees

        Returns:
            Unit quaternion. A zero axis gives the identity; if the angle
            was non-zero this is logged as degenerate input.
        """
        axis = as_vector(axis)
        if axis.is_zero():
            if angle_deg != 0.0:
                logger.warning(
                    "from_axis_angle: zero-length axis with angle %.6f, returning identity",
                    angle_deg
                )
            return cls.identity()

        half = np.deg2rad(angle_deg) / 2.0
        s = np.sin(half)
        u = axis.normalize()
        return cls(u.x * s, u.y * s, u.z * s, float(np.cos(half)))

    @classmethod
    def from_euler(cls, x: float, y: float, z: float) -> Quaternion:
        """
        Rotation from engine Euler angles in degrees.

        Applies z about world Z, then x about world X, then y about world Y.
        """
        qx = cls.from_axis_angle(_AXES[0], x)
        qy = cls.from_axis_angle(_AXES[1], y)
        qz = cls.from_axis_angle(_AXES[2], z)
        return qy * qx * qz

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Quaternion:
        """Uniformly distributed random rotation (Shoemake's method)."""
        if rng is None:
            rng = np.random.default_rng()
        u1, u2, u3 = rng.random(3)
        a = np.sqrt(1.0 - u1)
        b = np.sqrt(u1)
        return cls(
            float(a * np.sin(2.0 * np.pi * u2)),
            float(a * np.cos(2.0 * np.pi * u2)),
            float(b * np.sin(2.0 * np.pi * u3)),
            float(b * np.cos(2.0 * np.pi * u3)),
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (4,) in (x, y, z, w) order."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    @property
    def vector(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def magnitude(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def is_unit(self, tolerance: float = 1e-6) -> bool:
        return abs(self.magnitude() - 1.0) < tolerance

    def normalize(self) -> Quaternion:
        """Return the unit quaternion with the same orientation."""
        mag = self.magnitude()
        if mag < 1e-14:
            raise ValueError("Cannot normalize zero quaternion")
        return Quaternion.from_array(self.to_array() / mag)

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse (conjugate for unit quaternions)."""
        norm_sq = float(np.dot(self.to_array(), self.to_array()))
        if norm_sq < 1e-28:
            raise ValueError("Cannot invert zero quaternion")
        return Quaternion.from_array(self.conjugate().to_array() / norm_sq)

    def dot(self, other: Quaternion) -> float:
        return float(np.dot(self.to_array(), other.to_array()))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def multiply(self, other: Quaternion) -> Quaternion:
        """Hamilton product self * other (other is applied first)."""
        x1, y1, z1, w1 = self.x, self.y, self.z, self.w
        x2, y2, z2, w2 = other.x, other.y, other.z, other.w
        return Quaternion(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )

    def rotate(self, v: VectorLike) -> Vector3D:
        """Rotate a vector: v' = v + 2w(u x v) + 2u x (u x v)."""
        v_arr = as_vector(v).to_array()
        u = np.array([self.x, self.y, self.z], dtype=np.float64)
        t = 2.0 * np.cross(u, v_arr)
        return Vector3D.from_array(v_arr + self.w * t + np.cross(u, t))

    def __mul__(self, other: Union[Quaternion, Vector3D]):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if isinstance(other, Vector3D):
            return self.rotate(other)
        return NotImplemented

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def equivalent(self, other: Quaternion, tolerance: float = 1e-4) -> bool:
        """
        Same orientation up to global sign (q and -q are the same rotation).

        Compares component-wise: either the difference or the sum must be
        within tolerance everywhere.
        """
        a = self.to_array()
        b = other.to_array()
        return bool(
            np.allclose(a, b, rtol=0.0, atol=tolerance)
            or np.allclose(a, -b, rtol=0.0, atol=tolerance)
        )

    def angle_to(self, other: Quaternion) -> float:
        """Smallest rotation angle in degrees taking self onto other [0, 180]."""
        d = abs(self.normalize().dot(other.normalize()))
        return float(np.degrees(2.0 * np.arccos(min(1.0, d))))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_axis_angle(self) -> Tuple[Vector3D, float]:
        """
        Decompose into (unit axis, angle in degrees [0, 360)).

        The identity has no defined axis; (1, 0, 0) and 0 are returned.
        """
        q = self.normalize()
        w = float(np.clip(q.w, -1.0, 1.0))
        s = np.sqrt(max(0.0, 1.0 - w * w))
        if s < 1e-8:
            return Vector3D.right(), 0.0
        angle = float(np.degrees(2.0 * np.arccos(w)))
        axis = Vector3D(q.x / s, q.y / s, q.z / s).normalize()
        return axis, angle

    def to_matrix(self) -> NDArray[np.float64]:
        """3x3 rotation matrix (columns are the rotated basis vectors)."""
        x, y, z, w = self.normalize().to_array()
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ], dtype=np.float64)

    def to_euler(self) -> Tuple[float, float, float]:
        """
        Engine Euler angles (x, y, z) in degrees, each in (-180, 180].

        Inverse of from_euler. At gimbal lock (x = +-90) z is set to 0 and
        the combined yaw/roll is returned in y.
        """
        R = self.to_matrix()
        sin_x = float(np.clip(-R[1, 2], -1.0, 1.0))
        x = np.degrees(np.arcsin(sin_x))
        if abs(sin_x) < 1.0 - 1e-9:
            y = np.degrees(np.arctan2(R[0, 2], R[2, 2]))
            z = np.degrees(np.arctan2(R[1, 0], R[1, 1]))
        else:
            y = np.degrees(np.arctan2(-R[2, 0], R[0, 0]))
            z = 0.0
        return wrap_angle(x), wrap_angle(y), wrap_angle(z)

    def __repr__(self) -> str:
        return f"Quaternion({self.x:.6f}, {self.y:.6f}, {self.z:.6f}, {self.w:.6f})"
