"""
Geometric primitives: Vector3D and the vector helpers used by the rotation code.

Axes follow the engine basis the demos were built on: +X right, +Y up, +Z forward.
All angles are in degrees.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np
from numpy.typing import NDArray
from typing import Sequence, Tuple, Union

logger = logging.getLogger(__name__)

_ZERO_EPS = 1e-14


@dataclass(frozen=True)
class Vector3D:
    """Immutable 3D vector."""
    x: float
    y: float
    z: float = 0.0

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Vector3D:
        """Create from NumPy array."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    @classmethod
    def zero(cls) -> Vector3D:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> Vector3D:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> Vector3D:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def forward(cls) -> Vector3D:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def back(cls) -> Vector3D:
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def right(cls) -> Vector3D:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def left(cls) -> Vector3D:
        return cls(-1.0, 0.0, 0.0)

    def magnitude(self) -> float:
        """Vector magnitude (L2 norm)."""
        return float(np.linalg.norm(self.to_array()))

    def is_zero(self, eps: float = _ZERO_EPS) -> bool:
        return self.magnitude() < eps

    def normalize(self) -> Vector3D:
        """Return unit vector in same direction."""
        mag = self.magnitude()
        if mag < _ZERO_EPS:
            raise ValueError("Cannot normalize zero vector")
        arr = self.to_array() / mag
        return Vector3D.from_array(arr)

    def dot(self, other: Vector3D) -> float:
        """Dot product."""
        return float(np.dot(self.to_array(), other.to_array()))

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product."""
        arr = np.cross(self.to_array(), other.to_array())
        return Vector3D.from_array(arr)

    def angle_to(self, other: Vector3D) -> float:
        """Unsigned angle to another vector in degrees [0, 180]."""
        denom = self.magnitude() * other.magnitude()
        if denom < _ZERO_EPS:
            return 0.0
        cos_angle = self.dot(other) / denom
        cos_angle = np.clip(cos_angle, -1.0, 1.0)  # Numerical safety
        return float(np.degrees(np.arccos(cos_angle)))

    def __add__(self, other: Vector3D) -> Vector3D:
        """Vector addition."""
        arr = self.to_array() + other.to_array()
        return Vector3D.from_array(arr)

    def __sub__(self, other: Vector3D) -> Vector3D:
        """Vector subtraction."""
        arr = self.to_array() - other.to_array()
        return Vector3D.from_array(arr)

    def __mul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication."""
        arr = self.to_array() * scalar
        return Vector3D.from_array(arr)

    def __rmul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication (reversed)."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        """Scalar division."""
        if abs(scalar) < _ZERO_EPS:
            raise ValueError("Division by zero")
        arr = self.to_array() / scalar
        return Vector3D.from_array(arr)

    def __neg__(self) -> Vector3D:
        """Negation."""
        return Vector3D.from_array(-self.to_array())

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.6f}, {self.y:.6f}, {self.z:.6f})"


VectorLike = Union[Vector3D, Sequence[float], NDArray[np.float64]]


def wrap_angle(angle: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    angle = float(np.fmod(angle, 360.0))
    if angle <= -180.0:
        angle += 360.0
    elif angle > 180.0:
        angle -= 360.0
    return angle


def as_vector(value: VectorLike) -> Vector3D:
    """Coerce a Vector3D, 3-sequence or (3,) array to Vector3D."""
    if isinstance(value, Vector3D):
        return value
    return Vector3D.from_array(np.asarray(value, dtype=np.float64).reshape(-1))


def is_parallel(a: Vector3D, b: Vector3D, tol: float = 1e-6) -> bool:
    """
    True when a and b are (anti)parallel within a relative tolerance.

    A zero vector is treated as parallel to everything, since no plane
    can be built from it.
    """
    scale = a.magnitude() * b.magnitude()
    if scale < _ZERO_EPS:
        return True
    return a.cross(b).magnitude() <= tol * scale


def any_perpendicular(v: Vector3D) -> Vector3D:
    """
    Unit vector perpendicular to v.

    Crosses v with the world axis it is least aligned with, so the choice
    is deterministic and never degenerate for non-zero v.
    """
    arr = np.abs(v.to_array())
    axis = np.zeros(3, dtype=np.float64)
    axis[int(np.argmin(arr))] = 1.0
    return v.cross(Vector3D.from_array(axis)).normalize()


def orthonormalize(a: VectorLike, b: VectorLike) -> Tuple[Vector3D, Vector3D]:
    """
    Gram-Schmidt a pair of vectors.

    Args:
        a: Reference direction (kept, normalized)
        b: Vector to make orthogonal to a

    Returns:
        (a', b') where a' = a/|a| and b' is the unit component of b
        orthogonal to a'.

    Note:
        Degenerate input does not raise. A zero a is replaced by
        Vector3D.forward(); a zero b, or b parallel to a, is replaced by
        any_perpendicular(a'). Both cases are logged as warnings.
    """
    a = as_vector(a)
    b = as_vector(b)

    if a.is_zero():
        logger.warning("orthonormalize: zero reference vector, using +Z")
        a_n = Vector3D.forward()
    else:
        a_n = a.normalize()

    b_perp = b - a_n * b.dot(a_n)
    if is_parallel(a_n, b) or b_perp.is_zero():
        logger.warning(
            "orthonormalize: %r is parallel to %r, picking an arbitrary perpendicular",
            b, a_n
        )
        return a_n, any_perpendicular(a_n)

    return a_n, b_perp.normalize()


def signed_angle(from_vec: VectorLike, to_vec: VectorLike, axis: VectorLike) -> float:
    """
    Signed angle in degrees (-180, 180] rotating from_vec onto to_vec.

    The sign follows the right-hand rule about axis: positive when
    axis . (from x to) >= 0. Equal directions give exactly 0 and opposite
    directions give +180, whatever the axis.
    """
    from_vec = as_vector(from_vec)
    to_vec = as_vector(to_vec)
    axis = as_vector(axis)

    if from_vec.is_zero() or to_vec.is_zero():
        logger.warning("signed_angle: zero-length input, returning 0")
        return 0.0

    dot = from_vec.dot(to_vec)
    # Cross product sign is rounding noise at 0 and 180
    if is_parallel(from_vec, to_vec, tol=1e-12):
        return 0.0 if dot >= 0.0 else 180.0

    cross = from_vec.cross(to_vec)
    angle = float(np.degrees(np.arctan2(cross.magnitude(), dot)))
    if axis.dot(cross) < 0.0:
        angle = -angle
    return angle
