"""Vectors, quaternions, Euler composition, look rotation and interpolation."""

from .primitives import (
    Vector3D,
    VectorLike,
    as_vector,
    wrap_angle,
    is_parallel,
    any_perpendicular,
    orthonormalize,
    signed_angle,
)
from .quaternion import Quaternion
from .euler import RotationOrder, compose, axis_rotation, application_order
from .look_rotation import LookAngles, aim_angles, look_angles, derive_look_rotation
from .interpolation import (
    InterpolationStrategy,
    InterpolationTrace,
    axis_angle_interpolate,
    slerp,
    lerp,
    interpolate,
    trace_interpolation,
)
from .handle import handle_rotation, handle_vector, axis_spin_rotation

__all__ = [
    "Vector3D",
    "VectorLike",
    "as_vector",
    "wrap_angle",
    "is_parallel",
    "any_perpendicular",
    "orthonormalize",
    "signed_angle",
    "Quaternion",
    "RotationOrder",
    "compose",
    "axis_rotation",
    "application_order",
    "LookAngles",
    "aim_angles",
    "look_angles",
    "derive_look_rotation",
    "InterpolationStrategy",
    "InterpolationTrace",
    "axis_angle_interpolate",
    "slerp",
    "lerp",
    "interpolate",
    "trace_interpolation",
    "handle_rotation",
    "handle_vector",
    "axis_spin_rotation",
]
