"""
Three ways to interpolate between two rotations.

- axis_angle: decompose end * start^-1 once, scale its angle by t and
  re-apply it. Constant speed; follows the short way because the angle is
  folded into (-180, 180].
- slerp: spherical interpolation on the unit quaternion sphere. Constant
  angular speed along the shortest arc.
- lerp: component-wise blend, renormalized. Same path as slerp but the
  speed sags towards the middle of large rotations.

All three return start at t = 0 and end (up to sign) at t = 1.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import numpy as np
from numpy.typing import NDArray
from typing import Callable, Dict, List

from .quaternion import Quaternion


class InterpolationStrategy(str, Enum):
    AXIS_ANGLE = "axis_angle"
    SLERP = "slerp"
    LERP = "lerp"


def _aligned(start: Quaternion, end: Quaternion) -> NDArray[np.float64]:
    """end's components, negated if needed to sit in start's hemisphere."""
    b = end.to_array()
    if start.dot(end) < 0.0:
        b = -b
    return b


def axis_angle_interpolate(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """Scale the angle of the relative rotation end * start^-1 by t."""
    axis, angle = (end * start.inverse()).to_axis_angle()
    # Quaternions cover angles up to 360; fold into (-180, 180] for the short way
    if angle > 180.0:
        angle -= 360.0
    return Quaternion.from_axis_angle(axis, angle * t) * start


def slerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """
    Spherical linear interpolation, t clamped to [0, 1].

    Falls back to normalized lerp when the rotations are nearly identical,
    where sin(omega) underflows.
    """
    t = float(np.clip(t, 0.0, 1.0))
    a = start.to_array()
    b = _aligned(start, end)

    dot = float(np.clip(np.dot(a, b), -1.0, 1.0))
    if dot > 0.9995:
        result = a + t * (b - a)
        return Quaternion.from_array(result / np.linalg.norm(result))

    omega = np.arccos(dot)
    sin_omega = np.sin(omega)
    scale_a = np.sin((1.0 - t) * omega) / sin_omega
    scale_b = np.sin(t * omega) / sin_omega
    return Quaternion.from_array(scale_a * a + scale_b * b)


def lerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """Component-wise interpolation, t clamped to [0, 1], then renormalized."""
    t = float(np.clip(t, 0.0, 1.0))
    a = start.to_array()
    b = _aligned(start, end)
    result = a + t * (b - a)
    return Quaternion.from_array(result / np.linalg.norm(result))


_STRATEGIES: Dict[InterpolationStrategy, Callable[[Quaternion, Quaternion, float], Quaternion]] = {
    InterpolationStrategy.AXIS_ANGLE: axis_angle_interpolate,
    InterpolationStrategy.SLERP: slerp,
    InterpolationStrategy.LERP: lerp,
}


def interpolate(start: Quaternion, end: Quaternion, t: float,
                strategy: InterpolationStrategy = InterpolationStrategy.SLERP) -> Quaternion:
    """Interpolate with the named strategy."""
    return _STRATEGIES[InterpolationStrategy(strategy)](start, end, t)


@dataclass
class InterpolationTrace:
    """
    Samples of every strategy over a progress grid.

    Attributes:
        progress: (N,) progress values in [0, 1]
        rotations: strategy -> list of N quaternions
        angles: strategy -> (N,) angle from start in degrees
    """
    start: Quaternion
    end: Quaternion
    progress: NDArray[np.float64]
    rotations: Dict[InterpolationStrategy, List[Quaternion]] = field(default_factory=dict)
    angles: Dict[InterpolationStrategy, NDArray[np.float64]] = field(default_factory=dict)

    @property
    def total_angle(self) -> float:
        return self.start.angle_to(self.end)

    def angular_speed(self, strategy: InterpolationStrategy) -> NDArray[np.float64]:
        """Degrees per unit progress between consecutive samples."""
        return np.diff(self.angles[strategy]) / np.diff(self.progress)

    def max_deviation(self, strategy: InterpolationStrategy,
                      reference: InterpolationStrategy = InterpolationStrategy.SLERP) -> float:
        """Largest angle in degrees between two strategies at the same progress."""
        return max(
            a.angle_to(b)
            for a, b in zip(self.rotations[strategy], self.rotations[reference])
        )


def trace_interpolation(start: Quaternion, end: Quaternion, num_steps: int = 50) -> InterpolationTrace:
    """Sample all strategies at num_steps evenly spaced progress values."""
    if num_steps < 2:
        raise ValueError(f"num_steps must be at least 2, got {num_steps}")

    progress = np.linspace(0.0, 1.0, num_steps)
    trace = InterpolationTrace(start=start, end=end, progress=progress)
    for strategy in InterpolationStrategy:
        samples = [interpolate(start, end, float(t), strategy) for t in progress]
        trace.rotations[strategy] = samples
        trace.angles[strategy] = np.array([start.angle_to(q) for q in samples])
    return trace
