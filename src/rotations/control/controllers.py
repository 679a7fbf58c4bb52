"""
Key-driven angle accumulators for interactive rotation rigs.

This is host-loop bookkeeping: the host calls step() once per frame with
the elapsed time and the set of held keys, and reads the resulting
rotation. The rotation math itself stays in rotations.geometry and never
sees this state.

Key convention, shared by every rig: within each axis pair the second key
increases the angle and the first decreases it (Q/W, A/S, Z/X), and
E/D/C reset the axis to zero. Only one binding fires per step, the first
held one in binding order.
"""

from __future__ import annotations
import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from ..config.schemas import EulerConfig, HandleConfig
from ..geometry import (
    Quaternion,
    RotationOrder,
    Vector3D,
    axis_spin_rotation,
    compose,
    handle_rotation,
    handle_vector,
    wrap_angle,
)

logger = logging.getLogger(__name__)

# (key, field, direction); direction 0 resets the field
Binding = Tuple[str, str, int]


def _bindings(fields: Tuple[str, str, str]) -> List[Binding]:
    first, second, third = fields
    return [
        ("w", first, +1), ("q", first, -1), ("e", first, 0),
        ("s", second, +1), ("a", second, -1), ("d", second, 0),
        ("x", third, +1), ("z", third, -1), ("c", third, 0),
    ]


def parse_angle(text: str, previous: float) -> float:
    """
    Parse a text-field angle.

    Blank text reads as 0. Malformed or non-finite text is logged and the
    previous value is kept.
    """
    if not text.strip():
        return 0.0
    try:
        value = float(text)
    except ValueError:
        logger.info("Ignoring malformed angle %r, keeping %.3f", text, previous)
        return previous
    if not math.isfinite(value):
        logger.info("Ignoring out-of-range angle %r, keeping %.3f", text, previous)
        return previous
    return value


class KeyAccumulator:
    """Angles that grow or shrink at a fixed rate while keys are held."""

    fields: Tuple[str, str, str] = ("x", "y", "z")

    def __init__(self, rate: float):
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self.rate = rate
        self.bindings = _bindings(self.fields)
        self.values: Dict[str, float] = {name: 0.0 for name in self.fields}

    def step(self, dt: float, pressed: Iterable[str]) -> Optional[Binding]:
        """
        Advance one frame.

        Args:
            dt: Elapsed time in seconds
            pressed: Currently held keys (case-insensitive)

        Returns:
            The binding that fired, or None
        """
        held = {key.lower() for key in pressed}
        fired = None
        for binding in self.bindings:
            key, name, direction = binding
            if key in held:
                if direction == 0:
                    self.values[name] = 0.0
                else:
                    self.values[name] += direction * self.rate * dt
                fired = binding
                break
        self._constrain()
        return fired

    def apply_text(self, name: str, text: str) -> float:
        """Set a field from text input; returns the value now held."""
        if name not in self.values:
            raise KeyError(f"Unknown field '{name}', expected one of {self.fields}")
        self.values[name] = parse_angle(text, self.values[name])
        self._constrain()
        return self.values[name]

    def reset(self) -> None:
        for name in self.fields:
            self.values[name] = 0.0

    def _constrain(self) -> None:
        pass


class HandleController(KeyAccumulator):
    """
    Spin / pitch / orbit rig.

    Spin and orbit wrap into (-180, 180]; pitch is clamped to the limits.
    """

    fields = ("spin", "pitch", "orbit")

    def __init__(self, rate: float = 90.0,
                 pitch_limits: Tuple[float, float] = (-90.0, 90.0),
                 base_vector: Vector3D = Vector3D.forward()):
        super().__init__(rate)
        self.pitch_limits = pitch_limits
        self.base_vector = base_vector

    @property
    def spin(self) -> float:
        return self.values["spin"]

    @property
    def pitch(self) -> float:
        return self.values["pitch"]

    @property
    def orbit(self) -> float:
        return self.values["orbit"]

    @classmethod
    def from_config(cls, config: HandleConfig) -> HandleController:
        return cls(
            rate=config.rate,
            pitch_limits=tuple(config.pitch_limits),
            base_vector=Vector3D(*config.base_vector),
        )

    def _constrain(self) -> None:
        low, high = self.pitch_limits
        self.values["spin"] = wrap_angle(self.values["spin"])
        self.values["orbit"] = wrap_angle(self.values["orbit"])
        self.values["pitch"] = min(max(self.values["pitch"], low), high)

    def rotation(self) -> Quaternion:
        """Rig rotation (orbit * pitch * spin)."""
        return handle_rotation(self.spin, self.pitch, self.orbit)

    def handle_vector(self) -> Vector3D:
        return handle_vector(self.spin, self.pitch, self.orbit, self.base_vector)

    def axis_rotation(self) -> Quaternion:
        """Spin about the current handle direction."""
        return axis_spin_rotation(self.spin, self.pitch, self.orbit, self.base_vector)


class EulerController(KeyAccumulator):
    """Euler angles composed in a selectable order."""

    fields = ("x", "y", "z")

    def __init__(self, rate: float = 60.0,
                 order: RotationOrder = RotationOrder.ZXY,
                 intrinsic: bool = False):
        super().__init__(rate)
        self.order = RotationOrder(order)
        self.intrinsic = intrinsic

    @property
    def x(self) -> float:
        return self.values["x"]

    @property
    def y(self) -> float:
        return self.values["y"]

    @property
    def z(self) -> float:
        return self.values["z"]

    @classmethod
    def from_config(cls, config: EulerConfig) -> EulerController:
        return cls(rate=config.rate, order=config.order, intrinsic=config.intrinsic)

    def rotation(self) -> Quaternion:
        return compose(self.order, self.intrinsic, self.x, self.y, self.z)
