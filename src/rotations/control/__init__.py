"""Host-loop state: key-driven rigs, text input parsing, interpolation playback."""

from ..geometry import wrap_angle
from .controllers import (
    Binding,
    KeyAccumulator,
    HandleController,
    EulerController,
    parse_angle,
)
from .schedule import InterpolationFrame, InterpolationSchedule

__all__ = [
    "wrap_angle",
    "Binding",
    "KeyAccumulator",
    "HandleController",
    "EulerController",
    "parse_angle",
    "InterpolationFrame",
    "InterpolationSchedule",
]
