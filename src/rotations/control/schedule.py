"""
Interpolation playback schedule.

Progress runs from 0 to 1 at a fixed rate. When it reaches 1 the pose is
held until a wall-clock deadline, then a new random start/end pair is
drawn and playback restarts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional
import numpy as np

from ..config.schemas import InterpolationConfig
from ..geometry import InterpolationStrategy, Quaternion, interpolate


@dataclass
class InterpolationFrame:
    """Rotations produced by one schedule step."""
    progress: float
    rotations: Dict[InterpolationStrategy, Quaternion]
    restarted: bool = False


class InterpolationSchedule:
    """
    Drive all three interpolation strategies from a host loop.

    Usage:
        schedule = InterpolationSchedule(rate=0.2, wait=1.3, seed=0)
        frame = schedule.step(dt, now)
        if frame is not None:
            draw(frame.rotations)
    """

    def __init__(self, rate: float = 0.2, wait: float = 1.3,
                 seed: Optional[int] = None,
                 start: Optional[Quaternion] = None,
                 end: Optional[Quaternion] = None):
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        if wait < 0:
            raise ValueError(f"wait cannot be negative, got {wait}")
        self.rate = rate
        self.wait = wait
        self.rng = np.random.default_rng(seed)
        self.start = start if start is not None else Quaternion.random(self.rng)
        self.end = end if end is not None else Quaternion.random(self.rng)
        self.progress = 0.0
        self.resume_at: Optional[float] = None

    @classmethod
    def from_config(cls, config: InterpolationConfig) -> InterpolationSchedule:
        return cls(rate=config.rate, wait=config.wait, seed=config.seed)

    @property
    def waiting(self) -> bool:
        return self.resume_at is not None

    def restart(self) -> None:
        """Draw a new start/end pair and rewind progress."""
        self.start = Quaternion.random(self.rng)
        self.end = Quaternion.random(self.rng)
        self.progress = 0.0
        self.resume_at = None

    def step(self, dt: float, now: float) -> Optional[InterpolationFrame]:
        """
        Advance one frame.

        Args:
            dt: Elapsed time since the last step [s]
            now: Current wall-clock time [s]

        Returns:
            The frame to display, or None while holding the end pose
        """
        restarted = False
        if self.waiting:
            if now <= self.resume_at:
                return None
            self.restart()
            restarted = True

        self.progress += self.rate * dt
        if self.progress >= 1.0:
            self.progress = 1.0
            self.resume_at = now + self.wait

        rotations = {
            strategy: interpolate(self.start, self.end, self.progress, strategy)
            for strategy in InterpolationStrategy
        }
        return InterpolationFrame(self.progress, rotations, restarted)
