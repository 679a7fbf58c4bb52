"""
Sign-aware rotation comparison.

q and -q are the same rotation, so component differences are taken after
flipping one of them into the other's hemisphere.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from typing import Sequence

from rotations.geometry import Quaternion


def align_sign(q: Quaternion, reference: Quaternion) -> NDArray[np.float64]:
    """Components of q, negated if that brings them closer to reference."""
    arr = q.to_array()
    if np.dot(arr, reference.to_array()) < 0.0:
        arr = -arr
    return arr


def component_error(q: Quaternion, reference: Quaternion) -> float:
    """Largest absolute component difference after sign alignment."""
    return float(np.max(np.abs(align_sign(q, reference) - reference.to_array())))


def angular_error(q: Quaternion, reference: Quaternion) -> float:
    """Angle in degrees of the rotation between q and reference."""
    return q.angle_to(reference)


def stack_aligned(derived: Sequence[Quaternion],
                  reference: Sequence[Quaternion]) -> tuple[NDArray, NDArray]:
    """(N, 4) arrays of sign-aligned derived and reference components."""
    if len(derived) != len(reference):
        raise ValueError(f"Length mismatch: {len(derived)} != {len(reference)}")
    a = np.array([align_sign(d, r) for d, r in zip(derived, reference)])
    b = np.array([r.to_array() for r in reference])
    return a.reshape(-1, 4), b.reshape(-1, 4)
