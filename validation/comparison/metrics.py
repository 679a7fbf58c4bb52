"""
Error metrics over a batch of sign-aligned quaternion pairs.

Rows are samples, columns are components. The per-sample error is the
largest absolute component difference, the same quantity the pass/fail
tolerance is applied to.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray


@dataclass
class ErrorMetrics:
    """Summary of derived vs reference component differences."""
    linf_error: float  # worst component difference over the batch
    rms_error: float  # over every component of every sample
    mean_sample_error: float  # mean of the per-sample worst component
    worst_sample: int  # row index of the largest per-sample error
    num_samples: int

    def __str__(self) -> str:
        return (
            f"Error Metrics (n={self.num_samples}):\n"
            f"  L∞:          {self.linf_error:.3e} (sample {self.worst_sample})\n"
            f"  RMS:         {self.rms_error:.3e}\n"
            f"  Mean sample: {self.mean_sample_error:.3e}"
        )

    def to_dict(self) -> dict:
        return {
            'linf_error': float(self.linf_error),
            'rms_error': float(self.rms_error),
            'mean_sample_error': float(self.mean_sample_error),
            'worst_sample': int(self.worst_sample),
            'num_samples': int(self.num_samples),
        }


def compute_error_metrics(derived: NDArray, reference: NDArray) -> ErrorMetrics:
    """
    Metrics between two equally shaped batches.

    Args:
        derived: (N, k) values, typically sign-aligned quaternions (k = 4).
            A 1-D array is read as N samples of one component.
        reference: Same shape as derived

    Returns:
        ErrorMetrics

    Examples:
        >>> m = compute_error_metrics(np.array([1.0, 2.0, 3.0]), np.array([1.1, 2.1, 3.1]))
        >>> print(f"RMS error: {m.rms_error:.4f}")
        RMS error: 0.1000
    """
    derived = np.asarray(derived, dtype=np.float64)
    reference = np.asarray(reference, dtype=np.float64)
    if derived.shape != reference.shape:
        raise ValueError(f"Shapes must match: {derived.shape} != {reference.shape}")
    if derived.size == 0:
        raise ValueError("No samples to compare")

    diff = np.abs(derived.reshape(len(derived), -1) - reference.reshape(len(reference), -1))
    per_sample = diff.max(axis=1)
    worst = int(np.argmax(per_sample))

    return ErrorMetrics(
        linf_error=float(per_sample[worst]),
        rms_error=float(np.sqrt(np.mean(diff ** 2))),
        mean_sample_error=float(per_sample.mean()),
        worst_sample=worst,
        num_samples=len(per_sample),
    )
