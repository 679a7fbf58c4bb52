"""
Comparison utilities for validation.

Provides error metrics and sign-aware comparison of derived rotations
against the reference library.
"""

from . import metrics, rotations

from .metrics import ErrorMetrics, compute_error_metrics
from .rotations import align_sign, component_error, angular_error, stack_aligned

__all__ = [
    'metrics',
    'rotations',
    'ErrorMetrics',
    'compute_error_metrics',
    'align_sign',
    'component_error',
    'angular_error',
    'stack_aligned',
]
