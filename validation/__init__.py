"""
Validation module for checking derived rotations against scipy.

This module provides tools for:
- Reference rotations built with scipy.spatial.transform.Rotation
- Randomized cross-validation runs with per-sample error records
- Error metrics and sign-aware quaternion comparison

Usage:
    from validation import run_cross_validation, print_report
    from rotations.config import CrossValidationConfig

    reports = run_cross_validation(CrossValidationConfig(num_samples=500, seed=1))
    for report in reports.values():
        print_report(report)
"""

from .harness import (
    CrossValidationReport,
    RotationSample,
    cross_validate_axis_angle,
    cross_validate_euler_orders,
    cross_validate_look_rotation,
    cross_validate_slerp,
    print_report,
    run_cross_validation,
)
from .reference import reference_compose, reference_look_rotation

__all__ = [
    'CrossValidationReport',
    'RotationSample',
    'cross_validate_axis_angle',
    'cross_validate_euler_orders',
    'cross_validate_look_rotation',
    'cross_validate_slerp',
    'print_report',
    'run_cross_validation',
    'reference_compose',
    'reference_look_rotation',
]
