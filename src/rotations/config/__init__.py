"""Configuration schemas for validation."""

from .schemas import (
    CrossValidationConfig,
    InterpolationConfig,
    EulerConfig,
    HandleConfig,
    OutputConfig,
    VisualizationConfig,
    CaseConfig,
)

__all__ = [
    "CrossValidationConfig",
    "InterpolationConfig",
    "EulerConfig",
    "HandleConfig",
    "OutputConfig",
    "VisualizationConfig",
    "CaseConfig",
]
