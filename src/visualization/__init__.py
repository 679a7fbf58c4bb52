"""Visualization module for rotation comparisons."""

from .comparison import ComparisonVisualizer
from .orientation import OrientationPlotter

__all__ = [
    'ComparisonVisualizer',
    'OrientationPlotter',
]
