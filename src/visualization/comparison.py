"""
Comparison visualization module.

Provides plots for comparing rotation results:
- Cross-validation error distributions (derived vs reference)
- Interpolation strategies: angle from start and angular speed vs progress
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from rotations.geometry import InterpolationStrategy, InterpolationTrace

if TYPE_CHECKING:
    from validation.harness import CrossValidationReport

_STRATEGY_STYLES: Dict[InterpolationStrategy, Tuple[str, str]] = {
    InterpolationStrategy.AXIS_ANGLE: ("tab:blue", "-"),
    InterpolationStrategy.SLERP: ("tab:orange", "--"),
    InterpolationStrategy.LERP: ("tab:green", ":"),
}


class ComparisonVisualizer:
    """
    Figures comparing derived rotations with references and with each other.

    Usage:
        comp = ComparisonVisualizer(output_dir='results')
        comp.plot_error_distribution(reports)
        comp.save('errors.png')
        comp.plot_interpolation(trace)
        comp.save('interpolation.png')
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Args:
            output_dir: Optional directory for saving figures
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.fig: Optional[Figure] = None
        self.axes: List[Axes] = []

    # =========================================================================
    # Cross-validation
    # =========================================================================

    def plot_error_distribution(self,
                                reports: Sequence[CrossValidationReport],
                                title: str = "Derived vs Reference",
                                figsize: Tuple[float, float] = (12, 5)) -> Figure:
        """
        Histogram of angular errors and per-sample component errors.

        Args:
            reports: Cross-validation reports (one series each)
            title: Figure title
            figsize: Figure size

        Returns:
            Figure
        """
        fig, (ax_hist, ax_scatter) = plt.subplots(1, 2, figsize=figsize)
        colors = plt.cm.tab10(np.linspace(0, 1, max(len(reports), 1)))

        for report, color in zip(reports, colors):
            if not report.samples:
                continue
            # Errors can be exactly 0; keep them visible on a log axis
            angular = np.maximum(report.angular_errors, 1e-16)
            component = np.maximum(report.component_errors, 1e-16)

            ax_hist.hist(np.log10(angular), bins=20, alpha=0.6, color=color,
                         label=report.name)
            ax_scatter.semilogy(np.arange(len(component)), component, '.',
                                color=color, label=report.name)

            ax_scatter.axhline(report.tolerance, color=color, lw=0.8, ls='--')

        ax_hist.set_xlabel("log10(angular error [deg])")
        ax_hist.set_ylabel("Samples")
        ax_hist.set_title("Angular error")
        ax_hist.legend()

        ax_scatter.set_xlabel("Sample")
        ax_scatter.set_ylabel("Max component error")
        ax_scatter.set_title("Component error (dashed: tolerance)")
        ax_scatter.grid(True, which='both', alpha=0.3)
        ax_scatter.legend()

        fig.suptitle(title, fontsize=14, fontweight='bold')
        fig.tight_layout()

        self.fig = fig
        self.axes = [ax_hist, ax_scatter]
        return fig

    # =========================================================================
    # Interpolation
    # =========================================================================

    def plot_interpolation(self,
                           trace: InterpolationTrace,
                           title: Optional[str] = None,
                           figsize: Tuple[float, float] = (12, 5)) -> Figure:
        """
        Angle from start and angular speed of each strategy vs progress.

        Args:
            trace: Sampled interpolation trace
            title: Figure title (defaults to the total rotation angle)
            figsize: Figure size

        Returns:
            Figure
        """
        fig, (ax_angle, ax_speed) = plt.subplots(1, 2, figsize=figsize)
        midpoints = 0.5 * (trace.progress[1:] + trace.progress[:-1])

        for strategy in InterpolationStrategy:
            color, style = _STRATEGY_STYLES[strategy]
            ax_angle.plot(trace.progress, trace.angles[strategy], style,
                          color=color, lw=2, label=strategy.value)
            ax_speed.plot(midpoints, trace.angular_speed(strategy), style,
                          color=color, lw=2, label=strategy.value)

        ax_angle.set_xlabel("Progress")
        ax_angle.set_ylabel("Angle from start [deg]")
        ax_angle.grid(True, alpha=0.3)
        ax_angle.legend()

        ax_speed.set_xlabel("Progress")
        ax_speed.set_ylabel("Angular speed [deg / unit progress]")
        ax_speed.grid(True, alpha=0.3)
        ax_speed.legend()

        if title is None:
            title = f"Interpolation over {trace.total_angle:.1f}°"
        fig.suptitle(title, fontsize=14, fontweight='bold')
        fig.tight_layout()

        self.fig = fig
        self.axes = [ax_angle, ax_speed]
        return fig

    # =========================================================================
    # Output
    # =========================================================================

    def save(self, filename: str, dpi: int = 150) -> Path:
        """Save current figure."""
        if self.fig is None:
            raise RuntimeError("No figure to save")

        if self.output_dir:
            filepath = self.output_dir / filename
            self.output_dir.mkdir(parents=True, exist_ok=True)
        else:
            filepath = Path(filename)

        self.fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
        print(f"Saved: {filepath}")
        return filepath

    def show(self):
        """Display current figure."""
        if self.fig is None:
            raise RuntimeError("No figure to show")
        plt.show()

    def close(self):
        """Close current figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.axes = []
