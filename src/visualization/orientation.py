"""
3D orientation plots.

Draws the rotated local axes of one or more rotations side by side, with
optional extra direction lines (e.g. the forward target and up hint of a
look rotation).
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from rotations.geometry import Quaternion, Vector3D

_AXIS_COLORS = ("tab:red", "tab:green", "tab:blue")
_AXIS_NAMES = ("x", "y", "z")


class OrientationPlotter:
    """Plot local frames of rotations in 3D."""

    def __init__(self, scale: float = 1.0):
        self.scale = scale
        self.fig: Optional[Figure] = None

    def plot(self,
             rotations: Sequence[Quaternion],
             labels: Optional[Sequence[str]] = None,
             directions: Optional[Dict[str, Tuple[Vector3D, str]]] = None,
             title: str = "",
             figsize: Optional[Tuple[float, float]] = None) -> Figure:
        """
        One 3D subplot per rotation.

        Args:
            rotations: Rotations to draw
            labels: Subplot titles
            directions: name -> (vector, color) lines drawn in every subplot
            title: Figure title
            figsize: Figure size (auto-calculated if None)

        Returns:
            Figure
        """
        n = len(rotations)
        if n == 0:
            raise ValueError("Nothing to plot")
        if labels is None:
            labels = [f"rotation {i}" for i in range(n)]
        if figsize is None:
            figsize = (4.5 * n, 4.5)

        fig = plt.figure(figsize=figsize)
        for i, (q, label) in enumerate(zip(rotations, labels)):
            ax = fig.add_subplot(1, n, i + 1, projection='3d')
            basis = (Vector3D.right(), Vector3D.up(), Vector3D.forward())
            for axis, color, name in zip(basis, _AXIS_COLORS, _AXIS_NAMES):
                tip = (q * axis).to_array() * self.scale
                ax.quiver(0, 0, 0, *tip, color=color, lw=2)
                ax.text(*(tip * 1.1), name, color=color)

            for name, (vec, color) in (directions or {}).items():
                tip = vec.to_array()
                ax.plot([0, tip[0]], [0, tip[1]], [0, tip[2]], color=color,
                        ls='--', label=name)
            if directions:
                ax.legend(loc='upper left', fontsize=8)

            extent = self.scale
            if directions:
                extent = max([extent] + [v.magnitude() for v, _ in directions.values()])
            ax.set_xlim(-extent, extent)
            ax.set_ylim(-extent, extent)
            ax.set_zlim(-extent, extent)
            ax.set_xlabel('X')
            ax.set_ylabel('Y')
            ax.set_zlabel('Z')
            ax.set_title(label)

        if title:
            fig.suptitle(title, fontsize=14, fontweight='bold')

        self.fig = fig
        return fig

    def save(self, filepath: str | Path, dpi: int = 150) -> Path:
        """Save current figure."""
        if self.fig is None:
            raise RuntimeError("No figure to save")
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
        print(f"Saved: {filepath}")
        return filepath

    def close(self):
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
