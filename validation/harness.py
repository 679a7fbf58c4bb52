"""
Cross-validation of derived rotations against the scipy reference.

Each check draws random inputs, computes the rotation with the functions in
rotations.geometry and with validation.reference, and records both. A sample
passes when the two quaternions agree component-wise up to global sign.

Usage:
    from rotations.config import CrossValidationConfig
    from validation.harness import cross_validate_look_rotation, print_report

    report = cross_validate_look_rotation(CrossValidationConfig(seed=1))
    print_report(report)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from numpy.typing import NDArray
from typing import Any, Dict, List, Optional, Tuple

from rotations.config import CrossValidationConfig
from rotations.geometry import (
    Quaternion,
    RotationOrder,
    Vector3D,
    compose,
    derive_look_rotation,
    is_parallel,
    slerp,
)
from validation.comparison.metrics import ErrorMetrics, compute_error_metrics
from validation.comparison.rotations import angular_error, component_error, stack_aligned
from validation.reference import (
    reference_axis_angle,
    reference_compose,
    reference_look_rotation,
    reference_slerp,
)


@dataclass
class RotationSample:
    """One derived/reference pair with the inputs that produced it."""
    label: str
    derived: Quaternion
    reference: Quaternion
    inputs: Dict[str, Any] = field(default_factory=dict)

    @property
    def component_error(self) -> float:
        return component_error(self.derived, self.reference)

    @property
    def angular_error(self) -> float:
        return angular_error(self.derived, self.reference)

    def passed(self, tolerance: float) -> bool:
        return self.derived.equivalent(self.reference, tolerance)

    def to_row(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {'label': self.label}
        row.update(self.inputs)
        for prefix, q in (('derived', self.derived), ('reference', self.reference)):
            row[f'{prefix}_x'] = q.x
            row[f'{prefix}_y'] = q.y
            row[f'{prefix}_z'] = q.z
            row[f'{prefix}_w'] = q.w
        row['component_error'] = self.component_error
        row['angular_error_deg'] = self.angular_error
        return row


@dataclass
class CrossValidationReport:
    """Outcome of one cross-validation run."""
    name: str
    tolerance: float
    samples: List[RotationSample] = field(default_factory=list)
    skipped: int = 0

    @property
    def num_samples(self) -> int:
        return len(self.samples)

    @property
    def failures(self) -> List[RotationSample]:
        return [s for s in self.samples if not s.passed(self.tolerance)]

    @property
    def passed(self) -> bool:
        return self.num_samples > 0 and not self.failures

    @property
    def component_errors(self) -> NDArray[np.float64]:
        return np.array([s.component_error for s in self.samples])

    @property
    def angular_errors(self) -> NDArray[np.float64]:
        return np.array([s.angular_error for s in self.samples])

    @property
    def metrics(self) -> ErrorMetrics:
        """Error metrics over all sign-aligned quaternion components."""
        derived, reference = stack_aligned(
            [s.derived for s in self.samples],
            [s.reference for s in self.samples]
        )
        return compute_error_metrics(derived, reference)

    def to_rows(self) -> List[Dict[str, Any]]:
        return [s.to_row() for s in self.samples]

    def summary(self) -> Dict[str, Any]:
        summary: Dict[str, Any] = {
            'name': self.name,
            'passed': self.passed,
            'num_samples': self.num_samples,
            'num_failures': len(self.failures),
            'skipped': self.skipped,
            'tolerance': self.tolerance,
        }
        if self.samples:
            summary['max_component_error'] = float(self.component_errors.max())
            summary['max_angular_error_deg'] = float(self.angular_errors.max())
            summary['metrics'] = self.metrics.to_dict()
        return summary

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        lines = [
            f"{self.name}: {status} "
            f"({self.num_samples - len(self.failures)}/{self.num_samples} within "
            f"{self.tolerance:g}, {self.skipped} skipped)"
        ]
        if self.samples:
            lines.append(f"  max component error: {self.component_errors.max():.3e}")
            lines.append(f"  max angular error:   {self.angular_errors.max():.3e} deg")
        return "\n".join(lines)


# =============================================================================
# Input generation
# =============================================================================

def random_vector(rng: np.random.Generator,
                  component_range: Tuple[float, float] = (-10.0, 10.0),
                  integer_components: bool = True,
                  length: Optional[float] = None) -> Vector3D:
    """
    Random vector with components in [low, high).

    When length is given the vector is rescaled to it; a zero draw is
    returned unchanged.
    """
    low, high = component_range
    if integer_components:
        arr = rng.integers(int(np.ceil(low)), int(np.ceil(high)), size=3).astype(np.float64)
    else:
        arr = rng.uniform(low, high, size=3)

    norm = np.linalg.norm(arr)
    if length is not None and norm > 0.0:
        arr = arr / norm * length
    return Vector3D.from_array(arr)


def random_direction_pairs(config: CrossValidationConfig,
                           rng: Optional[np.random.Generator] = None
                           ) -> List[Tuple[Vector3D, Vector3D]]:
    """config.num_samples random (forward, up) pairs, degenerate ones included."""
    if rng is None:
        rng = np.random.default_rng(config.seed)
    pairs = []
    for _ in range(config.num_samples):
        forward = random_vector(rng, config.component_range, config.integer_components,
                                config.vector_length)
        up = random_vector(rng, config.component_range, config.integer_components,
                           config.vector_length)
        pairs.append((forward, up))
    return pairs


def is_degenerate_pair(forward: Vector3D, up: Vector3D) -> bool:
    """Zero forward, zero up, or up parallel to forward."""
    return forward.is_zero() or up.is_zero() or is_parallel(forward, up)


# =============================================================================
# Cross-validation runs
# =============================================================================

def cross_validate_look_rotation(config: CrossValidationConfig,
                                 rng: Optional[np.random.Generator] = None
                                 ) -> CrossValidationReport:
    """Derived look rotation vs reference for random direction pairs."""
    report = CrossValidationReport(name="look_rotation", tolerance=config.tolerance)

    for i, (forward, up) in enumerate(random_direction_pairs(config, rng)):
        if is_degenerate_pair(forward, up):
            report.skipped += 1
            continue

        derived = derive_look_rotation(forward, up)
        reference = reference_look_rotation(forward, up)
        aimed = derived * Vector3D.forward()

        report.samples.append(RotationSample(
            label=f"pair_{i}",
            derived=derived,
            reference=reference,
            inputs={
                'forward_x': forward.x, 'forward_y': forward.y, 'forward_z': forward.z,
                'up_x': up.x, 'up_y': up.y, 'up_z': up.z,
                'forward_dot': aimed.dot(forward.normalize()),
            }
        ))

    return report


def cross_validate_euler_orders(num_samples: int = 20,
                                tolerance: float = 1e-6,
                                rng: Optional[np.random.Generator] = None
                                ) -> CrossValidationReport:
    """compose() vs scipy from_euler for all six orders, intrinsic and extrinsic."""
    if rng is None:
        rng = np.random.default_rng()
    report = CrossValidationReport(name="euler_orders", tolerance=tolerance)

    for i in range(num_samples):
        rx, ry, rz = rng.uniform(-180.0, 180.0, size=3)
        for order in RotationOrder:
            for intrinsic in (False, True):
                kind = "intrinsic" if intrinsic else "extrinsic"
                report.samples.append(RotationSample(
                    label=f"{order.value}_{kind}_{i}",
                    derived=compose(order, intrinsic, rx, ry, rz),
                    reference=reference_compose(order, intrinsic, rx, ry, rz),
                    inputs={'rx': rx, 'ry': ry, 'rz': rz},
                ))

    return report


def cross_validate_axis_angle(num_samples: int = 50,
                              tolerance: float = 1e-6,
                              rng: Optional[np.random.Generator] = None
                              ) -> CrossValidationReport:
    """Quaternion.from_axis_angle vs scipy rotation vectors."""
    if rng is None:
        rng = np.random.default_rng()
    report = CrossValidationReport(name="axis_angle", tolerance=tolerance)

    for i in range(num_samples):
        axis = random_vector(rng, (-1.0, 1.0), integer_components=False)
        if axis.is_zero():
            report.skipped += 1
            continue
        angle = float(rng.uniform(-180.0, 180.0))
        report.samples.append(RotationSample(
            label=f"axis_angle_{i}",
            derived=Quaternion.from_axis_angle(axis, angle),
            reference=reference_axis_angle(axis, angle),
            inputs={'axis_x': axis.x, 'axis_y': axis.y, 'axis_z': axis.z, 'angle': angle},
        ))

    return report


def cross_validate_slerp(num_pairs: int = 10,
                         num_steps: int = 11,
                         tolerance: float = 1e-6,
                         rng: Optional[np.random.Generator] = None
                         ) -> CrossValidationReport:
    """slerp() vs scipy Slerp between random rotation pairs."""
    if rng is None:
        rng = np.random.default_rng()
    report = CrossValidationReport(name="slerp", tolerance=tolerance)

    for i in range(num_pairs):
        start = Quaternion.random(rng)
        end = Quaternion.random(rng)
        for t in np.linspace(0.0, 1.0, num_steps):
            report.samples.append(RotationSample(
                label=f"slerp_{i}_{t:.3f}",
                derived=slerp(start, end, float(t)),
                reference=reference_slerp(start, end, float(t)),
                inputs={'pair': i, 't': float(t)},
            ))

    return report


def run_cross_validation(config: CrossValidationConfig) -> Dict[str, CrossValidationReport]:
    """Run every check with one seeded generator."""
    rng = np.random.default_rng(config.seed)
    return {
        'look_rotation': cross_validate_look_rotation(config, rng),
        'euler_orders': cross_validate_euler_orders(rng=rng),
        'axis_angle': cross_validate_axis_angle(rng=rng),
        'slerp': cross_validate_slerp(rng=rng),
    }


def print_report(report: CrossValidationReport, max_failures: int = 10) -> None:
    """Print a report with a table of the worst failing samples."""
    print("\n" + "=" * 80)
    print(str(report))
    print("=" * 80)

    failures = sorted(report.failures, key=lambda s: s.component_error, reverse=True)
    if not failures:
        return

    print(f"{'Label':<24} {'Derived (x, y, z, w)':>36} {'Error':>12}")
    print("-" * 80)
    for sample in failures[:max_failures]:
        q = sample.derived
        print(f"{sample.label:<24} "
              f"{q.x:>8.4f} {q.y:>8.4f} {q.z:>8.4f} {q.w:>8.4f} "
              f"{sample.component_error:>12.3e}")
    if len(failures) > max_failures:
        print(f"... {len(failures) - max_failures} more")
    print("=" * 80)
