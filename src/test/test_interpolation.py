"""
Test the three interpolation strategies.
"""

import pytest
import numpy as np
from pathlib import Path
from scipy.spatial.transform import Rotation, Slerp

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from rotations.geometry import (
    InterpolationStrategy,
    Quaternion,
    Vector3D,
    interpolate,
    lerp,
    slerp,
    trace_interpolation,
)


@pytest.fixture
def pair():
    rng = np.random.default_rng(4)
    return Quaternion.random(rng), Quaternion.random(rng)


class TestStrategies:
    """Test endpoints and known midpoints."""

    @pytest.mark.parametrize("strategy", list(InterpolationStrategy))
    def test_endpoints(self, pair, strategy):
        start, end = pair
        assert interpolate(start, end, 0.0, strategy).equivalent(start, 1e-9)
        assert interpolate(start, end, 1.0, strategy).equivalent(end, 1e-9)

    @pytest.mark.parametrize("strategy", list(InterpolationStrategy))
    def test_midpoint(self, strategy):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Vector3D.up(), 90.0)
        mid = interpolate(start, end, 0.5, strategy)
        assert mid.equivalent(Quaternion.from_axis_angle(Vector3D.up(), 45.0), 1e-9)

    @pytest.mark.parametrize("strategy", list(InterpolationStrategy))
    def test_short_way(self, strategy):
        # 270 degrees one way is 90 the other
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Vector3D.up(), 270.0)
        mid = interpolate(start, end, 0.5, strategy)
        assert mid.equivalent(Quaternion.from_axis_angle(Vector3D.up(), -45.0), 1e-9)

    def test_slerp_matches_scipy(self, pair):
        start, end = pair
        keys = Rotation.from_quat(np.vstack([start.to_array(), end.to_array()]))
        reference = Slerp([0.0, 1.0], keys)
        for t in np.linspace(0.0, 1.0, 7):
            expected = Quaternion.from_array(reference([t])[0].as_quat())
            assert slerp(start, end, t).equivalent(expected, 1e-9)

    def test_nearly_identical_rotations(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Vector3D.right(), 0.01)
        mid = slerp(start, end, 0.5)
        assert mid.is_unit()
        assert mid.equivalent(Quaternion.from_axis_angle(Vector3D.right(), 0.005), 1e-9)

    def test_progress_is_clamped(self, pair):
        start, end = pair
        assert slerp(start, end, 1.5).equivalent(end, 1e-9)
        assert lerp(start, end, -0.5).equivalent(start, 1e-9)

    def test_results_are_unit(self, pair):
        start, end = pair
        for strategy in InterpolationStrategy:
            for t in (0.1, 0.37, 0.8):
                assert interpolate(start, end, t, strategy).is_unit()


class TestTrace:
    """Test InterpolationTrace."""

    def test_slerp_has_constant_speed(self, pair):
        trace = trace_interpolation(*pair, num_steps=41)
        speed = trace.angular_speed(InterpolationStrategy.SLERP)
        np.testing.assert_allclose(speed, trace.total_angle, rtol=1e-4)

    def test_axis_angle_follows_slerp(self, pair):
        trace = trace_interpolation(*pair)
        assert trace.max_deviation(InterpolationStrategy.AXIS_ANGLE) < 1e-4

    def test_lerp_deviates_on_large_rotation(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Vector3D.up(), 160.0)
        trace = trace_interpolation(start, end, num_steps=21)
        assert trace.max_deviation(InterpolationStrategy.LERP) > 1.0
        speed = trace.angular_speed(InterpolationStrategy.LERP)
        # Fastest in the middle, slowest at the ends
        assert speed[len(speed) // 2] > speed[0]

    def test_angles_span_total(self, pair):
        trace = trace_interpolation(*pair, num_steps=11)
        for strategy in InterpolationStrategy:
            assert trace.angles[strategy][0] < 1e-4
            assert abs(trace.angles[strategy][-1] - trace.total_angle) < 1e-4
            assert len(trace.rotations[strategy]) == 11

    def test_too_few_steps(self, pair):
        with pytest.raises(ValueError):
            trace_interpolation(*pair, num_steps=1)
