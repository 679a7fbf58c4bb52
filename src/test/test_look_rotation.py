"""
Test the derived look rotation.
"""

import logging
import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rotations.geometry import (
    Quaternion,
    Vector3D,
    aim_angles,
    derive_look_rotation,
    look_angles,
)
from validation.reference import reference_look_rotation


class TestAimAngles:
    """Test the pitch/yaw stage."""

    def test_forward_is_zero_angles(self):
        pitch, yaw = aim_angles((0, 0, 1))
        assert pitch == 0.0
        assert yaw == 0.0

    def test_yaw_towards_right(self):
        pitch, yaw = aim_angles((1, 0, 0))
        assert abs(pitch) < 1e-12
        assert abs(yaw - 90.0) < 1e-12

    def test_yaw_backwards(self):
        _, yaw = aim_angles((0, 0, -1))
        assert yaw == 180.0

    def test_yaw_diagonal(self):
        _, yaw = aim_angles((1, 0, 1))
        assert abs(yaw - 45.0) < 1e-12

    def test_looking_up_is_negative_pitch(self):
        pitch, yaw = aim_angles((0, 1, 1))
        assert abs(pitch + 45.0) < 1e-12
        assert yaw == 0.0

    def test_vertical(self):
        assert abs(aim_angles((0, 1, 0))[0] + 90.0) < 1e-12
        assert abs(aim_angles((0, -1, 0))[0] - 90.0) < 1e-12


class TestDeriveLookRotation:
    """Test the full two-stage look rotation."""

    def test_identity(self):
        q = derive_look_rotation((0, 0, 1), (0, 1, 0))
        assert q.equivalent(Quaternion.identity(), 1e-12)

    def test_look_right(self):
        q = derive_look_rotation((1, 0, 0), (0, 1, 0))
        assert q.equivalent(Quaternion.from_axis_angle(Vector3D.up(), 90.0), 1e-12)
        np.testing.assert_array_almost_equal((q * Vector3D.forward()).to_array(), [1.0, 0.0, 0.0])

    def test_roll_from_hint(self):
        angles = look_angles((0, 0, 1), (1, 0, 0))
        assert abs(angles.roll + 90.0) < 1e-10

        q = derive_look_rotation((0, 0, 1), (1, 0, 0))
        np.testing.assert_array_almost_equal((q * Vector3D.forward()).to_array(), [0.0, 0.0, 1.0])
        np.testing.assert_array_almost_equal((q * Vector3D.up()).to_array(), [1.0, 0.0, 0.0])

    def test_vertical_forward_with_hint(self):
        q = derive_look_rotation((0, 3, 0), (0, 0, 1))
        np.testing.assert_array_almost_equal((q * Vector3D.forward()).to_array(), [0.0, 1.0, 0.0])
        np.testing.assert_array_almost_equal((q * Vector3D.up()).to_array(), [0.0, 0.0, 1.0])
        assert q.equivalent(reference_look_rotation((0, 3, 0), (0, 0, 1)))

    def test_up_parallel_to_forward_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            q = derive_look_rotation((0, -1, 0), (0, 1, 0))
        np.testing.assert_array_almost_equal((q * Vector3D.forward()).to_array(), [0.0, -1.0, 0.0])
        assert "parallel" in caplog.text

    def test_nearly_parallel_up_falls_back(self, caplog):
        forward = np.array([0.3, 0.4, 0.5])
        with caplog.at_level(logging.WARNING):
            angles = look_angles(forward, forward + np.array([1e-7, 0.0, 0.0]))
        assert angles.roll == 0.0
        assert "parallel" in caplog.text

    def test_hint_outside_parallel_threshold_keeps_roll(self, caplog):
        forward = np.array([0.3, 0.4, 0.5])
        up = forward + np.array([1e-3, 0.0, 0.0])
        with caplog.at_level(logging.WARNING):
            q = derive_look_rotation(forward, up)
        assert not caplog.records
        assert q.equivalent(reference_look_rotation(forward, up))

    def test_zero_up_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            q = derive_look_rotation((1, 0, 0), (0, 0, 0))
        np.testing.assert_array_almost_equal((q * Vector3D.forward()).to_array(), [1.0, 0.0, 0.0])
        assert caplog.records

    def test_zero_forward_is_identity(self, caplog):
        with caplog.at_level(logging.WARNING):
            q = derive_look_rotation((0, 0, 0), (0, 1, 0))
        assert q == Quaternion.identity()
        assert "forward vector is zero" in caplog.text

    def test_result_is_unit(self):
        q = derive_look_rotation((3, -4, 2), (1, 1, 0))
        assert q.is_unit()

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_matches_reference(self, seed):
        rng = np.random.default_rng(seed)
        for _ in range(100):
            forward = rng.uniform(-1, 1, size=3)
            up = rng.uniform(-1, 1, size=3)
            derived = derive_look_rotation(forward, up)
            reference = reference_look_rotation(forward, up)
            assert derived.equivalent(reference), (forward, up)

    def test_integer_pairs_match_reference(self):
        # Integer components hit axis-aligned and x == 0 branches
        rng = np.random.default_rng(5)
        checked = 0
        for _ in range(300):
            forward = Vector3D.from_array(rng.integers(-3, 4, size=3).astype(float))
            up = Vector3D.from_array(rng.integers(-3, 4, size=3).astype(float))
            if forward.is_zero() or up.is_zero() or forward.cross(up).is_zero():
                continue
            assert derive_look_rotation(forward, up).equivalent(
                reference_look_rotation(forward, up)
            ), (forward, up)
            checked += 1
        assert checked > 200

    def test_forward_is_reached(self):
        rng = np.random.default_rng(9)
        for _ in range(50):
            forward = Vector3D.from_array(rng.normal(size=3))
            up = Vector3D.from_array(rng.normal(size=3))
            q = derive_look_rotation(forward, up)
            assert abs((q * Vector3D.forward()).dot(forward.normalize()) - 1.0) < 1e-9
