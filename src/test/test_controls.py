"""
Test the handle rig, key-driven controllers and the interpolation schedule.
"""

import logging
import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from rotations.config import EulerConfig, HandleConfig
from rotations.control import (
    EulerController,
    HandleController,
    InterpolationSchedule,
    parse_angle,
)
from rotations.geometry import (
    InterpolationStrategy,
    Quaternion,
    RotationOrder,
    Vector3D,
    axis_spin_rotation,
    compose,
    handle_vector,
)


class TestHandleGeometry:
    """Test handle_vector and axis_spin_rotation."""

    def test_rest(self):
        np.testing.assert_array_almost_equal(handle_vector(0, 0, 0).to_array(), [0.0, 0.0, 1.0])

    def test_spin_keeps_forward_handle(self):
        np.testing.assert_array_almost_equal(handle_vector(45, 0, 0).to_array(), [0.0, 0.0, 1.0])

    def test_pitch_tilts_down(self):
        np.testing.assert_array_almost_equal(handle_vector(0, 90, 0).to_array(), [0.0, -1.0, 0.0])

    def test_orbit(self):
        np.testing.assert_array_almost_equal(handle_vector(0, 0, 90).to_array(), [1.0, 0.0, 0.0])

    def test_custom_base(self):
        np.testing.assert_array_almost_equal(
            handle_vector(0, 0, 90, base=(1, 0, 0)).to_array(), [0.0, 0.0, -1.0]
        )

    def test_axis_spin(self):
        q = axis_spin_rotation(90, 0, 0)
        assert q.equivalent(Quaternion.from_axis_angle(Vector3D.forward(), 90.0), 1e-12)
        q = axis_spin_rotation(30, 0, 90)
        assert q.equivalent(Quaternion.from_axis_angle(Vector3D.right(), 30.0), 1e-9)


class TestParseAngle:
    """Test text-field parsing."""

    def test_number(self):
        assert parse_angle("42.5", 0.0) == 42.5

    def test_blank_is_zero(self):
        assert parse_angle("  ", 10.0) == 0.0

    @pytest.mark.parametrize("text", ["abc", "1.2.3", "inf", "nan"])
    def test_bad_text_keeps_previous(self, text, caplog):
        with caplog.at_level(logging.INFO):
            assert parse_angle(text, 12.0) == 12.0
        assert "Ignoring" in caplog.text


class TestHandleController:
    """Test HandleController stepping."""

    def test_pitch_increases(self):
        controller = HandleController(rate=90.0)
        binding = controller.step(0.5, {"s"})
        assert binding == ("s", "pitch", 1)
        assert abs(controller.pitch - 45.0) < 1e-12

    def test_pitch_clamped(self):
        controller = HandleController(rate=90.0)
        controller.step(2.0, {"s"})
        assert controller.pitch == 90.0
        controller.step(5.0, {"a"})
        assert controller.pitch == -90.0

    def test_spin_wraps(self):
        controller = HandleController(rate=90.0)
        controller.step(2.5, {"w"})
        assert abs(controller.spin + 135.0) < 1e-9
        controller.step(1.0, {"q"})
        assert abs(controller.spin - 135.0) < 1e-9

    def test_orbit_and_reset(self):
        controller = HandleController(rate=90.0)
        controller.step(1.0, {"x"})
        assert abs(controller.orbit - 90.0) < 1e-12
        controller.step(0.1, {"c"})
        assert controller.orbit == 0.0

    def test_only_first_binding_fires(self):
        controller = HandleController(rate=90.0)
        binding = controller.step(1.0, {"s", "w", "x"})
        assert binding[0] == "w"
        assert controller.spin == 90.0
        assert controller.pitch == 0.0
        assert controller.orbit == 0.0

    def test_keys_case_insensitive(self):
        controller = HandleController(rate=90.0)
        controller.step(1.0, ["S"])
        assert controller.pitch == 90.0

    def test_no_key(self):
        controller = HandleController()
        assert controller.step(1.0, set()) is None

    def test_apply_text(self):
        controller = HandleController()
        assert controller.apply_text("pitch", "120") == 90.0
        assert controller.apply_text("spin", "270") == -90.0
        assert controller.apply_text("spin", "oops") == -90.0
        with pytest.raises(KeyError):
            controller.apply_text("roll", "10")

    def test_rotation_and_vector(self):
        controller = HandleController()
        controller.apply_text("orbit", "90")
        np.testing.assert_array_almost_equal(controller.handle_vector().to_array(), [1.0, 0.0, 0.0])
        np.testing.assert_array_almost_equal(
            (controller.rotation() * Vector3D.forward()).to_array(), [1.0, 0.0, 0.0]
        )

    def test_from_config(self):
        controller = HandleController.from_config(
            HandleConfig(rate=45.0, pitch_limits=(-30.0, 30.0), base_vector=(1.0, 0.0, 0.0))
        )
        controller.step(1.0, {"s"})
        assert controller.pitch == 30.0
        assert controller.base_vector == Vector3D.right()

    def test_reset(self):
        controller = HandleController()
        controller.step(0.3, {"w"})
        controller.reset()
        assert controller.values == {"spin": 0.0, "pitch": 0.0, "orbit": 0.0}

    def test_invalid_rate(self):
        with pytest.raises(ValueError):
            HandleController(rate=0.0)


class TestEulerController:
    """Test EulerController."""

    def test_rotation_uses_order(self):
        controller = EulerController(order=RotationOrder.XYZ, intrinsic=True)
        controller.apply_text("x", "30")
        controller.apply_text("y", "-45")
        controller.apply_text("z", "60")
        expected = compose(RotationOrder.XYZ, True, 30.0, -45.0, 60.0)
        assert controller.rotation() == expected

    def test_step(self):
        controller = EulerController(rate=60.0)
        controller.step(0.5, {"w"})
        controller.step(0.5, {"a"})
        assert abs(controller.x - 30.0) < 1e-12
        assert abs(controller.y + 30.0) < 1e-12
        assert controller.z == 0.0

    def test_from_config(self):
        controller = EulerController.from_config(EulerConfig(order="YZX", intrinsic=True))
        assert controller.order is RotationOrder.YZX
        assert controller.intrinsic


class TestInterpolationSchedule:
    """Test progress, hold and restart."""

    def test_progress_and_hold(self):
        schedule = InterpolationSchedule(rate=0.5, wait=1.0, seed=0)
        start, end = schedule.start, schedule.end

        frame = schedule.step(1.0, now=1.0)
        assert frame.progress == 0.5
        assert set(frame.rotations) == set(InterpolationStrategy)
        assert not frame.restarted

        frame = schedule.step(1.0, now=2.0)
        assert frame.progress == 1.0
        assert schedule.waiting
        for q in frame.rotations.values():
            assert q.equivalent(end, 1e-9)

        assert schedule.step(0.1, now=2.5) is None
        assert schedule.step(0.1, now=3.0) is None

        frame = schedule.step(0.1, now=3.1)
        assert frame.restarted
        assert abs(frame.progress - 0.05) < 1e-12
        assert not schedule.start.equivalent(start)
        assert not schedule.waiting

    def test_fixed_endpoints(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Vector3D.up(), 90.0)
        schedule = InterpolationSchedule(rate=0.25, start=start, end=end)
        frame = schedule.step(2.0, now=2.0)
        expected = Quaternion.from_axis_angle(Vector3D.up(), 45.0)
        for q in frame.rotations.values():
            assert q.equivalent(expected, 1e-9)

    def test_seeded_is_repeatable(self):
        a = InterpolationSchedule(seed=3)
        b = InterpolationSchedule(seed=3)
        assert a.start == b.start
        assert a.end == b.end

    def test_invalid(self):
        with pytest.raises(ValueError):
            InterpolationSchedule(rate=0.0)
        with pytest.raises(ValueError):
            InterpolationSchedule(wait=-1.0)
