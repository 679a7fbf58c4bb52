#!/usr/bin/env python3
"""
Demo: Euler Rotation Orders

Composes one set of angles in all six orders, extrinsic and intrinsic, and
shows where the forward axis ends up for each. Then replays a short key
sequence on an EulerController.

Usage:
    python demo_euler_orders.py [--angles X Y Z] [--case CASE_FILE]
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rotations.control import EulerController
from rotations.config import EulerConfig
from rotations.geometry import Quaternion, RotationOrder, Vector3D, application_order, compose
from rotations.io import CaseLoader

DEFAULT_CASE = Path(__file__).parent.parent / "cases" / "default"


def demo_orders(rx: float, ry: float, rz: float):
    print("=" * 60)
    print(f"Euler Orders for ({rx}, {ry}, {rz})")
    print("=" * 60)
    print(f"{'Order':<8} {'Mode':<10} {'Applied':<10} {'Forward after rotation':>30}")
    print("-" * 60)

    for order in RotationOrder:
        axes = "".join("XYZ"[i] for i in application_order(order))
        for intrinsic in (False, True):
            q = compose(order, intrinsic, rx, ry, rz)
            mode = "intrinsic" if intrinsic else "extrinsic"
            print(f"{order.value:<8} {mode:<10} {axes:<10} {str(q * Vector3D.forward()):>30}")

    engine = Quaternion.from_euler(rx, ry, rz)
    print(f"\nEngine convention (extrinsic ZXY): {engine}")
    print(f"compose(ZXY, extrinsic) matches: "
          f"{engine.equivalent(compose(RotationOrder.ZXY, False, rx, ry, rz))}")


def demo_controller(config: EulerConfig):
    controller = EulerController.from_config(config)
    mode = "intrinsic" if controller.intrinsic else "extrinsic"

    print("\n" + "=" * 60)
    print(f"EulerController key replay ({controller.rate:g} deg/s, "
          f"{controller.order.value} {mode}, 30 fps)")
    print("=" * 60)

    dt = 1.0 / 30.0
    sequence = [("w", 30), ("s", 45), ("z", 15), ("e", 1)]
    for key, frames in sequence:
        for _ in range(frames):
            controller.step(dt, {key})
        print(f"  held '{key}' for {frames:3d} frames -> "
              f"x={controller.x:7.2f} y={controller.y:7.2f} z={controller.z:7.2f}")

    controller.apply_text("z", "not a number")
    print(f"  bad text on z keeps z={controller.z:.2f}")
    print(f"  rotation: {controller.rotation()}")


def main():
    parser = argparse.ArgumentParser(description="Euler order demo")
    parser.add_argument("--angles", type=float, nargs=3, default=[30.0, 45.0, 60.0],
                        metavar=("X", "Y", "Z"), help="Angles in degrees")
    parser.add_argument("--case", type=str, default=str(DEFAULT_CASE),
                        help="Case file or directory whose Euler settings to use")
    args = parser.parse_args()

    config = CaseLoader.load_case(args.case).config
    demo_orders(*args.angles)
    demo_controller(config.euler)

    print("\nDone.")


if __name__ == "__main__":
    main()
