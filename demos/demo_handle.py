#!/usr/bin/env python3
"""
Demo: Handle Rig

Steps a HandleController through a scripted key sequence and prints the
handle direction and the axis-spin rotation after each stage. Pitch stops
at its limits; spin and orbit wrap around.

Usage:
    python demo_handle.py [--case CASE_FILE]
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rotations.control import HandleController
from rotations.io import CaseLoader
from rotations.geometry import Vector3D

DEFAULT_CASE = Path(__file__).parent.parent / "cases" / "default"


def main():
    parser = argparse.ArgumentParser(description="Handle rig demo")
    parser.add_argument("--case", type=str, default=str(DEFAULT_CASE),
                        help="Case file or directory whose handle settings to use")
    args = parser.parse_args()

    config = CaseLoader.load_case(args.case).config
    controller = HandleController.from_config(config.handle)
    dt = 1.0 / 30.0

    print("=" * 60)
    print(f"Handle Rig ({controller.rate:g} deg/s, pitch limits {controller.pitch_limits})")
    print("=" * 60)

    # (key, seconds held, description)
    script = [
        ("s", 0.5, "pitch up"),
        ("s", 2.0, "pitch into limit"),
        ("x", 1.0, "orbit"),
        ("w", 3.0, "spin past 180"),
        ("d", 0.1, "reset pitch"),
        ("c", 0.1, "reset orbit"),
    ]

    for key, seconds, description in script:
        for _ in range(round(seconds * 30)):
            controller.step(dt, {key})
        direction = controller.handle_vector()
        spun = controller.axis_rotation() * Vector3D.up()
        print(f"\n{description} ('{key}' for {seconds}s)")
        print(f"  spin={controller.spin:8.2f}  pitch={controller.pitch:7.2f}  "
              f"orbit={controller.orbit:8.2f}")
        print(f"  handle:        {direction}")
        print(f"  up after spin: {spun}")

    controller.apply_text("pitch", "")
    print(f"\nBlank pitch text -> pitch={controller.pitch:.2f}")

    print("\nDone.")


if __name__ == "__main__":
    main()
