#!/usr/bin/env python3
"""
Demo: Look Rotation

Builds orientations from random (forward, up) pairs with the pitch / yaw /
roll derivation and checks each against the reference construction:
- Prints the intermediate angles and both quaternions
- Flags pairs where the two disagree
- Optionally plots the local frames of the last pair

Usage:
    python demo_look_rotation.py [--pairs N] [--seed S] [--show] [--save]
"""

import sys
import argparse
import logging
from pathlib import Path
import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from rotations.config import CrossValidationConfig
from rotations.geometry import Vector3D, derive_look_rotation, look_angles
from validation.harness import is_degenerate_pair, random_direction_pairs
from validation.reference import reference_look_rotation
from visualization import OrientationPlotter


def demo_pairs(num_pairs: int, seed, tolerance: float = 1e-4):
    """
    Derived vs reference for random direction pairs.

    Returns:
        The last non-degenerate (forward, up, derived, reference) tuple
    """
    print("=" * 60)
    print("Look Rotation: Derived vs Reference")
    print("=" * 60)

    config = CrossValidationConfig(num_samples=num_pairs, seed=seed, tolerance=tolerance)
    last = None
    mismatches = 0

    for i, (forward, up) in enumerate(random_direction_pairs(config)):
        print(f"\nPair {i}: forward={forward}, up={up}")
        if is_degenerate_pair(forward, up):
            print("  degenerate, skipped")
            continue

        angles = look_angles(forward, up)
        derived = derive_look_rotation(forward, up)
        reference = reference_look_rotation(forward, up)
        match = derived.equivalent(reference, tolerance)
        mismatches += not match

        print(f"  angles:    {angles}")
        print(f"  derived:   {derived}")
        print(f"  reference: {reference}")
        print(f"  match:     {'yes' if match else 'NO'}")
        last = (forward, up, derived, reference)

    print(f"\n{mismatches} mismatch(es) out of {num_pairs} pairs")
    return last


def demo_plot(pair, show: bool = True, save: bool = False):
    forward, up, derived, reference = pair
    plotter = OrientationPlotter(scale=1.0)
    plotter.plot(
        [derived, reference],
        labels=["derived", "reference"],
        directions={
            "forward": (forward.normalize() * 1.5, "black"),
            "up hint": (up.normalize() * 1.5, "gray"),
        },
        title="Look rotation",
    )
    if save:
        output_dir = Path(__file__).parent / "output"
        plotter.save(output_dir / "look_rotation.png")
    if show:
        import matplotlib.pyplot as plt
        plt.show()
    plotter.close()


def main():
    parser = argparse.ArgumentParser(description="Look rotation demo")
    parser.add_argument("--pairs", type=int, default=5, help="Number of random pairs")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--show", action="store_true", help="Display plot")
    parser.add_argument("--save", action="store_true", help="Save plot")
    parser.add_argument("--verbose", action="store_true", help="Log degenerate-input warnings")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)

    last = demo_pairs(args.pairs, args.seed)
    if last is not None and (args.show or args.save):
        demo_plot(last, args.show, args.save)

    # Fixed cases with a known answer
    print("\nKnown cases:")
    for forward in (Vector3D.forward(), Vector3D.right(), Vector3D(0, 1, 1)):
        q = derive_look_rotation(forward)
        print(f"  forward={forward}: {q}  euler={np.round(q.to_euler(), 3)}")

    print("\nDone.")


if __name__ == "__main__":
    main()
