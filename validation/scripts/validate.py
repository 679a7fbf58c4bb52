#!/usr/bin/env python3
"""
Cross-validation: derived rotations vs the scipy reference.

Checks:
    1. Look rotation from random (forward, up) pairs
    2. Euler composition for all six orders, intrinsic and extrinsic
    3. Axis-angle construction
    4. Slerp

Usage:
    python validate.py --samples 200 --seed 7
    python validate.py --samples 1000 --float-components --save results/validation
    python validate.py --only look_rotation
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rotations.config import CrossValidationConfig
from rotations.io import ResultExporter
from validation.harness import run_cross_validation, print_report


def main():
    parser = argparse.ArgumentParser(description="Cross-validate rotations against scipy")
    parser.add_argument("--samples", type=int, default=100, help="Random look-rotation pairs")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--tolerance", type=float, default=1e-4,
                        help="Component-wise quaternion tolerance")
    parser.add_argument("--float-components", action="store_true",
                        help="Draw continuous components instead of integers")
    parser.add_argument("--only", type=str, default=None,
                        choices=["look_rotation", "euler_orders", "axis_angle", "slerp"],
                        help="Report a single check")
    parser.add_argument("--save", type=str, default=None, help="Directory for CSV/YAML output")
    args = parser.parse_args()

    try:
        config = CrossValidationConfig(
            num_samples=args.samples,
            seed=args.seed,
            tolerance=args.tolerance,
            integer_components=not args.float_components,
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 60)
    print("Cross-Validation Against Reference")
    print("=" * 60)
    print(f"  Samples:   {config.num_samples}")
    print(f"  Seed:      {config.seed}")
    print(f"  Tolerance: {config.tolerance:g}")

    reports = run_cross_validation(config)
    if args.only:
        reports = {args.only: reports[args.only]}

    for report in reports.values():
        print_report(report)

    if args.save:
        exporter = ResultExporter(args.save)
        for name, report in reports.items():
            if report.samples:
                print(f"Saved: {exporter.write_csv(f'{name}_samples.csv', report.to_rows())}")
        summary = {name: report.summary() for name, report in reports.items()}
        print(f"Saved: {exporter.write_summary(summary)}")

    if not all(report.passed for report in reports.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
