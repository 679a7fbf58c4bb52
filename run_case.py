"""
Run a rotation case defined by a YAML config file.
"""

import sys
import argparse
import logging
from pathlib import Path
import numpy as np
import matplotlib.pyplot as plt

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from rotations.config import CaseConfig, InterpolationConfig
from rotations.control import EulerController, HandleController, InterpolationSchedule
from rotations.geometry import InterpolationStrategy, Quaternion, Vector3D, trace_interpolation
from rotations.io import CaseLoader, ResultExporter
from validation.harness import run_cross_validation, print_report
from visualization import ComparisonVisualizer


def play_schedule(config: InterpolationConfig, fps: float = 30.0) -> dict:
    """
    Run the interpolation schedule through one full cycle.

    Steps at a fixed frame rate until the schedule restarts with a new pair,
    tracking how long playback and the hold took and how far lerp strayed
    from slerp.
    """
    schedule = InterpolationSchedule.from_config(config)
    dt = 1.0 / fps
    now = 0.0
    play_frames = 0
    hold_frames = 0
    max_spread = 0.0

    # Playback takes 1/rate, then the hold, plus slack for frame rounding
    deadline = 1.0 / schedule.rate + schedule.wait + 2.0
    while now < deadline:
        now += dt
        frame = schedule.step(dt, now)
        if frame is None:
            hold_frames += 1
            continue
        if frame.restarted:
            break
        play_frames += 1
        rotations = frame.rotations
        max_spread = max(max_spread, rotations[InterpolationStrategy.LERP].angle_to(
            rotations[InterpolationStrategy.SLERP]))

    return {
        'play_seconds': play_frames * dt,
        'hold_seconds': hold_frames * dt,
        'max_lerp_spread_deg': max_spread,
    }


def replay_rigs(config: CaseConfig, seconds: float = 1.0, fps: float = 30.0) -> dict:
    """
    Hold each increasing key of the Euler and handle rigs for a while.

    Returns the resulting angles, the rotated forward axis of the Euler rig
    and the handle direction.
    """
    dt = 1.0 / fps
    frames = round(seconds * fps)

    euler = EulerController.from_config(config.euler)
    handle = HandleController.from_config(config.handle)
    for key in ("w", "s", "x"):
        for _ in range(frames):
            euler.step(dt, {key})
            handle.step(dt, {key})

    return {
        'euler': {
            'order': euler.order.value,
            'intrinsic': euler.intrinsic,
            'angles': [euler.x, euler.y, euler.z],
            'forward': (euler.rotation() * Vector3D.forward()).to_array().tolist(),
        },
        'handle': {
            'angles': [handle.spin, handle.pitch, handle.orbit],
            'direction': handle.handle_vector().to_array().tolist(),
        },
    }


def main():
    parser = argparse.ArgumentParser(description="Run Rotation Cross-Validation Case")
    parser.add_argument("case_file", type=str, help="Path to YAML case file or case directory")
    parser.add_argument("--verbose", action="store_true", help="Log degenerate-input warnings")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)

    case_path = Path(args.case_file).resolve()
    if not case_path.exists():
        print(f"Error: Case file not found: {case_path}")
        sys.exit(1)

    print(f"Loading case: {case_path.name}")
    try:
        case = CaseLoader.load_case(case_path)
    except Exception as e:
        print(f"Error loading case: {e}")
        sys.exit(1)

    config = case.config
    print(f"Case '{case.name}' loaded successfully.")

    # Cross-validation
    print("Running cross-validation against reference library...")
    reports = run_cross_validation(config.cross_validation)
    for report in reports.values():
        print_report(report)

    # Interpolation comparison
    rng = np.random.default_rng(config.interpolation.seed)
    start = Quaternion.random(rng)
    end = Quaternion.random(rng)
    trace = trace_interpolation(start, end, config.interpolation.num_steps)
    print(f"\nInterpolation: total angle {trace.total_angle:.2f} deg")
    for strategy in trace.angles:
        speed = trace.angular_speed(strategy)
        print(f"  {strategy.value:<12} speed min/max: {speed.min():8.2f} / {speed.max():8.2f} deg")

    # Interactive settings: one schedule cycle and a short rig replay
    playback = play_schedule(config.interpolation)
    print(f"\nSchedule (rate {config.interpolation.rate:g}, wait {config.interpolation.wait:g} s): "
          f"played {playback['play_seconds']:.2f} s, held {playback['hold_seconds']:.2f} s, "
          f"lerp spread up to {playback['max_lerp_spread_deg']:.3f} deg")
    rigs = replay_rigs(config)
    print(f"Euler rig ({rigs['euler']['order']}): angles {rigs['euler']['angles']}")
    print(f"Handle rig: angles {rigs['handle']['angles']}")

    # Export
    output_dir = case.output_dir
    exporter = ResultExporter(output_dir)
    if "csv" in config.output.formats:
        for name, report in reports.items():
            if report.samples:
                path = exporter.write_csv(f"{name}_samples.csv", report.to_rows())
                print(f"Saved: {path}")
    if "yaml" in config.output.formats:
        summary = {
            'case': case.name,
            'reports': {name: report.summary() for name, report in reports.items()},
            'interpolation': {
                'total_angle_deg': trace.total_angle,
                'max_lerp_deviation_deg': trace.max_deviation(InterpolationStrategy.LERP),
            },
            'schedule': playback,
            'rigs': rigs,
        }
        path = exporter.write_summary(summary)
        print(f"Saved: {path}")

    # Visualization
    if config.visualization.enabled:
        if not config.visualization.show:
            plt.switch_backend("Agg")
        print("Generating visualization...")
        comp = ComparisonVisualizer(output_dir=output_dir)
        comp.plot_error_distribution(list(reports.values()), title=f"{case.name} - Derived vs Reference")
        comp.save("cross_validation_errors.png", dpi=config.visualization.dpi)
        comp.plot_interpolation(trace)
        comp.save("interpolation.png", dpi=config.visualization.dpi)
        if config.visualization.show:
            plt.show()
        plt.close('all')

    failed = [name for name, report in reports.items() if not report.passed]
    if failed:
        print(f"FAILED: {', '.join(failed)}")
        sys.exit(1)

    print("Done.")


if __name__ == "__main__":
    main()
