#!/usr/bin/env python3
"""
Demo: Interpolation Strategies

Plays the interpolation schedule with a simulated clock: three strategies
run side by side from a random start to a random end, hold the end pose,
then restart with a new pair.

Also traces one pair densely and plots angle-from-start and angular speed,
where the lerp strategy's non-uniform speed is visible.

Usage:
    python demo_interpolation.py [--case CASE_FILE] [--seed S] [--show] [--save]
"""

import sys
import argparse
from pathlib import Path
import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rotations.config import InterpolationConfig
from rotations.control import InterpolationSchedule
from rotations.geometry import InterpolationStrategy, Quaternion, trace_interpolation
from rotations.io import CaseLoader
from visualization import ComparisonVisualizer

DEFAULT_CASE = Path(__file__).parent.parent / "cases" / "default"


def demo_schedule(config: InterpolationConfig, duration: float = 12.0, fps: float = 10.0):
    schedule = InterpolationSchedule.from_config(config)

    print("=" * 60)
    print(f"Interpolation Schedule (rate {schedule.rate:g}, wait {schedule.wait:g} s)")
    print("=" * 60)

    dt = 1.0 / fps
    now = 0.0
    held = 0
    steps = 0

    while now < duration:
        now += dt
        frame = schedule.step(dt, now)
        if frame is None:
            held += 1
            continue
        if frame.restarted:
            print(f"  t={now:5.1f}s  restart after holding {held} frames")
            held = 0
        steps += 1
        if steps % 10 == 0 or frame.progress == 1.0:
            spread = max(
                frame.rotations[s].angle_to(frame.rotations[InterpolationStrategy.SLERP])
                for s in InterpolationStrategy
            )
            print(f"  t={now:5.1f}s  progress={frame.progress:.2f}  "
                  f"max spread from slerp={spread:.3f} deg")


def demo_trace(seed, num_steps: int = 101, show: bool = True, save: bool = False):
    print("\n" + "=" * 60)
    print("Interpolation Trace")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    start = Quaternion.random(rng)
    end = Quaternion.random(rng)
    trace = trace_interpolation(start, end, num_steps=num_steps)

    print(f"  start: {start}")
    print(f"  end:   {end}")
    print(f"  total angle: {trace.total_angle:.2f} deg")
    for strategy in InterpolationStrategy:
        speed = trace.angular_speed(strategy)
        print(f"  {strategy.value:<12} speed {speed.min():8.2f} .. {speed.max():8.2f}, "
              f"max deviation from slerp {trace.max_deviation(strategy):.3f} deg")

    if not (show or save):
        return

    output_dir = Path(__file__).parent / "output"
    comp = ComparisonVisualizer(output_dir=output_dir)
    comp.plot_interpolation(trace)
    if save:
        comp.save("interpolation.png")
    if show:
        comp.show()
    comp.close()


def main():
    parser = argparse.ArgumentParser(description="Interpolation demo")
    parser.add_argument("--case", type=str, default=str(DEFAULT_CASE),
                        help="Case file or directory whose interpolation settings to use")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides the case)")
    parser.add_argument("--show", action="store_true", help="Display plot")
    parser.add_argument("--save", action="store_true", help="Save plot")
    args = parser.parse_args()

    config = CaseLoader.load_case(args.case).config.interpolation
    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    demo_schedule(config)
    demo_trace(config.seed, config.num_steps, args.show, args.save)

    print("\nDone.")


if __name__ == "__main__":
    main()
