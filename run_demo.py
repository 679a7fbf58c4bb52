#!/usr/bin/env python
"""
Convenience launcher for demos.

Run specific demo:
  python run_demo.py look
  python run_demo.py euler
  python run_demo.py interpolation
  python run_demo.py handle

Extra arguments are passed through:
  python run_demo.py look --pairs 10 --seed 3 --save

Or run from demos folder:
  python demos/demo_look_rotation.py
"""

import sys
from pathlib import Path

DEMO_DIR = Path(__file__).parent / "demos"

DEMOS = {
    "look": "demo_look_rotation.py",
    "euler": "demo_euler_orders.py",
    "interpolation": "demo_interpolation.py",
    "handle": "demo_handle.py",
}

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

def main():
    if len(sys.argv) < 2:
        print("Available demos:")
        for name in DEMOS:
            print(f"  python run_demo.py {name}")
        print("\nOr run directly:")
        print("  python demos/demo_look_rotation.py")
        sys.exit(1)

    demo = sys.argv[1].lower()

    if demo not in DEMOS:
        print(f"Unknown demo: {demo}")
        sys.exit(1)
    demo_file = DEMO_DIR / DEMOS[demo]

    if not demo_file.exists():
        print(f"Demo file not found: {demo_file}")
        sys.exit(1)

    # Demo sees its own arguments
    sys.argv = [str(demo_file)] + sys.argv[2:]

    # Execute the demo
    with open(demo_file) as f:
        code = f.read()

    exec(code, {"__name__": "__main__", "__file__": str(demo_file)})

if __name__ == "__main__":
    main()
