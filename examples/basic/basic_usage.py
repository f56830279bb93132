"""Basic usage example.

This example demonstrates:
- Building the reference segment for each of the six shapes
- Evaluating position, velocity, acceleration and jerk at a few times
- Printing the final position and sampled extrema
- Saving a four-panel plot per shape

This is the simplest way to use the motion segment library.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from motion_segment import SegmentShape
from motion_segment.presets import create_example_segment


def main():
    """Evaluate every reference segment: 100 units in 10 seconds from rest."""

    print("=" * 80)
    print("BASIC MOTION SEGMENT USAGE")
    print("=" * 80)

    for shape in SegmentShape:
        segment = create_example_segment(shape)
        summary = segment.summary()

        print(f"\n{shape.value.upper()}")
        print("-" * 80)
        print(f"{'Time':>8} {'Position':>12} {'Velocity':>12} {'Accel':>12} {'Jerk':>12}")
        for t in (0.0, 2.5, 5.0, 7.5, 10.0):
            print(
                f"{t:>8.2f} {segment.position(t):>12.4f} {segment.velocity(t):>12.4f} "
                f"{segment.acceleration(t):>12.4f} {segment.jerk(t):>12.4f}"
            )
        print(
            f"Final position: {summary['final_position']:.4f}  "
            f"Max accel: {summary['max_acceleration']:.4f}  "
            f"Max jerk: {summary['max_jerk']:.4f}"
        )

        generate_example_plot(shape.value.replace("-", "_"), segment)

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
