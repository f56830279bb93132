"""Custom boundary conditions example.

This example demonstrates:
- Non-zero boundary velocities, accelerations and jerks
- Choosing between cubic and quintic polynomial fits
- Comparing the velocity curves of several shapes on one plot
- Handling construction errors
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from motion_segment import ConstructionError, create_segment
from motion_segment.visualize import plot_shape_comparison


def main():
    """Blend from 2 units/s to 4 units/s while covering 60 units in 5 seconds."""

    print("=" * 80)
    print("CUSTOM BOUNDARY CONDITIONS")
    print("=" * 80)

    t0, t1, distance, v0, vf = 0.0, 5.0, 60.0, 2.0, 4.0

    segments = {
        "triangular": create_segment("triangular", t0, t1, distance, v0, vf=vf),
        "trapezoidal (25% cruise)": create_segment(
            "trapezoidal", t0, t1, distance, v0, vf=vf, cruise_fraction=0.25
        ),
        "cubic polynomial": create_segment("polynomial", t0, t1, distance, v0, vf=vf),
        "quintic polynomial": create_segment(
            "polynomial", t0, t1, distance, v0, vf=vf, a0=1.0, af=-1.0
        ),
        "jerk-limited": create_segment(
            "jerk-limited", t0, t1, distance, v0, vf=vf, a0=1.0, af=-1.0, j0=0.0, jf=0.0
        ),
    }

    for name, segment in segments.items():
        print(
            f"{name:<26} v(t0)={segment.velocity(t0):7.3f}  v(t1)={segment.velocity(t1):7.3f}  "
            f"s(t1)={segment.position(t1):8.3f}  max|a|={segment.max_acceleration():7.3f}"
        )
        if segment.coefficients is not None:
            coeffs = ", ".join(f"{c:.4g}" for c in segment.coefficients)
            print(f"{'':<26} coefficients: [{coeffs}]")

    output = Path(__file__).parent / "custom_boundaries_velocity.png"
    plot_shape_comparison(segments, quantity="velocity", show=False, save_path=str(output))
    print(f"\n  Plot saved: {output}")

    print("\nInvalid parameters fail at construction:")
    try:
        create_segment("jerk-limited", t0, t1, distance, v0, vf=vf)
    except ConstructionError as exc:
        print(f"  ConstructionError: {exc}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
