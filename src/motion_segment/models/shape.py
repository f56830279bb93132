"""Motion segment shape enumeration."""

from enum import Enum


class SegmentShape(Enum):
    """Functional family used to interpolate between boundary conditions."""

    CONSTANT = "constant"  # Constant acceleration, end velocity derived
    TRIANGULAR = "triangular"  # Accelerate to a peak at the midpoint, then decelerate
    TRAPEZOIDAL = "trapezoidal"  # Accelerate, cruise, decelerate
    S_CURVE = "s-curve"  # Cubic Hermite blend 3x^2 - 2x^3
    POLYNOMIAL = "polynomial"  # Cubic or quintic boundary fit
    JERK_LIMITED = "jerk-limited"  # 7th-order fit with jerk boundaries

    @property
    def uses_polynomial_fit(self) -> bool:
        """Whether this shape solves a boundary-condition system."""
        return self in (SegmentShape.POLYNOMIAL, SegmentShape.JERK_LIMITED)

    @property
    def models_jerk(self) -> bool:
        """Whether jerk is represented explicitly (otherwise it is reported as 0)."""
        return self in (
            SegmentShape.S_CURVE,
            SegmentShape.POLYNOMIAL,
            SegmentShape.JERK_LIMITED,
        )
