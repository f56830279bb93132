"""Reference segments for each shape, used by the examples and plots."""

from motion_segment.models.options import SegmentOptions
from motion_segment.models.shape import SegmentShape
from motion_segment.segment import MotionSegment

# Shared boundary conditions of the reference set: 100 units in 10 seconds
EXAMPLE_START_TIME = 0.0
EXAMPLE_END_TIME = 10.0
EXAMPLE_DISTANCE = 100.0


def create_example_options(shape: SegmentShape) -> SegmentOptions:
    """
    Create the reference rest-to-rest parameters for a shape.

    Each preset moves 100 units in 10 seconds starting from rest:
    - CONSTANT: end velocity is derived, so only v0 is given
    - TRAPEZOIDAL: one third of the duration is spent cruising
    - POLYNOMIAL: zero boundary accelerations select the quintic fit
    - JERK_LIMITED: all boundary accelerations and jerks are zero

    Args:
        shape: Shape to create parameters for

    Returns:
        SegmentOptions for the selected shape

    Examples:
        >>> opts = create_example_options(SegmentShape.TRAPEZOIDAL)
        >>> round(opts.cruise_fraction, 3)
        0.333
    """
    common = dict(
        t0=EXAMPLE_START_TIME,
        t1=EXAMPLE_END_TIME,
        distance=EXAMPLE_DISTANCE,
        v0=0.0,
        shape=shape,
    )
    if shape == SegmentShape.CONSTANT:
        return SegmentOptions(**common)
    elif shape in (SegmentShape.TRIANGULAR, SegmentShape.S_CURVE):
        return SegmentOptions(vf=0.0, **common)
    elif shape == SegmentShape.TRAPEZOIDAL:
        return SegmentOptions(vf=0.0, cruise_fraction=1 / 3, **common)
    elif shape == SegmentShape.POLYNOMIAL:
        return SegmentOptions(vf=0.0, a0=0.0, af=0.0, **common)
    elif shape == SegmentShape.JERK_LIMITED:
        return SegmentOptions(vf=0.0, a0=0.0, af=0.0, j0=0.0, jf=0.0, **common)
    else:
        raise ValueError(f"Unknown segment shape: {shape}")


def create_example_segment(shape: SegmentShape) -> MotionSegment:
    """Build the reference segment for a shape."""
    return MotionSegment(create_example_options(shape))
