"""Analytic motion segments: position, velocity, acceleration and jerk profiles."""

from .errors import ConstructionError, SingularSystemError
from .linalg import solve_linear_system
from .models import SegmentOptions, SegmentShape
from .segment import MotionSegment, create_segment

__all__ = [
    "MotionSegment",
    "SegmentOptions",
    "SegmentShape",
    "ConstructionError",
    "SingularSystemError",
    "create_segment",
    "solve_linear_system",
]
