"""Core data models for motion segments.

This package contains the shape enumeration and the construction parameters.
"""

from motion_segment.models.options import (
    JERK_LIMITED_REQUIRED,
    REQUIRED_FIELDS,
    SegmentOptions,
)
from motion_segment.models.shape import SegmentShape

__all__ = [
    "SegmentOptions",
    "SegmentShape",
    "JERK_LIMITED_REQUIRED",
    "REQUIRED_FIELDS",
]
