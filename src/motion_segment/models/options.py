"""Construction parameters for a motion segment."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Union

from motion_segment.errors import ConstructionError
from motion_segment.models.shape import SegmentShape

# Boundary derivatives the jerk-limited shape cannot default
JERK_LIMITED_REQUIRED = ("a0", "af", "j0", "jf")

# Fields every segment needs; they default to None only so omission is reported
REQUIRED_FIELDS = ("t0", "t1", "distance", "v0", "shape")


def _check_real(name: str, value: object) -> None:
    """Reject anything that is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConstructionError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConstructionError(f"{name} must be finite, got {value}")


def _coerce_shape(value: Union[SegmentShape, str]) -> SegmentShape:
    if isinstance(value, SegmentShape):
        return value
    if isinstance(value, str):
        try:
            return SegmentShape(value)
        except ValueError:
            pass
    raise ConstructionError(f"Unknown segment shape: {value!r}")


@dataclass(frozen=True)
class SegmentOptions:
    """Boundary conditions and shape selection for a single motion segment.

    Optional fields left as ``None`` are treated as "not supplied" and are
    defaulted per shape when the segment is built:

    - ``vf`` defaults to ``v0``. It must not be supplied for the constant
      shape, where it is derived from the constant acceleration.
    - ``a0``, ``af``, ``j0`` and ``jf`` default to 0, except for the
      jerk-limited shape which requires all four. Supplying both ``a0`` and
      ``af`` to the polynomial shape selects a quintic fit instead of a cubic.
    - ``cruise_fraction`` is only read by the trapezoidal shape. When absent,
      the cruise phase is the minimum feasible one.

    Attributes:
        t0: Segment start time
        t1: Segment end time, strictly greater than ``t0``
        distance: Total displacement over the segment (non-negative)
        v0: Start velocity (non-negative)
        shape: Profile shape, as a SegmentShape or its string tag
        vf: End velocity (non-negative)
        a0: Start acceleration
        af: End acceleration
        j0: Start jerk
        jf: End jerk
        cruise_fraction: Share of the duration spent cruising, strictly inside (0, 1)

    Raises:
        ConstructionError: If a required field is missing or any field violates
            its constraint
    """

    t0: Optional[float] = None
    t1: Optional[float] = None
    distance: Optional[float] = None
    v0: Optional[float] = None
    shape: Optional[Union[SegmentShape, str]] = None
    vf: Optional[float] = None
    a0: Optional[float] = None
    af: Optional[float] = None
    j0: Optional[float] = None
    jf: Optional[float] = None
    cruise_fraction: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate every field, failing on the first violated constraint."""
        missing = [name for name in REQUIRED_FIELDS if getattr(self, name) is None]
        if missing:
            raise ConstructionError(f"{', '.join(missing)} required")
        _check_real("t0", self.t0)
        _check_real("t1", self.t1)
        _check_real("distance", self.distance)
        _check_real("v0", self.v0)
        object.__setattr__(self, "shape", _coerce_shape(self.shape))
        for name in ("vf", "a0", "af", "j0", "jf", "cruise_fraction"):
            value = getattr(self, name)
            if value is not None:
                _check_real(name, value)

        if self.t0 >= self.t1:
            raise ConstructionError(f"t0 must be less than t1, got t0={self.t0}, t1={self.t1}")
        if self.distance < 0:
            raise ConstructionError(f"distance must be non-negative, got {self.distance}")
        if self.v0 < 0:
            raise ConstructionError(f"v0 must be non-negative, got {self.v0}")

        if self.shape == SegmentShape.CONSTANT:
            if self.vf is not None:
                raise ConstructionError("vf must not be provided for a constant segment")
        elif self.vf is not None and self.vf < 0:
            raise ConstructionError(f"vf must be non-negative, got {self.vf}")

        if self.shape == SegmentShape.JERK_LIMITED:
            missing = [name for name in JERK_LIMITED_REQUIRED if getattr(self, name) is None]
            if missing:
                raise ConstructionError(
                    f"{', '.join(missing)} required for a jerk-limited segment"
                )

        if self.shape == SegmentShape.TRAPEZOIDAL and self.cruise_fraction is not None:
            if not 0 < self.cruise_fraction < 1:
                raise ConstructionError(
                    f"cruise_fraction must be strictly between 0 and 1, "
                    f"got {self.cruise_fraction}"
                )

    @property
    def duration(self) -> float:
        """Segment duration ``t1 - t0``."""
        return self.t1 - self.t0
