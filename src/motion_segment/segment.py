"""Motion segment evaluator.

A :class:`MotionSegment` wraps validated :class:`SegmentOptions`, derives the
shape's parameters once when it is built, and evaluates position, velocity,
acceleration and jerk at arbitrary times.

Example:
    >>> from motion_segment import MotionSegment, SegmentOptions
    >>> seg = MotionSegment(
    ...     SegmentOptions(t0=0.0, t1=10.0, distance=100.0, v0=0.0, shape="constant")
    ... )
    >>> seg.velocity(10.0)
    20.0
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

import numpy as np

from motion_segment.models.options import SegmentOptions
from motion_segment.models.shape import SegmentShape
from motion_segment.profiles import (
    Boundaries,
    ShapeProfile,
    build_profile,
    resolve_boundaries,
)

logger = logging.getLogger(__name__)

# Equal steps used by the extrema scans (both endpoints are sampled)
EXTREMA_SAMPLE_STEPS = 100

# Default number of points returned by MotionSegment.sample
DEFAULT_SAMPLE_POINTS = EXTREMA_SAMPLE_STEPS + 1


@dataclass(frozen=True)
class MotionSegment:
    """A single bounded motion interval with an analytic position curve.

    All shape parameters and polynomial coefficients are derived while the
    segment is built and never change afterwards. Evaluation clamps the
    query time into ``[t0, t1]``, so times outside the interval return the
    boundary values and never raise.

    Args:
        options: Construction parameters, validated on creation

    Raises:
        ConstructionError: If the options are invalid or a polynomial fit fails
    """

    options: SegmentOptions
    _bounds: Boundaries = field(init=False, repr=False, compare=False)
    _profile: ShapeProfile = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        bounds = resolve_boundaries(self.options)
        profile = build_profile(self.options, bounds)
        object.__setattr__(self, "_bounds", bounds)
        object.__setattr__(self, "_profile", profile)
        logger.debug(
            "Built %s segment over [%g, %g] covering %g",
            self.shape.value,
            self.t0,
            self.t1,
            self.distance,
        )

    @property
    def shape(self) -> SegmentShape:
        return self.options.shape

    @property
    def t0(self) -> float:
        return self.options.t0

    @property
    def t1(self) -> float:
        return self.options.t1

    @property
    def duration(self) -> float:
        return self.options.duration

    @property
    def distance(self) -> float:
        return self.options.distance

    @property
    def v0(self) -> float:
        return self._bounds.v0

    @property
    def vf(self) -> float:
        """End velocity; derived from the acceleration for the constant shape."""
        return self._bounds.vf

    @property
    def a0(self) -> float:
        return self._bounds.a0

    @property
    def af(self) -> float:
        return self._bounds.af

    @property
    def j0(self) -> float:
        return self._bounds.j0

    @property
    def jf(self) -> float:
        return self._bounds.jf

    @property
    def cruise_fraction(self) -> Optional[float]:
        """Requested cruise share for trapezoidal segments, otherwise None."""
        if self.shape != SegmentShape.TRAPEZOIDAL:
            return None
        return self.options.cruise_fraction

    @property
    def coefficients(self) -> Optional[Tuple[float, ...]]:
        """Power-basis coefficients for polynomial and jerk-limited segments."""
        if self.shape.uses_polynomial_fit:
            return self._profile.coefficients
        return None

    @property
    def profile(self) -> ShapeProfile:
        """Derived shape parameters."""
        return self._profile

    def _clamp_dt(self, t: float) -> float:
        """Offset from t0 with t clamped into [t0, t1]."""
        if t < self.t0:
            return 0.0
        if t > self.t1:
            return self.duration
        return t - self.t0

    def position(self, t: float) -> float:
        """Displacement from the segment start at time t."""
        return self._profile.position(self._clamp_dt(t))

    def velocity(self, t: float) -> float:
        """Velocity at time t."""
        return self._profile.velocity(self._clamp_dt(t))

    def acceleration(self, t: float) -> float:
        """Acceleration at time t."""
        return self._profile.acceleration(self._clamp_dt(t))

    def jerk(self, t: float) -> float:
        """Jerk at time t.

        Shapes with piecewise-constant acceleration (constant, triangular,
        trapezoidal) report 0; the impulses at their phase boundaries are
        not represented.
        """
        if not self.shape.models_jerk:
            return 0.0
        return self._profile.jerk(self._clamp_dt(t))

    def _scan_times(self) -> np.ndarray:
        return np.linspace(self.t0, self.t1, EXTREMA_SAMPLE_STEPS + 1)

    def max_acceleration(self) -> float:
        """Largest absolute acceleration over a uniform scan of the segment.

        This is a sampled approximation: extrema falling between samples
        can be missed.
        """
        return max(abs(self.acceleration(t)) for t in self._scan_times())

    def max_jerk(self) -> float:
        """Largest absolute jerk over a uniform scan of the segment."""
        return max(abs(self.jerk(t)) for t in self._scan_times())

    def sample(
        self, num_points: int = DEFAULT_SAMPLE_POINTS
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Sample all four quantities at equally spaced times over [t0, t1].

        Args:
            num_points: Number of samples including both endpoints (at least 2)

        Returns:
            Arrays (times, position, velocity, acceleration, jerk)

        Raises:
            ValueError: If num_points is less than 2
        """
        if num_points < 2:
            raise ValueError(f"num_points must be >= 2, got {num_points}")

        times = np.linspace(self.t0, self.t1, num_points)
        position = np.array([self.position(t) for t in times])
        velocity = np.array([self.velocity(t) for t in times])
        acceleration = np.array([self.acceleration(t) for t in times])
        jerk = np.array([self.jerk(t) for t in times])
        return times, position, velocity, acceleration, jerk

    def summary(self) -> Dict[str, Union[str, float]]:
        """Final position and sampled extrema, keyed by name."""
        return {
            "shape": self.shape.value,
            "final_position": self.position(self.t1),
            "max_acceleration": self.max_acceleration(),
            "max_jerk": self.max_jerk(),
        }


def create_segment(
    shape: Union[SegmentShape, str],
    t0: float,
    t1: float,
    distance: float,
    v0: float,
    **optional: float,
) -> MotionSegment:
    """Build a MotionSegment from keyword parameters.

    Args:
        shape: Profile shape or its string tag (e.g. "s-curve")
        t0: Start time
        t1: End time
        distance: Total displacement
        v0: Start velocity
        **optional: Any of vf, a0, af, j0, jf, cruise_fraction

    Returns:
        The constructed segment

    Raises:
        ConstructionError: If the parameters are invalid
        TypeError: If an unknown keyword is passed

    Example:
        >>> seg = create_segment("triangular", 0.0, 10.0, 100.0, 0.0, vf=0.0)
        >>> seg.velocity(5.0)
        20.0
    """
    options = SegmentOptions(t0=t0, t1=t1, distance=distance, v0=v0, shape=shape, **optional)
    return MotionSegment(options)
