"""Closed-form formula families for each segment shape.

Every profile is a frozen set of parameters derived once from the segment's
boundary conditions. Its ``position``, ``velocity``, ``acceleration`` and
``jerk`` methods take the offset ``dt`` from the segment start, already
clamped to ``[0, T]`` by the caller.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Union

from motion_segment.models.options import SegmentOptions
from motion_segment.models.shape import SegmentShape
from motion_segment.polynomial import evaluate_polynomial, fit_boundary_polynomial

logger = logging.getLogger(__name__)

# Relative tolerance (of the distance) within which the ramps count as covering it exactly
CRUISE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Boundaries:
    """Boundary conditions after per-shape defaulting.

    Attributes:
        v0: Start velocity
        vf: End velocity (derived for the constant shape)
        a0: Start acceleration (derived for the constant shape)
        af: End acceleration (derived for the constant shape)
        j0: Start jerk
        jf: End jerk
    """

    v0: float
    vf: float
    a0: float
    af: float
    j0: float
    jf: float


def resolve_boundaries(options: SegmentOptions) -> Boundaries:
    """Apply the per-shape defaulting rules to the supplied boundary values."""
    j0 = 0.0 if options.j0 is None else float(options.j0)
    jf = 0.0 if options.jf is None else float(options.jf)
    v0 = float(options.v0)

    if options.shape == SegmentShape.CONSTANT:
        # distance = v0*T + a*T^2/2
        duration = options.duration
        accel = 2.0 * (options.distance - v0 * duration) / duration**2
        return Boundaries(v0=v0, vf=v0 + accel * duration, a0=accel, af=accel, j0=j0, jf=jf)

    return Boundaries(
        v0=v0,
        vf=v0 if options.vf is None else float(options.vf),
        a0=0.0 if options.a0 is None else float(options.a0),
        af=0.0 if options.af is None else float(options.af),
        j0=j0,
        jf=jf,
    )


@dataclass(frozen=True)
class ConstantProfile:
    """Constant acceleration over the whole segment."""

    v0: float
    accel: float

    def position(self, dt: float) -> float:
        return self.v0 * dt + 0.5 * self.accel * dt * dt

    def velocity(self, dt: float) -> float:
        return self.v0 + self.accel * dt

    def acceleration(self, dt: float) -> float:
        return self.accel

    def jerk(self, dt: float) -> float:
        return 0.0


@dataclass(frozen=True)
class TriangularProfile:
    """Accelerate to a peak velocity at the midpoint, then decelerate.

    Both phases last ``T/2``. The peak velocity is chosen so the segment
    covers exactly ``distance``; for a rest-to-rest move it is ``2*distance/T``.

    Attributes:
        v0: Start velocity
        peak_velocity: Velocity reached at the switch time
        switch_time: Offset of the peak, ``T/2``
        accel: Acceleration of the first half
        decel: Acceleration of the second half (negative when slowing down)
    """

    v0: float
    peak_velocity: float
    switch_time: float
    accel: float
    decel: float

    def position(self, dt: float) -> float:
        if dt < self.switch_time:
            return self.v0 * dt + 0.5 * self.accel * dt * dt
        d1 = self.v0 * self.switch_time + 0.5 * self.accel * self.switch_time**2
        dt2 = dt - self.switch_time
        return d1 + self.peak_velocity * dt2 + 0.5 * self.decel * dt2 * dt2

    def velocity(self, dt: float) -> float:
        if dt < self.switch_time:
            return self.v0 + self.accel * dt
        return self.peak_velocity + self.decel * (dt - self.switch_time)

    def acceleration(self, dt: float) -> float:
        return self.accel if dt < self.switch_time else self.decel

    def jerk(self, dt: float) -> float:
        return 0.0


@dataclass(frozen=True)
class TrapezoidalProfile:
    """Three phases: accelerate, cruise at constant velocity, decelerate.

    Attributes:
        v0: Start velocity
        cruise_velocity: Velocity held during the cruise phase
        accel_duration: Length of the acceleration phase
        cruise_duration: Length of the cruise phase (0 when degraded)
        decel_duration: Length of the deceleration phase
        accel: Acceleration during the first phase
        decel: Acceleration during the last phase
        degraded: True when no cruise phase fits and the profile fell back
            to a zero-cruise triangular shape
    """

    v0: float
    cruise_velocity: float
    accel_duration: float
    cruise_duration: float
    decel_duration: float
    accel: float
    decel: float
    degraded: bool = False

    @property
    def cruise_start(self) -> float:
        """Offset at which the cruise phase begins."""
        return self.accel_duration

    @property
    def cruise_end(self) -> float:
        """Offset at which the deceleration phase begins."""
        return self.accel_duration + self.cruise_duration

    def position(self, dt: float) -> float:
        d1 = self.v0 * self.accel_duration + 0.5 * self.accel * self.accel_duration**2
        if dt < self.cruise_start:
            return self.v0 * dt + 0.5 * self.accel * dt * dt
        if dt < self.cruise_end:
            return d1 + self.cruise_velocity * (dt - self.cruise_start)
        d2 = self.cruise_velocity * self.cruise_duration
        dt3 = dt - self.cruise_end
        return d1 + d2 + self.cruise_velocity * dt3 + 0.5 * self.decel * dt3 * dt3

    def velocity(self, dt: float) -> float:
        if dt < self.cruise_start:
            return self.v0 + self.accel * dt
        if dt < self.cruise_end:
            return self.cruise_velocity
        return self.cruise_velocity + self.decel * (dt - self.cruise_end)

    def acceleration(self, dt: float) -> float:
        if dt < self.cruise_start:
            return self.accel
        if dt < self.cruise_end:
            return 0.0
        return self.decel

    def jerk(self, dt: float) -> float:
        return 0.0


@dataclass(frozen=True)
class SCurveProfile:
    """Cubic Hermite blend ``distance * (3x^2 - 2x^3)`` with ``x = dt / T``.

    The blend starts and ends at rest; boundary velocities and accelerations
    of the segment do not enter the formula.
    """

    distance: float
    duration: float

    def _x(self, dt: float) -> float:
        return max(0.0, min(1.0, dt / self.duration))

    def position(self, dt: float) -> float:
        x = self._x(dt)
        return self.distance * (3 * x * x - 2 * x * x * x)

    def velocity(self, dt: float) -> float:
        x = self._x(dt)
        return self.distance * (6 * x - 6 * x * x) / self.duration

    def acceleration(self, dt: float) -> float:
        x = self._x(dt)
        return self.distance * (6 - 12 * x) / self.duration**2

    def jerk(self, dt: float) -> float:
        return -12 * self.distance / self.duration**3


@dataclass(frozen=True)
class PolynomialProfile:
    """Power-basis polynomial in ``dt`` with coefficients fitted at construction."""

    coefficients: Tuple[float, ...]

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def position(self, dt: float) -> float:
        return evaluate_polynomial(self.coefficients, dt, 0)

    def velocity(self, dt: float) -> float:
        return evaluate_polynomial(self.coefficients, dt, 1)

    def acceleration(self, dt: float) -> float:
        return evaluate_polynomial(self.coefficients, dt, 2)

    def jerk(self, dt: float) -> float:
        return evaluate_polynomial(self.coefficients, dt, 3)


ShapeProfile = Union[
    ConstantProfile,
    TriangularProfile,
    TrapezoidalProfile,
    SCurveProfile,
    PolynomialProfile,
]


def _build_constant(options: SegmentOptions, bounds: Boundaries) -> ConstantProfile:
    return ConstantProfile(v0=bounds.v0, accel=bounds.a0)


def _build_triangular(options: SegmentOptions, bounds: Boundaries) -> TriangularProfile:
    duration = options.duration
    half = duration / 2
    # Both halves contribute (v_start + v_peak) * T/4 to the distance
    peak = 2 * options.distance / duration - (bounds.v0 + bounds.vf) / 2
    return TriangularProfile(
        v0=bounds.v0,
        peak_velocity=peak,
        switch_time=half,
        accel=(peak - bounds.v0) / half,
        decel=(bounds.vf - peak) / half,
    )


def ramp_overshoots(distance: float, ramp_distance: float, peak_velocity: float) -> bool:
    """Whether the ramps alone cover more than ``distance``, leaving a negative cruise.

    The residual is judged relative to the magnitudes involved so rounding
    noise never counts as an overshoot. An overshoot is logged as a fallback
    to a zero-cruise (triangular) profile.
    """
    remaining = distance - ramp_distance
    scale = max(abs(distance), abs(ramp_distance))
    if remaining >= -CRUISE_TOLERANCE * scale:
        return False
    logger.warning(
        "No cruise phase fits trapezoidal segment (ramps overshoot by %.6g); "
        "falling back to a triangular profile with peak velocity %.6g",
        -remaining,
        peak_velocity,
    )
    return True


def _build_trapezoidal(options: SegmentOptions, bounds: Boundaries) -> TrapezoidalProfile:
    duration = options.duration
    distance = options.distance
    v0, vf = bounds.v0, bounds.vf

    if options.cruise_fraction is not None:
        cruise = options.cruise_fraction * duration
        ramp = (duration - cruise) / 2
        # distance = ramp/2*(v0 + vmax) + cruise*vmax + ramp/2*(vmax + vf)
        vmax = (distance - ramp / 2 * v0 - ramp / 2 * vf) / (ramp + cruise)
        return TrapezoidalProfile(
            v0=v0,
            cruise_velocity=vmax,
            accel_duration=ramp,
            cruise_duration=cruise,
            decel_duration=ramp,
            accel=(vmax - v0) / ramp,
            decel=(vf - vmax) / ramp,
        )

    # Minimum cruise velocity with symmetric ramps over T/2 each; the ramps
    # cover the distance exactly, so there is never any cruise phase
    half = duration / 2
    vmax = 2 * (distance - duration / 4 * (v0 + vf)) / duration
    ramp_distance = (v0 + vmax) * half / 2 + (vf + vmax) * half / 2
    degraded = ramp_overshoots(distance, ramp_distance, vmax)

    return TrapezoidalProfile(
        v0=v0,
        cruise_velocity=vmax,
        accel_duration=half,
        cruise_duration=0.0,
        decel_duration=half,
        accel=(vmax - v0) / half,
        decel=(vf - vmax) / half,
        degraded=degraded,
    )


def _build_s_curve(options: SegmentOptions, bounds: Boundaries) -> SCurveProfile:
    return SCurveProfile(distance=float(options.distance), duration=options.duration)


def _build_polynomial(options: SegmentOptions, bounds: Boundaries) -> PolynomialProfile:
    start = [0.0, bounds.v0]
    end = [float(options.distance), bounds.vf]
    # Quintic only when both boundary accelerations were supplied
    if options.a0 is not None and options.af is not None:
        start.append(bounds.a0)
        end.append(bounds.af)
    return PolynomialProfile(fit_boundary_polynomial(options.duration, start, end))


def _build_jerk_limited(options: SegmentOptions, bounds: Boundaries) -> PolynomialProfile:
    start = (0.0, bounds.v0, bounds.a0, bounds.j0)
    end = (float(options.distance), bounds.vf, bounds.af, bounds.jf)
    return PolynomialProfile(fit_boundary_polynomial(options.duration, start, end))


_BUILDERS: Dict[SegmentShape, Callable[[SegmentOptions, Boundaries], ShapeProfile]] = {
    SegmentShape.CONSTANT: _build_constant,
    SegmentShape.TRIANGULAR: _build_triangular,
    SegmentShape.TRAPEZOIDAL: _build_trapezoidal,
    SegmentShape.S_CURVE: _build_s_curve,
    SegmentShape.POLYNOMIAL: _build_polynomial,
    SegmentShape.JERK_LIMITED: _build_jerk_limited,
}


def build_profile(options: SegmentOptions, bounds: Boundaries) -> ShapeProfile:
    """Derive the formula parameters for the shape selected in ``options``.

    Args:
        options: Validated construction parameters
        bounds: Boundary conditions resolved by :func:`resolve_boundaries`

    Returns:
        The shape's profile, ready for repeated evaluation

    Raises:
        SingularSystemError: If a polynomial fit has no unique solution
    """
    return _BUILDERS[options.shape](options, bounds)
