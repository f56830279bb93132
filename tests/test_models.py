"""Tests for segment construction parameters."""

import dataclasses
import math

import pytest

from motion_segment.errors import ConstructionError
from motion_segment.models import SegmentOptions, SegmentShape


def make_options(**overrides):
    """Rest-to-rest trapezoidal options with selected fields replaced."""
    params = dict(t0=0.0, t1=10.0, distance=100.0, v0=0.0, shape=SegmentShape.TRAPEZOIDAL)
    params.update(overrides)
    return SegmentOptions(**params)


class TestSegmentShape:
    """Tests for the SegmentShape enumeration."""

    def test_six_shapes(self):
        assert len(SegmentShape) == 6

    def test_string_tags(self):
        assert SegmentShape("s-curve") is SegmentShape.S_CURVE
        assert SegmentShape("jerk-limited") is SegmentShape.JERK_LIMITED

    def test_polynomial_fit_shapes(self):
        fitted = {shape for shape in SegmentShape if shape.uses_polynomial_fit}
        assert fitted == {SegmentShape.POLYNOMIAL, SegmentShape.JERK_LIMITED}

    def test_jerk_modelling_shapes(self):
        """Piecewise-constant acceleration shapes do not model jerk."""
        assert not SegmentShape.CONSTANT.models_jerk
        assert not SegmentShape.TRIANGULAR.models_jerk
        assert not SegmentShape.TRAPEZOIDAL.models_jerk
        assert SegmentShape.S_CURVE.models_jerk


class TestSegmentOptions:
    """Tests for SegmentOptions validation and defaults."""

    def test_valid_options_creation(self):
        """Required fields are stored and optional ones default to None."""
        opts = make_options()
        assert opts.t0 == 0.0
        assert opts.t1 == 10.0
        assert opts.distance == 100.0
        assert opts.v0 == 0.0
        assert opts.shape is SegmentShape.TRAPEZOIDAL
        assert opts.vf is None
        assert opts.a0 is None
        assert opts.cruise_fraction is None

    def test_duration(self):
        assert make_options(t0=2.0, t1=7.5).duration == pytest.approx(5.5)

    def test_shape_string_is_coerced(self):
        opts = make_options(shape="triangular")
        assert opts.shape is SegmentShape.TRIANGULAR

    def test_unknown_shape_string_raises_error(self):
        with pytest.raises(ConstructionError, match="Unknown segment shape"):
            make_options(shape="sinusoidal")

    def test_non_string_shape_raises_error(self):
        with pytest.raises(ConstructionError, match="Unknown segment shape"):
            make_options(shape=3)

    def test_equal_times_raise_error(self):
        with pytest.raises(ConstructionError, match="t0 must be less than t1"):
            make_options(t0=5.0, t1=5.0)

    def test_reversed_times_raise_error(self):
        with pytest.raises(ConstructionError, match="t0 must be less than t1"):
            make_options(t0=10.0, t1=0.0)

    def test_negative_distance_raises_error(self):
        with pytest.raises(ConstructionError, match="distance must be non-negative"):
            make_options(distance=-1.0)

    def test_zero_distance_is_valid(self):
        assert make_options(distance=0.0).distance == 0.0

    def test_negative_start_velocity_raises_error(self):
        with pytest.raises(ConstructionError, match="v0 must be non-negative"):
            make_options(v0=-1.0)

    def test_nan_time_raises_error(self):
        with pytest.raises(ConstructionError, match="t0 must be finite"):
            make_options(t0=math.nan)

    def test_infinite_distance_raises_error(self):
        with pytest.raises(ConstructionError, match="distance must be finite"):
            make_options(distance=math.inf)

    def test_non_numeric_distance_raises_error(self):
        with pytest.raises(ConstructionError, match="distance must be a number"):
            make_options(distance="100")

    def test_boolean_velocity_raises_error(self):
        with pytest.raises(ConstructionError, match="v0 must be a number"):
            make_options(v0=True)

    def test_integer_values_are_accepted(self):
        opts = make_options(t0=0, t1=10, distance=100, v0=0)
        assert opts.duration == 10

    def test_constant_shape_rejects_end_velocity(self):
        with pytest.raises(ConstructionError, match="vf must not be provided"):
            make_options(shape=SegmentShape.CONSTANT, vf=0.0)

    def test_negative_end_velocity_raises_error(self):
        with pytest.raises(ConstructionError, match="vf must be non-negative"):
            make_options(vf=-0.5)

    def test_non_numeric_optional_field_raises_error(self):
        with pytest.raises(ConstructionError, match="a0 must be a number"):
            make_options(a0="fast")

    def test_jerk_limited_requires_all_boundary_derivatives(self):
        with pytest.raises(ConstructionError, match="required for a jerk-limited segment"):
            make_options(shape=SegmentShape.JERK_LIMITED, vf=0.0)

    def test_jerk_limited_names_missing_field(self):
        with pytest.raises(ConstructionError, match="^jf required"):
            make_options(shape=SegmentShape.JERK_LIMITED, a0=0.0, af=0.0, j0=0.0)

    def test_jerk_limited_accepts_negative_derivatives(self):
        """Signs of boundary accelerations and jerks are unconstrained."""
        opts = make_options(shape=SegmentShape.JERK_LIMITED, a0=-1.0, af=-2.0, j0=-0.5, jf=-3.0)
        assert opts.af == -2.0

    @pytest.mark.parametrize("fraction", [0.0, 1.0, -0.1, 1.1])
    def test_cruise_fraction_outside_open_interval_raises_error(self, fraction):
        with pytest.raises(ConstructionError, match="cruise_fraction must be strictly between"):
            make_options(cruise_fraction=fraction)

    def test_cruise_fraction_inside_interval_is_valid(self):
        assert make_options(cruise_fraction=0.5).cruise_fraction == 0.5

    def test_cruise_fraction_ignored_for_other_shapes(self):
        opts = make_options(shape=SegmentShape.TRIANGULAR, cruise_fraction=1.0)
        assert opts.cruise_fraction == 1.0

    def test_omitted_field_raises_error(self):
        with pytest.raises(ConstructionError, match="^t0 required"):
            SegmentOptions(t1=10.0, distance=100.0, v0=0.0, shape="triangular")

    def test_omitted_shape_raises_error(self):
        with pytest.raises(ConstructionError, match="^shape required"):
            SegmentOptions(t0=0.0, t1=10.0, distance=100.0, v0=0.0)

    def test_all_required_fields_reported(self):
        with pytest.raises(ConstructionError, match="t0, t1, distance, v0, shape required"):
            SegmentOptions()

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_options(distance=-1.0)

    def test_options_immutability(self):
        """SegmentOptions is a frozen dataclass."""
        opts = make_options()
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.distance = 50.0
