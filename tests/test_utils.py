"""Tests for unit conversions and vector helpers."""

import numpy as np
import pytest

from utils import (
    as_vec3, feet_to_meters, frozen, inches_to_meters, meters_to_feet,
    meters_to_inches, mph_to_mps, mps_to_mph, norm,
)


class TestUnitConversion:
    """Tests for scalar unit conversions."""

    def test_mph_to_mps(self):
        assert mph_to_mps(1.0) == pytest.approx(0.44704)
        assert mph_to_mps(95.0) == pytest.approx(42.4688)

    def test_mps_round_trip(self):
        assert mps_to_mph(mph_to_mps(87.5)) == pytest.approx(87.5)

    def test_inches_and_feet(self):
        assert inches_to_meters(12.0) == pytest.approx(feet_to_meters(1.0))
        assert meters_to_inches(0.0254) == pytest.approx(1.0)
        assert meters_to_feet(0.3048) == pytest.approx(1.0)

    def test_negative_values_keep_sign(self):
        """Breaks are signed, so conversions must not drop the sign."""
        assert inches_to_meters(-10.0) == pytest.approx(-0.254)


class TestVectors:
    """Tests for as_vec3 and friends."""

    def test_as_vec3_is_read_only(self):
        v = as_vec3([1, 2, 3])
        assert v.dtype == float
        with pytest.raises(ValueError):
            v[0] = 5.0

    def test_as_vec3_copies_input(self):
        src = np.array([1.0, 2.0, 3.0])
        v = as_vec3(src)
        src[0] = 9.0
        assert v[0] == 1.0

    def test_as_vec3_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="3 coordinates"):
            as_vec3([1.0, 2.0])

    def test_as_vec3_rejects_non_finite(self):
        with pytest.raises(ValueError, match="finite"):
            as_vec3([0.0, float("nan"), 1.0])
        with pytest.raises(ValueError, match="finite"):
            as_vec3([0.0, float("inf"), 1.0])

    def test_frozen_does_not_touch_source(self):
        src = np.array([1.0, 2.0, 3.0])
        v = frozen(src)
        assert not v.flags.writeable
        assert src.flags.writeable

    def test_norm(self):
        assert norm(np.array([3.0, 4.0, 0.0])) == pytest.approx(5.0)
