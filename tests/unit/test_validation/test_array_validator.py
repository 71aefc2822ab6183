"""Unit tests for array validation functions."""

import math

import numpy as np
import pytest

from pytabfunc.core.exceptions import (
    ArrayIsNotSortedError,
    DifferentLengthOfArraysError,
    InsufficientPointsError,
    NonFiniteValueError
)
from pytabfunc.validation.array_validator import (
    check_finite,
    check_finite_value,
    check_length_is_the_same,
    check_min_count,
    check_sorted
)


class TestArrayValidator:
    """Test cases for array validation functions."""

    def test_same_length_accepted(self):
        check_length_is_the_same([1.0, 2.0], [3.0, 4.0])
        check_length_is_the_same(np.arange(5), np.zeros(5))

    def test_different_length_rejected(self):
        """Test that a length mismatch reports both lengths."""
        with pytest.raises(DifferentLengthOfArraysError, match="x has 3 values, y has 2") as exc_info:
            check_length_is_the_same([1.0, 2.0, 3.0], [1.0, 2.0])
        assert exc_info.value.x_len == 3
        assert exc_info.value.y_len == 2

    def test_strictly_increasing_accepted(self):
        check_sorted([-1.0, 0.0, 0.5, 100.0])
        check_sorted(np.array([1.1, 2.2, 3.3]))

    def test_trivial_arrays_are_sorted(self):
        check_sorted([])
        check_sorted([42.0])

    @pytest.mark.parametrize("values, index", [
        ([1.0, 2.0, 2.0, 3.0], 2),
        ([1.0, 3.0, 2.0, 4.0], 2),
        ([5.0, 4.0], 1),
    ])
    def test_violation_reports_first_index(self, values, index):
        """Test that equal or decreasing neighbours are rejected at the first offending index."""
        with pytest.raises(ArrayIsNotSortedError) as exc_info:
            check_sorted(values)
        assert exc_info.value.index == index

    def test_min_count(self):
        check_min_count(2)
        check_min_count(5, min_points=5)
        with pytest.raises(InsufficientPointsError, match="minimum required: 2"):
            check_min_count(1)
        with pytest.raises(InsufficientPointsError):
            check_min_count(4, min_points=5)

    def test_errors_are_value_errors(self):
        """Test that validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_sorted([2.0, 1.0])
        with pytest.raises(ValueError):
            check_length_is_the_same([1.0], [])

    @pytest.mark.parametrize("values, index", [
        ([1.0, math.nan, 3.0], 1),
        ([math.nan, 1.0], 1),
        ([0.0, 1.0, math.nan], 2),
    ])
    def test_nan_breaks_ordering(self, values, index):
        """Test that NaN never counts as greater than its predecessor."""
        with pytest.raises(ArrayIsNotSortedError) as exc_info:
            check_sorted(values)
        assert exc_info.value.index == index

    def test_finite_arrays_accepted(self):
        check_finite([0.0, -1e300, 1e300])
        check_finite(np.arange(4))

    @pytest.mark.parametrize("values, index", [
        ([1.0, math.inf], 1),
        ([math.nan, 0.0], 0),
        (np.array([0.0, 1.0, -np.inf]), 2),
    ])
    def test_non_finite_array_rejected(self, values, index):
        with pytest.raises(NonFiniteValueError, match="y must be finite") as exc_info:
            check_finite(values, "y")
        assert exc_info.value.index == index
        assert exc_info.value.name == "y"

    def test_finite_value(self):
        """Test scalar conversion and rejection."""
        assert check_finite_value(3) == 3.0
        assert isinstance(check_finite_value(np.float32(1.5)), float)
        with pytest.raises(NonFiniteValueError, match="x must be finite"):
            check_finite_value(math.nan, "x")
        with pytest.raises(ValueError):
            check_finite_value(-math.inf)
