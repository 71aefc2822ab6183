"""Unit tests for the exception hierarchy."""

import pytest

from pytabfunc.core.exceptions import (
    ArrayIsNotSortedError,
    DifferentLengthOfArraysError,
    InconsistentFunctionsError,
    IndexOutOfBoundsError,
    InsufficientPointsError,
    InterpolationError,
    NonFiniteValueError,
    TabulatedFunctionError,
    ZeroDerivativeError
)


class TestExceptionHierarchy:
    """Every library error is a TabulatedFunctionError and a matching builtin."""

    @pytest.mark.parametrize("error, builtin", [
        (DifferentLengthOfArraysError(1, 2), ValueError),
        (ArrayIsNotSortedError(1, 2.0, 1.0), ValueError),
        (InsufficientPointsError(1, 2), ValueError),
        (IndexOutOfBoundsError(5, 3), IndexError),
        (InterpolationError(3.0, 1.0, 2.0), ArithmeticError),
        (ZeroDerivativeError(0.0, 0), ArithmeticError),
        (InconsistentFunctionsError("grids differ"), ValueError),
        (NonFiniteValueError("y", float("inf"), 3), ValueError),
    ])
    def test_bases(self, error, builtin):
        assert isinstance(error, TabulatedFunctionError)
        assert isinstance(error, builtin)

    def test_attributes_and_messages(self):
        error = IndexOutOfBoundsError(5, 3)
        assert (error.index, error.count) == (5, 3)
        assert str(error) == "Index 5 out of bounds for table of size 3"

        error = ZeroDerivativeError(1.5, 4)
        assert error.x == 1.5
        assert error.iteration == 4
        assert "x = 1.5" in str(error)

        error = ArrayIsNotSortedError(2, 3.0, 3.0)
        assert error.index == 2
        assert "index 2" in str(error)
