"""Custom exceptions for pytabfunc core functionality."""
from pytabfunc.data.constants import ErrorMessages


class TabulatedFunctionError(Exception):
    """Base exception for all tabulated-function errors."""
    pass


class DifferentLengthOfArraysError(TabulatedFunctionError, ValueError):
    """Raised when x and y arrays passed to a constructor differ in length."""

    def __init__(self, x_len: int, y_len: int):
        self.x_len = x_len
        self.y_len = y_len
        super().__init__(ErrorMessages.DIFFERENT_LENGTHS.format(x_len=x_len, y_len=y_len))


class ArrayIsNotSortedError(TabulatedFunctionError, ValueError):
    """Raised when x values are not strictly increasing."""

    def __init__(self, index: int, previous: float, current: float):
        self.index = index
        super().__init__(ErrorMessages.NOT_SORTED.format(index=index, previous=previous, current=current))


class InsufficientPointsError(TabulatedFunctionError, ValueError):
    """Raised when a table would hold fewer points than the allowed minimum."""

    def __init__(self, count: int, min_points: int):
        self.count = count
        self.min_points = min_points
        super().__init__(ErrorMessages.INSUFFICIENT_POINTS.format(count=count, min_points=min_points))


class IndexOutOfBoundsError(TabulatedFunctionError, IndexError):
    """Raised on access with an index outside ``[0, count)``."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(ErrorMessages.INDEX_OUT_OF_BOUNDS.format(index=index, count=count))


class InterpolationError(TabulatedFunctionError, ArithmeticError):
    """Raised when the raw interpolation formula is asked for x outside its interval."""

    def __init__(self, x: float, left: float, right: float):
        self.x = x
        super().__init__(ErrorMessages.OUTSIDE_INTERVAL.format(x=x, left=left, right=right))


class ZeroDerivativeError(TabulatedFunctionError, ArithmeticError):
    """Raised by Newton's method when the derivative evaluates to exactly zero."""

    def __init__(self, x: float, iteration: int):
        self.x = x
        self.iteration = iteration
        super().__init__(ErrorMessages.ZERO_DERIVATIVE.format(x=x, iteration=iteration))


class InconsistentFunctionsError(TabulatedFunctionError, ValueError):
    """Raised when two tables combined pointwise do not share the same x grid."""
    pass


class NonFiniteValueError(TabulatedFunctionError, ValueError):
    """Raised when a NaN or infinite coordinate would enter a table."""

    def __init__(self, name: str, value: float, index: int = 0):
        self.name = name
        self.value = value
        self.index = index
        super().__init__(ErrorMessages.NON_FINITE.format(name=name, value=value, index=index))
