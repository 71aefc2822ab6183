"""Core data types, interfaces and exceptions for PyTabFunc."""

from .exceptions import (
    TabulatedFunctionError,
    DifferentLengthOfArraysError,
    ArrayIsNotSortedError,
    InsufficientPointsError,
    IndexOutOfBoundsError,
    InterpolationError,
    ZeroDerivativeError,
    InconsistentFunctionsError,
    NonFiniteValueError
)
from .floor_index import FloorIndex, FloorIndexKind
from .interfaces import MathFunction, TabulatedFunction
from .point import Point

__all__ = [
    "TabulatedFunctionError",
    "DifferentLengthOfArraysError",
    "ArrayIsNotSortedError",
    "InsufficientPointsError",
    "IndexOutOfBoundsError",
    "InterpolationError",
    "ZeroDerivativeError",
    "InconsistentFunctionsError",
    "NonFiniteValueError",
    "FloorIndex",
    "FloorIndexKind",
    "MathFunction",
    "TabulatedFunction",
    "Point"
]
