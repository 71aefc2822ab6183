"""Construction-time validation of coordinate arrays."""

import logging
from typing import Sequence

import numpy as np

from pytabfunc.core.exceptions import (
    ArrayIsNotSortedError,
    DifferentLengthOfArraysError,
    InsufficientPointsError,
    NonFiniteValueError
)
from pytabfunc.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def check_length_is_the_same(x_values: Sequence[float], y_values: Sequence[float]) -> None:
    """Raise DifferentLengthOfArraysError unless both arrays have the same length."""
    if len(x_values) != len(y_values):
        logger.error("Array length mismatch: x(%d) != y(%d)", len(x_values), len(y_values))
        raise DifferentLengthOfArraysError(len(x_values), len(y_values))


def check_sorted(x_values: Sequence[float]) -> None:
    """Raise ArrayIsNotSortedError unless x_values is strictly increasing.

    Equal neighbours are a violation, and so is any comparison involving NaN.
    """
    for i in range(1, len(x_values)):
        if not x_values[i] > x_values[i - 1]:
            logger.error("x values not strictly increasing at index %d: %r -> %r",
                         i, x_values[i - 1], x_values[i])
            raise ArrayIsNotSortedError(i, x_values[i - 1], x_values[i])
    logger.debug("x values are strictly increasing (%d values)", len(x_values))


def check_min_count(count: int, min_points: int = ProcessingConstants.MIN_POINTS) -> None:
    """Raise InsufficientPointsError when count is below min_points."""
    if count < min_points:
        logger.error("Insufficient points: %d < %d", count, min_points)
        raise InsufficientPointsError(count, min_points)


def check_finite(values: Sequence[float], name: str = "x") -> None:
    """Raise NonFiniteValueError at the first NaN or infinite entry of values."""
    bad = np.flatnonzero(~np.isfinite(np.asarray(values, dtype=float)))
    if bad.size:
        index = int(bad[0])
        logger.error("Non-finite %s value at index %d: %r", name, index, values[index])
        raise NonFiniteValueError(name, values[index], index)


def check_finite_value(value: float, name: str = "y") -> float:
    """Return value as a float, raising NonFiniteValueError for NaN or infinity."""
    value = float(value)
    if not np.isfinite(value):
        logger.error("Non-finite %s value: %r", name, value)
        raise NonFiniteValueError(name, value)
    return value
