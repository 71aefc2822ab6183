import logging
import math
from abc import abstractmethod
from typing import Iterator, Sequence, Tuple

import numpy as np

from pytabfunc.core.exceptions import IndexOutOfBoundsError, InterpolationError
from pytabfunc.core.floor_index import FloorIndex
from pytabfunc.core.interfaces import MathFunction, TabulatedFunction
from pytabfunc.core.point import Point
from pytabfunc.validation.array_validator import (
    check_finite,
    check_finite_value,
    check_length_is_the_same,
    check_min_count,
    check_sorted
)

logger = logging.getLogger(__name__)


class AbstractTabulatedFunction(TabulatedFunction):
    """
    Shared algorithm skeleton for tabulated functions.

    Subclasses own the storage and provide element access, the floor search
    and the boundary-segment extrapolation; this class implements the
    evaluation dispatch in ``apply``, the linear formula, construction-time
    validation and the textual form.

    Both construction paths end in ``_initialize(x_values, y_values)``, which
    subclasses implement to fill their storage from two float arrays that
    are already known to be valid.
    """

    check_length_is_the_same = staticmethod(check_length_is_the_same)
    check_sorted = staticmethod(check_sorted)

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        self._count = 0
        check_length_is_the_same(x_values, y_values)
        check_min_count(len(x_values))
        x_array = np.asarray(x_values, dtype=float)
        y_array = np.asarray(y_values, dtype=float)
        check_sorted(x_array)
        check_finite(x_array, "x")
        check_finite(y_array, "y")
        self._initialize(x_array, y_array)
        logger.info("%s created from arrays: %d points, bounds [%r, %r]",
                    type(self).__name__, self._count, self.left_bound(), self.right_bound())

    @classmethod
    def from_function(cls, source: MathFunction, x_from: float, x_to: float, count: int):
        """
        Tabulate ``source`` on ``count`` equally spaced points of ``[x_from, x_to]``.

        The bounds are swapped when ``x_from > x_to``. When they are equal every
        point has the same x and the value ``source(x_from)``.

        Args:
            source: Function to sample.
            x_from: One end of the sampling interval.
            x_to: The other end.
            count: Number of points, at least ``ProcessingConstants.MIN_POINTS``.
        Returns:
            A new instance of ``cls``.
        """
        check_min_count(count)
        x_array, y_array = cls._sample(source, x_from, x_to, count)
        check_finite(x_array, "x")
        check_finite(y_array, "y")
        instance = cls.__new__(cls)
        instance._count = 0
        instance._initialize(x_array, y_array)
        logger.info("%s created from %r: %d points on [%r, %r]",
                    cls.__name__, source, count, instance.left_bound(), instance.right_bound())
        return instance

    @staticmethod
    def _sample(source: MathFunction, x_from: float, x_to: float, count: int) -> Tuple[np.ndarray, np.ndarray]:
        if x_from > x_to:
            logger.debug("Sampling bounds swapped: [%r, %r]", x_to, x_from)
            x_from, x_to = x_to, x_from
        if x_from == x_to:
            logger.debug("Degenerate sampling interval at x=%r", x_from)
            x_array = np.full(count, float(x_from))
            y_array = np.full(count, float(source(x_from)))
        else:
            x_array = np.linspace(x_from, x_to, count)
            y_array = np.array([source(float(x)) for x in x_array], dtype=float)
        return x_array, y_array

    # --- Storage hooks ---
    @abstractmethod
    def _initialize(self, x_values: np.ndarray, y_values: np.ndarray) -> None:
        pass

    @abstractmethod
    def extrapolate_left(self, x: float) -> float:
        pass

    @abstractmethod
    def extrapolate_right(self, x: float) -> float:
        pass

    @abstractmethod
    def interpolate_at(self, x: float, floor_index: int) -> float:
        """Interpolate on the segment starting at knot ``floor_index``."""
        pass

    # --- Shared behaviour ---
    def get_count(self) -> int:
        return self._count

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexOutOfBoundsError(index, self._count)

    @staticmethod
    def _check_insertable(x: float, y: float) -> Tuple[float, float]:
        return check_finite_value(x, "x"), check_finite_value(y, "y")

    def locate_x(self, x: float) -> FloorIndex:
        return FloorIndex.from_raw(self.floor_index_of_x(x), self._count, x < self.left_bound())

    @staticmethod
    def _linear(x: float, left_x: float, right_x: float, left_y: float, right_y: float) -> float:
        if right_x == left_x:
            return left_y
        return left_y + (right_y - left_y) * (x - left_x) / (right_x - left_x)

    def interpolate(self, x: float, left_x: float, right_x: float, left_y: float, right_y: float) -> float:
        """Linear blend between ``(left_x, left_y)`` and ``(right_x, right_y)``.

        Raises InterpolationError when x is outside ``[left_x, right_x]``.
        """
        if x < left_x or x > right_x:
            raise InterpolationError(x, left_x, right_x)
        return self._linear(x, left_x, right_x, left_y, right_y)

    @staticmethod
    def _check_query(x: float) -> None:
        if math.isnan(x):
            raise ValueError("Cannot evaluate a tabulated function at NaN")

    def apply(self, x: float) -> float:
        self._check_query(x)
        if x < self.left_bound():
            return self.extrapolate_left(x)
        if x > self.right_bound():
            return self.extrapolate_right(x)
        index = self.index_of_x(x)
        if index != -1:
            return self.get_y(index)
        floor_index = self.floor_index_of_x(x)
        logger.debug("apply(%r): interpolating on segment %d", x, floor_index)
        return self.interpolate_at(x, floor_index)

    def __iter__(self) -> Iterator[Point]:
        for i in range(self._count):
            yield Point(self.get_x(i), self.get_y(i))

    def __str__(self) -> str:
        lines = [f"{type(self).__name__} size = {self._count}\n"]
        for point in self:
            lines.append(f"[{point.x!r}; {point.y!r}]\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} count={self._count}>"

