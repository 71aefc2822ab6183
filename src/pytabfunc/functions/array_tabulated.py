import logging

import numpy as np

from pytabfunc.data.constants import ProcessingConstants
from pytabfunc.functions.abstract_tabulated import AbstractTabulatedFunction
from pytabfunc.validation.array_validator import check_finite_value, check_min_count

logger = logging.getLogger(__name__)


class ArrayTabulatedFunction(AbstractTabulatedFunction):
    """
    Tabulated function stored in two contiguous NumPy buffers.

    The buffers keep spare capacity; only the first ``count`` slots hold
    knots. Floor and exact-x lookups are binary searches, insertion and
    removal shift the tail of the buffers.
    """

    def _initialize(self, x_values: np.ndarray, y_values: np.ndarray) -> None:
        count = len(x_values)
        capacity = max(ProcessingConstants.INITIAL_CAPACITY, count)
        self._x = np.empty(capacity, dtype=float)
        self._y = np.empty(capacity, dtype=float)
        self._x[:count] = x_values
        self._y[:count] = y_values
        self._count = count
        logger.debug("Array storage initialized: count=%d, capacity=%d", count, capacity)

    @property
    def capacity(self) -> int:
        return len(self._x)

    def _grow(self) -> None:
        new_capacity = self.capacity * ProcessingConstants.GROWTH_FACTOR
        logger.debug("Growing array storage: %d -> %d", self.capacity, new_capacity)
        new_x = np.empty(new_capacity, dtype=float)
        new_y = np.empty(new_capacity, dtype=float)
        new_x[:self._count] = self._x[:self._count]
        new_y[:self._count] = self._y[:self._count]
        self._x, self._y = new_x, new_y

    def get_x(self, index: int) -> float:
        self._check_index(index)
        return float(self._x[index])

    def get_y(self, index: int) -> float:
        self._check_index(index)
        return float(self._y[index])

    def set_y(self, index: int, value: float) -> None:
        self._check_index(index)
        self._y[index] = check_finite_value(value, "y")

    def index_of_x(self, x: float) -> int:
        i = int(np.searchsorted(self._x[:self._count], x, side='left'))
        if i < self._count and self._x[i] == x:
            return i
        return -1

    def index_of_y(self, y: float) -> int:
        matches = np.flatnonzero(self._y[:self._count] == y)
        return int(matches[0]) if matches.size else -1

    def left_bound(self) -> float:
        return float(self._x[0])

    def right_bound(self) -> float:
        return float(self._x[self._count - 1])

    def floor_index_of_x(self, x: float) -> int:
        self._check_query(x)
        if x < self._x[0]:
            return 0
        if x >= self._x[self._count - 1]:
            return self._count
        return int(np.searchsorted(self._x[:self._count], x, side='right')) - 1

    def extrapolate_left(self, x: float) -> float:
        return self._linear(x, float(self._x[0]), float(self._x[1]),
                            float(self._y[0]), float(self._y[1]))

    def extrapolate_right(self, x: float) -> float:
        n = self._count
        return self._linear(x, float(self._x[n - 2]), float(self._x[n - 1]),
                            float(self._y[n - 2]), float(self._y[n - 1]))

    def interpolate_at(self, x: float, floor_index: int) -> float:
        return self.interpolate(x, float(self._x[floor_index]), float(self._x[floor_index + 1]),
                                float(self._y[floor_index]), float(self._y[floor_index + 1]))

    def insert(self, x: float, y: float) -> None:
        x, y = self._check_insertable(x, y)
        i = int(np.searchsorted(self._x[:self._count], x, side='left'))
        if i < self._count and self._x[i] == x:
            logger.debug("insert(%r): existing knot %d, replacing y", x, i)
            self._y[i] = y
            return
        if self._count == self.capacity:
            self._grow()
        n = self._count
        # slice assignment copies through a temporary when the ranges overlap
        self._x[i + 1:n + 1] = self._x[i:n]
        self._y[i + 1:n + 1] = self._y[i:n]
        self._x[i] = x
        self._y[i] = y
        self._count += 1
        logger.debug("insert(%r, %r): new knot at index %d, count=%d", x, y, i, self._count)

    def remove(self, index: int) -> None:
        self._check_index(index)
        check_min_count(self._count - 1)
        n = self._count
        self._x[index:n - 1] = self._x[index + 1:n]
        self._y[index:n - 1] = self._y[index + 1:n]
        self._count -= 1
        logger.debug("remove(%d): count=%d", index, self._count)

    @property
    def x_values(self) -> np.ndarray:
        return self._x[:self._count].copy()

    @property
    def y_values(self) -> np.ndarray:
        return self._y[:self._count].copy()
