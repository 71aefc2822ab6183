"""Abstract base classes for PyTabFunc components."""

from abc import ABC, abstractmethod
from typing import Iterator

import numpy as np

from pytabfunc.core.floor_index import FloorIndex
from pytabfunc.core.point import Point


class MathFunction(ABC):
    """A real-valued function of one real variable.

    Instances are callable, so ``f(x)`` and ``f.apply(x)`` are equivalent.
    """

    @abstractmethod
    def apply(self, x: float) -> float:
        """Evaluate the function at x."""
        pass

    def __call__(self, x: float) -> float:
        return self.apply(x)

    def and_then(self, after: "MathFunction") -> "MathFunction":
        """Return the composite ``after(self(x))``."""
        from pytabfunc.functions.basic import CompositeFunction
        return CompositeFunction(self, after)


class TabulatedFunction(MathFunction):
    """A finite table of knots with strictly increasing x, evaluated by linear interpolation.

    Implementations also support in-place mutation through ``insert``,
    ``remove`` and ``set_y``.
    """

    @abstractmethod
    def get_count(self) -> int:
        pass

    @abstractmethod
    def get_x(self, index: int) -> float:
        pass

    @abstractmethod
    def get_y(self, index: int) -> float:
        pass

    @abstractmethod
    def set_y(self, index: int, value: float) -> None:
        pass

    @abstractmethod
    def index_of_x(self, x: float) -> int:
        """Index of the first knot whose x equals ``x`` exactly, or -1."""
        pass

    @abstractmethod
    def index_of_y(self, y: float) -> int:
        """Index of the first knot whose y equals ``y`` exactly, or -1."""
        pass

    @abstractmethod
    def left_bound(self) -> float:
        pass

    @abstractmethod
    def right_bound(self) -> float:
        pass

    @abstractmethod
    def floor_index_of_x(self, x: float) -> int:
        """Index i with ``x[i] <= x < x[i+1]``; 0 left of the table, count at or past its right end."""
        pass

    @abstractmethod
    def locate_x(self, x: float) -> FloorIndex:
        """Tagged counterpart of :meth:`floor_index_of_x`."""
        pass

    @abstractmethod
    def insert(self, x: float, y: float) -> None:
        pass

    @abstractmethod
    def remove(self, index: int) -> None:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Point]:
        pass

    @property
    def x_values(self) -> np.ndarray:
        """Copy of the knot abscissae as a float array."""
        return np.array([point.x for point in self], dtype=float)

    @property
    def y_values(self) -> np.ndarray:
        """Copy of the knot ordinates as a float array."""
        return np.array([point.y for point in self], dtype=float)

    def __len__(self) -> int:
        return self.get_count()
