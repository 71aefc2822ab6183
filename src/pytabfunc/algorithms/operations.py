import logging
import operator
from typing import Callable, List, Optional

from pytabfunc.core.exceptions import InconsistentFunctionsError
from pytabfunc.core.interfaces import TabulatedFunction
from pytabfunc.core.point import Point
from pytabfunc.functions.factory import ArrayTabulatedFunctionFactory, TabulatedFunctionFactory

logger = logging.getLogger(__name__)


class TabulatedFunctionOperationService:
    """Snapshot conversion and pointwise arithmetic over tabulated functions.

    Arithmetic results are built with ``factory`` (array-backed by default).
    """

    def __init__(self, factory: Optional[TabulatedFunctionFactory] = None):
        self.factory = factory or ArrayTabulatedFunctionFactory()

    @staticmethod
    def as_points(function: TabulatedFunction) -> List[Point]:
        """Knots of ``function`` in index order, as an independent list."""
        points = list(function)
        logger.debug("as_points: %d points from %s", len(points), type(function).__name__)
        return points

    def _combine(self, first: TabulatedFunction, second: TabulatedFunction,
                 op: Callable[[float, float], float], name: str) -> TabulatedFunction:
        if first.get_count() != second.get_count():
            logger.error("Cannot %s tables of different size: %d vs %d",
                         name, first.get_count(), second.get_count())
            raise InconsistentFunctionsError(
                f"Cannot {name} tables of different size: {first.get_count()} vs {second.get_count()}")
        first_points = self.as_points(first)
        second_points = self.as_points(second)
        x_values, y_values = [], []
        for i, (a, b) in enumerate(zip(first_points, second_points)):
            if a.x != b.x:
                logger.error("x grids differ at index %d: %r vs %r", i, a.x, b.x)
                raise InconsistentFunctionsError(f"x grids differ at index {i}: {a.x} vs {b.x}")
            x_values.append(a.x)
            y_values.append(op(a.y, b.y))
        logger.info("Computed pointwise %s of %d points", name, len(x_values))
        return self.factory.create(x_values, y_values)

    def add(self, first: TabulatedFunction, second: TabulatedFunction) -> TabulatedFunction:
        return self._combine(first, second, operator.add, "add")

    def subtract(self, first: TabulatedFunction, second: TabulatedFunction) -> TabulatedFunction:
        return self._combine(first, second, operator.sub, "subtract")

    def multiply(self, first: TabulatedFunction, second: TabulatedFunction) -> TabulatedFunction:
        return self._combine(first, second, operator.mul, "multiply")

    def divide(self, first: TabulatedFunction, second: TabulatedFunction) -> TabulatedFunction:
        """Pointwise quotient; raises ZeroDivisionError when a divisor knot is zero."""
        return self._combine(first, second, operator.truediv, "divide")


def as_points(function: TabulatedFunction) -> List[Point]:
    return TabulatedFunctionOperationService.as_points(function)
