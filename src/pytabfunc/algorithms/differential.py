"""Numerical differentiation of analytic and tabulated functions."""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from pytabfunc.core.interfaces import MathFunction, TabulatedFunction
from pytabfunc.core.point import Point
from pytabfunc.data.constants import ErrorMessages
from pytabfunc.functions.basic import ZeroFunction
from pytabfunc.functions.factory import ArrayTabulatedFunctionFactory, TabulatedFunctionFactory
from pytabfunc.algorithms.operations import TabulatedFunctionOperationService

logger = logging.getLogger(__name__)


class _DerivedFunction(MathFunction):
    """Finite-difference derivative bound to a function and an operator."""

    def __init__(self, operator_: "SteppingDifferentialOperator", function: MathFunction):
        self._operator = operator_
        self._function = function

    def apply(self, x: float) -> float:
        return self._operator.difference(self._function, x)

    def __repr__(self) -> str:
        return f"{type(self._operator).__name__}(step={self._operator.step!r}).derive({self._function!r})"


class SteppingDifferentialOperator(ABC):
    """Finite-difference differentiation with a fixed positive step."""

    def __init__(self, step: float):
        self.step = step

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, value: float) -> None:
        try:
            step = float(value)
        except (TypeError, ValueError):
            raise ValueError(ErrorMessages.INVALID_STEP.format(step=value))
        if not (math.isfinite(step) and step > 0):
            logger.error("Invalid differentiation step: %r", value)
            raise ValueError(ErrorMessages.INVALID_STEP.format(step=value))
        self._step = step

    @abstractmethod
    def difference(self, function: MathFunction, x: float) -> float:
        """Difference quotient of ``function`` at ``x``."""
        pass

    def derive(self, function: MathFunction) -> MathFunction:
        return _DerivedFunction(self, function)


class LeftSteppingDifferentialOperator(SteppingDifferentialOperator):
    """(f(x) - f(x - h)) / h"""

    def difference(self, function: MathFunction, x: float) -> float:
        h = self._step
        return (function(x) - function(x - h)) / h


class RightSteppingDifferentialOperator(SteppingDifferentialOperator):
    """(f(x + h) - f(x)) / h"""

    def difference(self, function: MathFunction, x: float) -> float:
        h = self._step
        return (function(x + h) - function(x)) / h


class MiddleSteppingDifferentialOperator(SteppingDifferentialOperator):
    """(f(x + h) - f(x - h)) / 2h"""

    def difference(self, function: MathFunction, x: float) -> float:
        h = self._step
        return (function(x + h) - function(x - h)) / (2 * h)


class TabulatedDifferentialOperator:
    """
    Differentiates a tabulated function on its own x grid.

    Interior knots use the central difference of their two neighbours, the
    first and last knots the one-sided difference of the adjacent segment.
    The result is a new table built by ``factory``.
    A degenerate table whose knots all share one x derives to zero slope.
    """

    def __init__(self, factory: Optional[TabulatedFunctionFactory] = None):
        self.factory = factory or ArrayTabulatedFunctionFactory()

    @staticmethod
    def _slope(left: Point, right: Point) -> float:
        if right.x == left.x:
            return 0.0
        return (right.y - left.y) / (right.x - left.x)

    def derive(self, function: TabulatedFunction) -> TabulatedFunction:
        points = TabulatedFunctionOperationService.as_points(function)
        n = len(points)
        if points[0].x == points[-1].x:
            logger.info("Derived degenerate tabulated function at x=%r: zero slope", points[0].x)
            return self.factory.create_from_function(ZeroFunction(), points[0].x, points[0].x, n)
        x_values = [p.x for p in points]
        y_values = [0.0] * n
        for i in range(1, n - 1):
            y_values[i] = self._slope(points[i - 1], points[i + 1])
        y_values[0] = self._slope(points[0], points[1])
        y_values[-1] = self._slope(points[-2], points[-1])
        logger.info("Derived tabulated function with %d points", n)
        return self.factory.create(x_values, y_values)
