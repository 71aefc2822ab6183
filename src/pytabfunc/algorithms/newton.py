import logging
from typing import Union

import sympy as sp

from pytabfunc.algorithms.iteration_result import IterationResult, validate_solver_params
from pytabfunc.core.exceptions import ZeroDerivativeError
from pytabfunc.core.interfaces import MathFunction
from pytabfunc.data.constants import ProcessingConstants
from pytabfunc.functions.symbolic import SymbolicFunction

logger = logging.getLogger(__name__)


class NewtonMethodFunction(MathFunction):
    """
    Root of ``function`` by Newton-Raphson iteration, as a function of the starting point.

    ``apply(x0)`` iterates ``x <- x - f(x) / f'(x)`` and returns the first
    iterate with ``|f(x)| < tolerance``. If the budget of ``max_iterations``
    steps is exhausted the last iterate is returned; use :meth:`solve` to
    find out whether it converged.

    Raises:
        ZeroDerivativeError: If ``f'(x)`` is exactly zero at some iterate.
    """

    def __init__(self, function: MathFunction, derivative: MathFunction,
                 tolerance: float = ProcessingConstants.DEFAULT_TOLERANCE,
                 max_iterations: int = ProcessingConstants.DEFAULT_MAX_ITERATIONS):
        validate_solver_params(tolerance, max_iterations)
        self._function = function
        self._derivative = derivative
        self._tolerance = tolerance
        self._max_iterations = max_iterations

    @classmethod
    def from_expression(cls, expr: Union[sp.Expr, str], symbol: Union[sp.Symbol, str] = 'x',
                        tolerance: float = ProcessingConstants.DEFAULT_TOLERANCE,
                        max_iterations: int = ProcessingConstants.DEFAULT_MAX_ITERATIONS) -> "NewtonMethodFunction":
        """Build the solver from a SymPy expression, differentiating it symbolically."""
        function = SymbolicFunction(expr, symbol)
        return cls(function, function.derivative(), tolerance, max_iterations)

    @property
    def function(self) -> MathFunction:
        return self._function

    @property
    def derivative(self) -> MathFunction:
        return self._derivative

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    def solve(self, x0: float) -> IterationResult:
        logger.info("Newton's method from x0=%r, tolerance=%.2e, max_iterations=%d",
                    x0, self._tolerance, self._max_iterations)
        x = float(x0)
        for i in range(self._max_iterations):
            fx = self._function(x)
            if abs(fx) < self._tolerance:
                logger.info("Newton's method converged after %d iterations: x=%r", i, x)
                return IterationResult(x, i, True)
            dfx = self._derivative(x)
            logger.debug("Iteration %d: x=%r, f(x)=%r, f'(x)=%r", i, x, fx, dfx)
            if dfx == 0.0:
                logger.error("Zero derivative at iteration %d, x=%r", i, x)
                raise ZeroDerivativeError(x, i)
            x = x - fx / dfx
        converged = abs(self._function(x)) < self._tolerance
        if converged:
            logger.info("Newton's method converged after %d iterations: x=%r", self._max_iterations, x)
        else:
            logger.warning("Newton's method did not converge in %d iterations, last iterate: %r",
                           self._max_iterations, x)
        return IterationResult(x, self._max_iterations, converged)

    def apply(self, x0: float) -> float:
        return self.solve(x0).value

    def __repr__(self) -> str:
        return (f"NewtonMethodFunction({self._function!r}, {self._derivative!r}, "
                f"tolerance={self._tolerance!r}, max_iterations={self._max_iterations!r})")
