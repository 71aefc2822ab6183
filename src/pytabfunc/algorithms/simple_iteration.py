import logging

from pytabfunc.algorithms.iteration_result import IterationResult, validate_solver_params
from pytabfunc.core.interfaces import MathFunction
from pytabfunc.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class SimpleIterationFunction(MathFunction):
    """
    Fixed point of ``phi`` by simple iteration ``x <- phi(x)``.

    The argument of ``apply`` is ignored; iteration always starts from
    ``initial_guess``. Non-convergence is not an error: the last computed
    iterate is returned and :meth:`solve` reports ``converged=False``.
    """

    def __init__(self, phi_function: MathFunction, initial_guess: float,
                 max_iterations: int = ProcessingConstants.DEFAULT_MAX_ITERATIONS,
                 tolerance: float = ProcessingConstants.DEFAULT_TOLERANCE):
        validate_solver_params(tolerance, max_iterations)
        self._phi_function = phi_function
        self._initial_guess = float(initial_guess)
        self._max_iterations = max_iterations
        self._tolerance = tolerance

    @property
    def phi_function(self) -> MathFunction:
        return self._phi_function

    @property
    def initial_guess(self) -> float:
        return self._initial_guess

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def solve(self) -> IterationResult:
        logger.info("Simple iteration from x0=%r, tolerance=%.2e, max_iterations=%d",
                    self._initial_guess, self._tolerance, self._max_iterations)
        current = self._initial_guess
        for i in range(self._max_iterations):
            following = self._phi_function(current)
            delta = abs(following - current)
            logger.debug("Iteration %d: %r -> %r, delta=%.3e", i, current, following, delta)
            if delta < self._tolerance:
                logger.info("Simple iteration converged after %d iterations: x=%r", i + 1, following)
                return IterationResult(following, i + 1, True)
            current = following
        logger.warning("Simple iteration did not reach tolerance in %d iterations, last iterate: %r",
                       self._max_iterations, current)
        return IterationResult(current, self._max_iterations, False)

    def apply(self, x: float) -> float:
        return self.solve().value

    def __repr__(self) -> str:
        return (f"SimpleIterationFunction({self._phi_function!r}, {self._initial_guess!r}, "
                f"max_iterations={self._max_iterations!r}, tolerance={self._tolerance!r})")
