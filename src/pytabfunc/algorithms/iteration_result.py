from dataclasses import dataclass


@dataclass(frozen=True)
class IterationResult:
    """
    Outcome of an iterative solver run.

    Attributes:
        value (float): The returned iterate.
        iterations (int): Number of update steps performed.
        converged (bool): Whether the stopping criterion was met before the
            iteration budget ran out.
    """
    value: float
    iterations: int
    converged: bool


def validate_solver_params(tolerance: float, max_iterations: int) -> None:
    """Reject non-positive tolerances and empty iteration budgets."""
    if not tolerance > 0:
        raise ValueError(f"Tolerance must be positive, got {tolerance}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
