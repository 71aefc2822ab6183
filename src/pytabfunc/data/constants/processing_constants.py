from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Numerical defaults used throughout the tabulated-function library."""
    # Table invariants
    MIN_POINTS: Final[int] = 2
    # Array-backed storage
    INITIAL_CAPACITY: Final[int] = 8
    GROWTH_FACTOR: Final[int] = 2
    # Iterative solvers
    DEFAULT_TOLERANCE: Final[float] = 1e-6
    DEFAULT_MAX_ITERATIONS: Final[int] = 100
    # Visualization
    DEFAULT_PLOT_POINTS: Final[int] = 200
    PLOT_PADDING_FACTOR: Final[float] = 0.1


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    DIFFERENT_LENGTHS: Final[str] = "Arrays have different lengths: x has {x_len} values, y has {y_len}"
    NOT_SORTED: Final[str] = "x values are not strictly increasing at index {index}: {previous} >= {current}"
    INSUFFICIENT_POINTS: Final[str] = "Insufficient points ({count}), minimum required: {min_points}"
    INDEX_OUT_OF_BOUNDS: Final[str] = "Index {index} out of bounds for table of size {count}"
    OUTSIDE_INTERVAL: Final[str] = "x = {x} lies outside the interpolation interval [{left}, {right}]"
    ZERO_DERIVATIVE: Final[str] = "Derivative is zero at x = {x} (iteration {iteration}), Newton step undefined"
    INVALID_STEP: Final[str] = "Step must be a positive finite number, got {step}"
    NON_FINITE: Final[str] = "{name} must be finite, got {value} at index {index}"
