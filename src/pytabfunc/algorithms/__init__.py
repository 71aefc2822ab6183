"""
Numerical algorithms over scalar and tabulated functions.

This module provides the iterative root and fixed-point solvers, point
conversion and pointwise arithmetic for tabulated functions, and finite
difference differentiation.
"""

from .iteration_result import IterationResult
from .newton import NewtonMethodFunction
from .simple_iteration import SimpleIterationFunction
from .operations import TabulatedFunctionOperationService, as_points
from .differential import (
    SteppingDifferentialOperator,
    LeftSteppingDifferentialOperator,
    RightSteppingDifferentialOperator,
    MiddleSteppingDifferentialOperator,
    TabulatedDifferentialOperator
)

__all__ = [
    "IterationResult",
    "NewtonMethodFunction",
    "SimpleIterationFunction",
    "TabulatedFunctionOperationService",
    "as_points",
    "SteppingDifferentialOperator",
    "LeftSteppingDifferentialOperator",
    "RightSteppingDifferentialOperator",
    "MiddleSteppingDifferentialOperator",
    "TabulatedDifferentialOperator"
]
