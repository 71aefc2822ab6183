"""
PyTabFunc - A Python library for tabulated functions of one real variable.

This library provides finite, strictly ordered tables of (x, y) knots that
behave as continuous scalar functions through linear interpolation and
extrapolation, together with composable scalar functions and iterative
numerical solvers built on the same function interface.

Key Features:
- Two interchangeable table implementations (NumPy array, linked list)
- Exact-knot lookup, linear interpolation and boundary-slope extrapolation
- In-place insertion, removal and update of knots
- Function combinators and SymPy-backed symbolic functions
- Newton-Raphson and fixed-point iteration with convergence reporting
- Finite-difference differentiation and pointwise table arithmetic
- Matplotlib plotting of tables

Main Components:
- Core: Point, interfaces, floor-search result and exceptions
- Functions: combinators, tabulated functions and their factories
- Algorithms: solvers, operations and differential operators
- Validation: construction-time array checks
- Visualization: table plotting
- Data: numerical defaults and message templates
"""

try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pytabfunc")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"

# Core types
from .core.point import Point
from .core.floor_index import FloorIndex, FloorIndexKind
from .core.interfaces import MathFunction, TabulatedFunction
from .core.exceptions import (
    TabulatedFunctionError,
    DifferentLengthOfArraysError,
    ArrayIsNotSortedError,
    InsufficientPointsError,
    IndexOutOfBoundsError,
    InterpolationError,
    ZeroDerivativeError,
    InconsistentFunctionsError,
    NonFiniteValueError
)

# Functions
from .functions.basic import (
    IdentityFunction,
    ConstantFunction,
    ZeroFunction,
    UnitFunction,
    SqrFunction,
    CompositeFunction
)
from .functions.symbolic import SymbolicFunction
from .functions.abstract_tabulated import AbstractTabulatedFunction
from .functions.array_tabulated import ArrayTabulatedFunction
from .functions.linked_list_tabulated import LinkedListTabulatedFunction
from .functions.factory import (
    TabulatedFunctionFactory,
    ArrayTabulatedFunctionFactory,
    LinkedListTabulatedFunctionFactory
)

# Algorithms
from .algorithms.iteration_result import IterationResult
from .algorithms.newton import NewtonMethodFunction
from .algorithms.simple_iteration import SimpleIterationFunction
from .algorithms.operations import TabulatedFunctionOperationService, as_points
from .algorithms.differential import (
    LeftSteppingDifferentialOperator,
    RightSteppingDifferentialOperator,
    MiddleSteppingDifferentialOperator,
    TabulatedDifferentialOperator
)

# Visualization
from .visualization.plotters import TabulatedFunctionVisualizer

# Validation
from .validation.array_validator import check_length_is_the_same, check_sorted

__all__ = [
    # Version
    '__version__',

    # Core
    'Point',
    'FloorIndex',
    'FloorIndexKind',
    'MathFunction',
    'TabulatedFunction',

    # Exceptions
    'TabulatedFunctionError',
    'DifferentLengthOfArraysError',
    'ArrayIsNotSortedError',
    'InsufficientPointsError',
    'IndexOutOfBoundsError',
    'InterpolationError',
    'ZeroDerivativeError',
    'InconsistentFunctionsError',
    'NonFiniteValueError',

    # Functions
    'IdentityFunction',
    'ConstantFunction',
    'ZeroFunction',
    'UnitFunction',
    'SqrFunction',
    'CompositeFunction',
    'SymbolicFunction',
    'AbstractTabulatedFunction',
    'ArrayTabulatedFunction',
    'LinkedListTabulatedFunction',
    'TabulatedFunctionFactory',
    'ArrayTabulatedFunctionFactory',
    'LinkedListTabulatedFunctionFactory',

    # Algorithms
    'IterationResult',
    'NewtonMethodFunction',
    'SimpleIterationFunction',
    'TabulatedFunctionOperationService',
    'as_points',
    'LeftSteppingDifferentialOperator',
    'RightSteppingDifferentialOperator',
    'MiddleSteppingDifferentialOperator',
    'TabulatedDifferentialOperator',

    # Visualization
    'TabulatedFunctionVisualizer',

    # Validation
    'check_length_is_the_same',
    'check_sorted'
]

__description__ = "Tabulated functions with linear interpolation, combinators and iterative solvers"
