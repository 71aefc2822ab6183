"""
Scalar functions: elementary combinators and the two tabulated-function implementations.
"""

from .basic import (
    IdentityFunction,
    ConstantFunction,
    ZeroFunction,
    UnitFunction,
    SqrFunction,
    CompositeFunction
)
from .symbolic import SymbolicFunction
from .abstract_tabulated import AbstractTabulatedFunction
from .array_tabulated import ArrayTabulatedFunction
from .linked_list_tabulated import LinkedListTabulatedFunction
from .factory import (
    TabulatedFunctionFactory,
    ArrayTabulatedFunctionFactory,
    LinkedListTabulatedFunctionFactory
)

__all__ = [
    "IdentityFunction",
    "ConstantFunction",
    "ZeroFunction",
    "UnitFunction",
    "SqrFunction",
    "CompositeFunction",
    "SymbolicFunction",
    "AbstractTabulatedFunction",
    "ArrayTabulatedFunction",
    "LinkedListTabulatedFunction",
    "TabulatedFunctionFactory",
    "ArrayTabulatedFunctionFactory",
    "LinkedListTabulatedFunctionFactory"
]
