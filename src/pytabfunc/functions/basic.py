"""Elementary scalar functions and the composite combinator."""

import logging

from pytabfunc.core.interfaces import MathFunction

logger = logging.getLogger(__name__)


class IdentityFunction(MathFunction):
    """f(x) = x"""

    def apply(self, x: float) -> float:
        return x

    def __repr__(self) -> str:
        return "IdentityFunction()"


class SqrFunction(MathFunction):
    """f(x) = x * x"""

    def apply(self, x: float) -> float:
        return x * x

    def __repr__(self) -> str:
        return "SqrFunction()"


class ConstantFunction(MathFunction):
    """f(x) = c for every x."""

    def __init__(self, constant: float):
        self._constant = float(constant)

    @property
    def constant(self) -> float:
        return self._constant

    def apply(self, x: float) -> float:
        return self._constant

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._constant!r})"


class ZeroFunction(ConstantFunction):
    """f(x) = 0"""

    def __init__(self):
        super().__init__(0.0)

    def __repr__(self) -> str:
        return "ZeroFunction()"


class UnitFunction(ConstantFunction):
    """f(x) = 1"""

    def __init__(self):
        super().__init__(1.0)

    def __repr__(self) -> str:
        return "UnitFunction()"


class CompositeFunction(MathFunction):
    """
    Composition of two functions: ``second(first(x))``.

    Either component may itself be a CompositeFunction, so chains of any
    depth can be built, most conveniently through ``MathFunction.and_then``.
    Plain callables of one float are accepted as components as well.

    Attributes:
        first (MathFunction): Applied to the argument.
        second (MathFunction): Applied to the result of ``first``.
    """

    def __init__(self, first: MathFunction, second: MathFunction):
        if first is None or second is None:
            raise ValueError("CompositeFunction components cannot be None")
        self._first = first
        self._second = second
        logger.debug("CompositeFunction created: %r then %r", first, second)

    @property
    def first(self) -> MathFunction:
        return self._first

    @property
    def second(self) -> MathFunction:
        return self._second

    def apply(self, x: float) -> float:
        return self._second(self._first(x))

    def __repr__(self) -> str:
        return f"CompositeFunction({self._first!r}, {self._second!r})"
