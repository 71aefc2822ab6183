"""Factories that decouple algorithms from the concrete table type they produce."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from pytabfunc.core.interfaces import MathFunction, TabulatedFunction
from pytabfunc.functions.array_tabulated import ArrayTabulatedFunction
from pytabfunc.functions.linked_list_tabulated import LinkedListTabulatedFunction

logger = logging.getLogger(__name__)


class TabulatedFunctionFactory(ABC):
    """Creates tabulated functions of one concrete type."""

    product_type = None

    @abstractmethod
    def create(self, x_values: Sequence[float], y_values: Sequence[float]) -> TabulatedFunction:
        pass

    def create_from_function(self, source: MathFunction, x_from: float, x_to: float,
                             count: int) -> TabulatedFunction:
        logger.debug("%s sampling %r on [%r, %r] with %d points",
                     type(self).__name__, source, x_from, x_to, count)
        return self.product_type.from_function(source, x_from, x_to, count)


class ArrayTabulatedFunctionFactory(TabulatedFunctionFactory):
    product_type = ArrayTabulatedFunction

    def create(self, x_values: Sequence[float], y_values: Sequence[float]) -> ArrayTabulatedFunction:
        logger.debug("Creating ArrayTabulatedFunction, points: %d", len(x_values))
        return ArrayTabulatedFunction(x_values, y_values)


class LinkedListTabulatedFunctionFactory(TabulatedFunctionFactory):
    product_type = LinkedListTabulatedFunction

    def create(self, x_values: Sequence[float], y_values: Sequence[float]) -> LinkedListTabulatedFunction:
        logger.debug("Creating LinkedListTabulatedFunction, points: %d", len(x_values))
        return LinkedListTabulatedFunction(x_values, y_values)
