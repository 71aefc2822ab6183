"""Unit tests for elementary functions and composition."""

import math

import pytest

from pytabfunc.core.interfaces import MathFunction
from pytabfunc.functions.array_tabulated import ArrayTabulatedFunction
from pytabfunc.functions.basic import (
    CompositeFunction,
    ConstantFunction,
    IdentityFunction,
    SqrFunction,
    UnitFunction,
    ZeroFunction
)
from pytabfunc.functions.linked_list_tabulated import LinkedListTabulatedFunction


class AddOne(MathFunction):
    def apply(self, x):
        return x + 1


class Double(MathFunction):
    def apply(self, x):
        return x * 2


class TestElementaryFunctions:
    """Identity, constants and square."""

    @pytest.mark.parametrize("x", [-3.5, 0.0, 1.0, 1e6])
    def test_identity(self, x):
        assert IdentityFunction().apply(x) == x

    @pytest.mark.parametrize("x, expected", [(-3.0, 9.0), (0.0, 0.0), (1.5, 2.25)])
    def test_sqr(self, x, expected):
        assert SqrFunction().apply(x) == expected

    def test_constant(self):
        f = ConstantFunction(7.5)
        assert f.constant == 7.5
        assert f.apply(-100.0) == 7.5
        assert f(math.pi) == 7.5

    def test_zero_and_unit(self):
        """Test the fixed constants and their relation to ConstantFunction."""
        assert ZeroFunction().apply(123.0) == 0.0
        assert UnitFunction().apply(-4.0) == 1.0
        assert isinstance(ZeroFunction(), ConstantFunction)
        assert UnitFunction().constant == 1.0


class TestComposition:
    """CompositeFunction and and_then."""

    def test_composite_order(self):
        """Test that the first component is applied first."""
        f = CompositeFunction(AddOne(), SqrFunction())
        assert f.apply(2.0) == 9.0
        g = CompositeFunction(SqrFunction(), AddOne())
        assert g.apply(2.0) == 5.0

    def test_nested_composites(self):
        """Test a three-level chain ((2 + 1) * 2)^2."""
        f = CompositeFunction(CompositeFunction(AddOne(), Double()), SqrFunction())
        assert f.apply(2.0) == 36.0

    def test_and_then_chain(self):
        """Test fluent chaining matches explicit composition."""
        chained = AddOne().and_then(Double()).and_then(SqrFunction())
        assert isinstance(chained, CompositeFunction)
        assert chained.apply(2.0) == 36.0

    def test_and_then_accepts_callables(self):
        """Test composing with plain one-argument callables."""
        chained = IdentityFunction().and_then(lambda x: x + 1).and_then(lambda x: x * 2)
        chained = chained.and_then(lambda x: x * x)
        assert chained(2.0) == 36.0

    def test_composite_of_tables(self):
        """Test composition of two tabulated functions, g(f(x))."""
        f = ArrayTabulatedFunction([0.0, 1.0, 2.0], [0.0, 4.0, 8.0])
        g = LinkedListTabulatedFunction([0.0, 4.0, 8.0], [0.0, 2.0, 4.0])
        h = CompositeFunction(f, g)
        assert h.apply(1.0) == pytest.approx(2.0)
        assert h.apply(2.0) == pytest.approx(4.0)
        assert h.apply(0.5) == pytest.approx(1.0)

    def test_components_exposed(self):
        first, second = IdentityFunction(), SqrFunction()
        f = CompositeFunction(first, second)
        assert f.first is first
        assert f.second is second

    def test_none_component_rejected(self):
        with pytest.raises(ValueError, match="cannot be None"):
            CompositeFunction(None, SqrFunction())
