"""Shared pytest fixtures for PyTabFunc tests."""
import matplotlib
matplotlib.use("Agg")

import pytest

from pytabfunc.functions.array_tabulated import ArrayTabulatedFunction
from pytabfunc.functions.linked_list_tabulated import LinkedListTabulatedFunction


@pytest.fixture(params=[ArrayTabulatedFunction, LinkedListTabulatedFunction],
                ids=["array", "linked_list"])
def table_class(request):
    """Each tabulated-function implementation in turn."""
    return request.param


@pytest.fixture
def linear_table(table_class):
    """Table of y = 10x on x = 1, 2, 3."""
    return table_class([1.0, 2.0, 3.0], [10.0, 20.0, 30.0])


@pytest.fixture
def gapped_table(table_class):
    """Table on x = 1, 2, 4, 5 with an uneven gap."""
    return table_class([1.0, 2.0, 4.0, 5.0], [1.0, 4.0, 16.0, 25.0])


@pytest.fixture
def sample_x_values():
    """Strictly increasing abscissae."""
    return [-2.0, -0.5, 0.0, 1.5, 3.0, 7.25]


@pytest.fixture
def sample_y_values():
    """Ordinates matching sample_x_values."""
    return [4.0, 0.25, 0.0, 2.25, 9.0, 52.5625]
