"""Plotting of tabulated functions."""

from .plotters import TabulatedFunctionVisualizer

__all__ = ["TabulatedFunctionVisualizer"]
