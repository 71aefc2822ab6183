"""Validation utilities for PyTabFunc."""

from .array_validator import (
    check_length_is_the_same,
    check_sorted,
    check_min_count,
    check_finite,
    check_finite_value
)

__all__ = [
    "check_length_is_the_same",
    "check_sorted",
    "check_min_count",
    "check_finite",
    "check_finite_value"
]
