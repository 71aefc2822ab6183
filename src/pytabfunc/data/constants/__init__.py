"""Processing constants for PyTabFunc."""

from .processing_constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
