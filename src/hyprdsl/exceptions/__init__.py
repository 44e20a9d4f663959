"""
hyprdsl exception classes.

This package provides all exception types used throughout hyprdsl for
consistent error handling and reporting.
"""

from hyprdsl.exceptions.core import (
    ConverterParseError,
    HyprDSLError,
    UnknownConverterError,
)

__all__ = [
    "HyprDSLError",
    "ConverterParseError",
    "UnknownConverterError",
]
