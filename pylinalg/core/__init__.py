"""
Core infrastructure for pylinalg.

This module provides shared abstractions and utilities used by the matrix
domain package.

Key components:
    protocols: Kernel protocol
    result: Generic Result[P] tagged outcome
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pylinalg.core.protocols import Kernel
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    RaggedRowsError,
    ShapeMismatchError,
)

__all__ = [
    # Protocols
    "Kernel",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "RaggedRowsError",
    "ShapeMismatchError",
]
