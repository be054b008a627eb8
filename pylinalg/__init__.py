"""
pylinalg: a small dense-matrix value type.

Construction from scalars, rows and nested sequences, matrix
multiplication with dimension checking, transpose, exact equality, and
text rendering, over any element type supporting + and *.

Submodules:
    matrix: Matrix type and operations
    core: Exceptions, Result envelope, validation, timing
"""

__version__ = "0.1.0"

from pylinalg.matrix import (
    Matrix,
    Size,
    multiply,
    try_multiply,
    transpose,
    is_same,
    format_matrix,
    format_size,
    benchmark_orders,
)
from pylinalg.core import (
    Result,
    PyLinalgError,
    ValidationError,
    DimensionError,
    RaggedRowsError,
    ShapeMismatchError,
)

__all__ = [
    "__version__",
    "Matrix",
    "Size",
    "multiply",
    "try_multiply",
    "transpose",
    "is_same",
    "format_matrix",
    "format_size",
    "benchmark_orders",
    "Result",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "RaggedRowsError",
    "ShapeMismatchError",
]
