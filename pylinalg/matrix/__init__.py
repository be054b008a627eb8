"""
Dense 2D matrices.

Public API:
    Matrix(...)               - construct from scalar, row, rows, or (rows, cols, fill)
    multiply(A, B)            - matrix product, raises ShapeMismatchError
    try_multiply(A, B)        - matrix product as a Result
    transpose(A)              - transpose
    is_same(A, B)             - exact shape-and-element equality
    format_matrix(A)          - text rendering
    format_size(A.size())     - '(rows, cols)'
    benchmark_orders(A, B)    - time the kernel loop orders

Example:
    >>> from pylinalg.matrix import Matrix, transpose
    >>> v = Matrix([1, 2, 3])
    >>> v * transpose(v)
    Matrix([[14]])
"""

from pylinalg.matrix.matrix import Matrix, Size
from pylinalg.matrix.solvers import multiply, try_multiply, transpose, is_same
from pylinalg.matrix.formatting import format_matrix, format_size
from pylinalg.matrix.benchmark import BenchmarkParams, benchmark_orders
from pylinalg.matrix.backends import DEFAULT_ORDER, KERNELS

__all__ = [
    "Matrix",
    "Size",
    "multiply",
    "try_multiply",
    "transpose",
    "is_same",
    "format_matrix",
    "format_size",
    "BenchmarkParams",
    "benchmark_orders",
    "DEFAULT_ORDER",
    "KERNELS",
]
