"""
Matrix operations: multiplication, transpose, equality.

multiply() raises ShapeMismatchError on incompatible operands, which ends
the program unless the caller catches it. try_multiply() is the checked
counterpart and reports the mismatch as a failed Result instead.
"""

from __future__ import annotations

import logging
from typing import Any

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.result import Result
from pylinalg.core.validation import check_compatible
from pylinalg.matrix.backends import DEFAULT_ORDER, LoopOrder, get_kernel
from pylinalg.matrix.matrix import Matrix

logger = logging.getLogger(__name__)


def _check_matrix(obj: Any, name: str) -> Matrix:
    if not isinstance(obj, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(obj).__name__}")
    return obj


def multiply(
    left: Matrix,
    right: Matrix,
    *,
    order: LoopOrder = DEFAULT_ORDER,
    zero: Any = 0,
) -> Matrix:
    """
    Matrix product C = left * right.

    Parameters
    ----------
    left : Matrix
        m x n operand.
    right : Matrix
        n x k operand.
    order : str
        Loop order of the kernel, 'ikj' (default) or 'ijk'.
    zero : Any
        Additive identity of the element type. Every output cell starts
        from this value before products are accumulated.

    Returns
    -------
    Matrix
        New m x k matrix with C[i, j] = sum over k of left[i, k] * right[k, j].

    Raises
    ------
    ShapeMismatchError
        If left has a different number of columns than right has rows.
    ValidationError
        If an operand is not a Matrix or order is unknown.
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    kernel = get_kernel(order)

    left_size, right_size = left.size(), right.size()
    check_compatible(left_size, right_size)

    logger.debug(
        "multiply %s x %s with kernel %s", left_size, right_size, kernel.name
    )
    return Matrix._from_grid(kernel.multiply(left.grid, right.grid, zero))


def try_multiply(
    left: Matrix,
    right: Matrix,
    *,
    order: LoopOrder = DEFAULT_ORDER,
    zero: Any = 0,
) -> Result[Matrix]:
    """
    Checked matrix product.

    Same computation as multiply(), but a shape mismatch is returned as a
    failed Result holding the ShapeMismatchError rather than raised.
    Invalid arguments (non-Matrix operands, unknown order) still raise.

    Returns
    -------
    Result[Matrix]
        ok with the product as value, or not ok with the error.
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    get_kernel(order)

    info = {
        'operation': 'multiply',
        'kernel': order,
        'left_shape': left.size(),
        'right_shape': right.size(),
    }
    try:
        product = multiply(left, right, order=order, zero=zero)
    except DimensionError as e:
        logger.debug("try_multiply rejected: %s", e)
        return Result.failure(e, info=info)
    return Result.success(product, info=info)


def transpose(matrix: Matrix) -> Matrix:
    """
    Transpose of a matrix.

    Returns a new (cols, rows) matrix with result[j, i] == matrix[i, j].
    Applying it twice returns a matrix equal to the input.
    """
    _check_matrix(matrix, 'matrix')
    return Matrix._from_grid([list(col) for col in matrix.cols()])


def is_same(m1: Matrix, m2: Matrix) -> bool:
    """
    True if both matrices have the same shape and equal elements.

    Elements are compared with their own ==, with no tolerance. Shape is
    checked first, so a 1x3 row vector never equals a 3x1 column vector.
    """
    _check_matrix(m1, 'm1')
    _check_matrix(m2, 'm2')
    if m1.size() != m2.size():
        return False
    return all(
        a == b
        for row1, row2 in zip(m1.rows(), m2.rows())
        for a, b in zip(row1, row2)
    )
