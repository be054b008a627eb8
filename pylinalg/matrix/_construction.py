"""
Shape normalization for Matrix constructors.

Every constructor input is reduced to a canonical grid: a fresh list of
equally long, non-empty row lists. The helpers here never return a view
of caller-owned data.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any
import numpy as np

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_dimension,
    check_non_empty,
    check_rectangular,
)


UNSET = object()


def is_sequence(obj: Any) -> bool:
    """True for lists, tuples, ranges and ndarrays of 1+ dims; strings count as scalars."""
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def grid_from_scalar(value: Any) -> list[list[Any]]:
    """1x1 grid holding value."""
    return [[value]]


def grid_from_dimensions(rows: Any, cols: Any, fill: Any = 0) -> list[list[Any]]:
    """rows x cols grid with every cell set to fill."""
    n_rows = check_dimension(rows, 'rows')
    n_cols = check_dimension(cols, 'cols')
    return [[fill] * n_cols for _ in range(n_rows)]


def grid_from_sequence(data: Sequence[Any], name: str = 'data') -> list[list[Any]]:
    """
    Normalize a 1D or 2D sequence.

    A flat sequence becomes a single row. A sequence of sequences is copied
    row by row and must be rectangular.

    Raises:
        DimensionError: Empty input, mixed scalars and rows, or nesting
            deeper than two levels
        ValidationError: If data is not a sequence
        RaggedRowsError: Rows of unequal length
    """
    if not is_sequence(data):
        raise ValidationError(
            f"{name}: expected a sequence of values or rows, got {type(data).__name__}"
        )
    check_non_empty(data, name)

    nested = [is_sequence(item) for item in data]
    if not any(nested):
        return [list(data)]
    if not all(nested):
        raise DimensionError(
            f"{name}: mixes scalars and rows; pass either a flat sequence "
            f"(row vector) or a sequence of rows"
        )

    grid = [list(row) for row in data]
    check_non_empty(grid[0], f"{name}[0]")
    check_rectangular(grid, name)

    for index, row in enumerate(grid):
        if any(is_sequence(item) for item in row):
            raise DimensionError(
                f"{name}: row {index} contains nested sequences; "
                f"only 2D input is supported"
            )
    return grid


def grid_from_array(array: Any, name: str = 'array') -> list[list[Any]]:
    """
    Normalize a numpy array or array-like of dimension 0, 1 or 2.

    Elements are converted to Python scalars via ndarray.tolist().

    Raises:
        ValidationError: If the input cannot be converted to an array
        DimensionError: Empty input or more than two dimensions
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.ndim > 2:
        raise DimensionError(
            f"{name}: expected at most 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.size == 0:
        raise DimensionError(
            f"{name}: empty array with shape {arr.shape} (empty matrices are not allowed)"
        )

    if arr.ndim == 0:
        return grid_from_scalar(arr.item())
    if arr.ndim == 1:
        return [arr.tolist()]
    return arr.tolist()


def normalize(args: tuple[Any, ...], fill: Any) -> list[list[Any]]:
    """
    Dispatch Matrix(*args) to the matching normalizer.

    Matrix(value)               -> 1x1
    Matrix([a, b, c])           -> 1xN row vector (iterators are materialized)
    Matrix([[a, b], [c, d]])    -> copied rectangular grid
    Matrix(rows, cols[, fill])  -> rows x cols filled grid

    fill is UNSET when the keyword was not given.

    Raises:
        TypeError: Wrong number of arguments, or fill given twice
    """
    if len(args) == 1:
        if fill is not UNSET:
            raise TypeError("fill= is only valid with Matrix(rows, cols, fill)")
        (data,) = args
        if isinstance(data, Iterator):
            data = tuple(data)
        if isinstance(data, np.ndarray):
            return grid_from_array(data, 'data')
        if is_sequence(data):
            return grid_from_sequence(data, 'data')
        return grid_from_scalar(data)

    if len(args) == 2:
        return grid_from_dimensions(args[0], args[1], 0 if fill is UNSET else fill)

    if len(args) == 3:
        if fill is not UNSET:
            raise TypeError("Matrix() got fill both positionally and as a keyword")
        return grid_from_dimensions(*args)

    raise TypeError(
        f"Matrix() takes 1 to 3 positional arguments ({len(args)} given)"
    )
