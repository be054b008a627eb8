"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from numbers import Integral
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    RaggedRowsError,
    ShapeMismatchError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer (booleans included)
        DimensionError: If value is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if value < 1:
        raise DimensionError(
            f"{name}: must be at least 1, got {value} (empty matrices are not allowed)"
        )
    return value


def check_non_empty(items: Sequence[Any], name: str) -> None:
    """
    Verify a sequence has at least one element.

    Args:
        items: Sequence to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the sequence is empty
    """
    if len(items) == 0:
        raise DimensionError(
            f"{name}: empty sequence (empty matrices are not allowed)"
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> int:
    """
    Verify every row has the same length as the first row.

    Args:
        rows: Non-empty sequence of rows
        name: Parameter name for error messages

    Returns:
        The shared row length (column count)

    Raises:
        RaggedRowsError: On the first row whose length differs from row 0
    """
    expected = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != expected:
            raise RaggedRowsError(
                f"{name}: row {index} has length {len(row)}, "
                f"expected {expected} (length of row 0)",
                row_index=index,
                expected=expected,
                actual=len(row),
            )
    return expected


def check_compatible(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = 'multiply',
) -> None:
    """
    Verify the dimension-compatibility rule left.cols == right.rows.

    Args:
        left: (rows, cols) of the left operand
        right: (rows, cols) of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: left operand has {left[1]} columns but right operand "
            f"has {right[0]} rows (shapes {tuple(left)} and {tuple(right)})",
            left=left,
            right=right,
            operation=operation,
        )


def check_choice(value: Any, choices: Collection[str], name: str) -> str:
    """
    Verify value is one of the allowed string choices.

    Args:
        value: Candidate choice
        choices: Allowed values
        name: Parameter name for error messages

    Returns:
        The validated choice

    Raises:
        ValidationError: If value is not in choices
    """
    if not isinstance(value, str) or value not in choices:
        allowed = ", ".join(repr(c) for c in sorted(choices))
        raise ValidationError(f"{name}: unknown value {value!r}, expected one of {allowed}")
    return value


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an integer or is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ValidationError(f"{name}: expected an integer >= 1, got {value!r}")
    return int(value)
