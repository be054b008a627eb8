"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Shape problems are DimensionErrors so callers can
catch every shape failure with a single except clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an input cannot be normalized to a non-empty 2D grid, or
    when two operands have incompatible shapes.
    """
    pass


class RaggedRowsError(DimensionError):
    """
    Rows of a nested sequence have unequal lengths.

    Raised by the 2D constructor when a row's length differs from the
    length of the first row.

    Attributes:
        row_index: Index of the first offending row
        expected: Length of the first row
        actual: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row_index: int,
        expected: int,
        actual: int,
    ):
        super().__init__(message)
        self.row_index = row_index
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(DimensionError):
    """
    Operand shapes violate the dimension-compatibility rule.

    Raised when the left operand's column count differs from the right
    operand's row count.

    Attributes:
        left: (rows, cols) of the left operand
        right: (rows, cols) of the right operand
        operation: Name of the operation that failed
    """

    def __init__(
        self,
        message: str,
        left: tuple[int, int],
        right: tuple[int, int],
        operation: str = 'multiply',
    ):
        super().__init__(message)
        self.left = tuple(left)
        self.right = tuple(right)
        self.operation = operation
