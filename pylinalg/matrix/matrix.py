"""
Matrix: dense, rectangular, non-empty 2D value type.

A Matrix owns a private copy of its grid and is never mutated after
construction. Operations (multiply, transpose, equality, formatting) live
as free functions in pylinalg.matrix.solvers and pylinalg.matrix.formatting;
the operators defined here delegate to them.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, NamedTuple, Sequence
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import PyLinalgError
from pylinalg.core.result import Result
from pylinalg.matrix._construction import (
    UNSET,
    normalize,
    grid_from_array,
    grid_from_dimensions,
    grid_from_sequence,
)
from pylinalg.matrix.formatting import format_matrix, format_size


class Size(NamedTuple):
    """(rows, cols) pair. Compares equal to a plain tuple."""
    rows: int
    cols: int

    def __str__(self) -> str:
        return format_size(self)


class Matrix:
    """
    Dense 2D matrix over any element type supporting + and *.

    Construction (argument shape selects the variant):
        Matrix(5)                      -> 1x1
        Matrix([1, 2, 3])              -> 1x3 row vector
        Matrix([[1, 2], [3, 4]])       -> 2x2, rows must be equally long
        Matrix(3, 4)                   -> 3x4 of zeros
        Matrix(3, 4, 2)                -> 3x4 of twos (also fill=2)

    Every matrix has at least one row and one column. Invalid input raises
    a DimensionError (RaggedRowsError for unequal rows) or ValidationError.

    Examples:
        >>> A = Matrix([[1, 2], [3, 4]])
        >>> B = Matrix([[5, 6], [7, 8]])
        >>> print(A * B)
        [[ 19 22 ]
         [ 43 50 ]]
        >>> print(A.size())
        (2, 2)
    """

    __slots__ = ('_grid',)

    def __init__(self, *args: Any, fill: Any = UNSET):
        self._grid: list[list[Any]] = normalize(args, fill)

    # === Alternate constructors ===

    @classmethod
    def _from_grid(cls, grid: list[list[Any]]) -> Matrix:
        """Adopt an already-normalized grid without copying or checks."""
        obj = cls.__new__(cls)
        obj._grid = grid
        return obj

    @classmethod
    def from_rows(cls, rows: Sequence[Any]) -> Matrix:
        """
        Build from a 1D or 2D sequence.

        Raises:
            RaggedRowsError: If rows have unequal lengths
            DimensionError: If the input is empty or nested too deep
        """
        return cls._from_grid(grid_from_sequence(rows, 'rows'))

    @classmethod
    def try_from_rows(cls, rows: Sequence[Any]) -> Result[Matrix]:
        """
        Checked variant of from_rows().

        Returns a failure Result holding the error instead of raising.
        """
        try:
            matrix = cls.from_rows(rows)
        except PyLinalgError as e:
            return Result.failure(e, info={'operation': 'from_rows'})
        return Result.success(matrix, info={'operation': 'from_rows', 'shape': matrix.size()})

    @classmethod
    def filled(cls, rows: int, cols: int, fill: Any = 0) -> Matrix:
        """rows x cols matrix with every element equal to fill."""
        return cls._from_grid(grid_from_dimensions(rows, cols, fill))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """rows x cols matrix of integer zeros."""
        return cls.filled(rows, cols, 0)

    @classmethod
    def from_array(cls, array: Any) -> Matrix:
        """
        Build from a numpy array or array-like of dimension 0, 1 or 2.

        0D input becomes 1x1 and 1D input a row vector, matching the
        Matrix() constructor. Elements become Python scalars.
        """
        return cls._from_grid(grid_from_array(array))

    def to_array(self, dtype: Any = None) -> NDArray[Any]:
        """Materialize as a 2D numpy.ndarray of shape size()."""
        return np.array(self._grid, dtype=dtype, ndmin=2)

    # === Shape and access ===

    def size(self) -> Size:
        """(rows, cols), derived from the stored grid."""
        return Size(len(self._grid), len(self._grid[0]))

    @property
    def shape(self) -> Size:
        """Alias of size()."""
        return self.size()

    @property
    def grid(self) -> list[list[Any]]:
        """Copy of the grid as a list of row lists."""
        return [list(row) for row in self._grid]

    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Rows, top to bottom."""
        return tuple(tuple(row) for row in self._grid)

    def cols(self) -> tuple[tuple[Any, ...], ...]:
        """Columns, left to right."""
        return tuple(zip(*self._grid))

    def __getitem__(self, key):
        """
        m[i, j] returns one element; m[i] returns row i as a tuple.

        Negative indices count from the end. Slices are not supported.
        """
        if isinstance(key, tuple):
            if len(key) != 2 or not all(isinstance(k, Integral) for k in key):
                raise TypeError(f"Matrix indices must be (row, col) integers, got {key!r}")
            i, j = key
            return self._grid[i][j]
        if not isinstance(key, Integral):
            raise TypeError(
                f"Matrix indices must be integers or (row, col) pairs, "
                f"got {type(key).__name__}"
            )
        return tuple(self._grid[key])

    def copy(self) -> Matrix:
        """Independent matrix with an equal grid."""
        return Matrix._from_grid(self.grid)

    # === Operations ===

    def transpose(self) -> Matrix:
        """New matrix of shape (cols, rows) with result[j, i] == self[i, j]."""
        from pylinalg.matrix.solvers import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix:
        """Alias of transpose()."""
        return self.transpose()

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.solvers import multiply
        return multiply(self, other)

    __matmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.solvers import is_same
        return is_same(self, other)

    def __hash__(self):
        return hash(self.rows())

    @staticmethod
    def is_same(m1: Matrix, m2: Matrix) -> bool:
        """Same as m1 == m2; named for use in test assertions."""
        from pylinalg.matrix.solvers import is_same
        return is_same(m1, m2)

    # === Rendering ===

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix({self._grid!r})"
