"""
Text rendering for matrices and sizes.

Presentation only: the layout is for humans and is not meant to be parsed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


def format_row(row) -> str:
    """'[ a b c ]': each element followed by one space."""
    return "[ " + "".join(f"{value} " for value in row) + "]"


def format_matrix(matrix: Matrix) -> str:
    """
    Render a matrix row by row inside an outer bracket pair.

    Rows after the first start on a new line indented by one space, so
    the row brackets line up under the outer bracket:

        [[ 1 2 3 ]
         [ 4 5 6 ]]
    """
    return "[" + "\n ".join(format_row(row) for row in matrix.rows()) + "]"


def format_size(size: tuple[int, int]) -> str:
    """Render a (rows, cols) pair as '(rows, cols)'."""
    rows, cols = size
    return f"({rows}, {cols})"
