"""
Pure-Python matrix-product kernels.

Both kernels work on row-major grids (lists of rows) and accept any
element type supporting + and *. The result grid is pre-filled with the
caller's zero value and accumulated in place.
"""

from __future__ import annotations

from typing import Any


class IKJKernel:
    """
    Default kernel: output row i, then inner index k, then output column j.

    With row-major storage the innermost loop holds left[i][k] fixed and
    sweeps right[k] and out[i] together, walking both rows contiguously.
    It benchmarked faster than the naive ordering on the workloads it
    was tuned for; benchmark_orders() measures a given input.
    """

    @property
    def name(self) -> str:
        return 'ikj'

    def multiply(
        self,
        left: list[list[Any]],
        right: list[list[Any]],
        zero: Any,
    ) -> list[list[Any]]:
        n_inner = len(right)
        n_cols = len(right[0])
        out = [[zero] * n_cols for _ in range(len(left))]

        for i, left_row in enumerate(left):
            out_row = out[i]
            for k in range(n_inner):
                a_ik = left_row[k]
                right_row = right[k]
                for j in range(n_cols):
                    out_row[j] += a_ik * right_row[j]
        return out


class IJKKernel:
    """
    Reference kernel using the textbook i, j, k ordering.

    The inner loop walks down a column of the right operand, one row per
    step. Kept for comparison; IKJKernel is the default.
    """

    @property
    def name(self) -> str:
        return 'ijk'

    def multiply(
        self,
        left: list[list[Any]],
        right: list[list[Any]],
        zero: Any,
    ) -> list[list[Any]]:
        n_inner = len(right)
        n_cols = len(right[0])
        out = [[zero] * n_cols for _ in range(len(left))]

        for i, left_row in enumerate(left):
            out_row = out[i]
            for j in range(n_cols):
                for k in range(n_inner):
                    out_row[j] += left_row[k] * right[k][j]
        return out
