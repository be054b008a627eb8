"""
Loop-order benchmark for the matrix product.

The i, k, j kernel is the default because it was measured faster than the
textbook i, j, k ordering. That measurement depends on the input sizes
and element type, so benchmark_orders() lets callers repeat it on their
own operands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.result import Result
from pylinalg.core.validation import check_compatible, check_positive_int
from pylinalg.matrix.backends import KERNELS, LoopOrder, get_kernel
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solvers import multiply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkParams:
    """
    Payload of a loop-order benchmark.

    Attributes:
        best_seconds: Fastest single run per loop order
        fastest: Loop order with the smallest best time
        dims: (m, n, k) of the product that was timed
        repeats: Runs per loop order
    """
    best_seconds: dict[str, float]
    fastest: str
    dims: tuple[int, int, int]
    repeats: int

    def speedup(self, baseline: str = 'ijk') -> float:
        """How many times faster the fastest order is than baseline."""
        if baseline not in self.best_seconds:
            raise KeyError(f"Loop order {baseline!r} was not benchmarked")
        fastest = self.best_seconds[self.fastest]
        if fastest == 0.0:
            return float('inf')
        return self.best_seconds[baseline] / fastest


def _same_products(a: Matrix, b: Matrix) -> bool:
    """Element-wise equality in which NaN matches NaN."""
    if a.size() != b.size():
        return False
    return all(
        x == y or (x != x and y != y)
        for row_a, row_b in zip(a.rows(), b.rows())
        for x, y in zip(row_a, row_b)
    )


def benchmark_orders(
    left: Matrix,
    right: Matrix,
    *,
    orders: Sequence[LoopOrder] = tuple(KERNELS),
    repeats: int = 3,
    zero: Any = 0,
) -> Result[BenchmarkParams]:
    """
    Time multiply(left, right) once per repeat for every loop order.

    Parameters
    ----------
    left, right : Matrix
        Operands; left's column count must equal right's row count.
    orders : sequence of str
        Loop orders to compare. Defaults to every registered kernel.
    repeats : int
        Runs per order; the fastest run is reported.
    zero : Any
        Passed through to multiply().

    Returns
    -------
    Result[BenchmarkParams]
        timing holds the accumulated seconds per order plus
        'total_seconds'. A warning is attached if two orders produced
        different products.

    Raises
    ------
    ValidationError
        If orders is empty, contains an unknown order, or repeats < 1.
    ShapeMismatchError
        If the operands cannot be multiplied.
    """
    if not isinstance(left, Matrix) or not isinstance(right, Matrix):
        raise ValidationError(
            f"benchmark_orders: expected Matrix operands, got "
            f"{type(left).__name__} and {type(right).__name__}"
        )
    orders = tuple(orders)
    if not orders:
        raise ValidationError("orders: at least one loop order is required")
    for order in orders:
        get_kernel(order)
    repeats = check_positive_int(repeats, 'repeats')
    check_compatible(left.size(), right.size())

    timer = Timer()
    timer.start()
    products: dict[str, Matrix] = {}
    for order in orders:
        for _ in range(repeats):
            with timer.section(order):
                products[order] = multiply(left, right, order=order, zero=zero)
    timer.stop()

    warnings = []
    reference_order = orders[0]
    for order in orders[1:]:
        if not _same_products(products[order], products[reference_order]):
            logger.warning(
                "loop orders %r and %r produced different products", reference_order, order
            )
            warnings.append(
                f"loop orders {reference_order!r} and {order!r} produced different products"
            )

    best = {order: timer.best(order) for order in orders}
    fastest = min(best, key=best.get)
    m, n = left.size()
    k = right.size().cols
    logger.debug("benchmark %dx%dx%d best times %s, fastest %s", m, n, k, best, fastest)

    params = BenchmarkParams(
        best_seconds=best,
        fastest=fastest,
        dims=(m, n, k),
        repeats=repeats,
    )
    return Result.success(
        params,
        info={'operation': 'benchmark_orders', 'orders': orders},
        timing=timer.result(),
        warnings=tuple(warnings),
    )
