"""
Matrix-product kernels.

Available kernels:
    IKJKernel: i, k, j loop order (default)
    IJKKernel: i, j, k loop order (reference)
"""

from __future__ import annotations

from typing import Literal

from pylinalg.core.protocols import Kernel
from pylinalg.core.validation import check_choice
from pylinalg.matrix.backends.cpu import IKJKernel, IJKKernel

LoopOrder = Literal['ikj', 'ijk']

DEFAULT_ORDER: LoopOrder = 'ikj'

KERNELS: dict[str, Kernel] = {
    'ikj': IKJKernel(),
    'ijk': IJKKernel(),
}


def get_kernel(order: LoopOrder) -> Kernel:
    """
    Look up the kernel for a loop order.

    Raises:
        ValidationError: If order is not a registered loop order
    """
    check_choice(order, KERNELS, 'order')
    return KERNELS[order]


__all__ = [
    "LoopOrder",
    "DEFAULT_ORDER",
    "KERNELS",
    "IKJKernel",
    "IJKKernel",
    "get_kernel",
]
