"""
Core protocols for pylinalg.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
any object with the right shape can serve as a kernel.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Kernel(Protocol):
    """
    Protocol for matrix-product kernels.

    A kernel multiplies two rectangular grids (lists of rows) whose inner
    dimensions already agree. Shape checking is the caller's job; kernels
    only compute.

    Kernels are stateless, which makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Kernel identifier.

        Convention: the loop order, outermost first. Examples: 'ikj', 'ijk'
        """
        ...

    def multiply(
        self,
        left: list[list[Any]],
        right: list[list[Any]],
        zero: Any,
    ) -> list[list[Any]]:
        """
        Compute the product grid.

        Args:
            left: m x n grid
            right: n x k grid
            zero: Additive identity used to pre-fill the m x k result

        Returns:
            Newly allocated m x k grid
        """
        ...
