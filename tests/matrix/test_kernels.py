"""
Tests for the loop-order kernels and their registry.
"""

import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Kernel
from pylinalg.matrix.backends import (
    DEFAULT_ORDER,
    KERNELS,
    IJKKernel,
    IKJKernel,
    get_kernel,
)


LEFT = [[1, 2, 3], [4, 5, 6]]
RIGHT = [[7, 8], [9, 10], [11, 12]]
PRODUCT = [[58, 64], [139, 154]]


class TestRegistry:

    def test_default_is_ikj(self):
        assert DEFAULT_ORDER == "ikj"
        assert isinstance(get_kernel(DEFAULT_ORDER), IKJKernel)

    def test_registered_orders(self):
        assert set(KERNELS) == {"ikj", "ijk"}

    def test_names_match_keys(self):
        for order, kernel in KERNELS.items():
            assert kernel.name == order

    def test_kernels_satisfy_protocol(self):
        for kernel in KERNELS.values():
            assert isinstance(kernel, Kernel)

    def test_unknown_order(self):
        with pytest.raises(ValidationError, match="order"):
            get_kernel("kij")


@pytest.mark.parametrize("kernel", [IKJKernel(), IJKKernel()], ids=["ikj", "ijk"])
class TestKernels:

    def test_product(self, kernel):
        assert kernel.multiply(LEFT, RIGHT, 0) == PRODUCT

    def test_inputs_untouched(self, kernel):
        left = [row[:] for row in LEFT]
        right = [row[:] for row in RIGHT]
        kernel.multiply(left, right, 0)
        assert left == LEFT
        assert right == RIGHT

    def test_result_rows_independent(self, kernel):
        out = kernel.multiply([[1], [1]], [[1, 1]], 0)
        out[0][0] = 99
        assert out[1][0] == 1

    def test_zero_seeds_accumulator(self, kernel):
        assert kernel.multiply([[1]], [[1]], 0.0) == [[1.0]]
        assert isinstance(kernel.multiply([[1]], [[1]], 0.0)[0][0], float)


def test_kernels_agree_on_random_ints(rng):
    left = rng.integers(-50, 50, size=(6, 7)).tolist()
    right = rng.integers(-50, 50, size=(7, 5)).tolist()
    assert IKJKernel().multiply(left, right, 0) == IJKKernel().multiply(left, right, 0)
