"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair():
    """2x2 operands with a known product [[19, 22], [43, 50]]."""
    return Matrix([[1, 2], [3, 4]]), Matrix([[5, 6], [7, 8]])


@pytest.fixture
def row_vector():
    """1x3 row vector [1, 2, 3]."""
    return Matrix([1, 2, 3])


@pytest.fixture
def random_int_pair(rng):
    """Compatible integer operands of shapes (4, 5) and (5, 3)."""
    a = rng.integers(-9, 10, size=(4, 5))
    b = rng.integers(-9, 10, size=(5, 3))
    return Matrix.from_array(a), Matrix.from_array(b)
