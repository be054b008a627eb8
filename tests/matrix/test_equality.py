"""
Tests for == and is_same().

Equality is exact: same shape and element-wise == with no tolerance.
"""

import math

import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix import Matrix, is_same


class TestEquality:

    def test_reflexive(self, square_pair):
        A, _ = square_pair
        assert is_same(A, A)
        assert A == A

    def test_equal_values(self):
        assert Matrix([[1, 2], [3, 4]]) == Matrix([[1, 2], [3, 4]])

    def test_different_element(self):
        assert Matrix([[1, 2], [3, 4]]) != Matrix([[1, 2], [3, 5]])

    def test_row_vs_column_vector(self):
        """Same flattened elements, different shapes."""
        assert not is_same(Matrix([1, 2, 3]), Matrix([[1], [2], [3]]))
        assert Matrix([1, 2, 3]) != Matrix([[1], [2], [3]])

    def test_2x3_vs_3x2(self):
        assert Matrix(2, 3, 1) != Matrix(3, 2, 1)

    def test_no_tolerance(self):
        assert Matrix([0.1 + 0.2]) != Matrix([0.3])

    def test_int_float_compare_by_value(self):
        assert Matrix([1, 2]) == Matrix([1.0, 2.0])

    def test_nan_not_equal_to_itself(self):
        nan = math.nan
        m = Matrix([nan])
        assert not is_same(m, m)

    def test_non_matrix_comparison(self):
        m = Matrix([[1, 2]])
        assert (m == [[1, 2]]) is False
        assert m != "matrix"

    def test_static_method(self):
        assert Matrix.is_same(Matrix(1), Matrix(1))
        assert not Matrix.is_same(Matrix(1), Matrix(2))

    def test_is_same_rejects_non_matrix(self):
        with pytest.raises(ValidationError):
            is_same(Matrix(1), 1)
