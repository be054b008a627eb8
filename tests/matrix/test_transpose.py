"""
Tests for transpose(), Matrix.transpose() and Matrix.T.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix import Matrix, transpose


SHAPES = [(1, 1), (1, 4), (4, 1), (2, 3), (3, 2), (5, 5)]


class TestTranspose:

    def test_values(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert transpose(m) == Matrix([[1, 4], [2, 5], [3, 6]])

    def test_row_to_column(self):
        assert transpose(Matrix([1, 2, 3])) == Matrix([[1], [2], [3]])

    def test_method_and_property(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m.transpose() == m.T == transpose(m)

    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_shape_law(self, rng, rows, cols):
        m = Matrix.from_array(rng.integers(0, 10, size=(rows, cols)))
        assert transpose(m).size() == (cols, rows)

    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_involution(self, rng, rows, cols):
        m = Matrix.from_array(rng.standard_normal((rows, cols)))
        assert transpose(transpose(m)) == m

    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_elementwise(self, rng, rows, cols):
        m = Matrix.from_array(rng.integers(0, 10, size=(rows, cols)))
        t = transpose(m)
        for i in range(rows):
            for j in range(cols):
                assert t[j, i] == m[i, j]

    def test_matches_numpy(self, rng):
        arr = rng.standard_normal((3, 5))
        np.testing.assert_array_equal(transpose(Matrix(arr)).to_array(), arr.T)

    def test_source_unchanged(self):
        m = Matrix([[1, 2, 3]])
        transpose(m)
        assert m.size() == (1, 3)

    def test_non_matrix_rejected(self):
        with pytest.raises(ValidationError):
            transpose([[1, 2]])
