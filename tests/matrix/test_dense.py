"""
Tests for the dense Matrix container.
"""

import numpy as np
import pytest

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.matrix import Matrix
from pydensela.matrix.dense import check_matrix


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zeros(self):
        a = Matrix.zeros(2, 3)
        assert a.M == 2
        assert a.N == 3
        assert a.shape == (2, 3)
        assert a.size == 6
        np.testing.assert_array_equal(a.data, np.zeros(6))

    def test_zeros_empty(self):
        a = Matrix.zeros(0, 4)
        assert a.shape == (0, 4)
        assert a.data.size == 0

    def test_zeros_negative_rejected(self):
        with pytest.raises(DimensionError, match="non-negative"):
            Matrix.zeros(-1, 2)

    def test_identity(self):
        a = Matrix.identity(3)
        np.testing.assert_array_equal(a.as_array(), np.eye(3))

    def test_from_nested_row_major(self):
        a = Matrix.from_nested([[1, 2, 3], [4, 5, 6]])
        assert a.shape == (2, 3)
        np.testing.assert_array_equal(a.data, [1, 2, 3, 4, 5, 6])
        assert a.data.dtype == np.float64

    def test_from_nested_ragged_rejected(self):
        with pytest.raises(DimensionError, match="row 1 has length 1, expected 2"):
            Matrix.from_nested([[1, 2], [3]])

    def test_from_nested_empty(self):
        a = Matrix.from_nested([])
        assert a.shape == (0, 0)

    def test_from_nested_empty_rows(self):
        a = Matrix.from_nested([[], []])
        assert a.shape == (2, 0)

    def test_from_nested_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.from_nested([["a", "b"], ["c", "d"]])

    def test_from_nested_is_deep_copy(self):
        rows = [[1.0, 2.0], [3.0, 4.0]]
        a = Matrix.from_nested(rows)
        rows[0][0] = 99.0
        assert a.get(0, 0) == 1.0

    def test_from_array_is_deep_copy(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        a = Matrix.from_array(arr)
        arr[0, 0] = 99.0
        assert a.get(0, 0) == 1.0

    def test_from_array_fortran_order(self):
        arr = np.asfortranarray([[1.0, 2.0], [3.0, 4.0]])
        a = Matrix.from_array(arr)
        np.testing.assert_array_equal(a.data, [1.0, 2.0, 3.0, 4.0])

    def test_from_array_requires_2d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.zeros(3))

    def test_inconsistent_backing_store_rejected(self):
        with pytest.raises(DimensionError, match="backing store"):
            Matrix(_data=np.zeros(5), _m=2, _n=3)

    def test_build_dispatch(self):
        a = Matrix.from_nested([[1, 2]])
        assert Matrix.build(a) is a
        assert Matrix.build([[1, 2], [3, 4]]).shape == (2, 2)
        assert Matrix.build(np.ones((3, 1))).shape == (3, 1)


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get(self):
        a = Matrix.from_nested([[1, 2], [3, 2]])
        assert a.get(1, 0) == 3.0

    def test_set(self):
        a = Matrix.zeros(2, 2)
        a.set(0, 1, 7.5)
        assert a.get(0, 1) == 7.5
        assert a.data[1] == 7.5

    def test_add_accumulates(self):
        a = Matrix.from_nested([[1.0, 0.0]])
        a.add(0, 0, 0.5)
        a.add(0, 0, 0.25)
        assert a.get(0, 0) == 1.75

    def test_out_of_range(self):
        a = Matrix.zeros(2, 3)
        with pytest.raises(IndexError):
            a.get(2, 0)
        with pytest.raises(IndexError):
            a.set(0, 3, 1.0)
        with pytest.raises(IndexError):
            a.add(-1, 0, 1.0)

    def test_fill(self):
        a = Matrix.zeros(2, 2)
        a.fill(3.0)
        np.testing.assert_array_equal(a.data, [3.0] * 4)


# ═══════════════════════════════════════════════════════════════════════
# Bulk access
# ═══════════════════════════════════════════════════════════════════════


class TestBulkAccess:

    def test_data_is_live_view(self):
        a = Matrix.zeros(2, 2)
        a.data[3] = 5.0
        assert a.get(1, 1) == 5.0

    def test_as_array_is_live_view(self):
        a = Matrix.zeros(2, 3)
        a.as_array()[1, 2] = 4.0
        assert a.get(1, 2) == 4.0

    def test_assign(self):
        a = Matrix.zeros(2, 2)
        a.assign(np.array([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(a.data, [1, 2, 3, 4])

    def test_assign_shape_mismatch(self):
        a = Matrix.zeros(2, 3)
        with pytest.raises(DimensionError, match="expected shape"):
            a.assign(np.zeros((3, 2)))

    def test_copy_is_independent(self):
        a = Matrix.from_nested([[1, 2], [3, 4]])
        b = a.copy()
        b.set(0, 0, 10.0)
        assert a.get(0, 0) == 1.0

    def test_transpose(self):
        a = Matrix.from_nested([[1, 2, 3], [4, 5, 6]])
        t = a.transpose()
        assert t.shape == (3, 2)
        np.testing.assert_array_equal(t.as_array(), [[1, 4], [2, 5], [3, 6]])

    def test_is_square(self):
        assert Matrix.zeros(3, 3).is_square
        assert not Matrix.zeros(3, 2).is_square

    def test_repr(self):
        assert repr(Matrix.zeros(2, 5)) == "Matrix(M=2, N=5)"

    def test_str_shows_values(self):
        assert "2." in str(Matrix.from_nested([[1, 2]]))


class TestCheckMatrix:

    def test_accepts_matrix(self):
        a = Matrix.zeros(1, 1)
        assert check_matrix(a, "a") is a

    def test_rejects_array(self):
        with pytest.raises(ValidationError, match="expected Matrix, got ndarray"):
            check_matrix(np.zeros((2, 2)), "a")
