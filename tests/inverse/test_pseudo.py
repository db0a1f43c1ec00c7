"""
Tests for the SVD pseudo-inverse pinv().
"""

import numpy as np
import pytest

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.inverse import pinv
from pydensela.matrix import Matrix


MAGIC_8x6 = [
    [64, 2, 3, 61, 60, 6],
    [9, 55, 54, 12, 13, 51],
    [17, 47, 46, 20, 21, 43],
    [40, 26, 27, 37, 36, 30],
    [32, 34, 35, 29, 28, 38],
    [41, 23, 22, 44, 45, 19],
    [49, 15, 14, 52, 53, 11],
    [8, 58, 59, 5, 4, 62],
]

WIDE_5x6 = [
    [12, 28, 22, 20, 8, 1],
    [0, 3, 5, 17, 28, 1],
    [56, 0, 23, 1, 0, 1],
    [12, 29, 27, 10, 1, 1],
    [9, 4, 13, 8, 22, 1],
]


def _pinv(rows, **kwargs):
    a = Matrix.build(rows)
    ai = Matrix.zeros(a.N, a.M)
    rank = pinv(ai, a, **kwargs)
    return rank, ai


def _assert_moore_penrose(a, x, atol):
    np.testing.assert_allclose(a @ x @ a, a, atol=atol)
    np.testing.assert_allclose(x @ a @ x, x, atol=atol)
    np.testing.assert_allclose((a @ x).T, a @ x, atol=atol)
    np.testing.assert_allclose((x @ a).T, x @ a, atol=atol)


# ═══════════════════════════════════════════════════════════════════════
# Reference values
# ═══════════════════════════════════════════════════════════════════════


class TestReferenceValues:

    def test_4x5_with_zero_row(self):
        rank, ai = _pinv([
            [1, 0, 0, 0, 2],
            [0, 0, 3, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 4, 0, 0, 0],
        ])
        assert rank == 3
        expected = [
            [0.2, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 0.25],
            [0.0, 1.0 / 3.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 0.0],
            [0.4, 0.0, 0.0, 0.0],
        ]
        np.testing.assert_allclose(ai.as_array(), expected, rtol=0, atol=1e-14)

    def test_5x6_full_row_rank(self):
        rank, ai = _pinv(WIDE_5x6)
        assert rank == 5
        expected_first_row = [
            5.6387724512344639e-01, -6.0176177188969326e-01, -7.6500652148749224e-02,
            -5.6389938864086908e-01, 5.8595836573334192e-01,
        ]
        expected_last_row = [
            -1.1017522295492406e+00, 1.2149323757487696e+00, 1.9244991110051662e-01,
            1.0958269819071325e+00, -1.1998242501940171e+00,
        ]
        np.testing.assert_allclose(ai.as_array()[0], expected_first_row, rtol=1e-10)
        np.testing.assert_allclose(ai.as_array()[-1], expected_last_row, rtol=1e-10)
        a = np.array(WIDE_5x6, dtype=float)
        np.testing.assert_allclose(a @ ai.as_array(), np.eye(5), atol=1e-11)

    def test_8x6_rank_three(self):
        rank, ai = _pinv(MAGIC_8x6)
        assert rank == 3
        a = np.array(MAGIC_8x6, dtype=float)
        _assert_moore_penrose(a, ai.as_array(), atol=1e-10)

    def test_8x6_noise_directions_not_amplified(self):
        """Near-zero singular values are dropped, so the result stays bounded."""
        _, ai = _pinv(MAGIC_8x6)
        assert np.max(np.abs(ai.as_array())) < 1.0


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    @pytest.mark.parametrize("shape", [(7, 4), (3, 6), (5, 5), (1, 4), (4, 1)])
    def test_matches_numpy(self, rng, shape):
        arr = rng.standard_normal(shape)
        rank, ai = _pinv(arr)
        assert rank == min(shape)
        np.testing.assert_allclose(ai.as_array(), np.linalg.pinv(arr), atol=1e-12)

    def test_rank_deficient_identities(self, rank_deficient_square):
        rank, ai = _pinv(rank_deficient_square)
        assert rank == 3
        _assert_moore_penrose(rank_deficient_square.as_array(), ai.as_array(), atol=1e-10)

    def test_jacobi_method_agrees(self, tall_matrix):
        _, lapack = _pinv(tall_matrix, method="lapack")
        _, jacobi = _pinv(tall_matrix, method="jacobi")
        np.testing.assert_allclose(jacobi.as_array(), lapack.as_array(), atol=1e-12)

    def test_zero_matrix(self):
        rank, ai = _pinv(np.zeros((3, 2)))
        assert rank == 0
        np.testing.assert_array_equal(ai.as_array(), np.zeros((2, 3)))

    def test_empty_matrix(self):
        rank, ai = _pinv(np.zeros((0, 3)))
        assert rank == 0
        assert ai.shape == (3, 0)


# ═══════════════════════════════════════════════════════════════════════
# Invalid input
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidInput:

    def test_dst_shape(self):
        with pytest.raises(DimensionError, match="dst"):
            pinv(Matrix.zeros(3, 2), Matrix.zeros(3, 2))

    def test_nan_rejected(self):
        a = Matrix.from_nested([[np.nan, 1.0]])
        with pytest.raises(ValidationError, match="non-finite"):
            pinv(Matrix.zeros(2, 1), a)

    def test_unknown_svd_method(self):
        with pytest.raises(ValidationError, match="method"):
            pinv(Matrix.zeros(2, 2), Matrix.identity(2), method="qr")
