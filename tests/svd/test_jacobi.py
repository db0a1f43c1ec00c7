"""
Tests for the one-sided Jacobi SVD kernel.

The Jacobi path is checked against LAPACK on singular values and on the
structural properties (orthogonality, reconstruction); the factors
themselves are only unique up to signs and rotations within repeated
singular values, so they are not compared entrywise.
"""

import numpy as np
import pytest

from pydensela.core.exceptions import ConvergenceError
from pydensela.svd._jacobi import svd_jacobi, _complete_basis
from pydensela.svd._lapack import svd_lapack


def _check_factors(a, f, atol=1e-12):
    m, n = a.shape
    k = min(m, n)
    assert f.U.shape == (m, m)
    assert f.Vt.shape == (n, n)
    np.testing.assert_allclose(f.U.T @ f.U, np.eye(m), atol=atol)
    np.testing.assert_allclose(f.Vt @ f.Vt.T, np.eye(n), atol=atol)
    rebuilt = (f.U[:, :k] * f.s) @ f.Vt[:k, :]
    np.testing.assert_allclose(rebuilt, a, atol=atol * max(1.0, np.abs(a).max()))


# ═══════════════════════════════════════════════════════════════════════
# Agreement with LAPACK
# ═══════════════════════════════════════════════════════════════════════


class TestAgreementWithLapack:

    @pytest.mark.parametrize("shape", [(5, 5), (8, 3), (3, 8), (2, 1), (1, 4)])
    def test_random(self, rng, shape):
        a = rng.standard_normal(shape)
        jac = svd_jacobi(a)
        ref = svd_lapack(a)
        np.testing.assert_allclose(jac.s, ref.s, rtol=1e-12)
        _check_factors(a, jac)

    def test_2x2_reference(self):
        f = svd_jacobi(np.array([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_allclose(f.s, [5.4649857042190426, 0.36596619062625751], rtol=1e-13)

    def test_5x5_reference(self):
        a = np.array([
            [12, 28, 22, 20, 8],
            [0, 3, 5, 17, 28],
            [56, 0, 23, 1, 0],
            [12, 29, 27, 10, 1],
            [9, 4, 13, 8, 22],
        ], dtype=float)
        f = svd_jacobi(a)
        np.testing.assert_allclose(
            f.s,
            [76.98680631820568, 46.904429440544916, 32.931871778592146,
             8.1528007049378086, 0.17266616332203916],
            rtol=1e-12,
        )
        _check_factors(a, f)

    def test_rank_deficient(self):
        a = np.array([
            [64, 2, 3, 61, 60, 6],
            [9, 55, 54, 12, 13, 51],
            [17, 47, 46, 20, 21, 43],
            [40, 26, 27, 37, 36, 30],
            [32, 34, 35, 29, 28, 38],
            [41, 23, 22, 44, 45, 19],
            [49, 15, 14, 52, 53, 11],
            [8, 58, 59, 5, 4, 62],
        ], dtype=float)
        f = svd_jacobi(a)
        np.testing.assert_allclose(
            f.s[:3], [225.16957799370013, 127.18652890528337, 11.757891442113218], rtol=1e-12
        )
        assert np.all(f.s[3:] < 1e-11)
        _check_factors(a, f)

    def test_graded_matrix_small_value(self):
        """Small singular values of a graded diagonal are exact."""
        a = np.diag([1.0, 1e-8, 1e-16])
        f = svd_jacobi(a)
        np.testing.assert_allclose(f.s, [1.0, 1e-8, 1e-16], rtol=1e-14)

    def test_tiny_singular_value_does_not_underflow(self):
        a = np.diag([1.0, 1e-14, 1e-300])
        f = svd_jacobi(a)
        np.testing.assert_allclose(f.s, [1.0, 1e-14, 1e-300], rtol=1e-14)
        assert f.s[2] > 0.0
        np.testing.assert_allclose(f.s, svd_lapack(a).s, rtol=1e-14)
        _check_factors(a, f)


# ═══════════════════════════════════════════════════════════════════════
# Structure
# ═══════════════════════════════════════════════════════════════════════


class TestStructure:

    def test_descending_order(self):
        a = np.diag([1.0, 3.0, 2.0])
        f = svd_jacobi(a)
        np.testing.assert_array_equal(f.s, [3.0, 2.0, 1.0])
        _check_factors(a, f)

    def test_values_only(self, rng):
        a = rng.standard_normal((4, 4))
        f = svd_jacobi(a, compute_uv=False)
        assert f.U is None
        assert f.Vt is None
        assert f.info["sweeps"] >= 1

    def test_zero_matrix(self):
        f = svd_jacobi(np.zeros((3, 2)))
        np.testing.assert_array_equal(f.s, [0.0, 0.0])
        np.testing.assert_array_equal(f.U, np.eye(3))

    def test_zero_column(self):
        a = np.array([[1.0, 0.0], [2.0, 0.0], [2.0, 0.0]])
        f = svd_jacobi(a)
        np.testing.assert_allclose(f.s, [3.0, 0.0], atol=1e-15)
        _check_factors(a, f)

    def test_negative_scalar(self):
        f = svd_jacobi(np.array([[-3.0]]))
        assert f.s[0] == 3.0
        assert f.U[0, 0] * f.Vt[0, 0] == -1.0

    def test_empty(self):
        f = svd_jacobi(np.zeros((0, 2)))
        assert f.s.size == 0
        assert f.Vt.shape == (2, 2)


# ═══════════════════════════════════════════════════════════════════════
# Convergence
# ═══════════════════════════════════════════════════════════════════════


class TestConvergence:

    def test_sweep_limit_raises(self, rng):
        a = rng.standard_normal((8, 8))
        with pytest.raises(ConvergenceError) as exc_info:
            svd_jacobi(a, max_sweeps=1)
        err = exc_info.value
        assert err.iterations == 1
        assert err.reason == "max_sweeps"
        assert err.final_change > err.threshold

    def test_orthogonal_input_converges_in_one_sweep(self):
        f = svd_jacobi(np.diag([2.0, 5.0]))
        assert f.info["sweeps"] == 1


class TestCompleteBasis:

    def test_extends_to_orthogonal(self):
        q_r = np.array([[1.0], [0.0], [0.0]])
        q = _complete_basis(q_r, 3)
        np.testing.assert_allclose(q.T @ q, np.eye(3), atol=1e-15)
        np.testing.assert_array_equal(q[:, 0], [1.0, 0.0, 0.0])

    def test_no_columns(self):
        np.testing.assert_array_equal(_complete_basis(np.zeros((2, 0)), 2), np.eye(2))
