"""
Moore-Penrose pseudo-inverse through the SVD.

    A⁺ = V · Σ⁺ · Uᵗ

Σ⁺ inverts each singular value above max(M, N)·eps·s_max and maps the
others to zero, which keeps the pseudo-inverse of rank-deficient input
bounded instead of amplifying rounding noise.
"""

import numpy as np
from numpy.typing import NDArray

from pydensela.core.validation import check_finite, check_shape
from pydensela.matrix.dense import Matrix, check_matrix
from pydensela.svd.decomposition import compute_svd, numerical_rank, SVDMethod


def pseudo_inverse(a: NDArray, method: SVDMethod = 'lapack') -> tuple[NDArray, int]:
    """
    Pseudo-inverse of an (M x N) array.

    Args:
        a: Finite float64 array
        method: SVD method ('lapack' or 'jacobi')

    Returns:
        (N x M pseudo-inverse, numerical rank)
    """
    m, n = a.shape
    if a.size == 0:
        return np.zeros((n, m)), 0

    factors = compute_svd(a, True, method=method)
    s = factors.s
    k = s.size
    rank = numerical_rank(s, (m, n))

    # s is descending, so the retained values come first
    s_inv = np.zeros(k)
    s_inv[:rank] = 1.0 / s[:rank]
    ai = (factors.Vt[:k, :].T * s_inv) @ factors.U[:, :k].T
    return ai, rank


def pinv(dst: Matrix, a: Matrix, *, method: SVDMethod = 'lapack') -> int:
    """
    Write the pseudo-inverse of a (M x N) into dst (N x M).

    Returns:
        The numerical rank of a

    Raises:
        DimensionError: If dst is not N x M
        ValidationError: If a contains NaN/Inf
        ConvergenceError: If the SVD does not converge
    """
    check_matrix(dst, 'dst')
    check_matrix(a, 'a')
    check_shape(dst.shape, (a.N, a.M), 'dst')
    check_finite(a.data, 'a')

    ai, rank = pseudo_inverse(a.as_array(), method)
    dst.assign(ai)
    return rank
