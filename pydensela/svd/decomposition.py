"""
Singular value decomposition into caller-owned buffers.

    svd(s, u, vt, a, want_uv)

factorizes a = U·diag(s)·Vᵗ with U (M x M) and Vᵗ (N x N) orthogonal and
s the min(M, N) singular values in descending order. When M != N only the
first min(M, N) columns of U / rows of Vᵗ take part in the reconstruction;
the remaining ones are an orthonormal completion.

Singular values at or near zero signal rank deficiency; the pseudo-inverse
and the numerical rank use the cutoff max(M, N)·eps·s_max.
"""

from collections.abc import MutableSequence
from typing import Literal
import numpy as np
from numpy.typing import NDArray

from pydensela.core.compute.precision import singular_value_cutoff
from pydensela.core.exceptions import ValidationError
from pydensela.core.validation import check_finite, check_length, check_shape
from pydensela.matrix.dense import Matrix, check_matrix
from pydensela.svd._common import SVDFactors
from pydensela.svd._jacobi import svd_jacobi, DEFAULT_MAX_SWEEPS
from pydensela.svd._lapack import svd_lapack


SVDMethod = Literal['lapack', 'jacobi']

SVD_METHODS: frozenset[str] = frozenset({'lapack', 'jacobi'})


def svd(
    s: MutableSequence[float],
    u: Matrix | None,
    vt: Matrix | None,
    a: Matrix,
    want_uv: bool,
    *,
    method: SVDMethod = 'lapack',
    max_sweeps: int = DEFAULT_MAX_SWEEPS,
) -> None:
    """
    Singular value decomposition of a, written into s, u and vt.

    Args:
        s: Output sequence of length min(M, N) (list or 1-D ndarray)
        u: Output M x M matrix; ignored (may be None) when want_uv is False
        vt: Output N x N matrix; ignored (may be None) when want_uv is False
        a: Input M x N matrix (not modified)
        want_uv: If False only s is computed and written
        method: 'lapack' (gesdd, falling back to gesvd) or 'jacobi'
        max_sweeps: Sweep limit for the Jacobi method

    Raises:
        DimensionError: If an output buffer has the wrong size
        ValidationError: If a contains NaN/Inf or method is unknown
        ConvergenceError: If the factorization does not converge

    Example:
        >>> a = Matrix.from_nested([[1, 2], [3, 4]])
        >>> s = [0.0, 0.0]
        >>> u, vt = Matrix.zeros(2, 2), Matrix.zeros(2, 2)
        >>> svd(s, u, vt, a, True)
        >>> s
        [5.464985704219043, 0.3659661906262578]
    """
    check_matrix(a, 'a')
    k = min(a.M, a.N)
    check_length(len(s), k, 's')
    if want_uv:
        check_matrix(u, 'u')
        check_matrix(vt, 'vt')
        check_shape(u.shape, (a.M, a.M), 'u')
        check_shape(vt.shape, (a.N, a.N), 'vt')

    factors = compute_svd(a.as_array(), want_uv, method=method, max_sweeps=max_sweeps)

    s[:] = [float(v) for v in factors.s]
    if want_uv:
        u.assign(factors.U)
        vt.assign(factors.Vt)


def compute_svd(
    a: NDArray,
    compute_uv: bool,
    *,
    method: SVDMethod = 'lapack',
    max_sweeps: int = DEFAULT_MAX_SWEEPS,
) -> SVDFactors:
    """
    Dispatch an (M x N) array to the requested SVD kernel.

    Raises:
        ValidationError: If a contains NaN/Inf or method is unknown
        ConvergenceError: If the factorization does not converge
    """
    check_finite(a, 'a')
    if method == 'lapack':
        return svd_lapack(a, compute_uv)
    if method == 'jacobi':
        return svd_jacobi(a, compute_uv, max_sweeps)
    raise ValidationError(
        f"method: expected one of {sorted(SVD_METHODS)}, got {method!r}"
    )


def svd_values(a: Matrix, *, method: SVDMethod = 'lapack') -> NDArray[np.float64]:
    """Singular values of a, descending, as a 1-D array."""
    check_matrix(a, 'a')
    return compute_svd(a.as_array(), False, method=method).s


def numerical_rank(s: NDArray, shape: tuple[int, int]) -> int:
    """
    Number of singular values above max(M, N)·eps·s_max.

    Args:
        s: Singular values (any order)
        shape: Shape (M, N) of the decomposed matrix

    Returns:
        Numerical rank (0 for an empty or zero matrix)
    """
    s = np.asarray(s, dtype=np.float64)
    if s.size == 0:
        return 0
    s_max = float(np.max(s))
    if s_max == 0.0:
        return 0
    return int(np.sum(s > singular_value_cutoff(s_max, shape)))
