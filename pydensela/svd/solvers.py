"""
Solver dispatch for singular value decomposition.

This module provides the decompose() function (public API) and backend selection.
"""

from numpy.typing import ArrayLike

from pydensela.core.exceptions import ValidationError
from pydensela.core.protocols import Backend
from pydensela.core.validation import check_finite
from pydensela.matrix.dense import Matrix
from pydensela.svd._jacobi import DEFAULT_MAX_SWEEPS
from pydensela.svd.backends import LAPACKSVDBackend, JacobiSVDBackend
from pydensela.svd.decomposition import SVDMethod
from pydensela.svd.solution import SVDSolution


def decompose(
    a: Matrix | ArrayLike,
    *,
    method: SVDMethod = 'lapack',
    compute_uv: bool = True,
    max_sweeps: int = DEFAULT_MAX_SWEEPS,
) -> SVDSolution:
    """
    Singular value decomposition a = U·diag(s)·Vᵗ.

    Args:
        a: Matrix or 2-D array-like (M x N)
        method: 'lapack' (reference) or 'jacobi'
        compute_uv: If False only singular values are computed
        max_sweeps: Sweep limit for the Jacobi method

    Returns:
        SVDSolution with descending singular values and, optionally, U and Vt

    Raises:
        ValidationError: If input is invalid or method unknown
        DimensionError: If input is not 2-D
        ConvergenceError: If the factorization does not converge

    Example:
        >>> sol = decompose([[1, 2], [3, 4]])
        >>> sol.singular_values
        array([5.4649857 , 0.36596619])
    """
    matrix = Matrix.build(a)
    check_finite(matrix.data, 'a')
    backend = _get_backend(method, compute_uv, max_sweeps)
    result = backend.solve(matrix)
    return SVDSolution(_result=result, _matrix=matrix)


def _get_backend(method: str, compute_uv: bool, max_sweeps: int) -> Backend:
    if method == 'lapack':
        return LAPACKSVDBackend(compute_uv=compute_uv)
    elif method == 'jacobi':
        return JacobiSVDBackend(compute_uv=compute_uv, max_sweeps=max_sweeps)
    else:
        raise ValidationError(f"Unknown SVD method: {method!r}")
