"""
LU factorization with partial pivoting (LAPACK getrf via SciPy).

Used for the exact inverse of square non-singular matrices and for the
determinant. A matrix is treated as numerically singular when

    min|u_ii| <= n * eps * max|u_ii|

which also covers exactly zero pivots and the zero matrix.

The test is relative to the largest pivot, so it flags badly scaled
matrices as well as rank-deficient ones: diag(1e20, 1) has a pivot ratio
of 1e-20 and is reported singular, even though its determinant is 1e20.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pydensela.core.compute.precision import pivot_cutoff
from pydensela.inverse._common import LUResult


def lu_factorize(a: NDArray) -> LUResult:
    """
    Factorize a square array as P·A = L·U.

    Args:
        a: Finite float64 square array (n x n)

    Returns:
        LUResult with packed factors, pivots, determinant and singular flag
    """
    n = a.shape[0]
    if n == 0:
        return LUResult(
            lu=np.zeros((0, 0)),
            piv=np.zeros(0, dtype=np.int32),
            determinant=1.0,
            singular=False,
        )

    with warnings.catch_warnings():
        # Exact zero pivots are reported through LUResult.singular
        warnings.simplefilter('ignore', sla.LinAlgWarning)
        lu, piv = sla.lu_factor(a, check_finite=False)

    pivots = np.diag(lu)
    n_swaps = int(np.count_nonzero(piv != np.arange(n)))
    sign = -1.0 if n_swaps % 2 else 1.0
    determinant = sign * float(np.prod(pivots))
    singular = bool(np.min(np.abs(pivots)) <= pivot_cutoff(pivots))

    return LUResult(lu=lu, piv=piv, determinant=determinant, singular=singular)


def lu_inverse(factors: LUResult) -> NDArray:
    """Solve A·X = I from an LU factorization; factors must be non-singular."""
    n = factors.lu.shape[0]
    if n == 0:
        return np.zeros((0, 0))
    return sla.lu_solve((factors.lu, factors.piv), np.eye(n), check_finite=False)
