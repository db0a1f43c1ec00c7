"""
Inversion backends.

Three strategies behind one capability ("invert a matrix"), each
implementing the Backend protocol for Matrix -> InverseParams:

    ClosedFormBackend      1x1/2x2/3x3 cofactor formulas
    LUBackend              LU with partial pivoting (square)
    PseudoInverseBackend   SVD pseudo-inverse (any shape)

None of them raises on singular input. The singular flag in the payload
and in Result.info reports it; invert() decides what to do with it.
"""

from typing import Any
import numpy as np

from pydensela.core.result import Result
from pydensela.core.compute.timing import Timer
from pydensela.core.compute.tolerances import DEFAULT_ZERO_DET_TOL
from pydensela.inverse._closed_form import closed_form_inverse
from pydensela.inverse._common import InverseParams
from pydensela.inverse._lu import lu_factorize, lu_inverse
from pydensela.inverse._pseudo import pseudo_inverse
from pydensela.matrix.dense import Matrix
from pydensela.svd.decomposition import SVDMethod, svd_values, numerical_rank


class ClosedFormBackend:
    """
    CPU backend using closed-form cofactor inverses (sizes 1 to 3).

    A singular matrix (|det| <= zero_det_tol) yields a zero inverse.
    """

    def __init__(self, zero_det_tol: float = DEFAULT_ZERO_DET_TOL):
        self._zero_det_tol = zero_det_tol

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, a: Matrix) -> Result[InverseParams]:
        timer = Timer()
        timer.start()

        with timer.section('cofactors'):
            ai, det = closed_form_inverse(a.as_array(), self._zero_det_tol)

        singular = ai is None
        warnings: tuple[str, ...] = ()
        if singular:
            with timer.section('rank'):
                rank = numerical_rank(svd_values(a), a.shape)
            ai = np.zeros((a.N, a.M))
            warnings = (
                f"singular matrix: |det| = {abs(det):.3e} <= "
                f"zero_det_tol = {self._zero_det_tol:.3e}; inverse set to zero",
            )
        else:
            rank = a.M

        timer.stop()

        info: dict[str, Any] = {
            'method': 'closed_form',
            'singular': singular,
            'rank': rank,
            'zero_det_tol': self._zero_det_tol,
        }
        return Result(
            params=InverseParams(inverse=ai, determinant=det, rank=rank, singular=singular),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


class LUBackend:
    """
    CPU backend using LU decomposition with partial pivoting.

    When the pivots reveal a singular matrix the inverse is replaced by
    the SVD pseudo-inverse and the fallback is recorded in the warnings.
    """

    def __init__(self, svd_method: SVDMethod = 'lapack'):
        self._svd_method = svd_method

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, a: Matrix) -> Result[InverseParams]:
        timer = Timer()
        timer.start()

        arr = a.as_array()
        with timer.section('lu_factorization'):
            factors = lu_factorize(arr)

        warnings: tuple[str, ...] = ()
        if factors.singular:
            with timer.section('pseudo_inverse'):
                ai, rank = pseudo_inverse(arr, self._svd_method)
            method = 'lu_pinv'
            warnings = (
                f"singular matrix: LU pivots below n*eps*max|u_ii|, "
                f"pseudo-inverse used (rank {rank} of {a.M})",
            )
        else:
            with timer.section('lu_solve'):
                ai = lu_inverse(factors)
            rank = a.M
            method = 'lu'

        timer.stop()

        info: dict[str, Any] = {
            'method': method,
            'singular': factors.singular,
            'rank': rank,
        }
        return Result(
            params=InverseParams(
                inverse=ai,
                determinant=factors.determinant,
                rank=rank,
                singular=factors.singular,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


class PseudoInverseBackend:
    """
    CPU backend using the SVD pseudo-inverse A⁺ = V·Σ⁺·Uᵗ.

    Handles rectangular and rank-deficient matrices. The determinant is
    reported only for square input (from an LU factorization).
    """

    def __init__(self, svd_method: SVDMethod = 'lapack'):
        self._svd_method = svd_method

    @property
    def name(self) -> str:
        return 'cpu_svd_pinv'

    def solve(self, a: Matrix) -> Result[InverseParams]:
        timer = Timer()
        timer.start()

        arr = a.as_array()
        with timer.section('pseudo_inverse'):
            ai, rank = pseudo_inverse(arr, self._svd_method)

        determinant: float | None = None
        if a.is_square:
            with timer.section('determinant'):
                determinant = lu_factorize(arr).determinant

        timer.stop()

        singular = rank < min(a.M, a.N)
        info: dict[str, Any] = {
            'method': 'pinv',
            'svd_method': self._svd_method,
            'singular': singular,
            'rank': rank,
        }
        return Result(
            params=InverseParams(
                inverse=ai,
                determinant=determinant,
                rank=rank,
                singular=singular,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
