"""
SVD backends.

Each backend implements the Backend protocol for Matrix -> SVDParams.
"""

from typing import Any

from pydensela.core.result import Result
from pydensela.core.compute.timing import Timer
from pydensela.matrix.dense import Matrix
from pydensela.svd._common import SVDParams
from pydensela.svd._jacobi import svd_jacobi, DEFAULT_MAX_SWEEPS
from pydensela.svd._lapack import svd_lapack
from pydensela.svd.decomposition import numerical_rank


class LAPACKSVDBackend:
    """
    CPU backend using LAPACK gesdd (gesvd on non-convergence).

    This is the reference implementation.
    """

    def __init__(self, compute_uv: bool = True):
        self._compute_uv = compute_uv

    @property
    def name(self) -> str:
        return 'cpu_lapack_svd'

    def solve(self, a: Matrix) -> Result[SVDParams]:
        timer = Timer()
        timer.start()

        with timer.section('svd'):
            factors = svd_lapack(a.as_array(), self._compute_uv)

        with timer.section('rank'):
            rank = numerical_rank(factors.s, a.shape)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'lapack',
            'driver': factors.info.get('driver'),
            'rank': rank,
        }
        return Result(
            params=SVDParams(
                singular_values=factors.s,
                U=factors.U,
                Vt=factors.Vt,
                rank=rank,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=factors.info.get('notes', ()),
        )


class JacobiSVDBackend:
    """
    CPU backend using one-sided Jacobi rotations (pure NumPy).

    Slower than LAPACK but computes small singular values to high
    relative accuracy.
    """

    def __init__(self, compute_uv: bool = True, max_sweeps: int = DEFAULT_MAX_SWEEPS):
        self._compute_uv = compute_uv
        self._max_sweeps = max_sweeps

    @property
    def name(self) -> str:
        return 'cpu_jacobi_svd'

    def solve(self, a: Matrix) -> Result[SVDParams]:
        timer = Timer()
        timer.start()

        with timer.section('svd'):
            factors = svd_jacobi(a.as_array(), self._compute_uv, self._max_sweeps)

        with timer.section('rank'):
            rank = numerical_rank(factors.s, a.shape)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'jacobi',
            'sweeps': factors.info.get('sweeps', 0),
            'rank': rank,
        }
        return Result(
            params=SVDParams(
                singular_values=factors.s,
                U=factors.U,
                Vt=factors.Vt,
                rank=rank,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
