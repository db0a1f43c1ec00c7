"""
SVD via LAPACK (through SciPy).

The divide-and-conquer driver (gesdd) is tried first. It is fast but can
fail to converge on some pathological inputs, in which case the
QR-iteration driver (gesvd) is used. Both return singular values in
descending order.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pydensela.core.exceptions import ConvergenceError
from pydensela.svd._common import SVDFactors, empty_factors


def svd_lapack(a: NDArray, compute_uv: bool = True) -> SVDFactors:
    """
    Full SVD of a (m x n) using LAPACK.

    Args:
        a: Finite float64 matrix
        compute_uv: If False only the singular values are computed

    Returns:
        SVDFactors with U (m x m) and Vt (n x n) when compute_uv is True

    Raises:
        ConvergenceError: If both gesdd and gesvd fail to converge
    """
    m, n = a.shape
    if a.size == 0:
        return empty_factors(m, n, compute_uv)

    notes: list[str] = []
    try:
        out = _call_driver(a, compute_uv, 'gesdd')
        driver = 'gesdd'
    except np.linalg.LinAlgError as e:
        msg = f"SVD driver gesdd did not converge ({e}); retried with gesvd"
        warnings.warn(msg, RuntimeWarning, stacklevel=3)
        notes.append(msg)
        try:
            out = _call_driver(a, compute_uv, 'gesvd')
        except np.linalg.LinAlgError as e2:
            raise ConvergenceError(
                f"SVD did not converge with gesdd or gesvd for {m}x{n} matrix: {e2}",
                iterations=0,
                reason='lapack',
            ) from e2
        driver = 'gesvd'

    info = {'driver': driver, 'notes': tuple(notes)}
    if compute_uv:
        U, s, Vt = out
        return SVDFactors(s=s, U=U, Vt=Vt, info=info)
    return SVDFactors(s=out, U=None, Vt=None, info=info)


def _call_driver(a: NDArray, compute_uv: bool, driver: str):
    return sla.svd(
        a,
        full_matrices=True,
        compute_uv=compute_uv,
        overwrite_a=False,
        check_finite=False,
        lapack_driver=driver,
    )
