"""
One-sided (Hestenes) Jacobi SVD.

For m >= n, plane rotations are applied to the columns of W = A (and
accumulated into V) until every pair of columns is orthogonal:

    A·V = W,  W = U·Σ  with  σ_j = ‖w_j‖,  u_j = w_j / σ_j

The rotation for a column pair (p, q) with α = ‖w_p‖², β = ‖w_q‖²,
γ = w_pᵗw_q is

    ζ = (β − α) / 2γ,  t = sign(ζ) / (|ζ| + √(1 + ζ²)),
    c = 1 / √(1 + t²),  s = c·t

A pair is considered orthogonal when |γ| ≤ m·eps·√(αβ). Columns whose
norm has fallen below eps·‖A‖_F are numerically zero and are not
rotated. The matrix with m < n is handled through its transpose.

Singular values are sorted into descending order explicitly. Columns of
U belonging to singular values at or below the cutoff
max(m, n)·eps·σ_max carry no direction information, so U is completed
to a full orthogonal basis from a complete QR factorization of the
retained columns.

References:
    Demmel, J. & Veselić, K. (1992). Jacobi's method is more accurate
    than QR. SIAM J. Matrix Anal. Appl., 13(4), 1204-1245.
"""

import math

import numpy as np
from numpy.typing import NDArray

from pydensela.core.compute.precision import EPSILON_64, singular_value_cutoff
from pydensela.core.exceptions import ConvergenceError
from pydensela.svd._common import SVDFactors, empty_factors


DEFAULT_MAX_SWEEPS = 60


def svd_jacobi(
    a: NDArray,
    compute_uv: bool = True,
    max_sweeps: int = DEFAULT_MAX_SWEEPS,
) -> SVDFactors:
    """
    Full SVD of a (m x n) by one-sided Jacobi rotations.

    Args:
        a: Finite float64 matrix
        compute_uv: If False U and Vt are not returned
        max_sweeps: Maximum number of sweeps over all column pairs

    Returns:
        SVDFactors with descending singular values; info holds 'sweeps'

    Raises:
        ConvergenceError: If columns are not orthogonal after max_sweeps
    """
    m, n = a.shape
    if a.size == 0:
        return empty_factors(m, n, compute_uv)

    if m < n:
        f = svd_jacobi(a.T, compute_uv, max_sweeps)
        if not compute_uv:
            return f
        # A = Bᵗ = (U_b Σ V_bᵗ)ᵗ = V_b Σ U_bᵗ
        return SVDFactors(s=f.s, U=f.Vt.T, Vt=f.U.T, info=f.info)

    W = np.array(a, dtype=np.float64, copy=True)
    V = np.eye(n)
    tol = m * EPSILON_64
    floor = (EPSILON_64 * float(np.linalg.norm(W))) ** 2

    sweeps = 0
    off = 0.0
    for sweeps in range(1, max_sweeps + 1):
        off = _sweep(W, V, tol, floor)
        if off <= tol:
            break
    else:
        raise ConvergenceError(
            f"Jacobi SVD did not converge in {max_sweeps} sweeps "
            f"(max column coupling {off:.3e} > {tol:.3e})",
            iterations=max_sweeps,
            final_change=off,
            reason='max_sweeps',
            threshold=tol,
        )

    # Column norms without squaring, so tiny singular values do not underflow
    s = np.hypot.reduce(W, axis=0, initial=0.0)
    order = np.argsort(-s, kind='stable')
    s = s[order]
    info = {'sweeps': sweeps, 'off_diagonal': off}
    if not compute_uv:
        return SVDFactors(s=s, U=None, Vt=None, info=info)

    W = W[:, order]
    V = V[:, order]
    cutoff = singular_value_cutoff(s[0], (m, n))
    r = int(np.sum(s > cutoff))
    U = _complete_basis(W[:, :r] / s[:r], m)
    return SVDFactors(s=s, U=U, Vt=V.T, info=info)


def _sweep(W: NDArray, V: NDArray, tol: float, floor: float = 0.0) -> float:
    """
    One cyclic sweep over all column pairs, rotating W and V in place.

    Returns the largest relative coupling |γ|/√(αβ) seen before rotation.
    """
    n = W.shape[1]
    off = 0.0
    for p in range(n - 1):
        for q in range(p + 1, n):
            wp = W[:, p]
            wq = W[:, q]
            alpha = float(wp @ wp)
            beta = float(wq @ wq)
            if alpha <= floor or beta <= floor:
                continue
            gamma = float(wp @ wq)
            coupling = abs(gamma) / math.sqrt(alpha * beta)
            off = max(off, coupling)
            if coupling <= tol:
                continue

            zeta = (beta - alpha) / (2.0 * gamma)
            t = math.copysign(1.0, zeta) / (abs(zeta) + math.hypot(1.0, zeta))
            c = 1.0 / math.hypot(1.0, t)
            s = c * t

            wp_old = wp.copy()
            W[:, p] = c * wp_old - s * wq
            W[:, q] = s * wp_old + c * wq
            vp_old = V[:, p].copy()
            V[:, p] = c * vp_old - s * V[:, q]
            V[:, q] = s * vp_old + c * V[:, q]
    return off


def _complete_basis(Q_r: NDArray, m: int) -> NDArray:
    """Extend r orthonormal columns (m x r) to an m x m orthogonal matrix."""
    r = Q_r.shape[1]
    if r == m:
        return Q_r
    if r == 0:
        return np.eye(m)
    Q, _ = np.linalg.qr(Q_r, mode='complete')
    return np.hstack([Q_r, Q[:, r:]])
