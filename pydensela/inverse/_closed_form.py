"""
Closed-form inverse of 1x1, 2x2 and 3x3 matrices.

Direct cofactor formulas avoid factorization overhead for the small
matrices that appear in tight loops (element Jacobians, 3-D frames).
The determinant is always computed and returned. When
|det| <= zero_det_tol the matrix is numerically singular: no division
takes place, the destination is zero-filled and SingularMatrixWarning
is emitted.
"""

import warnings

import numpy as np
from numpy.typing import NDArray

from pydensela.core.exceptions import SingularMatrixWarning, ValidationError
from pydensela.core.validation import check_finite, check_shape
from pydensela.matrix.dense import Matrix, check_matrix


SMALL_SIZES: frozenset[int] = frozenset({1, 2, 3})


def inv_small(dst: Matrix, a: Matrix, zero_det_tol: float) -> float:
    """
    Invert a 1x1, 2x2 or 3x3 matrix by closed-form formulas.

    Args:
        dst: Output matrix with the same shape as a
        a: Square matrix of size 1, 2 or 3
        zero_det_tol: |det| at or below this value means singular

    Returns:
        The determinant of a (also when singular)

    Raises:
        ValidationError: If a is not 1x1, 2x2 or 3x3, or zero_det_tol < 0
        DimensionError: If dst does not have the shape of a

    Warns:
        SingularMatrixWarning: If |det| <= zero_det_tol; dst is then all zeros

    Example:
        >>> a = Matrix.from_nested([[1, 2], [3, 2]])
        >>> ai = Matrix.zeros(2, 2)
        >>> inv_small(ai, a, 1e-15)
        -4.0
    """
    check_matrix(dst, 'dst')
    check_matrix(a, 'a')
    if not a.is_square or a.M not in SMALL_SIZES:
        raise ValidationError(
            f"a: closed-form inverse supports 1x1, 2x2 and 3x3 matrices, got {a.M}x{a.N}"
        )
    check_shape(dst.shape, a.shape, 'dst')
    if zero_det_tol < 0:
        raise ValidationError(
            f"zero_det_tol: must be non-negative, got {zero_det_tol}"
        )
    check_finite(a.data, 'a')

    ai, det = closed_form_inverse(a.as_array(), zero_det_tol)
    if ai is None:
        warnings.warn(
            f"{a.M}x{a.N} matrix is singular: |det| = {abs(det):.3e} "
            f"<= zero_det_tol = {zero_det_tol:.3e}; inverse set to zero",
            SingularMatrixWarning,
            stacklevel=2,
        )
        dst.fill(0.0)
    else:
        dst.assign(ai)
    return det


def closed_form_inverse(
    a: NDArray,
    zero_det_tol: float,
) -> tuple[NDArray | None, float]:
    """
    Cofactor inverse of a 1x1, 2x2 or 3x3 array.

    Returns:
        (inverse, det), with inverse None when |det| <= zero_det_tol
    """
    n = a.shape[0]
    if n == 1:
        det = float(a[0, 0])
        if abs(det) <= zero_det_tol:
            return None, det
        return np.array([[1.0 / det]]), det

    if n == 2:
        a00, a01 = float(a[0, 0]), float(a[0, 1])
        a10, a11 = float(a[1, 0]), float(a[1, 1])
        det = a00 * a11 - a01 * a10
        if abs(det) <= zero_det_tol:
            return None, det
        return np.array([
            [a11 / det, -a01 / det],
            [-a10 / det, a00 / det],
        ]), det

    a00, a01, a02 = float(a[0, 0]), float(a[0, 1]), float(a[0, 2])
    a10, a11, a12 = float(a[1, 0]), float(a[1, 1]), float(a[1, 2])
    a20, a21, a22 = float(a[2, 0]), float(a[2, 1]), float(a[2, 2])

    # Cofactors of the first row
    c00 = a11 * a22 - a12 * a21
    c01 = a12 * a20 - a10 * a22
    c02 = a10 * a21 - a11 * a20
    det = a00 * c00 + a01 * c01 + a02 * c02
    if abs(det) <= zero_det_tol:
        return None, det

    # Inverse = adjugate / det (adjugate is the transposed cofactor matrix)
    return np.array([
        [c00 / det, (a02 * a21 - a01 * a22) / det, (a01 * a12 - a02 * a11) / det],
        [c01 / det, (a00 * a22 - a02 * a20) / det, (a02 * a10 - a00 * a12) / det],
        [c02 / det, (a01 * a20 - a00 * a21) / det, (a00 * a11 - a01 * a10) / det],
    ]), det
