"""
Matrix inversion: closed form, LU and pseudo-inverse.

Public API:
    inv_small(dst, a, zero_det_tol) -> det   (1x1, 2x2, 3x3)
    inv(dst, a, calc_det) -> det             (any M x N)
    det(a) -> float                          (square)
    pinv(dst, a) -> rank                     (any M x N)
    invert(a, ...) -> InverseSolution        (strategy dispatch)

Example:
    >>> from pydensela.matrix import Matrix
    >>> from pydensela.inverse import inv
    >>> a = Matrix.from_nested([[1, 2], [3, 2]])
    >>> ai = Matrix.zeros(2, 2)
    >>> inv(ai, a, True)
    -4.0
"""

from pydensela.inverse._common import InverseParams, LUResult
from pydensela.inverse._closed_form import inv_small, SMALL_SIZES
from pydensela.inverse._lu import lu_factorize
from pydensela.inverse._pseudo import pinv
from pydensela.inverse.general import inv, det
from pydensela.inverse.solution import InverseSolution
from pydensela.inverse.solvers import invert, MethodChoice

__all__ = [
    "inv_small",
    "inv",
    "det",
    "pinv",
    "lu_factorize",
    "invert",
    "InverseSolution",
    "InverseParams",
    "LUResult",
    "MethodChoice",
    "SMALL_SIZES",
]
