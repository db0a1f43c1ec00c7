"""
Solver dispatch for matrix inversion.

This module provides the invert() function (public API) and strategy selection.
"""

from dataclasses import replace
from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pydensela.core.compute.tolerances import DEFAULT_ZERO_DET_TOL
from pydensela.core.protocols import Backend
from pydensela.core.exceptions import (
    SingularMatrixError,
    SingularMatrixWarning,
    ValidationError,
)
from pydensela.core.validation import check_finite, check_square
from pydensela.inverse._closed_form import SMALL_SIZES
from pydensela.inverse.backends import (
    ClosedFormBackend,
    LUBackend,
    PseudoInverseBackend,
)
from pydensela.inverse.solution import InverseSolution
from pydensela.matrix.dense import Matrix
from pydensela.svd.decomposition import SVDMethod


# Type alias for strategy selection
MethodChoice = Literal['auto', 'closed_form', 'lu', 'pinv']


def invert(
    a: Matrix | ArrayLike,
    *,
    method: MethodChoice = 'auto',
    zero_det_tol: float = DEFAULT_ZERO_DET_TOL,
    allow_singular: bool = True,
    svd_method: SVDMethod = 'lapack',
) -> InverseSolution:
    """
    Invert a matrix, or compute its pseudo-inverse.

    This is the primary public API for inversion. All input validation,
    strategy selection, and result wrapping happens here.

    Args:
        a: Matrix or 2-D array-like (M x N)
        method: Inversion strategy:
            - 'auto': closed form for 1x1/2x2/3x3 (pseudo-inverse if it
              reports singularity), LU for larger square matrices,
              pseudo-inverse for rectangular ones
            - 'closed_form': cofactor formulas, square sizes 1 to 3 only
            - 'lu': LU with partial pivoting, square only
            - 'pinv': SVD pseudo-inverse, any shape
        zero_det_tol: Singularity threshold on |det| for the closed form
        allow_singular: If False, raise SingularMatrixError instead of
            returning a degenerate result for singular input
        svd_method: SVD method used by the pseudo-inverse

    Returns:
        InverseSolution with the inverse, determinant, rank and diagnostics

    Raises:
        ValidationError: If input is invalid, method unknown, or the closed
            form is requested for an unsupported size
        DimensionError: If 'lu' is requested for a rectangular matrix
        SingularMatrixError: If the matrix is singular and allow_singular is False
        ConvergenceError: If the SVD does not converge

    Warns:
        SingularMatrixWarning: If the matrix is singular or rank-deficient

    Example:
        >>> sol = invert([[1, 2], [3, 2]])
        >>> sol.determinant
        -4.0
        >>> sol.inverse
        array([[-0.5 ,  0.5 ],
               [ 0.75, -0.25]])
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    matrix = Matrix.build(a)
    check_finite(matrix.data, 'a')
    if zero_det_tol < 0:
        raise ValidationError(
            f"zero_det_tol: must be non-negative, got {zero_det_tol}"
        )

    # === Select Strategy and Solve ===
    backend = _get_backend(method, matrix, zero_det_tol, svd_method)
    result = backend.solve(matrix)

    if method == 'auto' and isinstance(backend, ClosedFormBackend) and result.info['singular']:
        closed_form_warnings = result.warnings
        result = PseudoInverseBackend(svd_method).solve(matrix)
        if not result.info['singular']:
            # Tiny |det| but full numerical rank: the zero-inverse note no longer applies
            closed_form_warnings = (
                f"closed-form |det| <= zero_det_tol = {zero_det_tol:.3e}; "
                f"pseudo-inverse found full rank (rank {result.params.rank})",
            )
        result = _with_warnings(result, closed_form_warnings)

    # === Singularity Policy ===
    if result.info['singular']:
        if not allow_singular:
            raise SingularMatrixError(
                f"Matrix is singular: rank={result.params.rank}, "
                f"expected={min(matrix.shape)}",
                matrix_name='a',
                rank=result.params.rank,
                expected_rank=min(matrix.shape),
            )
        warnings.warn(
            f"{matrix.M}x{matrix.N} matrix is singular or rank-deficient "
            f"(rank {result.params.rank}); result from {result.backend_name} "
            f"is a best-effort inverse",
            SingularMatrixWarning,
            stacklevel=2,
        )

    return InverseSolution(_result=result, _matrix=matrix)


def _get_backend(
    choice: str,
    matrix: Matrix,
    zero_det_tol: float,
    svd_method: SVDMethod,
) -> Backend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown method or unsupported closed-form size
        DimensionError: If 'lu' requested for a rectangular matrix
    """
    is_small = matrix.is_square and matrix.M in SMALL_SIZES

    if choice == 'auto':
        if is_small:
            return ClosedFormBackend(zero_det_tol)
        if matrix.is_square:
            return LUBackend(svd_method)
        return PseudoInverseBackend(svd_method)

    elif choice == 'closed_form':
        if not is_small:
            raise ValidationError(
                f"closed_form supports 1x1, 2x2 and 3x3 matrices, "
                f"got {matrix.M}x{matrix.N}"
            )
        return ClosedFormBackend(zero_det_tol)

    elif choice == 'lu':
        check_square(matrix.shape, 'a')
        return LUBackend(svd_method)

    elif choice == 'pinv':
        return PseudoInverseBackend(svd_method)

    else:
        raise ValidationError(f"Unknown inversion method: {choice!r}")


def _with_warnings(result, extra: tuple[str, ...]):
    """Copy of a frozen Result with extra warnings prepended."""
    return replace(result, warnings=extra + result.warnings)
