"""
Condition number from induced norms.

    cond(A) = ‖A‖ · ‖A⁻¹‖

with ‖·‖ the infinity norm ('I') or the Frobenius norm ('F'). A⁻¹ comes
from the general inverse, so singular and rectangular input use the
pseudo-inverse; the number is then finite but only meaningful as a
sensitivity indicator for the square non-singular case. Thresholds for
"ill-conditioned" are left to the caller.
"""

from pydensela.core.exceptions import ValidationError
from pydensela.inverse.general import inv
from pydensela.matrix.algebra import mat_norm, NormKind, NORM_KINDS
from pydensela.matrix.dense import Matrix, check_matrix


def cond_num(a: Matrix, norm_kind: NormKind) -> float:
    """
    Condition number of a under the selected norm.

    Args:
        a: Input M x N matrix
        norm_kind: 'I' (infinity norm) or 'F' (Frobenius norm)

    Returns:
        ‖a‖ · ‖inv(a)‖ (0.0 for an empty matrix)

    Raises:
        ValidationError: If norm_kind is not 'I' or 'F', or a has NaN/Inf

    Example:
        >>> cond_num(Matrix.from_nested([[1, 2], [2, 3]]), 'I')
        25.0
    """
    check_matrix(a, 'a')
    if norm_kind not in NORM_KINDS:
        raise ValidationError(
            f"norm_kind: expected one of {sorted(NORM_KINDS)}, got {norm_kind!r}"
        )
    ai = Matrix.zeros(a.N, a.M)
    inv(ai, a, False)
    return mat_norm(a, norm_kind) * mat_norm(ai, norm_kind)
