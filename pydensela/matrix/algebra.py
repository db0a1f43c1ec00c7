"""
Basic matrix algebra.

mat_mul is both a primitive and the verification tool used to rebuild
products such as A·A⁻¹ or U·S·Vᵗ. mat_norm provides the induced norms
used by the condition number.
"""

from typing import Literal
import numpy as np

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.matrix.dense import Matrix, check_matrix


NormKind = Literal['I', 'F']

NORM_KINDS: frozenset[str] = frozenset({'I', 'F'})


def mat_mul(dst: Matrix, alpha: float, a: Matrix, b: Matrix) -> None:
    """
    Compute dst ← alpha · a·b.
    
    dst is overwritten entirely; existing content is not accumulated.
    dst may alias a or b.
    
    Args:
        dst: Output matrix, pre-sized to (a.M, b.N)
        alpha: Scalar coefficient
        a: Left operand (M x K)
        b: Right operand (K x N)
        
    Raises:
        DimensionError: If a.N != b.M or dst is not a.M x b.N
    """
    check_matrix(dst, 'dst')
    check_matrix(a, 'a')
    check_matrix(b, 'b')
    if a.N != b.M:
        raise DimensionError(
            f"mat_mul: inner dimensions differ, a is {a.M}x{a.N} and b is {b.M}x{b.N}"
        )
    if dst.shape != (a.M, b.N):
        raise DimensionError(
            f"mat_mul: dst must be {a.M}x{b.N}, got {dst.M}x{dst.N}"
        )
    # Product is formed before writing so dst may alias an operand
    product = a.as_array() @ b.as_array()
    dst.assign(alpha * product)


def mat_norm(a: Matrix, kind: str) -> float:
    """
    Matrix norm of the requested kind.
    
    Args:
        a: Input matrix
        kind: 'I' for the infinity norm (max absolute row sum),
              'F' for the Frobenius norm (sqrt of the sum of squares)
        
    Returns:
        The norm (0.0 for an empty matrix)
        
    Raises:
        ValidationError: If kind is not 'I' or 'F'
    """
    check_matrix(a, 'a')
    if kind not in NORM_KINDS:
        raise ValidationError(
            f"kind: expected one of {sorted(NORM_KINDS)}, got {kind!r}"
        )
    if a.size == 0:
        return 0.0
    arr = a.as_array()
    if kind == 'I':
        return float(np.max(np.sum(np.abs(arr), axis=1)))
    return float(np.sqrt(np.sum(arr * arr)))
