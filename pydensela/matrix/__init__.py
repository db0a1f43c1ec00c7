"""
Dense Matrix container and basic algebra.

Public API:
    Matrix: row-major dense container (zeros, from_nested, from_array)
    mat_mul(dst, alpha, a, b): dst ← alpha · a·b
    mat_norm(a, kind): infinity ('I') or Frobenius ('F') norm
"""

from pydensela.matrix.dense import Matrix, check_matrix
from pydensela.matrix.algebra import mat_mul, mat_norm, NormKind, NORM_KINDS

__all__ = [
    "Matrix",
    "check_matrix",
    "mat_mul",
    "mat_norm",
    "NormKind",
    "NORM_KINDS",
]
