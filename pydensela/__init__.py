"""
PyDenseLA: dense linear algebra for numerical Python code.

Direct (factorization-based) matrix algebra over real, dense matrices of
modest size, with well-defined tolerance semantics.

Submodules:
    matrix: Dense Matrix container and basic algebra (mat_mul, mat_norm)
    inverse: Closed-form, LU and pseudo-inverse strategies
    svd: Singular value decomposition (LAPACK and one-sided Jacobi)
    condition: Condition number from induced norms
"""

__version__ = "0.1.0"
__author__ = "PyDenseLA developers"

from pydensela import matrix
from pydensela import inverse
from pydensela import svd
from pydensela import condition

__all__ = [
    "__version__",
    "matrix",
    "inverse",
    "svd",
    "condition",
]
