"""
Numerical precision constants and internal cutoff formulas.

The cutoffs defined here decide when a pivot or a singular value is
treated as zero. Downstream accuracy depends on them, so the formulas
are fixed and documented:

    singular value cutoff:  tol = max(m, n) * eps * s_max
    LU pivot cutoff:        tol = n * eps * max|u_ii|

with eps the float64 machine epsilon.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def singular_value_cutoff(s_max: float, shape: tuple[int, int]) -> float:
    """
    Threshold below which a singular value is treated as zero.
    
    Args:
        s_max: Largest singular value of the matrix
        shape: Matrix shape (m, n)
        
    Returns:
        max(m, n) * eps * s_max
    """
    return max(shape) * EPSILON_64 * float(s_max)


def pivot_cutoff(pivots: NDArray[np.floating[Any]]) -> float:
    """
    Threshold below which an LU pivot marks the matrix as singular.
    
    Args:
        pivots: Diagonal of U from an n x n LU factorization
        
    Returns:
        n * eps * max|u_ii| (0.0 for an empty or all-zero diagonal)
    """
    if pivots.size == 0:
        return 0.0
    return pivots.size * EPSILON_64 * float(np.max(np.abs(pivots)))
