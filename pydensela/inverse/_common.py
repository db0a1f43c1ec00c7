"""
Common data types for matrix inversion.

Contains the LU factorization container and the parameter payload that
goes inside Result[P] envelopes. Each is a pure data container.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LUResult:
    """
    LU factorization with partial pivoting, P·A = L·U.

    Attributes:
        lu: Packed factors (n x n): U on and above the diagonal, the unit
            lower triangular L strictly below.
        piv: LAPACK pivot indices (0-based): row i was interchanged with
             row piv[i].
        determinant: prod(diag(U)) * (-1)^(number of interchanges).
        singular: True if min|u_ii| <= n * eps * max|u_ii|.
    """
    lu: NDArray
    piv: NDArray
    determinant: float
    singular: bool


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for an inversion.

    Attributes:
        inverse: N x M inverse (exact) or Moore-Penrose pseudo-inverse.
        determinant: Determinant for square input, None for rectangular.
        rank: Numerical rank of the input.
        singular: True if the input is numerically singular (square) or
                  rank-deficient, i.e. rank < min(M, N).
    """
    inverse: NDArray
    determinant: float | None
    rank: int
    singular: bool
