"""
Common data types for singular value decomposition.

Contains the frozen factor container returned by the kernels and the
parameter payload that goes inside Result[P] envelopes.
Each is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SVDFactors:
    """Raw output of an SVD kernel.

    Attributes:
        s: Singular values in descending order, length min(m, n).
        U: Orthogonal m x m factor, or None when not computed.
        Vt: Orthogonal n x n factor (transposed V), or None when not computed.
        info: Kernel diagnostics ('driver', 'sweeps', fallback notes).
    """
    s: NDArray
    U: NDArray | None
    Vt: NDArray | None
    info: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SVDParams:
    """
    Parameter payload for a singular value decomposition.

    Attributes:
        singular_values: Descending, non-negative, length min(m, n).
        U: m x m orthogonal factor, or None if compute_uv was False.
        Vt: n x n orthogonal factor, or None if compute_uv was False.
        rank: Number of singular values above the cutoff
              max(m, n) * eps * s_max.
    """
    singular_values: NDArray
    U: NDArray | None
    Vt: NDArray | None
    rank: int


def empty_factors(m: int, n: int, compute_uv: bool) -> SVDFactors:
    """Factors of a matrix with no elements (m == 0 or n == 0)."""
    s = np.zeros(0, dtype=np.float64)
    if not compute_uv:
        return SVDFactors(s=s, U=None, Vt=None)
    return SVDFactors(s=s, U=np.eye(m), Vt=np.eye(n))
