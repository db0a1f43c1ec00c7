"""
Singular value decomposition.

Public API:
    svd(s, u, vt, a, want_uv): decomposition into caller-owned buffers
    decompose(a, ...) -> SVDSolution
    svd_values(a): singular values only
    numerical_rank(s, shape): rank from singular values

Singular values are always returned in descending order.

Example:
    >>> from pydensela.svd import decompose
    >>> sol = decompose([[1, 2], [3, 4]])
    >>> sol.singular_values
    array([5.4649857 , 0.36596619])
"""

from pydensela.svd._common import SVDParams
from pydensela.svd.decomposition import (
    svd,
    compute_svd,
    svd_values,
    numerical_rank,
    SVDMethod,
    SVD_METHODS,
)
from pydensela.svd.solution import SVDSolution
from pydensela.svd.solvers import decompose

__all__ = [
    "svd",
    "compute_svd",
    "svd_values",
    "numerical_rank",
    "decompose",
    "SVDSolution",
    "SVDParams",
    "SVDMethod",
    "SVD_METHODS",
]
