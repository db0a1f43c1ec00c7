"""
SVD solution types.

Contains the user-facing solution wrapper around Result[SVDParams].
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydensela.core.result import Result
from pydensela.matrix.dense import Matrix
from pydensela.svd._common import SVDParams


@dataclass
class SVDSolution:
    """
    User-facing singular value decomposition.

    Wraps the backend Result and provides accessors and a reconstruction.
    """
    _result: Result[SVDParams]
    _matrix: Matrix

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        """Descending, non-negative singular values, length min(M, N)."""
        return self._result.params.singular_values

    @property
    def U(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.U

    @property
    def Vt(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.Vt

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def condition_number(self) -> float:
        """2-norm condition number s_max / s_min (inf when s_min is zero)."""
        s = self.singular_values
        if s.size == 0:
            return 0.0
        if s[-1] == 0.0:
            return float('inf')
        return float(s[0] / s[-1])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """
        U[:, :k] · diag(s) · Vt[:k, :] with k = min(M, N).

        Raises:
            ValueError: If U and Vt were not computed
        """
        if self.U is None or self.Vt is None:
            raise ValueError("reconstruct() requires compute_uv=True")
        k = self.singular_values.size
        return (self.U[:, :k] * self.singular_values) @ self.Vt[:k, :]

    def summary(self) -> str:
        """Generate a short text summary."""
        m, n = self._matrix.shape
        lines = [
            "Singular Value Decomposition",
            "=" * 60,
            f"Shape: {m} x {n}",
            f"Rank: {self.rank}",
            f"Condition number (2-norm): {self.condition_number:.6g}",
            "",
            "Singular values:",
            "-" * 60,
        ]
        for i, value in enumerate(self.singular_values):
            lines.append(f"  s[{i}]: {value:22.15e}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._matrix.shape
        return f"SVDSolution(shape=({m}, {n}), rank={self.rank})"
