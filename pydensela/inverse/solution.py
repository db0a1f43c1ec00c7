"""
Inversion solution types.

Contains the user-facing solution wrapper around Result[InverseParams].
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydensela.core.result import Result
from pydensela.inverse._common import InverseParams
from pydensela.matrix.dense import Matrix


@dataclass
class InverseSolution:
    """
    User-facing inversion result.

    Wraps the backend Result and provides accessors plus residual checks
    of the Moore-Penrose identities.
    """
    _result: Result[InverseParams]
    _matrix: Matrix

    @property
    def inverse(self) -> NDArray[np.floating[Any]]:
        """N x M inverse or pseudo-inverse."""
        return self._result.params.inverse

    @property
    def determinant(self) -> float | None:
        """Determinant of a square input, None for rectangular input."""
        return self._result.params.determinant

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_singular(self) -> bool:
        return self._result.params.singular

    @property
    def is_exact(self) -> bool:
        """True for a square, non-singular input (A·Ai ≈ I holds)."""
        return self._matrix.is_square and not self.is_singular

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def method(self) -> str:
        return self._result.info['method']

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

    def to_matrix(self) -> Matrix:
        """The inverse as a new Matrix."""
        return Matrix.from_array(self.inverse)

    def residual(self) -> float:
        """Frobenius norm of A·Ai·A − A."""
        a = self._matrix.as_array()
        return float(np.linalg.norm(a @ self.inverse @ a - a))

    def identity_residual(self) -> float:
        """
        Frobenius norm of A·Ai − I.

        Meaningful only for square non-singular input.
        """
        a = self._matrix.as_array()
        return float(np.linalg.norm(a @ self.inverse - np.eye(a.shape[0])))

    def summary(self) -> str:
        """Generate a short text summary."""
        m, n = self._matrix.shape
        det_str = "NA" if self.determinant is None else f"{self.determinant:.10g}"
        lines = [
            "Matrix Inverse",
            "=" * 60,
            f"Shape: {m} x {n}",
            f"Method: {self.method}",
            f"Rank: {self.rank}",
            f"Singular: {self.is_singular}",
            f"Determinant: {det_str}",
            f"Residual ||A Ai A - A||_F: {self.residual():.3e}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._matrix.shape
        return (
            f"InverseSolution(shape=({m}, {n}), method={self.method!r}, "
            f"rank={self.rank}, singular={self.is_singular})"
        )
