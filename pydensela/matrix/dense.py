"""
Dense Matrix container.

A Matrix owns a flat, contiguous float64 backing store of exactly M·N
values in row-major (C) order: element (i, j) lives at data[i * N + j].
The shape is fixed at construction; there is no reshaping or resizing.
A result with a different shape needs a new Matrix.

Usage:
    from pydensela.matrix import Matrix

    a = Matrix.from_nested([[1, 2], [3, 2]])
    ai = Matrix.zeros(2, 2)
    a.get(1, 0)       # 3.0
    a.add(0, 0, 0.5)  # a[0, 0] == 1.5
    a.data            # flat view of the backing store
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.core.validation import check_array, check_2d


@dataclass(eq=False)
class Matrix:
    """
    Dense M x N matrix of double-precision values.
    
    Construct via factory classmethods, not directly.
    
    Content is mutable; identity (M, N and the backing store) is not.
    """
    _data: NDArray[np.float64]
    _m: int
    _n: int
    
    def __post_init__(self) -> None:
        if self._m < 0 or self._n < 0:
            raise DimensionError(
                f"Matrix: dimensions must be non-negative, got {self._m}x{self._n}"
            )
        if self._data.ndim != 1 or self._data.size != self._m * self._n:
            raise DimensionError(
                f"Matrix: backing store has {self._data.size} values, "
                f"expected {self._m}*{self._n}={self._m * self._n}"
            )
    
    # === Factory Methods ===
    
    @classmethod
    def zeros(cls, m: int, n: int) -> Matrix:
        """Zero-filled m x n matrix."""
        if m < 0 or n < 0:
            raise DimensionError(
                f"Matrix: dimensions must be non-negative, got {m}x{n}"
            )
        return cls(_data=np.zeros(m * n, dtype=np.float64), _m=m, _n=n)
    
    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return cls.from_array(np.eye(n))
    
    @classmethod
    def from_nested(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Deep copy from a sequence of row sequences.
        
        Args:
            rows: Row-major literal data; every row must have the same length
            
        Returns:
            New Matrix owning a copy of the values
            
        Raises:
            DimensionError: If rows have unequal lengths
            ValidationError: If values are not real numbers
            
        Example:
            >>> Matrix.from_nested([[1, 2], [3]])
            DimensionError: rows: row 1 has length 1, expected 2
        """
        rows = list(rows)
        if not rows:
            return cls.zeros(0, 0)
        n = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != n:
                raise DimensionError(
                    f"rows: row {i} has length {len(row)}, expected {n}"
                )
        if n == 0:
            return cls.zeros(len(rows), 0)
        return cls.from_array(check_array(rows, 'rows'))
    
    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Deep copy from a 2D array-like.
        
        Raises:
            DimensionError: If input is not 2D
            ValidationError: If input is not real numeric data
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        m, n = arr.shape
        data = np.array(arr, dtype=np.float64, order='C').ravel()
        return cls(_data=data, _m=m, _n=n)
    
    @classmethod
    def build(cls, obj: Matrix | ArrayLike) -> Matrix:
        """
        Convenience factory that dispatches on the input type.
        
        A Matrix is returned as-is (no copy); anything else is deep-copied
        via from_nested (lists, tuples) or from_array (arrays).
        """
        if isinstance(obj, Matrix):
            return obj
        if isinstance(obj, (list, tuple)) and obj and isinstance(obj[0], (list, tuple)):
            return cls.from_nested(obj)
        return cls.from_array(obj)
    
    # === Properties ===
    
    @property
    def M(self) -> int:
        """Number of rows."""
        return self._m
    
    @property
    def N(self) -> int:
        """Number of columns."""
        return self._n
    
    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)
    
    @property
    def size(self) -> int:
        return self._m * self._n
    
    @property
    def data(self) -> NDArray[np.float64]:
        """Flat row-major backing store (a live view, length M·N)."""
        return self._data
    
    @property
    def is_square(self) -> bool:
        return self._m == self._n
    
    # === Element Access ===
    
    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self._m and 0 <= j < self._n):
            raise IndexError(
                f"Matrix index ({i}, {j}) out of range for shape {self._m}x{self._n}"
            )
        return i * self._n + j
    
    def get(self, i: int, j: int) -> float:
        """Value at row i, column j."""
        return float(self._data[self._offset(i, j)])
    
    def set(self, i: int, j: int, value: float) -> None:
        """Overwrite the value at row i, column j."""
        self._data[self._offset(i, j)] = value
    
    def add(self, i: int, j: int, delta: float) -> None:
        """Accumulate delta into the value at row i, column j."""
        self._data[self._offset(i, j)] += delta
    
    def fill(self, value: float) -> None:
        """Set every element to value."""
        self._data.fill(value)
    
    # === Bulk Access ===
    
    def as_array(self) -> NDArray[np.float64]:
        """(M, N) view of the backing store; writes go to the matrix."""
        return self._data.reshape(self._m, self._n)
    
    def assign(self, values: NDArray[Any]) -> None:
        """
        Overwrite the whole content from an array of the same shape.
        
        Raises:
            DimensionError: If values does not have shape (M, N)
        """
        values = np.asarray(values)
        if values.shape != self.shape:
            raise DimensionError(
                f"assign: expected shape {self.shape}, got {values.shape}"
            )
        self.as_array()[...] = values
    
    def copy(self) -> Matrix:
        """Deep copy."""
        return Matrix(_data=self._data.copy(), _m=self._m, _n=self._n)
    
    def transpose(self) -> Matrix:
        """New N x M matrix holding the transpose."""
        return Matrix.from_array(self.as_array().T)
    
    def __repr__(self) -> str:
        return f"Matrix(M={self._m}, N={self._n})"
    
    def __str__(self) -> str:
        return np.array2string(self.as_array(), precision=6, suppress_small=True)


def check_matrix(obj: Any, name: str) -> Matrix:
    """
    Verify an argument is a Matrix.
    
    Raises:
        ValidationError: If obj is not a Matrix
    """
    if not isinstance(obj, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(obj).__name__}"
        )
    return obj
