"""
Input validation utilities for PyDenseLA.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting,
truncating, padding or resizing.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydensela.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating ragged rows, mixed types or
    non-numeric data) and complex input.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_shape(
    actual: tuple[int, ...],
    expected: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify a shape matches the required shape exactly.
    
    Used for caller-preallocated output buffers, which are never resized.
    
    Args:
        actual: Shape to check
        expected: Required shape
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the shapes differ
    """
    if tuple(actual) != tuple(expected):
        raise DimensionError(
            f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a 2D shape is square.
    
    Raises:
        DimensionError: If rows != columns
    """
    m, n = shape
    if m != n:
        raise DimensionError(f"{name}: expected square matrix, got {m}x{n}")


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a sequence has exactly the required length.
    
    Raises:
        DimensionError: If the length differs
    """
    if length != expected:
        raise DimensionError(
            f"{name}: expected length {expected}, got {length}"
        )
