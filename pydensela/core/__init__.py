"""
Core infrastructure for PyDenseLA.

This module provides shared abstractions and utilities used by all
domain-specific submodules (matrix, inverse, svd, condition).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Input validators
    compute: Timing, precision constants and tolerance tiers
"""

from pydensela.core.protocols import Backend
from pydensela.core.result import Result
from pydensela.core.exceptions import (
    PyDenseLAError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
    SingularMatrixWarning,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDenseLAError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
    # Warnings
    "SingularMatrixWarning",
]
