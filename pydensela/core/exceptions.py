"""
Exception hierarchy for PyDenseLA.

All exceptions inherit from PyDenseLAError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Numerical singularity is an expected input condition for this engine,
not a failure: the default inversion paths report it through the returned
determinant, the numerical rank and SingularMatrixWarning. The
SingularMatrixError exception is reserved for callers that explicitly
demand an exact inverse.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseLAError(Exception):
    """Base exception for all PyDenseLA errors."""
    pass


class ValidationError(PyDenseLAError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks
    (non-numeric data, non-finite values, unknown options).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when operand or destination shapes don't match the shapes an
    operation requires, or when nested literal rows have unequal lengths.
    """
    pass


class NumericalError(PyDenseLAError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when the caller requires an exact inverse but the matrix
    is singular or numerically rank-deficient.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(m, n))
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(PyDenseLAError):
    """
    Iterative factorization failed to converge.
    
    Raised when the SVD (LAPACK driver or Jacobi sweeps) does not meet
    its convergence criterion.
    
    Attributes:
        iterations: Number of iterations (sweeps) completed
        final_change: Final off-diagonal measure, if known
        reason: Why convergence failed (e.g., 'max_sweeps', 'lapack')
        threshold: The convergence threshold that was not met
    """
    
    def __init__(
        self, 
        message: str, 
        iterations: int, 
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class SingularMatrixWarning(UserWarning):
    """Matrix was found numerically singular; a degenerate result was produced."""
    pass
