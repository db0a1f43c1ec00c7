"""
Tolerance tiers for numerical verification.

Defines precision expectations when checking reconstructions such as
A·A⁻¹ ≈ I or U·diag(S)·Vᵗ ≈ A:
- well-conditioned float64: near machine precision
- ill-conditioned float64 (cond > 1e4): relaxed by the loss of digits

Used by the test suite when checking reconstructions and residuals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned double precision reconstruction
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, reconstruction to near machine precision',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which the relaxed tier applies
ILL_CONDITIONED_THRESHOLD = 1e4

# Recommended zero-determinant tolerance for the closed-form inverse
DEFAULT_ZERO_DET_TOL = 1e-15


def select_tolerance(condition_number: float) -> ToleranceTier:
    """Select the tolerance tier appropriate for a matrix's condition number."""
    if condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
