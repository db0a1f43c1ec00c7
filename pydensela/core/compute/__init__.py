"""
Shared compute infrastructure for PyDenseLA.

This module provides timing utilities, precision constants and tolerance
tiers shared across all domain-specific submodules.

Submodules:
    timing: Execution timing utilities
    precision: Machine epsilon and internal cutoff formulas
    tolerances: Tolerance tiers for numerical verification
"""

from pydensela.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
