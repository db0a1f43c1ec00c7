"""
Generic result container for all PyDenseLA computations.

The Result class provides a standardized envelope that all strategy
results use. This enables shared tooling for timing, reproducibility
and reporting while allowing domains to define their own payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, singular flag)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata of the libraries that produced a result."""
    import numpy as np
    import scipy
    from pydensela import __version__

    return {
        'pydensela_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The domain-specific parameter payload type
        
    Attributes:
        params: Domain-specific payload (inverse, singular values, etc.)
        info: Structured metadata (method, rank, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used for the computation
        
    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=ai, determinant=-4.0, rank=2),
        ...     info={'method': 'lu', 'singular': False},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_lu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
