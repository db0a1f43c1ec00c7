"""
Core protocols for PyDenseLA.

These define structural interfaces that strategy implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pydensela.core.result import Result
    from pydensela.matrix.dense import Matrix

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.
    
    Each backend knows how to take a validated Matrix and produce a
    domain-specific parameter payload (an inverse, a decomposition).
    
    Backends are stateless: all configuration is passed at construction
    time. This makes them easy to test and swap.
    
    Type Parameters:
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_lu', 'cpu_svd_pinv', 'cpu_jacobi_svd'
        """
        ...
    
    def solve(self, a: 'Matrix') -> 'Result[P]':
        """
        Execute the computation.
        
        Args:
            a: Input matrix
            
        Returns:
            Result envelope containing parameter payload and metadata
            
        Raises:
            ConvergenceError: If an iterative factorization fails to converge
            NumericalError: If numerical issues prevent a result
            ValidationError: If the matrix is invalid for this backend
        """
        ...
