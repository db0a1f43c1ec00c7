"""
Condition number.

Public API:
    cond_num(a, norm_kind) -> float   with norm_kind in {'I', 'F'}
"""

from pydensela.condition.condnum import cond_num

__all__ = [
    "cond_num",
]
