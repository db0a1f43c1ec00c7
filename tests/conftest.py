"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydensela.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 6x6 matrix (diagonally shifted)."""
    values = rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
    return Matrix.from_array(values)


@pytest.fixture
def rank_deficient_square(rng):
    """5x5 matrix of rank 3 (last two rows repeat the first two)."""
    base = rng.standard_normal((3, 5))
    return Matrix.from_array(np.vstack([base, base[:2]]))


@pytest.fixture
def tall_matrix(rng):
    """Full column rank 7x4 matrix."""
    return Matrix.from_array(rng.standard_normal((7, 4)))


@pytest.fixture
def wide_matrix(rng):
    """Full row rank 3x6 matrix."""
    return Matrix.from_array(rng.standard_normal((3, 6)))
