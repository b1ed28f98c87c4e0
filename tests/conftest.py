"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Factory for random diagonally dominant (hence invertible) square arrays."""
    def make(n):
        a = rng.standard_normal((n, n))
        return a + n * np.eye(n)
    return make
