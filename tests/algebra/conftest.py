"""
Shared matrices for algebra tests.
"""

import pytest

from pymatrix.algebra import Matrix


@pytest.fixture
def a2():
    return Matrix.from_array([[1, 2], [3, 4]])


@pytest.fixture
def b2():
    return Matrix.from_array([[5, 6], [7, 8]])


@pytest.fixture
def a3():
    """3x3 with determinant -15."""
    return Matrix.from_array([[1, 0, 2], [-1, 3, 1], [2, 2, 1]])


@pytest.fixture
def rect23():
    return Matrix.from_array([[1, 2, 3], [4, 5, 6]])
