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
def noisy_line_data(rng):
    """y = 1.5 - 0.75 x + noise, n = 200."""
    n = 200
    x = rng.uniform(-10.0, 10.0, n)
    y = 1.5 - 0.75 * x + rng.standard_normal(n) * 0.5
    return x, y


@pytest.fixture
def perfect_line_data():
    """Exact line y = 2x."""
    return [1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 6.0, 8.0]


@pytest.fixture
def small_noisy_data():
    """Five points scattered about y = 2x."""
    return [1.0, 2.0, 3.0, 4.0, 5.0], [2.1, 3.9, 6.2, 7.8, 10.1]
