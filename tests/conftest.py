"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyslr import DataTable


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_table():
    """x = 1..5, y = [2, 4, 5, 4, 5]: b0 = 2.2, b1 = 0.6, R² = 0.6."""
    return DataTable.from_columns(x=[1, 2, 3, 4, 5], y=[2, 4, 5, 4, 5])


@pytest.fixture
def abalone_like_table(rng):
    """Growth declining with pH, with a few missing readings."""
    n = 60
    ph = rng.uniform(7.5, 8.1, n)
    growth = 40.0 - 4.5 * ph + rng.standard_normal(n) * 0.3
    growth[[3, 17]] = np.nan
    ph[[8]] = np.nan
    return DataTable.from_columns(ph=ph, growth=growth)


@pytest.fixture
def simple_regression_data(rng):
    """Noisy straight line for property tests."""
    n = 100
    x = rng.standard_normal(n) * 3.0 + 10.0
    y = 1.5 - 0.8 * x + rng.standard_normal(n) * 0.5
    return x, y
