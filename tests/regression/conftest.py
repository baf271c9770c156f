"""
Regression test fixtures.
"""

import pytest

from pyslr.regression import fit


@pytest.fixture
def textbook_model(textbook_table):
    return fit(textbook_table, 'y', 'x')
