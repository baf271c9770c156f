"""
PySLR: simple linear regression with inference and diagnostics.

Fits one response on one predictor by ordinary least squares and derives
everything a report or a plot of that fit needs: coefficient tests and
intervals, mean-response confidence bands, and per-observation
diagnostics.

Submodules:
    core: DataTable, Result envelope, exceptions, validation
    regression: fit, report, predict, diagnose
"""

__version__ = "0.1.0"

from pyslr.core.datatable import DataTable
from pyslr import regression

__all__ = [
    "__version__",
    "DataTable",
    "regression",
]
