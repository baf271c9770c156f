"""
Core infrastructure for PySLR.

This module provides the shared abstractions used by the regression
domain: the DataTable container, the Result envelope, the exception
hierarchy and input validators.

Key components:
    datatable: DataTable, named float columns with NaN as missing marker
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from pyslr.core.datatable import DataTable
from pyslr.core.result import Result
from pyslr.core.exceptions import (
    PySLRError,
    ValidationError,
    DimensionError,
    ColumnNotFoundError,
    InsufficientDataError,
    InvalidParameterError,
    EmptyQueryError,
    NumericalError,
    DegenerateModelError,
)

__all__ = [
    # Data
    "DataTable",
    # Result
    "Result",
    # Exceptions
    "PySLRError",
    "ValidationError",
    "DimensionError",
    "ColumnNotFoundError",
    "InsufficientDataError",
    "InvalidParameterError",
    "EmptyQueryError",
    "NumericalError",
    "DegenerateModelError",
]
