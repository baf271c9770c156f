"""
Exception hierarchy for PySLR.

All exceptions inherit from PySLRError to allow catching any
library-specific error. Input problems derive from ValidationError,
problems with the fitted quantities derive from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PySLRError(Exception):
    """Base exception for all PySLR errors."""
    pass


class ValidationError(PySLRError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a column is not 1-D or when columns of one table
    have different lengths.
    """
    pass


class ColumnNotFoundError(ValidationError):
    """
    A requested column is not present in the DataTable.

    Attributes:
        column: The name that was requested
        available: Names of the columns the table does have
    """

    def __init__(
        self,
        message: str,
        column: str,
        available: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.column = column
        self.available = available


class InsufficientDataError(ValidationError):
    """
    Too few complete observations remain to fit the model.

    With two observations the line passes through both points and the
    residual degrees of freedom are zero, so inference is undefined.

    Attributes:
        n_complete: Number of complete (paired, non-missing) observations
        required: Minimum number of observations needed
    """

    def __init__(self, message: str, n_complete: int, required: int):
        super().__init__(message)
        self.n_complete = n_complete
        self.required = required


class InvalidParameterError(ValidationError):
    """
    A tuning parameter is outside its valid domain.

    Attributes:
        name: Parameter name (e.g. 'confidence_level')
        value: The rejected value
    """

    def __init__(self, message: str, name: str, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


class EmptyQueryError(ValidationError):
    """Prediction was requested for an empty set of predictor values."""
    pass


class NumericalError(PySLRError):
    """
    Numerical computation failed.

    Base class for errors arising from the data itself rather than
    from malformed inputs.
    """
    pass


class DegenerateModelError(NumericalError):
    """
    The model is degenerate and a quantity is undefined.

    Raised when the predictor is constant (slope undefined) or when an
    observation has leverage of one (standardized residual undefined).

    Attributes:
        quantity: Name of the offending quantity (e.g. 'Sxx', 'leverage')
        value: Its computed value, if available
    """

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.value = value
