"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pyslr.core.datatable import DataTable
from pyslr.core.exceptions import InvalidParameterError
from pyslr.regression.design import RegressionDesign
from pyslr.regression.solution import FittedModel
from pyslr.regression.backends.cpu import (
    CPUClosedFormBackend,
    CPUQRBackend,
    ZERO_VARIANCE_WARNING,
)


# Type alias for backend selection
BackendChoice = Literal['auto', 'closed_form', 'qr']


def fit(
    table: DataTable,
    response: str,
    predictor: str,
    *,
    backend: BackendChoice = 'auto',
) -> FittedModel:
    """
    Fit a simple linear regression of one column on another.

    Solves the ordinary least squares problem:
        min_{b0, b1} Σ (y_i - b0 - b1·x_i)²

    over the rows of ``table`` where both columns are present. This is the
    primary public API; input validation, backend selection and result
    wrapping all happen here.

    Args:
        table: Source data
        response: Name of the response column (y)
        predictor: Name of the predictor column (x)
        backend: Computational backend to use:
            - 'auto': Same as 'closed_form'
            - 'closed_form': Centered-sums solution
            - 'qr': QR decomposition of the [1, x] design matrix

    Returns:
        FittedModel with coefficients, fit statistics and summary()

    Raises:
        ColumnNotFoundError: If either column is absent
        InsufficientDataError: If fewer than 3 complete pairs remain
        DegenerateModelError: If the predictor is constant
        InvalidParameterError: If backend is unknown

    Example:
        >>> from pyslr import DataTable
        >>> from pyslr.regression import fit
        >>>
        >>> table = DataTable.from_columns(x=[1, 2, 3, 4, 5], y=[2, 4, 5, 4, 5])
        >>> model = fit(table, 'y', 'x')
        >>> model.slope
        0.6
        >>> print(model.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    backend_impl = _get_backend(backend)

    # === Construct Design ===
    design = RegressionDesign.from_table(table, response=response, predictor=predictor)

    # === Solve ===
    result = backend_impl.solve(design)

    if result.has_warning(ZERO_VARIANCE_WARNING):
        warnings.warn(
            f"{response}: {ZERO_VARIANCE_WARNING}",
            RuntimeWarning,
            stacklevel=2,
        )

    # === Wrap and Return ===
    return FittedModel(_result=result, _design=design)


def fit_arrays(
    x: ArrayLike,
    y: ArrayLike,
    *,
    response: str = 'y',
    predictor: str = 'x',
    backend: BackendChoice = 'auto',
) -> FittedModel:
    """
    Fit y on x given as paired arrays.

    NaN (or None) in either array drops that pair, exactly as in fit().
    """
    table = DataTable.from_columns({predictor: x, response: y})
    return fit(table, response, predictor, backend=backend)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        InvalidParameterError: If unknown backend specified
    """
    if choice in ('auto', 'closed_form'):
        return CPUClosedFormBackend()
    elif choice == 'qr':
        return CPUQRBackend()
    else:
        raise InvalidParameterError(
            f"Unknown backend: {choice!r}", name='backend', value=choice
        )
