"""
Regression Design.

Design pulls one response and one predictor out of a DataTable, drops the
rows where either is missing, and checks that a straight line can be fit.
It knows it's building a simple regression; DataTable doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslr.core.datatable import DataTable
from pyslr.core.exceptions import DegenerateModelError
from pyslr.core.validation import check_finite, check_min_observations


# n - 2 residual degrees of freedom must be positive for inference
MIN_OBSERVATIONS = 3


@dataclass(frozen=True, eq=False)
class RegressionDesign:
    """
    Validated (x, y) sample for a single-predictor fit.

    Immutable after construction. Holds only complete pairs, in the
    order they appear in the source table, together with their original
    row numbers.

    Construction:
        RegressionDesign.from_table(table, response='growth', predictor='ph')
        RegressionDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _rows: NDArray[np.intp]
    _response: str
    _predictor: str
    _n_dropped: int

    @classmethod
    def from_table(
        cls,
        table: DataTable,
        *,
        response: str,
        predictor: str,
    ) -> RegressionDesign:
        """
        Build Design from a DataTable.

        Raises:
            ColumnNotFoundError: If either column is absent
            InsufficientDataError: If fewer than 3 complete pairs remain
            ValidationError: If a complete pair holds an infinite value
            DegenerateModelError: If the predictor is constant
        """
        x, y, rows = table.complete_pairs(response, predictor)
        return cls._build(
            x, y, rows,
            response=response,
            predictor=predictor,
            n_dropped=table.n_rows - rows.shape[0],
        )

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        response: str = 'y',
        predictor: str = 'x',
    ) -> RegressionDesign:
        """Build Design directly from paired arrays."""
        table = DataTable.from_columns({predictor: x, response: y})
        return cls.from_table(table, response=response, predictor=predictor)

    @classmethod
    def _build(
        cls,
        x: NDArray,
        y: NDArray,
        rows: NDArray,
        *,
        response: str,
        predictor: str,
        n_dropped: int,
    ) -> RegressionDesign:
        """Internal builder with validation."""
        check_min_observations(
            x.shape[0], MIN_OBSERVATIONS, f"{response} ~ {predictor}"
        )
        check_finite(x, predictor)
        check_finite(y, response)

        if np.all(x == x[0]):
            raise DegenerateModelError(
                f"{predictor}: predictor is constant (all {x.shape[0]} values "
                f"equal {x[0]!r}); slope is undefined",
                quantity='Sxx',
                value=0.0,
            )

        for arr in (x, y, rows):
            arr.setflags(write=False)

        return cls(
            _x=x, _y=y, _rows=rows,
            _response=response, _predictor=predictor, _n_dropped=n_dropped,
        )

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def rows(self) -> NDArray[np.intp]:
        """Original table row of each observation."""
        return self._rows

    @property
    def n(self) -> int:
        """Number of complete observations."""
        return self._x.shape[0]

    @property
    def n_dropped(self) -> int:
        """Rows removed for missing response or predictor."""
        return self._n_dropped

    @property
    def response(self) -> str:
        return self._response

    @property
    def predictor(self) -> str:
        return self._predictor

    @property
    def response_is_constant(self) -> bool:
        """True when every response value is identical (TSS == 0)."""
        return bool(np.all(self._y == self._y[0]))

    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix [1, x] (n x 2)."""
        return np.column_stack([np.ones(self.n), self._x])
