"""
DataTable: named numeric columns for PySLR.

DataTable is the "I have data" abstraction. It holds equal-length float
columns and knows nothing about regression. Missing values are NaN and
nothing else; a zero is always a real zero.

Usage:
    from pyslr import DataTable

    table = DataTable.from_columns(ph=ph, growth=growth)
    table = DataTable.from_file("abalone.csv")
    table = DataTable.from_dataframe(df)

    table.columns        # ('ph', 'growth')
    table['growth']      # float64 array
    x, y, rows = table.complete_pairs('growth', 'ph')
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslr.core.exceptions import ColumnNotFoundError, ValidationError
from pyslr.core.validation import check_array, check_1d, check_consistent_length

if TYPE_CHECKING:
    import pandas as pd


_EXCEL_SUFFIXES = ('.xlsx', '.xls')
_DELIMITED_SUFFIXES = {'.csv': ',', '.tsv': '\t'}


@dataclass(frozen=True, eq=False)
class DataTable:
    """
    Immutable table of named float64 columns.

    Construct via factory classmethods, not directly. Every transformation
    (select, dropna) returns a new table; column arrays are read-only.
    """
    _columns: dict[str, NDArray[np.floating[Any]]]
    _n_rows: int
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in insertion order."""
        return tuple(self._columns)

    @property
    def n_rows(self) -> int:
        """Number of rows, including rows with missing values."""
        return self._n_rows

    @property
    def metadata(self) -> dict[str, Any]:
        """Provenance metadata (source, source_path)."""
        return self._metadata.copy()

    def __getitem__(self, name: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            ColumnNotFoundError: If the column does not exist, with the
                available names attached.

        Example:
            >>> table = DataTable.from_columns(x=[1, 2], y=[3, 4])
            >>> table['z']  # ColumnNotFoundError: "DataTable has no column 'z'. ..."
        """
        if name not in self._columns:
            raise ColumnNotFoundError(
                f"DataTable has no column {name!r}. Available: {list(self.columns)}",
                column=name,
                available=self.columns,
            )
        return self._columns[name]

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __len__(self) -> int:
        return self._n_rows

    def __repr__(self) -> str:
        return f"DataTable(n_rows={self._n_rows}, columns={list(self.columns)})"

    # === Missing Values ===

    def missing_mask(self, *names: str) -> NDArray[np.bool_]:
        """Boolean mask of rows missing a value in any of the named columns."""
        mask = np.zeros(self._n_rows, dtype=bool)
        for name in names:
            mask |= np.isnan(self[name])
        return mask

    def complete_pairs(
        self,
        response: str,
        predictor: str,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.intp]]:
        """
        Paired predictor/response values for rows where both are present.

        Args:
            response: Response column name
            predictor: Predictor column name

        Returns:
            (x, y, rows): predictor values, response values, and the
            original row numbers they came from, in table order.
        """
        x_all = self[predictor]
        y_all = self[response]
        keep = ~self.missing_mask(predictor, response)
        rows = np.flatnonzero(keep)
        return x_all[keep], y_all[keep], rows

    # === Transformations ===

    def select(self, *names: str) -> DataTable:
        """New table holding only the named columns, in the given order."""
        return DataTable._build({name: self[name] for name in names}, self._metadata)

    def dropna(self, *names: str) -> DataTable:
        """
        New table without rows missing any of the named columns.

        With no names, rows missing a value in any column are dropped.
        """
        names = names or self.columns
        keep = ~self.missing_mask(*names)
        return DataTable._build(
            {name: col[keep] for name, col in self._columns.items()},
            self._metadata,
        )

    def to_dataframe(self) -> 'pd.DataFrame':
        """Copy of the table as a pandas DataFrame."""
        import pandas as pd
        return pd.DataFrame({name: col.copy() for name, col in self._columns.items()})

    # === Factory Methods ===

    @classmethod
    def from_columns(
        cls,
        columns: Mapping[str, ArrayLike] | None = None,
        **named_columns: ArrayLike,
    ) -> DataTable:
        """
        Construct from array-likes keyed by column name.

        Both ``DataTable.from_columns({'x': x})`` and
        ``DataTable.from_columns(x=x)`` are accepted; ``None`` entries
        are treated as missing.
        """
        merged: dict[str, ArrayLike] = dict(columns or {})
        for name, values in named_columns.items():
            if name in merged:
                raise ValidationError(f"Column {name!r} given twice")
            merged[name] = values
        return cls._build(merged, {'source': 'columns'})

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        columns: list[str] | None = None,
        source_path: str | None = None,
    ) -> DataTable:
        """
        Construct from a pandas DataFrame.

        Only numeric columns are kept when ``columns`` is not given;
        pandas missing values (NaN, None, pd.NA) all become NaN.
        """
        if columns is None:
            columns = [c for c in df.columns if _is_numeric_series(df[c])]
        else:
            absent = [c for c in columns if c not in df.columns]
            if absent:
                raise ColumnNotFoundError(
                    f"DataFrame has no column {absent[0]!r}. "
                    f"Available: {[str(c) for c in df.columns]}",
                    column=str(absent[0]),
                    available=tuple(str(c) for c in df.columns),
                )

        storage: dict[str, ArrayLike] = {}
        for col in columns:
            series = df[col]
            if not _is_numeric_series(series):
                raise ValidationError(
                    f"{col}: non-numeric dtype {series.dtype}, expected numeric data"
                )
            storage[str(col)] = series.to_numpy(dtype=np.float64, na_value=np.nan)

        metadata: dict[str, Any] = {'source': 'dataframe'}
        if source_path:
            metadata['source_path'] = source_path
        return cls._build(storage, metadata)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        columns: list[str] | None = None,
        sheet_name: str | int = 0,
    ) -> DataTable:
        """Construct from a CSV, TSV or Excel file."""
        import pandas as pd

        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in _DELIMITED_SUFFIXES:
            df = pd.read_csv(path, sep=_DELIMITED_SUFFIXES[suffix], usecols=columns)
        elif suffix in _EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=sheet_name, usecols=columns)
        else:
            raise ValidationError(f"Unknown file format: {suffix}")
        return cls.from_dataframe(df, columns=columns, source_path=str(path))

    @classmethod
    def _build(
        cls,
        columns: Mapping[str, ArrayLike],
        metadata: dict[str, Any],
    ) -> DataTable:
        """Internal builder with validation."""
        storage: dict[str, NDArray[np.floating[Any]]] = {}
        for name, values in columns.items():
            if not isinstance(name, str):
                raise ValidationError(f"Column names must be strings, got {name!r}")
            arr = check_array(values, name)
            check_1d(arr, name)
            arr = arr.copy()
            arr.setflags(write=False)
            storage[name] = arr

        arrays = tuple(storage.values())
        check_consistent_length(*arrays, names=tuple(storage))

        n_rows = arrays[0].shape[0] if arrays else 0
        return cls(_columns=storage, _n_rows=n_rows, _metadata=dict(metadata))


def _is_numeric_series(series: 'pd.Series') -> bool:
    from pandas.api.types import is_bool_dtype, is_numeric_dtype
    return is_numeric_dtype(series) and not is_bool_dtype(series)
