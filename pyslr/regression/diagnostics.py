"""
Per-observation regression diagnostics.

Supplies the numbers behind the usual four diagnostic panels
(residuals vs fitted, normal Q-Q, scale-location, residuals vs leverage):

    h_i  = 1/n + (x_i - x̄)² / Sxx
    r_i  = e_i / (s · sqrt(1 - h_i))
    D_i  = r_i² · h_i / (2 · (1 - h_i))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyslr.core.compute.tolerances import LEVERAGE_EPS
from pyslr.core.exceptions import DegenerateModelError
from pyslr.regression.solution import FittedModel

if TYPE_CHECKING:
    import pandas as pd


# Number of fitted coefficients, used by Cook's distance
_N_COEF = 2


@dataclass(frozen=True)
class DiagnosticRow:
    """Diagnostics for one fitting observation."""
    row: int
    x: float
    fitted: float
    residual: float
    standardized_residual: float
    leverage: float
    cooks_distance: float
    sqrt_abs_standardized_residual: float
    theoretical_quantile: float


@dataclass(frozen=True)
class DiagnosticSet(Sequence):
    """DiagnosticRow per observation, in original row order."""
    _rows: tuple[DiagnosticRow, ...]

    def __getitem__(self, index: int) -> DiagnosticRow:
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[DiagnosticRow]:
        return iter(self._rows)

    def column(self, name: str) -> NDArray[np.floating[Any]]:
        """One DiagnosticRow field across all rows, e.g. column('leverage')."""
        return np.array([getattr(r, name) for r in self._rows])

    def to_dataframe(self) -> 'pd.DataFrame':
        import pandas as pd
        return pd.DataFrame([asdict(r) for r in self._rows]).set_index('row')


def diagnose(model: FittedModel) -> DiagnosticSet:
    """
    Leverage, standardized residuals and related diagnostics.

    Args:
        model: Fitted simple regression

    Returns:
        DiagnosticSet, one row per fitting observation in original order

    Raises:
        DegenerateModelError: If any observation has leverage of 1
    """
    n = model.n
    x = model.x
    e = model.residuals
    s = model.residual_std_error

    leverage = 1.0 / n + (x - model.x_mean) ** 2 / model.sxx

    worst = int(np.argmax(leverage))
    if leverage[worst] >= 1.0 - LEVERAGE_EPS:
        raise DegenerateModelError(
            f"Observation at row {int(model.rows[worst])} has leverage "
            f"{leverage[worst]!r}; standardized residual is undefined",
            quantity='leverage',
            value=float(leverage[worst]),
        )

    one_minus_h = 1.0 - leverage
    if s > 0.0:
        std_resid = e / (s * np.sqrt(one_minus_h))
    else:
        # Perfect fit: every residual is zero
        std_resid = np.zeros(n)

    cooks = std_resid ** 2 * leverage / (_N_COEF * one_minus_h)
    quantiles = _normal_scores(std_resid)

    rows = tuple(
        DiagnosticRow(
            row=int(model.rows[i]),
            x=float(x[i]),
            fitted=float(model.fitted_values[i]),
            residual=float(e[i]),
            standardized_residual=float(std_resid[i]),
            leverage=float(leverage[i]),
            cooks_distance=float(cooks[i]),
            sqrt_abs_standardized_residual=float(np.sqrt(abs(std_resid[i]))),
            theoretical_quantile=float(quantiles[i]),
        )
        for i in range(n)
    )
    return DiagnosticSet(_rows=rows)


def _normal_scores(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Normal quantiles at R's ppoints positions, matched to values by rank.

    ppoints(n) = (i - a) / (n + 1 - 2a) with a = 3/8 for n <= 10, else 1/2.
    """
    n = values.shape[0]
    a = 3.0 / 8.0 if n <= 10 else 0.5
    ranks = sp_stats.rankdata(values, method='ordinal')
    return sp_stats.norm.ppf((ranks - a) / (n + 1 - 2 * a))
