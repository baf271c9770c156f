"""
Model-based predictions with t intervals.

For each query value x0:

    ŷ0 = b0 + b1·x0
    se  = s · sqrt(1/n + (x0 - x̄)² / Sxx)         interval='confidence'
    se  = s · sqrt(1 + 1/n + (x0 - x̄)² / Sxx)     interval='prediction'
    ŷ0 ± t*(n - 2, (1 + level)/2) · se

Queries outside the observed predictor range are answered, not refused;
each result says whether it was extrapolated.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Literal, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslr.core.exceptions import EmptyQueryError
from pyslr.core.validation import (
    check_array,
    check_choice,
    check_confidence_level,
    check_finite,
)
from pyslr.regression._common import DEFAULT_CONF_LEVEL, t_critical
from pyslr.regression.solution import FittedModel

if TYPE_CHECKING:
    import pandas as pd


IntervalKind = Literal['confidence', 'prediction']
_INTERVAL_KINDS = ('confidence', 'prediction')


@dataclass(frozen=True)
class PredictionResult:
    """Predicted mean (or new-observation) response at one x value."""
    x: float
    fit: float
    std_error: float
    lower: float
    upper: float
    conf_level: float
    extrapolated: bool


@dataclass(frozen=True)
class PredictionSet(Sequence):
    """
    Ordered, re-iterable predictions, one per query value in input order.

    Exposes the observed predictor range so callers can treat
    extrapolated queries as they see fit.
    """
    _results: tuple[PredictionResult, ...]
    predictor_range: tuple[float, float]
    interval: str
    conf_level: float

    def __getitem__(self, index: int) -> PredictionResult:
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[PredictionResult]:
        return iter(self._results)

    # === Column views ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return np.array([r.x for r in self._results])

    @property
    def fit(self) -> NDArray[np.floating[Any]]:
        return np.array([r.fit for r in self._results])

    @property
    def lower(self) -> NDArray[np.floating[Any]]:
        return np.array([r.lower for r in self._results])

    @property
    def upper(self) -> NDArray[np.floating[Any]]:
        return np.array([r.upper for r in self._results])

    @property
    def any_extrapolated(self) -> bool:
        return any(r.extrapolated for r in self._results)

    def to_dataframe(self) -> 'pd.DataFrame':
        """One row per query: x, fit, std_error, lower, upper, extrapolated."""
        import pandas as pd
        return pd.DataFrame(
            {
                'x': self.x,
                'fit': self.fit,
                'std_error': [r.std_error for r in self._results],
                'lower': self.lower,
                'upper': self.upper,
                'extrapolated': [r.extrapolated for r in self._results],
            }
        )


def predict(
    model: FittedModel,
    x_values: ArrayLike,
    confidence_level: float = DEFAULT_CONF_LEVEL,
    *,
    interval: IntervalKind = 'confidence',
) -> PredictionSet:
    """
    Predict the response at the given predictor values.

    Args:
        model: Fitted simple regression
        x_values: Query predictor values (a scalar is one query)
        confidence_level: Interval coverage, strictly inside (0, 1)
        interval: 'confidence' for the mean response, 'prediction' for a
            single new observation

    Returns:
        PredictionSet in input order

    Raises:
        InvalidParameterError: If confidence_level or interval is invalid
        EmptyQueryError: If x_values is empty
        ValidationError: If x_values is non-numeric or non-finite
    """
    level = check_confidence_level(confidence_level)
    check_choice(interval, _INTERVAL_KINDS, 'interval')

    x0 = np.atleast_1d(check_array(x_values, 'x_values')).ravel()
    if x0.size == 0:
        raise EmptyQueryError("x_values: no predictor values to predict at")
    check_finite(x0, 'x_values')

    n = model.n
    s = model.residual_std_error
    lo, hi = model.predictor_range

    fit = model.intercept + model.slope * x0
    spread = 1.0 / n + (x0 - model.x_mean) ** 2 / model.sxx
    if interval == 'prediction':
        spread = spread + 1.0
    se = s * np.sqrt(spread)
    margin = t_critical(model.df_residual, level) * se

    results = tuple(
        PredictionResult(
            x=float(x0[i]),
            fit=float(fit[i]),
            std_error=float(se[i]),
            lower=float(fit[i] - margin[i]),
            upper=float(fit[i] + margin[i]),
            conf_level=level,
            extrapolated=bool(x0[i] < lo or x0[i] > hi),
        )
        for i in range(x0.size)
    )
    return PredictionSet(
        _results=results,
        predictor_range=(lo, hi),
        interval=interval,
        conf_level=level,
    )
