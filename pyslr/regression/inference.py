"""
Coefficient inference for a fitted simple regression.

report(model) gives, for the intercept and the slope, the standard error,
t statistic, two-sided p-value and t-based confidence interval:

    se(b1) = s / sqrt(Sxx)
    se(b0) = s · sqrt(1/n + x̄² / Sxx)
    CI     = b ± t*(n - 2, (1 + level)/2) · se
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING
import numpy as np

from pyslr.core.validation import check_confidence_level
from pyslr.regression._common import DEFAULT_CONF_LEVEL, t_critical, t_pvalue, safe_ratio
from pyslr.regression.solution import FittedModel

if TYPE_CHECKING:
    import pandas as pd


INTERCEPT_TERM = "(Intercept)"


@dataclass(frozen=True)
class CoefficientInference:
    """
    Inference for one coefficient.

    Attributes
    ----------
    term : str
        "(Intercept)" or the predictor column name.
    estimate : float
        Coefficient value.
    std_error : float
        Standard error of the estimate.
    t_statistic : float
        estimate / std_error.
    p_value : float
        Two-sided p-value on n - 2 degrees of freedom.
    conf_low, conf_high : float
        Confidence interval bounds.
    conf_level : float
        Confidence level of the interval.
    """
    term: str
    estimate: float
    std_error: float
    t_statistic: float
    p_value: float
    conf_low: float
    conf_high: float
    conf_level: float

    @property
    def conf_int(self) -> tuple[float, float]:
        return self.conf_low, self.conf_high


@dataclass(frozen=True)
class InferenceReport:
    """Intercept and slope inference, in that order."""
    intercept: CoefficientInference
    slope: CoefficientInference
    df_residual: int
    conf_level: float

    def __iter__(self) -> Iterator[CoefficientInference]:
        yield self.intercept
        yield self.slope

    def __len__(self) -> int:
        return 2

    def __getitem__(self, term: str) -> CoefficientInference:
        for coef in self:
            if coef.term == term:
                return coef
        raise KeyError(
            f"No coefficient {term!r}. Available: {[c.term for c in self]}"
        )

    def to_dataframe(self) -> 'pd.DataFrame':
        """Tidy coefficient table, one row per term."""
        import pandas as pd
        return pd.DataFrame(
            [
                {
                    'term': c.term,
                    'estimate': c.estimate,
                    'std_error': c.std_error,
                    't_statistic': c.t_statistic,
                    'p_value': c.p_value,
                    'conf_low': c.conf_low,
                    'conf_high': c.conf_high,
                }
                for c in self
            ]
        )


def report(
    model: FittedModel,
    confidence_level: float = DEFAULT_CONF_LEVEL,
) -> InferenceReport:
    """
    Standard errors, t tests and confidence intervals for b0 and b1.

    Args:
        model: Fitted simple regression
        confidence_level: Interval coverage, strictly inside (0, 1)

    Returns:
        InferenceReport with intercept and slope entries

    Raises:
        InvalidParameterError: If confidence_level is outside (0, 1)
    """
    level = check_confidence_level(confidence_level)

    n = model.n
    df = model.df_residual
    s = model.residual_std_error
    sxx = model.sxx
    x_mean = model.x_mean

    se_slope = s / np.sqrt(sxx)
    se_intercept = s * np.sqrt(1.0 / n + x_mean ** 2 / sxx)
    t_star = t_critical(df, level)

    return InferenceReport(
        intercept=_coefficient(INTERCEPT_TERM, model.intercept, se_intercept, df, t_star, level),
        slope=_coefficient(model.predictor, model.slope, se_slope, df, t_star, level),
        df_residual=df,
        conf_level=level,
    )


def _coefficient(
    term: str,
    estimate: float,
    se: float,
    df: int,
    t_star: float,
    level: float,
) -> CoefficientInference:
    se = float(se)
    t_stat = safe_ratio(estimate, se)
    margin = t_star * se
    return CoefficientInference(
        term=term,
        estimate=float(estimate),
        std_error=se,
        t_statistic=t_stat,
        p_value=t_pvalue(t_stat, df),
        conf_low=float(estimate - margin),
        conf_high=float(estimate + margin),
        conf_level=level,
    )
