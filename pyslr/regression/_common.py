"""
Student-t helpers shared by inference and prediction.
"""

import numpy as np
from scipy import stats as sp_stats


DEFAULT_CONF_LEVEL = 0.95


def t_critical(df: int, conf_level: float) -> float:
    """Two-sided critical value t*(df, (1 + level) / 2)."""
    return float(sp_stats.t.ppf((1.0 + conf_level) / 2.0, df))


def t_pvalue(t_stat: float, df: int) -> float:
    """Two-sided p-value from the t distribution."""
    if np.isnan(t_stat):
        return np.nan
    return float(2.0 * sp_stats.t.sf(abs(t_stat), df))


def safe_ratio(estimate: float, se: float) -> float:
    """
    estimate / se with the zero-error conventions of a perfect fit.

    A zero standard error gives ±inf for a non-zero estimate and NaN for
    a zero one.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(estimate) / se)
