"""
Regression solution types.

Contains the parameter payload and the user-facing fitted model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyslr.core.result import Result

if TYPE_CHECKING:
    from pyslr.regression.design import RegressionDesign


@dataclass(frozen=True, eq=False)
class SimpleLinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends. The centered
    moments (x_mean, sxx) are stored because every downstream standard
    error is a function of them.
    """
    intercept: float
    slope: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    x_mean: float
    y_mean: float
    sxx: float
    df_residual: int


@dataclass(frozen=True, eq=False)
class FittedModel:
    """
    User-facing simple regression results.

    Wraps the backend Result together with the design it was fit on.
    Never mutated: report(), predict() and diagnose() only read from it.
    """
    _result: Result[SimpleLinearParams]
    _design: 'RegressionDesign'

    # === Coefficients ===

    @property
    def intercept(self) -> float:
        """b0."""
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        """b1."""
        return self._result.params.slope

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Array [b0, b1]."""
        return np.array([self.intercept, self.slope])

    # === Sample ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._design.x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._design.y

    @property
    def rows(self) -> NDArray[np.intp]:
        """Original table row of each fitting observation."""
        return self._design.rows

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def response(self) -> str:
        return self._design.response

    @property
    def predictor(self) -> str:
        return self._design.predictor

    @property
    def predictor_range(self) -> tuple[float, float]:
        """(min, max) of the observed predictor values."""
        return float(np.min(self.x)), float(np.max(self.x))

    @property
    def x_mean(self) -> float:
        return self._result.params.x_mean

    @property
    def y_mean(self) -> float:
        return self._result.params.y_mean

    @property
    def sxx(self) -> float:
        """Σ(x_i - x̄)²."""
        return self._result.params.sxx

    # === Fit ===

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def r_squared_defined(self) -> bool:
        """False when the response has zero variance."""
        return self.tss > 0.0

    @property
    def r_squared(self) -> float:
        """1 - RSS/TSS in [0, 1], reported as 0.0 when TSS is zero."""
        if not self.r_squared_defined:
            return 0.0
        # RSS can round above TSS when y varies only in its last bits
        return min(max(1.0 - (self.rss / self.tss), 0.0), 1.0)

    @property
    def adjusted_r_squared(self) -> float:
        if not self.r_squared_defined:
            return 0.0
        return 1.0 - (1.0 - self.r_squared) * (self.n - 1) / self.df_residual

    @property
    def residual_std_error(self) -> float:
        """s = sqrt(RSS / (n - 2))."""
        return float(np.sqrt(self.rss / self.df_residual))

    @property
    def f_statistic(self) -> float:
        """Overall F statistic on 1 and n - 2 DF; equals the squared slope t."""
        if not self.r_squared_defined:
            return np.nan
        with np.errstate(divide='ignore'):
            explained = max(self.tss - self.rss, 0.0)
            return float(np.float64(explained) / (self.rss / self.df_residual))

    @property
    def f_p_value(self) -> float:
        f = self.f_statistic
        if np.isnan(f):
            return np.nan
        return float(sp_stats.f.sf(f, 1, self.df_residual))

    # === Metadata ===

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self, confidence_level: float = 0.95) -> str:
        """Generate R-style summary output."""
        from pyslr.regression.inference import report

        inference = report(self, confidence_level)
        pct = f"{100 * inference.conf_level:g}%"

        res = self.residuals
        q = np.quantile(res, [0.0, 0.25, 0.5, 0.75, 1.0])

        r2 = f"{self.r_squared:.4f}" if self.r_squared_defined else "NA (zero variance response)"
        lines = [
            f"Simple Linear Regression: {self.response} ~ {self.predictor}",
            "=" * 78,
            f"Observations: {self.n}"
            + (f" ({self._design.n_dropped} dropped for missing values)"
               if self._design.n_dropped else ""),
            "",
            "Residuals:",
            f"{'Min':>10} {'1Q':>10} {'Median':>10} {'3Q':>10} {'Max':>10}",
            " ".join(f"{v:10.4f}" for v in q),
            "",
            "Coefficients:",
            "-" * 78,
            f"{'':<14} {'Estimate':>11} {'Std.Error':>11} {'t value':>9} "
            f"{'Pr(>|t|)':>10} {'CI low':>9} {'CI high':>9}",
            "-" * 78,
        ]
        for coef in inference:
            lines.append(
                f"{coef.term[:14]:<14} {coef.estimate:11.5f} {coef.std_error:11.5f} "
                f"{coef.t_statistic:9.3f} {_format_p(coef.p_value):>10} "
                f"{coef.conf_low:9.4f} {coef.conf_high:9.4f}"
            )
        lines.extend([
            "-" * 78,
            f"Confidence level: {pct}",
            f"Residual standard error: {self.residual_std_error:.4f} "
            f"on {self.df_residual} degrees of freedom",
            f"Multiple R-squared: {r2}",
        ])
        if self.r_squared_defined:
            lines.append(
                f"Adjusted R-squared: {self.adjusted_r_squared:.4f}, "
                f"F-statistic: {self.f_statistic:.4g} on 1 and {self.df_residual} DF, "
                f"p-value: {_format_p(self.f_p_value)}"
            )
        lines.append(f"Backend: {self.backend_name}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FittedModel({self.response} ~ {self.predictor}, n={self.n}, "
            f"intercept={self.intercept:.6g}, slope={self.slope:.6g}, "
            f"r_squared={self.r_squared:.4f})"
        )


def _format_p(p: float) -> str:
    """R's format.pval for the summary table."""
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "<2e-16"
    if p < 1e-4:
        return f"{p:.2e}"
    return f"{p:.4f}"
