"""
CPU backends for simple linear regression.

Two ways to the same least squares line:

    CPUClosedFormBackend: centered sums, b1 = Sxy / Sxx, b0 = ȳ - b1·x̄.
        The reference path.
    CPUQRBackend: QR decomposition of the [1, x] design matrix via
        LAPACK, a cross-check on the closed form.

Both share the same residual and sum-of-squares bookkeeping.
"""

from typing import Any
import numpy as np
from scipy import linalg as sp_linalg

from pyslr.core.result import Result
from pyslr.core.compute.timing import Timer
from pyslr.core.exceptions import DegenerateModelError
from pyslr.regression.design import RegressionDesign
from pyslr.regression.solution import SimpleLinearParams


ZERO_VARIANCE_WARNING = "response has zero variance; R-squared is undefined and reported as 0"


class CPUClosedFormBackend:
    """
    CPU backend using the closed-form OLS solution.

    Implements RegressionDesign -> Result[SimpleLinearParams].
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: RegressionDesign) -> Result[SimpleLinearParams]:
        """
        Solve OLS from centered sums.

        Algorithm:
            1. x̄, ȳ and the centered vectors
            2. Sxx = Σ(x - x̄)², Sxy = Σ(x - x̄)(y - ȳ)
            3. b1 = Sxy / Sxx, b0 = ȳ - b1·x̄
            4. Fitted values, residuals, RSS, TSS

        Raises:
            DegenerateModelError: If Sxx is zero
        """
        timer = Timer()
        timer.start()

        x, y = design.x, design.y

        with timer.section('moments'):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))
            dx = x - x_mean
            sxx = float(dx @ dx)
            sxy = float(dx @ (y - y_mean))

        _check_sxx(sxx, design)

        with timer.section('solve'):
            slope = sxy / sxx
            intercept = y_mean - slope * x_mean

        params, warnings_list = _finish(
            design, intercept, slope, x_mean, y_mean, sxx, timer
        )
        timer.stop()

        return Result(
            params=params,
            info=_info(design, 'closed_form'),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Solves min ||y - Xβ||² for X = [1, x] via X = QR, β = R⁻¹Q'y.
    Should agree with CPUClosedFormBackend to machine precision.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[SimpleLinearParams]:
        timer = Timer()
        timer.start()

        x, y = design.x, design.y

        with timer.section('moments'):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))
            dx = x - x_mean
            sxx = float(dx @ dx)

        _check_sxx(sxx, design)

        with timer.section('qr_decomposition'):
            Q, R = np.linalg.qr(design.X(), mode='reduced')

        with timer.section('solve'):
            beta = sp_linalg.solve_triangular(R, Q.T @ y, lower=False)
            intercept, slope = float(beta[0]), float(beta[1])

        params, warnings_list = _finish(
            design, intercept, slope, x_mean, y_mean, sxx, timer
        )
        timer.stop()

        return Result(
            params=params,
            info=_info(design, 'qr'),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _check_sxx(sxx: float, design: RegressionDesign) -> None:
    if not sxx > 0.0:
        raise DegenerateModelError(
            f"{design.predictor}: predictor has zero variance (Sxx={sxx!r}); "
            f"slope is undefined",
            quantity='Sxx',
            value=sxx,
        )


def _finish(
    design: RegressionDesign,
    intercept: float,
    slope: float,
    x_mean: float,
    y_mean: float,
    sxx: float,
    timer: Timer,
) -> tuple[SimpleLinearParams, list[str]]:
    """Residuals, sums of squares and the parameter payload."""
    warnings_list: list[str] = []
    y = design.y

    with timer.section('residuals'):
        fitted_values = intercept + slope * design.x
        residuals = y - fitted_values

    with timer.section('statistics'):
        rss = float(residuals @ residuals)
        if design.response_is_constant:
            tss = 0.0
            warnings_list.append(ZERO_VARIANCE_WARNING)
        else:
            dy = y - y_mean
            tss = float(dy @ dy)

    fitted_values.setflags(write=False)
    residuals.setflags(write=False)

    params = SimpleLinearParams(
        intercept=float(intercept),
        slope=float(slope),
        fitted_values=fitted_values,
        residuals=residuals,
        rss=rss,
        tss=tss,
        x_mean=x_mean,
        y_mean=y_mean,
        sxx=sxx,
        df_residual=design.n - 2,
    )
    return params, warnings_list


def _info(design: RegressionDesign, method: str) -> dict[str, Any]:
    return {
        'method': method,
        'n': design.n,
        'n_dropped': design.n_dropped,
        'response': design.response,
        'predictor': design.predictor,
    }
