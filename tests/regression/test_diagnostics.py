"""
Tests for diagnose(): leverage, standardized residuals, Cook's distance.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from pyslr import DataTable
from pyslr.regression import fit, fit_arrays, diagnose, DiagnosticRow
from pyslr.core.exceptions import DegenerateModelError


class TestTextbookDiagnostics:
    """x = 1..5, y = [2, 4, 5, 4, 5]."""

    def test_one_row_per_observation(self, textbook_model):
        diag = diagnose(textbook_model)
        assert len(diag) == 5
        assert all(isinstance(r, DiagnosticRow) for r in diag)
        assert [r.row for r in diag] == [0, 1, 2, 3, 4]

    def test_leverage(self, textbook_model):
        diag = diagnose(textbook_model)
        assert_allclose(diag.column('leverage'), [0.6, 0.3, 0.2, 0.3, 0.6], rtol=1e-12)

    def test_standardized_residuals(self, textbook_model):
        diag = diagnose(textbook_model)
        s = np.sqrt(0.8)
        h = np.array([0.6, 0.3, 0.2, 0.3, 0.6])
        e = np.array([-0.8, 0.6, 1.0, -0.6, -0.2])
        assert_allclose(diag.column('standardized_residual'), e / (s * np.sqrt(1 - h)), rtol=1e-10)
        assert diag[0].standardized_residual == pytest.approx(-np.sqrt(2), rel=1e-10)
        assert diag[2].standardized_residual == pytest.approx(1.25, rel=1e-10)

    def test_cooks_distance(self, textbook_model):
        diag = diagnose(textbook_model)
        assert diag[0].cooks_distance == pytest.approx(1.5, rel=1e-10)
        assert diag[2].cooks_distance == pytest.approx(0.1953125, rel=1e-10)
        assert diag[4].cooks_distance == pytest.approx(0.09375, rel=1e-10)

    def test_fitted_and_residual_columns(self, textbook_model):
        diag = diagnose(textbook_model)
        assert_allclose(diag.column('fitted'), textbook_model.fitted_values)
        assert_allclose(diag.column('residual'), textbook_model.residuals)
        assert_allclose(diag.column('x'), textbook_model.x)

    def test_scale_location(self, textbook_model):
        diag = diagnose(textbook_model)
        assert_allclose(
            diag.column('sqrt_abs_standardized_residual'),
            np.sqrt(np.abs(diag.column('standardized_residual'))),
        )


class TestDiagnosticProperties:

    def test_leverage_sums_to_two(self, simple_regression_data):
        x, y = simple_regression_data
        diag = diagnose(fit_arrays(x, y))
        assert diag.column('leverage').sum() == pytest.approx(2.0, rel=1e-10)

    def test_leverage_matches_hat_matrix(self, simple_regression_data):
        x, y = simple_regression_data
        diag = diagnose(fit_arrays(x, y))
        X = np.column_stack([np.ones_like(x), x])
        H = X @ np.linalg.inv(X.T @ X) @ X.T
        assert_allclose(diag.column('leverage'), np.diag(H), rtol=1e-8)

    def test_leverage_bounds(self, simple_regression_data):
        x, y = simple_regression_data
        h = diagnose(fit_arrays(x, y)).column('leverage')
        assert np.all(h >= 1.0 / len(x) - 1e-15)
        assert np.all(h < 1.0)

    def test_original_row_numbers_after_dropping(self):
        table = DataTable.from_columns(
            x=[1.0, np.nan, 2.0, 3.0, 4.0, 5.0],
            y=[2.0, 1.0, 4.0, np.nan, 4.0, 5.0],
        )
        diag = diagnose(fit(table, 'y', 'x'))
        assert [r.row for r in diag] == [0, 2, 4, 5]

    def test_theoretical_quantiles_follow_residual_ranks(self, simple_regression_data):
        x, y = simple_regression_data
        diag = diagnose(fit_arrays(x, y))
        r = diag.column('standardized_residual')
        q = diag.column('theoretical_quantile')
        order = np.argsort(r)
        assert np.all(np.diff(q[order]) > 0)
        n = len(r)
        expected = sp_stats.norm.ppf((np.arange(1, n + 1) - 0.5) / n)
        assert_allclose(np.sort(q), expected, rtol=1e-12)

    def test_small_sample_quantile_positions(self, textbook_model):
        q = np.sort(diagnose(textbook_model).column('theoretical_quantile'))
        a = 3.0 / 8.0
        expected = sp_stats.norm.ppf((np.arange(1, 6) - a) / (5 + 1 - 2 * a))
        assert_allclose(q, expected, rtol=1e-12)

    def test_model_unchanged(self, textbook_model):
        before = textbook_model.residuals.copy()
        diagnose(textbook_model)
        assert_allclose(textbook_model.residuals, before, atol=0)


class TestDegenerate:

    def test_unit_leverage_raises(self):
        # Two tied predictor values and one lone value: the lone point has h = 1
        model = fit_arrays([0.0, 0.0, 1.0], [1.0, 2.0, 3.0])
        with pytest.raises(DegenerateModelError) as excinfo:
            diagnose(model)
        assert excinfo.value.quantity == 'leverage'
        assert excinfo.value.value == pytest.approx(1.0)

    def test_perfect_fit_zero_standardized_residuals(self):
        model = fit_arrays([1.0, 2.0, 3.0, 4.0], [3.0, 5.0, 7.0, 9.0])
        diag = diagnose(model)
        assert_allclose(diag.column('standardized_residual'), 0.0)
        assert_allclose(diag.column('cooks_distance'), 0.0)


def test_to_dataframe(textbook_model):
    df = diagnose(textbook_model).to_dataframe()
    assert df.index.name == 'row'
    assert list(df.index) == [0, 1, 2, 3, 4]
    assert 'leverage' in df.columns
    assert 'cooks_distance' in df.columns
