"""
Simple linear regression.

One response, one predictor, ordinary least squares, with the inference
and diagnostics needed to report and plot the fit.

Public API:
    fit(table, response, predictor)   -> FittedModel
    fit_arrays(x, y)                  -> FittedModel
    report(model, confidence_level)   -> InferenceReport
    predict(model, x_values, ...)     -> PredictionSet
    diagnose(model)                   -> DiagnosticSet

Example:
    >>> from pyslr import DataTable
    >>> from pyslr.regression import fit, report, predict, diagnose
    >>> table = DataTable.from_file("abalone.csv").dropna("growth", "ph")
    >>> model = fit(table, "growth", "ph")
    >>> print(model.summary())
    >>> report(model).to_dataframe()
    >>> predict(model, [7.6, 7.8, 8.0]).to_dataframe()
"""

from pyslr.regression.design import RegressionDesign, MIN_OBSERVATIONS
from pyslr.regression.solution import FittedModel, SimpleLinearParams
from pyslr.regression.solvers import fit, fit_arrays
from pyslr.regression.inference import CoefficientInference, InferenceReport, report
from pyslr.regression.prediction import PredictionResult, PredictionSet, predict
from pyslr.regression.diagnostics import DiagnosticRow, DiagnosticSet, diagnose
from pyslr.regression._common import DEFAULT_CONF_LEVEL

__all__ = [
    "fit",
    "fit_arrays",
    "report",
    "predict",
    "diagnose",
    "RegressionDesign",
    "FittedModel",
    "SimpleLinearParams",
    "CoefficientInference",
    "InferenceReport",
    "PredictionResult",
    "PredictionSet",
    "DiagnosticRow",
    "DiagnosticSet",
    "DEFAULT_CONF_LEVEL",
    "MIN_OBSERVATIONS",
]
