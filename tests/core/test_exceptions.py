"""
Tests for PySLR exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySLRError)
    - Diagnostic attributes on the input and model errors
    - Default attribute values
"""

import pytest

from pyslr.core.exceptions import (
    ColumnNotFoundError,
    DegenerateModelError,
    DimensionError,
    EmptyQueryError,
    InsufficientDataError,
    InvalidParameterError,
    NumericalError,
    PySLRError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySLRError."""

    @pytest.mark.parametrize("exc", [
        DimensionError("wrong shape"),
        ColumnNotFoundError("no column", column="x"),
        InsufficientDataError("too few", n_complete=2, required=3),
        InvalidParameterError("bad level", name="confidence_level", value=2.0),
        EmptyQueryError("empty"),
    ])
    def test_input_errors_are_validation_errors(self, exc):
        assert isinstance(exc, ValidationError)
        assert isinstance(exc, PySLRError)
        assert not isinstance(exc, NumericalError)

    def test_degenerate_model_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateModelError("constant predictor")

    def test_degenerate_model_is_pyslr_error(self):
        with pytest.raises(PySLRError):
            raise DegenerateModelError("constant predictor")

    def test_degenerate_model_is_not_validation_error(self):
        assert not isinstance(DegenerateModelError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestColumnNotFoundError:

    def test_attributes(self):
        err = ColumnNotFoundError("no 'ph'", column="ph", available=("x", "y"))
        assert str(err) == "no 'ph'"
        assert err.column == "ph"
        assert err.available == ("x", "y")

    def test_available_defaults_empty(self):
        assert ColumnNotFoundError("no 'ph'", column="ph").available == ()


class TestInsufficientDataError:

    def test_attributes(self):
        err = InsufficientDataError("need 3", n_complete=2, required=3)
        assert err.n_complete == 2
        assert err.required == 3


class TestInvalidParameterError:

    def test_attributes(self):
        err = InvalidParameterError("bad", name="confidence_level", value=1.5)
        assert err.name == "confidence_level"
        assert err.value == 1.5

    def test_value_defaults_none(self):
        assert InvalidParameterError("bad", name="backend").value is None


class TestDegenerateModelError:

    def test_attributes(self):
        err = DegenerateModelError("h = 1", quantity="leverage", value=1.0)
        assert err.quantity == "leverage"
        assert err.value == 1.0

    def test_defaults_are_none(self):
        err = DegenerateModelError("degenerate")
        assert err.quantity is None
        assert err.value is None

    def test_catchable_with_attributes(self):
        with pytest.raises(DegenerateModelError) as exc_info:
            raise DegenerateModelError("Sxx = 0", quantity="Sxx", value=0.0)
        assert exc_info.value.quantity == "Sxx"
