"""
Input validation utilities for PySLR.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - None is the only non-numeric value accepted, and it becomes NaN
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyslr.core.exceptions import (
    ValidationError,
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. ``None`` entries are read as missing and
    become NaN; any other non-numeric content is rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        flat = [np.nan if v is None else v for v in result.ravel()]
        if not all(isinstance(v, numbers.Real) for v in flat):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        result = np.asarray(flat, dtype=np.float64).reshape(result.shape)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(
        result.dtype, np.complexfloating
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_observations(n_complete: int, min_obs: int, name: str) -> None:
    """
    Verify enough complete observations remain after dropping missing rows.

    Args:
        n_complete: Number of complete observations
        min_obs: Minimum required
        name: Description of the data for error messages

    Raises:
        InsufficientDataError: If n_complete < min_obs
    """
    if n_complete < min_obs:
        raise InsufficientDataError(
            f"{name}: requires at least {min_obs} complete observations, "
            f"got {n_complete}",
            n_complete=n_complete,
            required=min_obs,
        )


def check_confidence_level(level: Any, name: str = 'confidence_level') -> float:
    """
    Verify a confidence level lies strictly inside (0, 1).

    Args:
        level: Candidate confidence level
        name: Parameter name for error messages

    Returns:
        The level as a Python float

    Raises:
        InvalidParameterError: If level is not a real number in (0, 1)
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise InvalidParameterError(
            f"{name}: expected a real number in (0, 1), got {level!r}",
            name=name,
            value=level,
        )
    level = float(level)
    if not (0.0 < level < 1.0):
        raise InvalidParameterError(
            f"{name}: must lie in (0, 1), got {level}",
            name=name,
            value=level,
        )
    return level


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    """
    Verify a string option is one of the allowed choices.

    Raises:
        InvalidParameterError: If value is not in choices
    """
    if value not in choices:
        raise InvalidParameterError(
            f"{name}: expected one of {choices}, got {value!r}",
            name=name,
            value=value,
        )
    return value
