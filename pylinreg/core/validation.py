"""
Input validation utilities for pylinreg.

These validators fail fast: they raise immediately with the offending
values in the message rather than silently correcting the input.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinreg.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientSamplesError,
)
from pylinreg.core.messages import (
    SAMPLE_VECTORS_SAME_LENGTH,
    REGRESSION_NOT_ENOUGH_SAMPLES,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is rejected along with strings, bytes and datetimes
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


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


def check_same_length(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> None:
    """
    Verify predictor and response have the same number of observations.

    Raises:
        LengthMismatchError: If the lengths differ, carrying both lengths
    """
    nx, ny = x.shape[0], y.shape[0]
    if nx != ny:
        raise LengthMismatchError(
            SAMPLE_VECTORS_SAME_LENGTH.format(nx, ny),
            x_length=nx,
            y_length=ny,
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int) -> None:
    """
    Verify array has at least the minimum number of observations.

    Raises:
        InsufficientSamplesError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientSamplesError(
            REGRESSION_NOT_ENOUGH_SAMPLES.format(min_samples, n),
            required=min_samples,
            actual=n,
        )


def count_non_finite(array: NDArray[np.floating[Any]]) -> int:
    """Number of NaN or Inf entries in array."""
    return int(np.count_nonzero(~np.isfinite(array)))


def device_of(value: Any) -> str | None:
    """Device a tensor lives on, or None for objects without one."""
    device = getattr(value, 'device', None)
    return str(device) if device is not None else None


def to_host(value: Any) -> tuple[Any, str | None]:
    """
    Move a torch tensor to host memory; pass anything else through.

    Returns:
        (value, device) where device is None unless value was a tensor
    """
    if hasattr(value, 'cpu'):
        return value.detach().cpu().numpy(), device_of(value)
    return value, None
