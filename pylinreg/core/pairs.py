"""
Unzipping of (x, y) sample pairs into parallel arrays.

Accepts any iterable of pairs, including one-shot generators, and
traverses it exactly once.
"""

from typing import Any, Iterable
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import DimensionError
from pylinreg.core.messages import SAMPLE_NOT_A_PAIR
from pylinreg.core.validation import check_array, to_host


def unpack_pairs(
    samples: Iterable[Any],
    name: str = 'samples',
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split a sequence of (x, y) pairs into x and y arrays in a single pass.

    Args:
        samples: Iterable of 2-element items, or an (n, 2) array
        name: Parameter name for error messages

    Returns:
        (x, y) as float64 arrays of equal length

    Raises:
        DimensionError: If an item is not a pair, or an array input is
            not of shape (n, 2)
        ValidationError: If values are not numeric
    """
    samples, _ = to_host(samples)

    if isinstance(samples, np.ndarray):
        arr = check_array(samples, name)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"{name}: expected array of shape (n, 2), got {arr.shape}"
            )
        return arr[:, 0].copy(), arr[:, 1].copy()

    xs: list[Any] = []
    ys: list[Any] = []
    for i, item in enumerate(samples):
        try:
            a, b = item
        except (TypeError, ValueError) as e:
            raise DimensionError(SAMPLE_NOT_A_PAIR.format(name, i, item)) from e
        xs.append(a)
        ys.append(b)

    return check_array(xs, f'{name} (x)'), check_array(ys, f'{name} (y)')
