"""
Line design.

LineDesign holds the validated predictor x and response y for a
straight-line fit. Every public entry point builds one, so validation
happens exactly once, at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.capabilities import CAPABILITY_GPU_NATIVE, CAPABILITY_REPEATABLE
from pylinreg.core.pairs import unpack_pairs
from pylinreg.core.validation import (
    check_array,
    check_1d,
    check_same_length,
    check_min_samples,
    count_non_finite,
    device_of,
    to_host,
)

if TYPE_CHECKING:
    import pandas as pd

# A line needs two points.
MIN_SAMPLES = 2


@dataclass(frozen=True)
class LineDesign:
    """
    Paired observations (x[i], y[i]) for simple linear regression.

    Immutable after construction.

    Construction:
        LineDesign.from_arrays(x, y)
        LineDesign.from_pairs([(x0, y0), (x1, y1), ...])
        LineDesign.from_dataframe(df, x='dose', y='response')
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _device: str | None = None

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> LineDesign:
        """
        Build from two parallel sequences.

        Raises:
            ValidationError: If either input is not numeric
            DimensionError: If either input is not 1-dimensional
            LengthMismatchError: If x and y differ in length
            InsufficientSamplesError: If fewer than two observations
        """
        x, x_device = to_host(x)
        y, y_device = to_host(y)
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr, device=x_device or y_device)

    @classmethod
    def from_pairs(cls, samples: Iterable[Any]) -> LineDesign:
        """Build from a sequence of (x, y) pairs, traversed once."""
        device = device_of(samples)
        x_arr, y_arr = unpack_pairs(samples)
        return cls._build(x_arr, y_arr, device=device)

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, x: str, y: str) -> LineDesign:
        """Build from two columns of a DataFrame (or any column mapping)."""
        x_arr = check_array(np.asarray(df[x]), x)
        y_arr = check_array(np.asarray(df[y]), y)
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(
        cls,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        device: str | None = None,
    ) -> LineDesign:
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_same_length(x, y)
        check_min_samples(x, MIN_SAMPLES)
        # C-ordered copies, independent of the caller's arrays
        x = np.array(x, dtype=np.float64, order='C')
        y = np.array(y, dtype=np.float64, order='C')
        return cls(_x=x, _y=y, _n=x.shape[0], _device=device)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def device(self) -> str | None:
        """Device the inputs arrived on, if they were tensors."""
        return self._device

    @property
    def n_non_finite(self) -> int:
        """Number of NaN/Inf entries across x and y."""
        return count_non_finite(self._x) + count_non_finite(self._y)

    def supports(self, capability: str) -> bool:
        """Check a capability; unknown capabilities return False."""
        if capability == CAPABILITY_REPEATABLE:
            return True
        if capability == CAPABILITY_GPU_NATIVE:
            return self._device is not None and not self._device.startswith('cpu')
        return False

