"""
Regression solution types.

Contains the parameter payloads computed by backends and the user-facing
wrappers around them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.result import Result
from pylinreg.core.validation import check_array

if TYPE_CHECKING:
    from pylinreg.regression.design import LineDesign


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for a straight-line fit y = intercept + slope * x.

    ss_xy and ss_xx are the centred sums of the second pass; slope is
    their ratio.
    """
    intercept: float
    slope: float
    mean_x: float
    mean_y: float
    ss_xy: float
    ss_xx: float


@dataclass(frozen=True)
class StatisticsParams:
    """Parameter payload for fit diagnostics."""
    standard_error_intercept: float
    standard_error_slope: float
    rss: float
    ess: float
    r_squared: float
    tss: float


@dataclass(frozen=True)
class LineSolution:
    """
    User-facing result of fit().

    Named accessors replace the positional (intercept, slope) pair;
    as_tuple() gives that pair when it is needed.
    """
    _result: Result[LineParams]
    _design: 'LineDesign'

    @property
    def intercept(self) -> float:
        """Value of the line at x = 0."""
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        """Change in y per unit of x."""
        return self._result.params.slope

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope] as an array."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    @property
    def params(self) -> LineParams:
        """Raw payload, including means and centred sums."""
        return self._result.params

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._design.n

    @property
    def design(self) -> 'LineDesign':
        """The validated input the line was fitted to."""
        return self._design

    def as_tuple(self) -> tuple[float, float]:
        """(intercept, slope)."""
        return (self.intercept, self.slope)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at x."""
        x_arr = check_array(x, 'x')
        with np.errstate(invalid='ignore', over='ignore'):
            return self.slope * x_arr + self.intercept

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        """Line evaluated at each observed x."""
        return self.predict(self._design.x)

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """y minus fitted values."""
        with np.errstate(invalid='ignore', over='ignore'):
            return self._design.y - self.fitted_values

    @property
    def info(self) -> dict[str, Any]:
        """Backend metadata (method, n, device)."""
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        """Section timings in seconds, or None."""
        return self._result.timing

    @property
    def backend_name(self) -> str:
        """Identifier of the backend that fitted the line."""
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        """Non-fatal issues such as zero variance in x."""
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Human-readable report of the fit."""
        lines = [
            "Simple Linear Regression",
            "=" * 60,
            f"Observations: {self.n}",
            f"Intercept: {self.intercept:.6g}",
            f"Slope:     {self.slope:.6g}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(n={self.n}, intercept={self.intercept:.6g}, "
            f"slope={self.slope:.6g})"
        )


@dataclass(frozen=True)
class FitStatistics:
    """
    User-facing result of statistics().

    as_tuple() returns (se_intercept, se_slope, rss, ess, r_squared).
    """
    _result: Result[StatisticsParams]
    _fit: LineSolution

    @property
    def standard_error_intercept(self) -> float:
        """Standard error of the intercept."""
        return self._result.params.standard_error_intercept

    @property
    def standard_error_slope(self) -> float:
        """Standard error of the slope."""
        return self._result.params.standard_error_slope

    @property
    def rss(self) -> float:
        """Residual sum of squares."""
        return self._result.params.rss

    @property
    def ess(self) -> float:
        """Explained sum of squares, tss - rss."""
        return self._result.params.ess

    @property
    def tss(self) -> float:
        """Total sum of squares about mean(y)."""
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        """1 - rss/tss; nan when y is constant."""
        return self._result.params.r_squared

    @property
    def params(self) -> StatisticsParams:
        """Raw diagnostics payload."""
        return self._result.params

    @property
    def fit(self) -> LineSolution:
        """The line the statistics describe."""
        return self._fit

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._fit.n

    @property
    def info(self) -> dict[str, Any]:
        """Diagnostics metadata, including the raw-moment denominator."""
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        """Section timings in seconds."""
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        """Fit warnings followed by diagnostic warnings, without duplicates."""
        return tuple(dict.fromkeys(self._fit.warnings + self._result.warnings))

    def has_warning(self, substring: str) -> bool:
        """True if any warning contains substring."""
        return any(substring in w for w in self.warnings)

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """(se_intercept, se_slope, rss, ess, r_squared)."""
        return (
            self.standard_error_intercept,
            self.standard_error_slope,
            self.rss,
            self.ess,
            self.r_squared,
        )

    def summary(self) -> str:
        """Formatted table of the diagnostics."""
        lines = [
            "Simple Linear Regression Diagnostics",
            "=" * 60,
            f"Observations: {self.n}",
            "",
            f"{'':<12} {'Estimate':>14} {'Std.Error':>14}",
            "-" * 60,
            f"{'Intercept':<12} {self._fit.intercept:14.6g} {self.standard_error_intercept:14.6g}",
            f"{'Slope':<12} {self._fit.slope:14.6g} {self.standard_error_slope:14.6g}",
            "-" * 60,
            f"RSS: {self.rss:.6g}",
            f"ESS: {self.ess:.6g}",
            f"TSS: {self.tss:.6g}",
            f"R-squared: {self.r_squared:.6f}",
            f"Backend: {self._fit.backend_name}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitStatistics(n={self.n}, rss={self.rss:.6g}, "
            f"r_squared={self.r_squared:.4f})"
        )
