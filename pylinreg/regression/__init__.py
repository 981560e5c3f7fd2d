"""
Simple linear regression: one predictor, one response.

Public API:
    fit(x, y)         -> LineSolution    (intercept, slope)
    fit(samples)      -> LineSolution    from (x, y) pairs
    statistics(x, y)  -> FitStatistics   (standard errors, RSS, ESS, R-squared)

Example:
    >>> from pylinreg.regression import fit, statistics
    >>> line = fit(x, y)
    >>> print(line.intercept, line.slope)
    >>> print(statistics(x, y).summary())
"""

from pylinreg.regression.design import LineDesign
from pylinreg.regression.solution import (
    LineParams,
    LineSolution,
    StatisticsParams,
    FitStatistics,
)
from pylinreg.regression.solvers import fit, statistics

__all__ = [
    "fit",
    "statistics",
    "LineDesign",
    "LineParams",
    "LineSolution",
    "StatisticsParams",
    "FitStatistics",
]
