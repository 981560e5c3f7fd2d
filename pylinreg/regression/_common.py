"""
Shared helpers for regression backends and diagnostics.

Degenerate inputs are not errors: the arithmetic runs to completion and
yields inf/nan. These helpers only describe such inputs, as warning
strings for Result.warnings.
"""

import numpy as np

from pylinreg.regression.design import LineDesign

ZERO_VARIANCE_X = "x has zero variance; slope and intercept are not finite"
ZERO_VARIANCE_Y = "y has zero variance; r_squared is undefined (0/0)"
NON_FINITE_INPUT = "inputs contain {0} non-finite value(s); results will be NaN"
DENOMINATOR_CANCELLED = (
    "raw-moment denominator n*sum(x^2) - sum(x)^2 is {0:g} although x varies; "
    "standard errors are not finite"
)


def fit_warnings(design: LineDesign, ss_xx: float) -> tuple[str, ...]:
    """Warnings that apply to the fit itself."""
    warnings_list = []
    n_bad = design.n_non_finite
    if n_bad:
        warnings_list.append(NON_FINITE_INPUT.format(n_bad))
    elif ss_xx == 0.0 or np.all(design.x == design.x[0]):
        warnings_list.append(ZERO_VARIANCE_X)
    return tuple(warnings_list)


def statistics_warnings(
    design: LineDesign,
    tss: float,
    denominator: float,
) -> tuple[str, ...]:
    """Warnings that apply only to the diagnostics."""
    if design.n_non_finite:
        return ()
    warnings_list = []
    x_constant = bool(np.all(design.x == design.x[0]))
    # n*sum(x^2) - sum(x)^2 cancels when x sits far from zero
    if denominator <= 0.0 and not x_constant:
        warnings_list.append(DENOMINATOR_CANCELLED.format(denominator))
    if tss == 0.0 or np.all(design.y == design.y[0]):
        warnings_list.append(ZERO_VARIANCE_Y)
    return tuple(warnings_list)
