"""
Residual-based diagnostics for a fitted line.

Standard errors use the raw-moment denominator n*sum(x^2) - sum(x)^2,
which equals n * ss_xx from the fit. ess is derived as tss - rss; that
identity holds because an OLS line passes through (mean x, mean y).
"""

from typing import Any
import numpy as np

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.regression._common import statistics_warnings
from pylinreg.regression.design import LineDesign
from pylinreg.regression.solution import LineParams, StatisticsParams


def compute_statistics(design: LineDesign, line: LineParams) -> Result[StatisticsParams]:
    """
    Diagnostics for the line (line.intercept, line.slope) over design.

    Degenerate inputs propagate: zero variance in x gives non-finite
    standard errors, zero variance in y gives r_squared = nan.
    """
    timer = Timer()
    timer.start()

    x, y, n = design.x, design.y, design.n

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        with timer.section('raw_moments'):
            sx = float(np.sum(x))
            sy = float(np.sum(y))
            sxx = float(np.dot(x, x))
            my = sy / n

        with timer.section('residuals'):
            y_hat = line.slope * x + line.intercept
            resid = y - y_hat
            rss = float(np.dot(resid, resid))
            centred = y - my
            tss = float(np.dot(centred, centred))

        with timer.section('standard_errors'):
            denominator = np.float64(n * sxx - sx * sx)
            se_intercept = float(np.sqrt(np.float64(rss * sxx) / denominator))
            se_slope = float(np.sqrt(np.float64(rss * n) / denominator))

        r_squared = float(1.0 - np.float64(rss) / np.float64(tss))

    timer.stop()

    params = StatisticsParams(
        standard_error_intercept=se_intercept,
        standard_error_slope=se_slope,
        rss=rss,
        ess=tss - rss,
        r_squared=r_squared,
        tss=tss,
    )

    info: dict[str, Any] = {
        'method': 'residuals',
        'n': n,
        'denominator': float(denominator),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_residuals',
        warnings=statistics_warnings(design, tss, float(denominator)),
    )
