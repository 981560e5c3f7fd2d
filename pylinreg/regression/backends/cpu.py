"""
CPU reference backend for simple linear regression.

Two-pass algorithm: means first, then centred cross-products. Centring
before multiplying avoids the catastrophic cancellation of the one-pass
sum-of-products formula when x or y sit far from zero.
"""

from typing import Any
import numpy as np

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.regression._common import fit_warnings
from pylinreg.regression.design import LineDesign
from pylinreg.regression.solution import LineParams


class CPUTwoPassBackend:
    """
    CPU backend using the two-pass mean/covariance method.

    Implements the Backend protocol for LineDesign -> LineParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_two_pass'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        """
        Fit y = a + b*x by least squares.

        Algorithm:
            1. mx = sum(x)/n, my = sum(y)/n
            2. ss_xy = sum((x-mx)(y-my)), ss_xx = sum((x-mx)^2)
            3. b = ss_xy / ss_xx, a = my - b*mx

        ss_xx == 0 gives inf/nan under IEEE 754; nothing is raised.
        """
        timer = Timer()
        timer.start()

        x, y, n = design.x, design.y, design.n

        # inf - inf and 0/0 are expected outcomes for degenerate input
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            with timer.section('means'):
                mx = float(np.sum(x)) / n
                my = float(np.sum(y)) / n

            with timer.section('moments'):
                dx = x - mx
                ss_xy = float(np.dot(dx, y - my))
                ss_xx = float(np.dot(dx, dx))

            with timer.section('coefficients'):
                slope = _divide(ss_xy, ss_xx)
                intercept = my - slope * mx

        timer.stop()

        params = LineParams(
            intercept=intercept,
            slope=slope,
            mean_x=mx,
            mean_y=my,
            ss_xy=ss_xy,
            ss_xx=ss_xx,
        )

        info: dict[str, Any] = {
            'method': 'two_pass',
            'n': n,
            'device': 'cpu',
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=fit_warnings(design, ss_xx),
        )


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division on Python floats, which raise on zero divisors."""
    return float(np.float64(numerator) / np.float64(denominator))
