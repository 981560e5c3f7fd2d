"""
Tests for regression statistics().

Standard errors follow the raw-moment formulas
    se_intercept = sqrt(rss * sum(x^2) / (n*sum(x^2) - sum(x)^2))
    se_slope     = sqrt(rss * n        / (n*sum(x^2) - sum(x)^2))
with no degrees-of-freedom correction.
"""

import dataclasses
import math
import warnings

import numpy as np
import pytest

from pylinreg.regression import statistics, fit, FitStatistics, StatisticsParams
from pylinreg.core.exceptions import InsufficientSamplesError, LengthMismatchError


class TestStatisticsBasic:

    def test_returns_fit_statistics(self, small_noisy_data):
        assert isinstance(statistics(*small_noisy_data), FitStatistics)

    def test_perfect_fit(self, perfect_line_data):
        result = statistics(*perfect_line_data)
        assert result.rss == pytest.approx(0.0, abs=1e-20)
        assert result.r_squared == pytest.approx(1.0)
        assert result.standard_error_intercept == pytest.approx(0.0, abs=1e-10)
        assert result.standard_error_slope == pytest.approx(0.0, abs=1e-10)
        assert result.fit.slope == pytest.approx(2.0)
        assert result.fit.intercept == pytest.approx(0.0, abs=1e-12)

    def test_noisy_five_points(self, small_noisy_data):
        result = statistics(*small_noisy_data)
        # Hand-computed for the line y = 0.05 + 1.99 x
        assert result.rss == pytest.approx(0.107, rel=1e-9)
        assert result.tss == pytest.approx(39.708, rel=1e-9)
        assert result.ess == pytest.approx(39.601, rel=1e-9)
        assert result.r_squared == pytest.approx(1.0 - 0.107 / 39.708, rel=1e-9)
        assert 0.0 < result.r_squared < 1.0
        # n = 5, sum(x) = 15, sum(x^2) = 55, denominator = 50
        assert result.standard_error_intercept == pytest.approx(
            math.sqrt(0.107 * 55 / 50), rel=1e-9)
        assert result.standard_error_slope == pytest.approx(
            math.sqrt(0.107 * 5 / 50), rel=1e-9)

    def test_as_tuple_order(self, small_noisy_data):
        result = statistics(*small_noisy_data)
        assert result.as_tuple() == (
            result.standard_error_intercept,
            result.standard_error_slope,
            result.rss,
            result.ess,
            result.r_squared,
        )

    def test_pairs_input(self, small_noisy_data):
        x, y = small_noisy_data
        assert statistics(list(zip(x, y))).as_tuple() == statistics(x, y).as_tuple()

    def test_fit_matches_standalone_fit(self, noisy_line_data):
        x, y = noisy_line_data
        assert statistics(x, y).fit.as_tuple() == fit(x, y).as_tuple()


class TestStatisticsIdentities:

    def test_rss_plus_ess_equals_tss(self, noisy_line_data):
        x, y = noisy_line_data
        result = statistics(x, y)
        tss = float(np.sum((y - y.mean()) ** 2))
        assert result.rss + result.ess == pytest.approx(tss, rel=1e-12)

    def test_ess_matches_explained_variation(self, noisy_line_data):
        """tss - rss equals sum((y_hat - mean(y))^2) for an OLS line."""
        x, y = noisy_line_data
        result = statistics(x, y)
        y_hat = result.fit.fitted_values
        explained = float(np.sum((y_hat - y.mean()) ** 2))
        assert result.ess == pytest.approx(explained, rel=1e-9)

    def test_rss_matches_residuals(self, noisy_line_data):
        x, y = noisy_line_data
        result = statistics(x, y)
        r = result.fit.residuals
        assert result.rss == pytest.approx(float(r @ r), rel=1e-12)

    def test_r_squared_is_squared_correlation(self, noisy_line_data):
        x, y = noisy_line_data
        r = np.corrcoef(x, y)[0, 1]
        assert statistics(x, y).r_squared == pytest.approx(r * r, rel=1e-9)

    def test_standard_errors_relate_to_scipy_by_df(self, noisy_line_data):
        """scipy divides rss by n - 2; these formulas do not."""
        stats = pytest.importorskip("scipy.stats")
        x, y = noisy_line_data
        ref = stats.linregress(x, y)
        result = statistics(x, y)
        scale = math.sqrt(len(x) - 2)
        assert result.standard_error_slope == pytest.approx(ref.stderr * scale, rel=1e-8)
        assert result.standard_error_intercept == pytest.approx(
            ref.intercept_stderr * scale, rel=1e-8)
        assert result.r_squared == pytest.approx(ref.rvalue ** 2, rel=1e-9)

    def test_no_cross_sum_in_payload(self):
        """
        An earlier formulation accumulated sum(x + y) alongside the raw
        moments without using it. No returned statistic depends on it, so
        it is not part of the payload.
        """
        names = {f.name for f in dataclasses.fields(StatisticsParams)}
        assert names == {
            'standard_error_intercept',
            'standard_error_slope',
            'rss',
            'ess',
            'r_squared',
            'tss',
        }


class TestStatisticsValidation:

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            statistics([1, 2, 3], [1, 2])
        assert (exc_info.value.x_length, exc_info.value.y_length) == (3, 2)

    def test_insufficient_samples(self):
        with pytest.raises(InsufficientSamplesError) as exc_info:
            statistics([1.0], [1.0])
        assert (exc_info.value.required, exc_info.value.actual) == (2, 1)


class TestStatisticsDegenerate:

    def test_constant_x_non_finite_standard_errors(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = statistics([5.0, 5.0, 5.0], [1.0, 2.0, 3.0])
        assert not np.isfinite(result.standard_error_intercept)
        assert not np.isfinite(result.standard_error_slope)
        assert result.info['denominator'] == 0.0
        assert result.has_warning("x has zero variance")

    def test_constant_y_nan_r_squared(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = statistics([1.0, 2.0, 3.0], [4.0, 4.0, 4.0])
        assert result.fit.slope == 0.0
        assert result.rss == 0.0
        assert result.tss == 0.0
        assert result.ess == 0.0
        assert np.isnan(result.r_squared)
        assert result.has_warning("y has zero variance")


class TestStatisticsOutput:

    def test_summary(self, small_noisy_data):
        s = statistics(*small_noisy_data).summary()
        assert "R-squared" in s
        assert "Std.Error" in s
        assert "RSS" in s

    def test_repr(self, small_noisy_data):
        assert repr(statistics(*small_noisy_data)).startswith("FitStatistics(n=5")

    def test_timing_sections(self, small_noisy_data):
        timing = statistics(*small_noisy_data).timing
        assert {'total_seconds', 'raw_moments', 'residuals', 'standard_errors'} <= set(timing)


class TestStatisticsRecords:

    def test_frozen(self, small_noisy_data):
        result = statistics(*small_noisy_data)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result._fit = None

    def test_caller_mutation_does_not_change_result(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        y = np.array([2.1, 3.9, 6.2, 7.8, 10.1])
        result = statistics(x, y)
        y[:] = 0.0
        assert result.fit.residuals @ result.fit.residuals == pytest.approx(result.rss)


class TestCancelledDenominator:
    """
    n*sum(x^2) - sum(x)^2 can cancel to zero for x far from the origin
    even though x varies; the standard errors are then not finite.
    """

    def test_warning_explains_non_finite_standard_errors(self, rng):
        x = 1e9 + np.arange(10.0)
        y = 3.0 + 2.0 * np.arange(10.0) + rng.standard_normal(10) * 0.1
        result = statistics(x, y)
        assert result.info['denominator'] <= 0.0
        assert not np.isfinite(result.standard_error_slope)
        assert result.has_warning("raw-moment denominator")
        assert not result.has_warning("x has zero variance")

    def test_no_denominator_warning_for_well_scaled_x(self, noisy_line_data):
        assert not statistics(*noisy_line_data).has_warning("denominator")

    def test_constant_x_reports_zero_variance_only(self):
        result = statistics([5.0, 5.0, 5.0], [1.0, 2.0, 3.0])
        assert result.has_warning("x has zero variance")
        assert not result.has_warning("raw-moment denominator")
