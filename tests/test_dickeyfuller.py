import numpy as np
import pytest

from unitroot.distrib.dickeyfuller import get_critical_value
from unitroot.exceptions import NotEnoughSamplesError
from unitroot.tools.dickeyfuller import constant_no_trend_test, dickeyfuller_test
from unitroot.tools.report import LegacyReport
from unitroot.types import AlphaLevel, Regression
from unitroot.utils.generators import gen_ar_1


class TestDickeyFuller:

    def test_stationary_series_rejects_unit_root(self, rng):
        y = gen_ar_1(rng, 100, 0.0, 0.5, 1.0)
        report = dickeyfuller_test(y, Regression.CONSTANT)

        assert report.size == 99
        assert report.test_statistic < get_critical_value("c", report.size, AlphaLevel.ONE_PERCENT)

    def test_random_walk_keeps_unit_root(self, rng):
        y = gen_ar_1(rng, 100, 0.0, 1.0, 1.0)
        report = dickeyfuller_test(y, Regression.CONSTANT)

        assert report.size == 99
        assert report.test_statistic > get_critical_value("c", report.size, AlphaLevel.ONE_PERCENT)

    def test_example_series(self, example_series, backend):
        report = dickeyfuller_test(example_series, "c", backend=backend)
        assert report.size == 10
        assert report.test_statistic == pytest.approx(-1.472691, abs=1e-6)

    def test_default_regression_is_constant(self, example_series):
        assert dickeyfuller_test(example_series) == dickeyfuller_test(example_series, "c")

    def test_float32(self, example_series):
        report = dickeyfuller_test(example_series.astype(np.float32), "c")
        assert report.test_statistic.dtype == np.float32
        assert report.test_statistic == pytest.approx(-1.472691, abs=1e-4)

    def test_single_observation(self):
        with pytest.raises(NotEnoughSamplesError):
            dickeyfuller_test([1.0], "c")


class TestConstantNoTrendTest:

    def test_example_series(self, example_series):
        report = constant_no_trend_test(example_series)

        assert isinstance(report, LegacyReport)
        assert isinstance(report.test_statistic, float)
        assert report.size == 10
        assert report.test_statistic == pytest.approx(-1.472691, abs=1e-6)

    def test_matches_dickeyfuller(self, reference_series):
        report = constant_no_trend_test(reference_series)
        expected = dickeyfuller_test(reference_series, Regression.CONSTANT)

        assert report.test_statistic == float(expected.test_statistic)
        assert report.size == expected.size

    def test_non_finite_statistic_is_none(self):
        # Delta y is constant, so the fit is perfect and the level coefficient is 0
        report = constant_no_trend_test([1., 2., 3., 4., 5.])

        assert report.test_statistic is None
        assert report.size == 4

    def test_always_float64(self, example_series):
        report = constant_no_trend_test(example_series.astype(np.float32))
        assert report.test_statistic == pytest.approx(-1.472691, abs=1e-6)
