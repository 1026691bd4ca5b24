"""
Reference values come from statsmodels:

    import statsmodels.tsa.stattools as ts
    ts.adfuller(y, maxlag=lag, regression=regression, autolag=None)
"""

import dataclasses

import numpy as np
import pandas as pd
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from unitroot.distrib.dickeyfuller import get_critical_value
from unitroot.exceptions import (
    ConversionFailedError,
    FailedToInvertMatrixError,
    NotEnoughSamplesError,
    UnitRootError,
)
from unitroot.tools.adf import adf_test
from unitroot.tools.dickeyfuller import dickeyfuller_test
from unitroot.types import AlphaLevel, Regression
from unitroot.utils.generators import gen_ar_1


class TestReferenceValues:

    def test_t_statistic_n(self, reference_series, backend):
        report = adf_test(reference_series, 1, Regression.NO_CONSTANT_NO_TREND, backend=backend)
        assert report.size == 9
        assert report.test_statistic == pytest.approx(-0.417100483298, abs=1e-9)

    def test_t_statistic_c(self, reference_series, backend):
        report = adf_test(reference_series, 2, Regression.CONSTANT, backend=backend)
        assert report.size == 8
        assert report.test_statistic == pytest.approx(0.486121422662, abs=1e-9)

    def test_t_statistic_ct(self, reference_series, backend):
        report = adf_test(reference_series, 0, Regression.CONSTANT_AND_TREND, backend=backend)
        assert report.size == 10
        assert report.test_statistic == pytest.approx(-4.20337098854, abs=1e-9)

    @pytest.mark.parametrize("regression, lag, expected", [
        ("n", 1, {0.01: -2.85894, 0.05: -1.96955775034, 0.10: -1.58602219479}),
        ("c", 2, {0.01: -4.66518632812, 0.05: -3.367186875, 0.10: -2.802960625}),
        ("ct", 0, {0.01: -5.282515, 0.05: -3.985264, 0.10: -3.44724}),
    ])
    def test_critical_values_at_reported_size(self, reference_series, regression, lag, expected):
        report = adf_test(reference_series, lag, regression)
        for alpha, value in expected.items():
            assert get_critical_value(regression, report.size, alpha) == pytest.approx(value, abs=1e-6)

    def test_example_series(self, example_series):
        report = adf_test(example_series, 1, Regression.CONSTANT)
        assert report.size == 9
        assert report.test_statistic == pytest.approx(-1.1639935, abs=1e-6)
        assert report.test_statistic > get_critical_value("c", report.size, AlphaLevel.ONE_PERCENT)

    def test_float32(self, reference_series):
        report = adf_test(reference_series.astype(np.float32), 2, "c")
        assert report.size == 8
        assert report.test_statistic.dtype == np.float32
        assert report.test_statistic == pytest.approx(0.486121422662, abs=1e-3)

    def test_dtype_override(self, reference_series):
        report = adf_test(reference_series, 2, "c", dtype="float32")
        assert report.test_statistic.dtype == np.float32

    def test_accepts_pandas(self, reference_series):
        series = pd.Series(reference_series, index=pd.date_range("2020-01-01", periods=11))
        report = adf_test(series, 2, "c")
        assert report.test_statistic == pytest.approx(0.486121422662, abs=1e-9)

    def test_report_is_immutable(self, reference_series):
        report = adf_test(reference_series, 2, "c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.size = 3


class TestAgainstStatsmodels:

    @pytest.mark.parametrize("regression", ["n", "c", "ct"])
    @pytest.mark.parametrize("lag", [0, 1, 4])
    def test_adfuller(self, rng, regression, lag):
        stattools = pytest.importorskip("statsmodels.tsa.stattools")
        y = gen_ar_1(rng, 250, 0.1, 0.9, 1.0)

        expected = stattools.adfuller(y, maxlag=lag, regression=regression, autolag=None)
        report = adf_test(y, lag, regression)

        assert report.test_statistic == pytest.approx(expected[0], rel=1e-8)
        assert report.size == expected[3]


def _outcome(f, *args):
    try:
        report = f(*args)
    except UnitRootError as e:
        return type(e)
    return report


class TestProperties:

    @settings(deadline=None, max_examples=40)
    @given(
        seed=st.integers(0, 2**32 - 1),
        lag=st.integers(0, 8),
        extra=st.integers(0, 100),
        regression=st.sampled_from(list(Regression)),
    )
    def test_size(self, seed, lag, extra, regression):
        n = 2 * lag + 5 + extra
        y = gen_ar_1(np.random.default_rng(seed), n, 0.0, 1.0, 1.0)

        report = adf_test(y, lag, regression)
        assert report.size == n - lag - 1

    @settings(deadline=None, max_examples=40)
    @given(
        values=st.lists(st.floats(-1e3, 1e3, allow_nan=False), max_size=12),
        extra_lag=st.integers(0, 5),
        regression=st.sampled_from(list(Regression)),
    )
    def test_not_enough_samples(self, values, extra_lag, regression):
        lag = max(len(values) - 1, 0) + extra_lag
        with pytest.raises(NotEnoughSamplesError):
            adf_test(values, lag, regression)

    @settings(deadline=None, max_examples=40)
    @given(
        seed=st.integers(0, 2**32 - 1),
        n=st.integers(2, 80),
        regression=st.sampled_from(list(Regression)),
        dtype=st.sampled_from([np.float32, np.float64]),
    )
    def test_lag_zero_is_dickeyfuller(self, seed, n, regression, dtype):
        y = gen_ar_1(np.random.default_rng(seed), n, 0.0, 0.7, 1.0, dtype=dtype)

        adf = _outcome(adf_test, y, 0, regression)
        df = _outcome(dickeyfuller_test, y, regression)

        if isinstance(adf, type):
            assert adf is df
        else:
            np.testing.assert_equal(adf.test_statistic, df.test_statistic)
            assert adf.size == df.size

    def test_lag_zero_is_dickeyfuller_triangular(self, triangular_series):
        y = triangular_series.astype(np.float32)
        report = adf_test(y, 0, Regression.CONSTANT)
        df_report = dickeyfuller_test(y, Regression.CONSTANT)

        assert report.test_statistic == df_report.test_statistic
        assert report.size == df_report.size


class TestErrors:

    def test_not_enough_samples(self):
        with pytest.raises(NotEnoughSamplesError):
            adf_test([1., 2., 3.], 2, "c")

    def test_constant_series_is_singular(self):
        with pytest.raises(FailedToInvertMatrixError):
            adf_test(np.full(20, 3.0), 1, "c")

    def test_overflow_in_float32(self):
        y = np.array([1e39, 1., 2., 4., 3., 5.])
        with pytest.raises(ConversionFailedError):
            adf_test(y, 0, "c", dtype=np.float32)

    def test_non_numeric(self):
        with pytest.raises(ConversionFailedError):
            adf_test(["a", "b", "c", "d"], 0, "c")

    @pytest.mark.parametrize("lag", [-1, 1.5])
    def test_invalid_lag(self, lag):
        with pytest.raises(ValueError, match="lag"):
            adf_test(np.arange(10.), lag, "c")

    def test_unknown_regression(self):
        with pytest.raises(ValueError):
            adf_test(np.arange(10.), 1, "ctt")

    def test_unsupported_dtype(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            adf_test(np.arange(10.), 1, "c", dtype=np.int32)

    def test_two_dimensional_input(self):
        with pytest.raises(ValueError, match="1-dimensional"):
            adf_test(np.ones((5, 2)), 0, "c")
