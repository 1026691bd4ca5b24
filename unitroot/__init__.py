"""
Dickey-Fuller and augmented Dickey-Fuller unit root tests.

Usage::

    from unitroot import adf_test, get_critical_value, AlphaLevel

    report = adf_test(y, lag=2, regression="c")
    critical_value = get_critical_value("c", report.size, AlphaLevel.FIVE_PERCENT)
    stationary = report.test_statistic < critical_value
"""

from .distrib.dickeyfuller import (
    constant_no_trend_critical_value,
    constant_trend_critical_value,
    get_critical_value,
    no_constant_no_trend_critical_value,
)
from .exceptions import (
    ConversionFailedError,
    FailedToInvertMatrixError,
    NotEnoughSamplesError,
    UnitRootError,
)
from .regression.linear_models import OLS, ols
from .tools.adf import adf_test
from .tools.dickeyfuller import constant_no_trend_test, dickeyfuller_test
from .tools.report import LegacyReport, Report
from .types import AlphaLevel, Regression

__version__ = "0.1.0"

__all__ = [
    "AlphaLevel",
    "ConversionFailedError",
    "FailedToInvertMatrixError",
    "LegacyReport",
    "NotEnoughSamplesError",
    "OLS",
    "Regression",
    "Report",
    "UnitRootError",
    "adf_test",
    "constant_no_trend_critical_value",
    "constant_no_trend_test",
    "constant_trend_critical_value",
    "dickeyfuller_test",
    "get_critical_value",
    "no_constant_no_trend_critical_value",
    "ols",
]
