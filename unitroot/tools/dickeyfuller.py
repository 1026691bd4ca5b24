"""
Dickey-Fuller test: the augmented test without lagged differences.
"""

from typing import Optional, Union

import numpy as np

from ..types import Regression
from ..utils.arrays import ArrayLike
from .adf import adf_test
from .report import LegacyReport, Report


def dickeyfuller_test(
    series: ArrayLike,
    regression: Union[Regression, str] = Regression.CONSTANT,
    backend: Optional[str] = None,
    dtype=None,
) -> Report:
    """
    Dickey-Fuller test statistic and sample size.

    Regresses Delta y[t] on y[t-1] plus the requested deterministic terms.
    Identical to ``adf_test(series, 0, regression)``.

    Parameters
    ----------
    series : array_like, 1d
        The data series to test, at least two observations.
    regression : Regression or {"n", "c", "ct"}
        Deterministic terms included in the regression.
    backend : str, optional
        OLS backend, "numba" or "jax".
    dtype : {None, str, np.dtype}
        Working precision, float32 or float64.

    Returns
    -------
    Report
    """
    return adf_test(series, 0, regression, backend=backend, dtype=dtype)


def constant_no_trend_test(series: ArrayLike, backend: Optional[str] = None) -> LegacyReport:
    """
    Dickey-Fuller test with a constant and no trend, in float64.

    Same regression as ``dickeyfuller_test(series, "c")`` but a non-finite
    statistic is reported as None.

    Examples
    --------
    >>> y = [-0.89642362, 0.3222552, -1.96581989, -1.10012936, -1.3682928,
    ...      1.17239875, 2.19561259, 2.54295031, 2.05530587, 1.13212955,
    ...      -0.42968979]
    >>> report = constant_no_trend_test(y)
    >>> report.size
    10
    >>> abs(report.test_statistic - -1.472691) < 1e-6
    True
    """
    report = dickeyfuller_test(series, Regression.CONSTANT, backend=backend, dtype=np.float64)
    statistic = float(report.test_statistic)
    if not np.isfinite(statistic):
        return LegacyReport(test_statistic=None, size=report.size)
    return LegacyReport(test_statistic=statistic, size=report.size)
