"""
Augmented Dickey-Fuller test with a fixed lag order.

The statistic matches ``statsmodels.tsa.stattools.adfuller(x, maxlag=lag,
regression=..., autolag=None)[0]``: the regression of Delta y[t] on y[t-1],
`lag` lagged differences and the requested deterministic terms, fitted on
the last N - lag - 1 observations.
"""

import logging
from typing import Optional, Union

from ..backends.backend import StatisticalBackend
from ..types import Regression
from ..utils.arrays import ArrayLike, as_series
from .design import prepare
from .report import Report

logger = logging.getLogger(__name__)


def _level_column(regression: Regression) -> int:
    """Column of y[t-1] in the design matrix built by `prepare`."""
    # deterministic terms are appended after the lag columns, so the level
    # column never moves
    if regression is Regression.NO_CONSTANT_NO_TREND:
        return 0
    elif regression is Regression.CONSTANT:
        return 0
    elif regression is Regression.CONSTANT_AND_TREND:
        return 0
    raise ValueError(f"Unhandled regression: {regression!r}")


def adf_test(
    series: ArrayLike,
    lag: int,
    regression: Union[Regression, str] = Regression.CONSTANT,
    backend: Optional[str] = None,
    dtype=None,
) -> Report:
    """
    Augmented Dickey-Fuller test statistic.

    The null hypothesis is that the series has a unit root. Reject it at level
    alpha when the statistic is below ``get_critical_value(regression,
    report.size, alpha)``.

    Parameters
    ----------
    series : array_like, 1d
        The data series to test.
    lag : int
        Number of lagged differences; the series must have more than lag + 1
        observations.
    regression : Regression or {"n", "c", "ct"}
        Deterministic terms included in the regression.
    backend : str, optional
        OLS backend, "numba" or "jax".
    dtype : {None, str, np.dtype}
        Working precision, float32 or float64.

    Returns
    -------
    Report
        t-statistic of the y[t-1] coefficient and the number of observations
        used. The statistic may be inf or NaN for degenerate data.

    Raises
    ------
    NotEnoughSamplesError
        If len(series) <= lag + 1.
    FailedToInvertMatrixError
        If the regressors are perfectly collinear.
    ConversionFailedError
        If the data cannot be represented in the working precision.
    """
    if int(lag) != lag or lag < 0:
        raise ValueError(f"lag must be a non-negative integer, got {lag!r}")
    lag = int(lag)
    regression = Regression(regression)
    ols_fit = StatisticalBackend(backend=backend).get_core_function("ols")

    y = as_series(series, dtype)
    delta_y, x, size = prepare(y, lag, regression)

    _betas, t_stats, _std_errors = ols_fit(delta_y, x)

    column = _level_column(regression)
    logger.debug("ADF statistic taken from column %d of %d", column, x.shape[1])
    return Report(test_statistic=t_stats[column], size=size)
