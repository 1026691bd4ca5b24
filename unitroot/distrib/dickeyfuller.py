"""
Approximate finite-sample critical values of the Dickey-Fuller distribution.

Each critical value is the response surface ``t + u/n + v/n**2 + w/n**3`` of
MacKinnon (2010), "Critical Values for Cointegration Tests", Queen's
Economics Department Working Paper 1227, Table 2 (one variable), see also
https://www.real-statistics.com/statistics-tables/augmented-dickey-fuller-table/

The 2.5% rows for the 'n' and 'ct' regressions are not tabulated there; they
are interpolated between the 1% and 5% rows on the standard normal quantile
scale (weight 0.537618), which reproduces the tabulated 'c' row to within
0.01 at n = 25.
"""

from typing import Dict, Tuple, Union

import numpy as np

from ..exceptions import ConversionFailedError, NotEnoughSamplesError
from ..types import AlphaLevel, Regression

Coefficients = Tuple[float, float, float, float]

NO_CONSTANT_NO_TREND: Dict[AlphaLevel, Coefficients] = {
    AlphaLevel.ONE_PERCENT: (-2.56574, -2.2358, -3.627, 0.0),
    AlphaLevel.TWO_POINT_FIVE_PERCENT: (-2.22987, -1.17820, -3.48614, 16.786),
    AlphaLevel.FIVE_PERCENT: (-1.94100, -0.2686, -3.365, 31.223),
    AlphaLevel.TEN_PERCENT: (-1.61682, 0.2656, -2.714, 25.364),
}

CONSTANT_NO_TREND: Dict[AlphaLevel, Coefficients] = {
    AlphaLevel.ONE_PERCENT: (-3.43035, -6.5393, -16.786, -79.433),
    AlphaLevel.TWO_POINT_FIVE_PERCENT: (-3.1175, -4.53235, -9.8824, -57.7669),
    AlphaLevel.FIVE_PERCENT: (-2.86154, -2.8903, -4.234, -40.040),
    AlphaLevel.TEN_PERCENT: (-2.56677, -1.5384, -2.809, 0.0),
}

CONSTANT_TREND: Dict[AlphaLevel, Coefficients] = {
    AlphaLevel.ONE_PERCENT: (-3.95877, -9.0531, -28.428, -134.155),
    AlphaLevel.TWO_POINT_FIVE_PERCENT: (-3.66401, -6.54635, -18.00251, -86.42474),
    AlphaLevel.FIVE_PERCENT: (-3.41049, -4.3904, -9.036, -45.374),
    AlphaLevel.TEN_PERCENT: (-3.12705, -2.5856, -3.925, -22.380),
}


def _response_surface(coefficients: Coefficients, sample_size: int, dtype) -> np.floating:
    if sample_size <= 0:
        raise NotEnoughSamplesError(f"Sample size must be positive, got {sample_size}")

    dtype = np.dtype(dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        t, u, v, w = (dtype.type(c) for c in coefficients)
        n = dtype.type(sample_size)
        value = t + u / n + v / n ** 2 + w / n ** 3

    if not np.isfinite(value):
        raise ConversionFailedError(
            f"Critical value for n={sample_size} is not representable as {dtype.name}"
        )
    return value


def no_constant_no_trend_critical_value(
    sample_size: int,
    alpha_level: Union[AlphaLevel, float],
    dtype=np.float64,
) -> np.floating:
    """Critical value for Delta y[t] = b1*y[t-1] + e[t]."""
    return _response_surface(NO_CONSTANT_NO_TREND[AlphaLevel(alpha_level)], sample_size, dtype)


def constant_no_trend_critical_value(
    sample_size: int,
    alpha_level: Union[AlphaLevel, float],
    dtype=np.float64,
) -> np.floating:
    """Critical value for Delta y[t] = b0 + b1*y[t-1] + e[t]."""
    return _response_surface(CONSTANT_NO_TREND[AlphaLevel(alpha_level)], sample_size, dtype)


def constant_trend_critical_value(
    sample_size: int,
    alpha_level: Union[AlphaLevel, float],
    dtype=np.float64,
) -> np.floating:
    """Critical value for Delta y[t] = b0 + b1*y[t-1] + b2*t + e[t]."""
    return _response_surface(CONSTANT_TREND[AlphaLevel(alpha_level)], sample_size, dtype)


def get_critical_value(
    regression: Union[Regression, str],
    sample_size: int,
    alpha_level: Union[AlphaLevel, float],
    dtype=np.float64,
) -> np.floating:
    """
    Approximate critical value of the (augmented) Dickey-Fuller statistic.

    Parameters
    ----------
    regression : Regression or {"n", "c", "ct"}
        Deterministic terms of the tested regression.
    sample_size : int
        Number of observations used, i.e. ``Report.size``.
    alpha_level : AlphaLevel or {0.01, 0.025, 0.05, 0.10}
        Significance level.
    dtype : np.dtype, default float64
        Precision of the returned value.

    Returns
    -------
    np.floating
        Reject the unit root null hypothesis when the test statistic is
        below this value.

    Raises
    ------
    NotEnoughSamplesError
        If `sample_size` is not positive.
    ConversionFailedError
        If the value is not finite in `dtype`.
    """
    regression = Regression(regression)
    if regression is Regression.NO_CONSTANT_NO_TREND:
        return no_constant_no_trend_critical_value(sample_size, alpha_level, dtype)
    elif regression is Regression.CONSTANT:
        return constant_no_trend_critical_value(sample_size, alpha_level, dtype)
    elif regression is Regression.CONSTANT_AND_TREND:
        return constant_trend_critical_value(sample_size, alpha_level, dtype)
    raise ValueError(f"Unhandled regression: {regression!r}")
