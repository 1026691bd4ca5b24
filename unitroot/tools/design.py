import logging
from typing import Tuple

import numpy as np

from ..backends.numba.matrix import lagged_design
from ..backends.numba.time_series import add_trend
from ..exceptions import NotEnoughSamplesError
from ..types import Regression

logger = logging.getLogger(__name__)


def prepare(y: np.ndarray, lag: int, regression: Regression) -> Tuple[np.ndarray, np.ndarray, int]:
    """
    Build the Dickey-Fuller regression for a series.

    Parameters
    ----------
    y : ndarray, shape (N,)
        Series already converted to the working precision.
    lag : int
        Number of lagged differences, N must exceed lag + 1.
    regression : Regression
        Deterministic terms, appended after the lag columns.

    Returns
    -------
    delta_y : ndarray, shape (N-lag-1,)
        Response: Delta y[t] for t = lag+1 .. N-1.
    x : ndarray, shape (N-lag-1, lag+1+n_deterministic)
        Columns: y[t-1], Delta y[t-1] .. Delta y[t-lag], then the constant and
        the time trend 1..N-lag-1 when requested.
    size : int
        Effective number of observations, N - lag - 1.

    Raises
    ------
    NotEnoughSamplesError
        If N <= lag + 1.
    ConversionFailedError
        If the time trend cannot be represented in the working precision.
    """
    n_obs = y.shape[0]
    if n_obs <= lag + 1:
        raise NotEnoughSamplesError(
            f"Series of length {n_obs} needs more than {lag + 1} observations for lag={lag}"
        )

    delta_y, x = lagged_design(y, lag)
    x = add_trend(x, regression, prepend=False)

    size = n_obs - lag - 1
    logger.debug("Design matrix %s for lag=%d, regression=%s", x.shape, lag, regression.value)
    return delta_y, x, size
