import numpy as np
from numba import njit

from ...exceptions import ConversionFailedError
from ...types import Regression


@njit
def _first_difference(y):
    """
    First difference y[t] - y[t-1] of a 1D array.

    Parameters
    ----------
    y : ndarray, shape (N,)

    Returns
    -------
    ndarray, shape (N-1,)
    """
    n = y.shape[0]
    out = np.empty(n - 1, dtype=y.dtype)
    for t in range(n - 1):
        out[t] = y[t + 1] - y[t]
    return out


def _time_trend(nobs, dtype):
    """Linear time index 1..nobs converted to `dtype`."""
    index = np.arange(1, nobs + 1, dtype=np.float64)
    with np.errstate(over="ignore"):
        trend = index.astype(dtype)
    if not np.all(np.isfinite(trend)):
        raise ConversionFailedError(
            f"Time index up to {nobs} cannot be represented as {np.dtype(dtype).name}"
        )
    return trend


def add_trend(x, regression=Regression.CONSTANT, prepend=False):
    """
    Add the deterministic terms of a Dickey-Fuller regression to a design matrix.

    Parameters
    ----------
    x : ndarray, shape (nobs, k)
        Regressors, already in the working precision.
    regression : Regression or str {'n', 'c', 'ct'}
        'n' adds nothing, 'c' adds a column of ones, 'ct' adds a column of ones
        followed by the time trend 1..nobs.
    prepend : bool
        If True, the deterministic columns come first; otherwise they are
        appended after the columns of `x`.

    Returns
    -------
    ndarray, shape (nobs, k + n_deterministic)
        A new array; `x` is never modified.
    """
    regression = Regression(regression)
    x = np.asarray(x)
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    nobs = x.shape[0]
    dtype = x.dtype

    n_deterministic = regression.n_deterministic
    if n_deterministic == 0:
        return x.copy()

    trendarr = np.ones((nobs, n_deterministic), dtype=dtype)
    if n_deterministic == 2:
        trendarr[:, 1] = _time_trend(nobs, dtype)

    if prepend:
        return np.hstack([trendarr, x])
    return np.hstack([x, trendarr])
