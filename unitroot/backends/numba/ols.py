import numpy as np
from numba import njit
from typing import Tuple

from ...exceptions import FailedToInvertMatrixError
from ...utils.arrays import collinearity_rtol
from .matrix import _inv_core, _is_collinear, _matmul, _matvec, _transpose


# error_model="numpy": zero residual degrees of freedom or a zero standard error
# give inf/nan instead of ZeroDivisionError
@njit(error_model="numpy")
def _ols_core(X: np.ndarray, y: np.ndarray, rtol: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray, bool]:
    """
    Core OLS routine optimized with numba.

    Computes beta = (X'X)^-1 X'y, the standard errors from the classical
    variance-covariance matrix (X'X)^-1 * RSS / (n - k) and the t-statistics
    beta / se.

    Parameters
    ----------
    X : ndarray
        Design matrix with shape (n_samples, n_features)
    y : ndarray
        Target vector with shape (n_samples,)
    rtol : float
        Relative pivot tolerance of the collinearity check.

    Returns
    -------
    beta : ndarray
        Coefficient vector with shape (n_features,)
    t_stats : ndarray
        t-statistics with shape (n_features,)
    std_errors : ndarray
        Standard errors with shape (n_features,)
    ok : bool
        False when X'X is numerically singular; the arrays are NaN then.
    """
    n, k = X.shape

    XT = _transpose(X)
    XtX = _matmul(XT, X)
    XtX_inv, ok = _inv_core(XtX)
    if not ok or _is_collinear(XtX, rtol):
        failed = np.full(k, np.nan, dtype=X.dtype)
        return failed, failed.copy(), failed.copy(), False

    beta = _matvec(XtX_inv, _matvec(XT, y))

    residuals = y - _matvec(X, beta)
    RSS = np.zeros(1, dtype=X.dtype)
    for i in range(n):
        RSS[0] += residuals[i] * residuals[i]

    # keep the degrees of freedom in the working precision
    dof = np.full(1, n - k, dtype=X.dtype)
    sigma_squared = RSS[0] / dof[0]

    std_errors = np.empty(k, dtype=X.dtype)
    t_stats = np.empty(k, dtype=X.dtype)
    for j in range(k):
        std_errors[j] = np.sqrt(XtX_inv[j, j] * sigma_squared)
        t_stats[j] = beta[j] / std_errors[j]

    return beta, t_stats, std_errors, True


def ols_fit(y: np.ndarray, X: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Fit OLS with the numba kernel.

    Parameters
    ----------
    y : ndarray, shape (n_samples,)
    X : ndarray, shape (n_samples, n_features)
        Both already converted to the same working precision.

    Returns
    -------
    beta, t_stats, std_errors : ndarray, shape (n_features,)

    Raises
    ------
    FailedToInvertMatrixError
        If X'X is singular or its columns are collinear up to rounding.
    """
    rtol = collinearity_rtol(X.dtype, X.shape[1])
    beta, t_stats, std_errors, ok = _ols_core(np.ascontiguousarray(X), np.ascontiguousarray(y), rtol)
    if not ok:
        raise FailedToInvertMatrixError("OLS failed to invert X.T @ X")
    return beta, t_stats, std_errors
