from typing import Tuple

import jax
import jax.numpy as jnp
import numpy as np

from ...exceptions import FailedToInvertMatrixError
from ...utils.arrays import collinearity_rtol


def _adjugate(a: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """Adjugate and determinant of a 1x1, 2x2 or 3x3 matrix, by cofactors."""
    k = a.shape[0]
    if k == 1:
        return jnp.ones_like(a), a[0, 0]

    if k == 2:
        adj = jnp.stack([
            jnp.stack([a[1, 1], -a[0, 1]]),
            jnp.stack([-a[1, 0], a[0, 0]]),
        ])
        return adj, a[0, 0] * a[1, 1] - a[1, 0] * a[0, 1]

    c00 = a[1, 1] * a[2, 2] - a[2, 1] * a[1, 2]
    c01 = a[1, 0] * a[2, 2] - a[2, 0] * a[1, 2]
    c02 = a[1, 0] * a[2, 1] - a[2, 0] * a[1, 1]
    adj = jnp.stack([
        jnp.stack([c00, -(a[0, 1] * a[2, 2] - a[2, 1] * a[0, 2]), a[0, 1] * a[1, 2] - a[1, 1] * a[0, 2]]),
        jnp.stack([-c01, a[0, 0] * a[2, 2] - a[2, 0] * a[0, 2], -(a[0, 0] * a[1, 2] - a[1, 0] * a[0, 2])]),
        jnp.stack([c02, -(a[0, 0] * a[2, 1] - a[2, 0] * a[0, 1]), a[0, 0] * a[1, 1] - a[1, 0] * a[0, 1]]),
    ])
    return adj, a[0, 0] * c00 - a[0, 1] * c01 + a[0, 2] * c02


def _is_collinear(a: jnp.ndarray, rtol: float) -> jnp.ndarray:
    """
    True when a column of X is a linear combination of the others up to
    rounding, judged on a = X'X by elimination in column order.
    """
    k = a.shape[0]
    diag = jnp.diag(a)
    work = a
    collinear = jnp.zeros((), dtype=bool)
    for col in range(k):
        pivot = work[col, col]
        # "not >" so NaN pivots count as collinear
        bad = jnp.logical_not(pivot > rtol * diag[col])
        collinear = collinear | bad
        pivot = jnp.where(bad, 1.0, pivot)
        work = work - jnp.outer(work[:, col] / pivot, work[col])
    return collinear


@jax.jit
def _ols_core(X: jnp.ndarray, y: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray, jnp.ndarray, jnp.ndarray]:
    """
    Core OLS routine optimized with JAX.

    Up to three regressors the coefficients are adj(X'X) X'y / det(X'X), so
    integer-valued data give exact coefficients and residuals. Larger
    designs use ``jnp.linalg.inv``.

    Parameters
    ----------
    X : jnp.ndarray
        Design matrix with shape (n_samples, n_features)
    y : jnp.ndarray
        Target vector with shape (n_samples,)

    Returns
    -------
    beta : jnp.ndarray
        Coefficient vector with shape (n_features,)
    t_stats : jnp.ndarray
        t-statistics with shape (n_features,)
    std_errors : jnp.ndarray
        Standard errors with shape (n_features,)
    ok : jnp.ndarray
        Scalar bool, False when X'X is numerically singular.
    """
    n, k = X.shape

    XtX = X.T @ X
    Xty = X.T @ y
    if k <= 3:
        adj, det = _adjugate(XtX)
        XtX_inv = adj / det
        beta = (adj @ Xty) / det
    else:
        XtX_inv = jnp.linalg.inv(XtX)
        beta = XtX_inv @ Xty

    residuals = y - X @ beta
    RSS = residuals @ residuals

    # n == k gives inf/nan here
    sigma_squared = RSS / jnp.asarray(n - k, dtype=X.dtype)
    std_errors = jnp.sqrt(jnp.diag(XtX_inv) * sigma_squared)

    ok = jnp.all(jnp.isfinite(XtX_inv)) & jnp.logical_not(
        _is_collinear(XtX, collinearity_rtol(X.dtype, k))
    )
    return beta, beta / std_errors, std_errors, ok


def ols_fit(y: np.ndarray, X: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Fit OLS with the JAX kernel and return NumPy arrays.

    Raises
    ------
    FailedToInvertMatrixError
        If X'X is singular or its columns are collinear up to rounding.
    """
    beta, t_stats, std_errors, ok = _ols_core(jnp.asarray(X), jnp.asarray(y))
    if not bool(ok):
        raise FailedToInvertMatrixError("OLS failed to invert X.T @ X")
    return np.asarray(beta), np.asarray(t_stats), np.asarray(std_errors)
