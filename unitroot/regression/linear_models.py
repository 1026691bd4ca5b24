from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from scipy import stats

from ..backends.backend import StatisticalBackend
from ..backends.numba.time_series import add_trend
from ..types import Regression
from ..utils.arrays import ArrayLike, as_matrix, as_series


def _fit(y: ArrayLike, x: ArrayLike, backend: Optional[str], dtype) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coefficients, t-statistics and standard errors from the selected backend."""
    X_array = as_matrix(x, dtype)
    y_array = as_series(y, X_array.dtype)

    if y_array.shape[0] != X_array.shape[0]:
        raise ValueError(
            f"y has {y_array.shape[0]} samples but x has {X_array.shape[0]} rows"
        )

    ols_fit = StatisticalBackend(backend=backend).get_core_function("ols")
    return ols_fit(y_array, X_array)


def ols(
    y: ArrayLike,
    x: ArrayLike,
    backend: Optional[str] = None,
    dtype=None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Ordinary least squares coefficients and their t-statistics.

    No intercept is added: include a column of ones in `x` if one is needed.

    Parameters
    ----------
    y : array_like, shape (n_samples,)
        Response vector.
    x : array_like, shape (n_samples, n_features)
        Predictor matrix.
    backend : str, optional
        "numba" or "jax"; defaults to ``config.DEFAULT_BACKEND``.
    dtype : {None, str, np.dtype}
        Working precision. Defaults to the precision of `x`.

    Returns
    -------
    beta : ndarray, shape (n_features,)
        Estimated coefficients.
    t_stats : ndarray, shape (n_features,)
        beta / standard error. A zero standard error gives inf (or NaN when
        the coefficient is zero too); these are returned as is.

    Raises
    ------
    FailedToInvertMatrixError
        If X'X is singular or its columns are collinear up to rounding.
    ConversionFailedError
        If the data cannot be represented in the working precision.
    """
    beta, t_stats, _std_errors = _fit(y, x, backend, dtype)
    return beta, t_stats


class OLS:
    """
    Least squares estimator with classical (homoskedastic) t-statistics.

    pandas inputs keep their column names in `summary`.

    Parameters
    ----------
    fit_intercept : bool, default=True
        Prepend a column of ones to the regressors.
    backend : {"numba", "jax"}, optional
        Computational backend.
    dtype : {None, str, np.dtype}
        Working precision.

    Attributes
    ----------
    coef_ : ndarray of shape (n_features,)
        Slope coefficients.
    intercept_ : float
        0.0 when `fit_intercept` is False.
    tvalues_, std_errors_ : ndarray of shape (n_params,)
        Per parameter, intercept first when fitted.
    residuals_ : ndarray of shape (n_samples,)
    df_resid_ : int
        n_samples - n_params.
    """

    def __init__(self, fit_intercept: bool = True, backend: Optional[str] = None, dtype=None):
        self.fit_intercept = fit_intercept
        self.backend = backend
        self.dtype = dtype
        self.coef_ = None
        self.intercept_ = None
        self.tvalues_ = None
        self.std_errors_ = None
        self.residuals_ = None
        self.df_resid_ = None
        self._names: List[str] = []
        self._total_ss = None

    def _design(self, X: ArrayLike) -> np.ndarray:
        X_array = as_matrix(X, self.dtype)
        if not self.fit_intercept:
            return X_array
        return add_trend(X_array, Regression.CONSTANT, prepend=True)

    def _check_fitted(self) -> None:
        if self.coef_ is None:
            raise ValueError("Model not fitted yet. Call 'fit' first.")

    @property
    def params_(self) -> np.ndarray:
        """All estimated parameters, intercept first when fitted."""
        self._check_fitted()
        if self.fit_intercept:
            return np.concatenate(([self.intercept_], self.coef_))
        return self.coef_

    def fit(self, X: ArrayLike, y: ArrayLike) -> "OLS":
        """
        Estimate the coefficients and their t-statistics.

        Raises
        ------
        FailedToInvertMatrixError
            If the regressors (with the intercept) are collinear.
        """
        design = self._design(X)
        y_array = as_series(y, design.dtype)
        beta, t_stats, std_errors = _fit(y_array, design, self.backend, None)

        if isinstance(X, pd.DataFrame):
            names = [str(c) for c in X.columns]
        else:
            names = [f"x{i}" for i in range(design.shape[1] - int(self.fit_intercept))]
        self._names = ["intercept"] + names if self.fit_intercept else names

        self.intercept_ = beta[0] if self.fit_intercept else 0.0
        self.coef_ = beta[1:] if self.fit_intercept else beta
        self.tvalues_ = t_stats
        self.std_errors_ = std_errors
        self.residuals_ = y_array - design @ beta
        self.df_resid_ = design.shape[0] - design.shape[1]

        centred = y_array - y_array.mean() if self.fit_intercept else y_array
        self._total_ss = float(centred @ centred)
        return self

    def predict(self, X: ArrayLike) -> np.ndarray:
        """Fitted values for new regressors, shape (n_samples,)."""
        self._check_fitted()
        return self._design(X) @ self.params_

    def summary(self) -> Dict[str, Any]:
        """
        Regression results.

        Returns
        -------
        dict
            'coefficients' : DataFrame of coef, std_err, t and two-sided P>|t|
            'n_observations' : int
            'df_residuals' : int
            'r_squared' : float, centred when an intercept is fitted and 0.0
            for a constant response
        """
        self._check_fitted()

        p_values = 2 * stats.t.sf(np.abs(self.tvalues_), self.df_resid_)
        coefficients = pd.DataFrame({
            'coef': self.params_,
            'std_err': self.std_errors_,
            't': self.tvalues_,
            'P>|t|': p_values,
        }, index=self._names)

        rss = float(self.residuals_ @ self.residuals_)
        return {
            'coefficients': coefficients,
            'n_observations': len(self.residuals_),
            'df_residuals': self.df_resid_,
            'r_squared': 1.0 - rss / self._total_ss if self._total_ss != 0 else 0.0,
        }
