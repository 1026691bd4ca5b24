import numpy as np
from numba import njit

from .time_series import _first_difference


@njit
def _lagged_design_core(y, lag):
    """
    Build the Dickey-Fuller response and core regressors.

    Parameters
    ----------
    y : ndarray, shape (N,)
        Levels of the series.
    lag : int
        Number of lagged differences to include.

    Returns
    -------
    delta_y : ndarray, shape (N-lag-1,)
        First differences y[t] - y[t-1] with the first `lag` values dropped.
    x : ndarray, shape (N-lag-1, lag+1)
        Column 0 is y[t-1], column i is Delta y[t-i] for i in 1..lag.
    """
    n = y.shape[0]
    rows = n - lag - 1

    delta = _first_difference(y)

    x = np.empty((rows, lag + 1), dtype=y.dtype)
    for r in range(rows):
        # row r is observation t = r + lag + 1 of the series
        t = r + lag
        x[r, 0] = y[t]
        for i in range(1, lag + 1):
            x[r, i] = delta[t - i]

    return delta[lag:].copy(), x


def lagged_design(y, lag):
    """
    Response vector and lag matrix for the (augmented) Dickey-Fuller regression.

    Row r of both outputs refers to the same observation y[r + lag + 1].

    Parameters
    ----------
    y : ndarray, shape (N,)
        Series in the working precision, N > lag + 1.
    lag : int
        Number of lagged differences.

    Returns
    -------
    delta_y : ndarray, shape (N-lag-1,)
    x : ndarray, shape (N-lag-1, lag+1)
    """
    y = np.ascontiguousarray(y)
    return _lagged_design_core(y, lag)


@njit
def _matmul(a, b):
    """Dense matrix product without BLAS so rounding matches the scalar loop."""
    n, m = a.shape
    p = b.shape[1]
    out = np.zeros((n, p), dtype=a.dtype)
    for i in range(n):
        for j in range(p):
            s = out[i, j]
            for t in range(m):
                s += a[i, t] * b[t, j]
            out[i, j] = s
    return out


@njit
def _matvec(a, v):
    n, m = a.shape
    out = np.zeros(n, dtype=a.dtype)
    for i in range(n):
        s = out[i]
        for t in range(m):
            s += a[i, t] * v[t]
        out[i] = s
    return out


@njit
def _transpose(a):
    return np.ascontiguousarray(a.T)


@njit
def _inv_small(a, inv):
    """Closed-form cofactor inverse for 1x1, 2x2 and 3x3 matrices."""
    k = a.shape[0]
    if k == 1:
        det = a[0, 0]
        if det == 0.0 or not np.isfinite(det):
            return False
        inv[0, 0] = 1.0 / det
        return True

    if k == 2:
        det = a[0, 0] * a[1, 1] - a[1, 0] * a[0, 1]
        if det == 0.0 or not np.isfinite(det):
            return False
        inv[0, 0] = a[1, 1] / det
        inv[0, 1] = -a[0, 1] / det
        inv[1, 0] = -a[1, 0] / det
        inv[1, 1] = a[0, 0] / det
        return True

    c00 = a[1, 1] * a[2, 2] - a[2, 1] * a[1, 2]
    c01 = a[1, 0] * a[2, 2] - a[2, 0] * a[1, 2]
    c02 = a[1, 0] * a[2, 1] - a[2, 0] * a[1, 1]
    det = a[0, 0] * c00 - a[0, 1] * c01 + a[0, 2] * c02
    if det == 0.0 or not np.isfinite(det):
        return False

    inv[0, 0] = c00 / det
    inv[1, 0] = -c01 / det
    inv[2, 0] = c02 / det
    inv[0, 1] = -(a[0, 1] * a[2, 2] - a[2, 1] * a[0, 2]) / det
    inv[1, 1] = (a[0, 0] * a[2, 2] - a[2, 0] * a[0, 2]) / det
    inv[2, 1] = -(a[0, 0] * a[2, 1] - a[2, 0] * a[0, 1]) / det
    inv[0, 2] = (a[0, 1] * a[1, 2] - a[1, 1] * a[0, 2]) / det
    inv[1, 2] = -(a[0, 0] * a[1, 2] - a[1, 0] * a[0, 2]) / det
    inv[2, 2] = (a[0, 0] * a[1, 1] - a[1, 0] * a[0, 1]) / det
    return True


@njit
def _inv_gauss_jordan(a, inv):
    """Gauss-Jordan elimination with partial pivoting, in place on `inv`."""
    k = a.shape[0]
    work = a.copy()
    for i in range(k):
        for j in range(k):
            inv[i, j] = 1.0 if i == j else 0.0

    for col in range(k):
        # Partial pivoting: largest magnitude entry at or below the diagonal
        pivot_row = col
        pivot_abs = abs(work[col, col])
        for r in range(col + 1, k):
            if abs(work[r, col]) > pivot_abs:
                pivot_abs = abs(work[r, col])
                pivot_row = r

        if pivot_abs == 0.0 or not np.isfinite(pivot_abs):
            return False

        if pivot_row != col:
            for j in range(k):
                tmp = work[col, j]
                work[col, j] = work[pivot_row, j]
                work[pivot_row, j] = tmp
                tmp = inv[col, j]
                inv[col, j] = inv[pivot_row, j]
                inv[pivot_row, j] = tmp

        pivot = work[col, col]
        for j in range(k):
            work[col, j] = work[col, j] / pivot
            inv[col, j] = inv[col, j] / pivot

        for r in range(k):
            if r != col:
                factor = work[r, col]
                if factor != 0.0:
                    for j in range(k):
                        work[r, j] -= factor * work[col, j]
                        inv[r, j] -= factor * inv[col, j]

    return True


@njit
def _inv_core(a):
    """
    Invert a square matrix.

    Parameters
    ----------
    a : ndarray, shape (K, K)

    Returns
    -------
    inv : ndarray, shape (K, K)
        The inverse; undefined content when `ok` is False.
    ok : bool
        False when the matrix is singular or holds non-finite values.
    """
    k = a.shape[0]
    inv = np.zeros_like(a)
    if k == 0:
        return inv, False
    if k <= 3:
        ok = _inv_small(a, inv)
    else:
        ok = _inv_gauss_jordan(a, inv)
    return inv, ok


@njit
def _is_collinear(a, rtol):
    """
    Detect a numerically singular cross-product matrix.

    Eliminates the symmetric matrix `a` = X'X in column order. Each pivot is
    the part of a column not explained by the columns before it, so a pivot
    at or below ``rtol * a[col, col]`` means that column is a linear
    combination of the others up to rounding.
    """
    k = a.shape[0]
    work = a.copy()
    for col in range(k):
        pivot = work[col, col]
        if not pivot > rtol * a[col, col]:
            return True
        for r in range(col + 1, k):
            factor = work[r, col] / pivot
            if factor != 0.0:
                for j in range(col + 1, k):
                    work[r, j] -= factor * work[col, j]
    return False
