from typing import Optional, Union

import numpy as np
import pandas as pd

from .. import config
from ..exceptions import ConversionFailedError

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

ArrayLike = Union[np.ndarray, pd.Series, pd.DataFrame, list, tuple]


def resolve_dtype(data: np.ndarray, dtype=None) -> np.dtype:
    """
    Pick the working precision for `data`.

    An explicit `dtype` wins; otherwise float32/float64 input keeps its own
    precision and anything else falls back to ``config.DEFAULT_DTYPE``.
    """
    if dtype is None:
        if data.dtype in SUPPORTED_DTYPES:
            return data.dtype
        dtype = config.DEFAULT_DTYPE

    try:
        dtype = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Invalid dtype: {dtype!r}") from e

    if dtype not in SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported dtype: {dtype.name}. Must be float32 or float64.")
    return dtype


def _convert(data: np.ndarray, dtype: np.dtype) -> np.ndarray:
    if data.dtype.kind not in "biuf":
        raise ConversionFailedError(f"Cannot convert data of dtype {data.dtype} to {dtype.name}")

    with np.errstate(over="ignore", invalid="ignore"):
        converted = data.astype(dtype)

    # finite values that overflow the working type
    if np.any(np.isfinite(data) & ~np.isfinite(converted)):
        raise ConversionFailedError(f"Values out of range for {dtype.name}")
    return np.ascontiguousarray(converted)


def as_series(x: ArrayLike, dtype=None) -> np.ndarray:
    """
    Convert a 1D array-like to a contiguous array in the working precision.

    Parameters
    ----------
    x : array_like, 1d
        Series data; pandas objects are accepted.
    dtype : {None, str, np.dtype}
        Working precision, float32 or float64.

    Returns
    -------
    ndarray, shape (N,)
    """
    if isinstance(x, (pd.Series, pd.DataFrame)):
        x = x.to_numpy()
    data = np.asarray(x)

    if data.ndim == 2 and data.shape[1] == 1:
        data = data[:, 0]
    if data.ndim != 1:
        raise ValueError(f"x must be a 1-dimensional array, got shape {data.shape}")

    return _convert(data, resolve_dtype(data, dtype))


def as_matrix(x: ArrayLike, dtype=None) -> np.ndarray:
    """Convert a 2D array-like (1D is read as a single column) to the working precision."""
    if isinstance(x, (pd.Series, pd.DataFrame)):
        x = x.to_numpy()
    data = np.asarray(x)

    if data.ndim == 1:
        data = data.reshape(-1, 1)
    if data.ndim != 2:
        raise ValueError(f"X must be a 2-dimensional array, got shape {data.shape}")

    return _convert(data, resolve_dtype(data, dtype))


def collinearity_rtol(dtype, n_features: int) -> float:
    """Relative pivot tolerance of the singularity check on X'X."""
    return config.COLLINEARITY_ULPS * max(n_features, 1) * float(np.finfo(dtype).eps)
