"""
Synthetic series for tests, examples and benchmarks.
"""

from typing import Tuple

import numpy as np


def gen_ar_1(
    rng: np.random.Generator,
    size: int,
    mu: float,
    delta: float,
    sigma: float,
    dtype=np.float64,
) -> np.ndarray:
    """
    Simulate y[t] = mu + delta * y[t-1] + sigma * e[t] with y[-1] = 0.

    `delta` = 1 gives a random walk (unit root), |delta| < 1 a stationary AR(1).
    """
    epsilon = rng.standard_normal(size)
    y = np.empty(size, dtype=np.float64)

    previous = 0.0
    for t in range(size):
        previous = mu + delta * previous + sigma * epsilon[t]
        y[t] = previous

    return y.astype(dtype)


def _gen_x(size: int, dtype) -> np.ndarray:
    return np.arange(size, dtype=dtype).reshape(-1, 1)


def gen_affine_data(size: int, mu: float, beta: float, dtype=np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """x = 0..size-1 as a single column, y = mu + beta * x."""
    x = _gen_x(size, dtype)
    y = (x[:, 0] * beta + mu).astype(dtype)
    return x, y


def gen_affine_data_with_whitenoise(
    rng: np.random.Generator,
    size: int,
    mu: float,
    beta: float,
    dtype=np.float64,
) -> Tuple[np.ndarray, np.ndarray]:
    """Same as `gen_affine_data` plus standard normal noise on y."""
    x = _gen_x(size, dtype)
    noise = rng.standard_normal(size)
    y = (x[:, 0] * beta + noise + mu).astype(dtype)
    return x, y
