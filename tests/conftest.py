'''
Pytest configuration and fixtures for the unitroot test suite.
'''

import numpy as np
import pytest

from unitroot.utils.generators import gen_ar_1


# Series with known statsmodels results, see the reference tests
REFERENCE_SERIES = np.array([
    -1.06714348, -1.14700339, 0.79204106, -0.05845247, -0.67476754, -0.10396661,
    1.82059282, -0.51169443, 2.07712365, 1.85668086, 2.56363688,
])

EXAMPLE_SERIES = np.array([
    -0.89642362, 0.3222552, -1.96581989, -1.10012936, -1.3682928, 1.17239875,
    2.19561259, 2.54295031, 2.05530587, 1.13212955, -0.42968979,
])

# First differences are 2, 3, ..., 10
TRIANGULAR_SERIES = np.array([1., 3., 6., 10., 15., 21., 28., 36., 45., 55.])


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_series() -> np.ndarray:
    return REFERENCE_SERIES.copy()


@pytest.fixture
def example_series() -> np.ndarray:
    return EXAMPLE_SERIES.copy()


@pytest.fixture
def triangular_series() -> np.ndarray:
    return TRIANGULAR_SERIES.copy()


@pytest.fixture
def random_walk(rng: np.random.Generator) -> np.ndarray:
    return gen_ar_1(rng, 200, 0.0, 1.0, 1.0)


@pytest.fixture(params=["numba", "jax"])
def backend(request) -> str:
    """Run a test once per OLS backend."""
    if request.param == "jax":
        pytest.importorskip("jax")
    return request.param
