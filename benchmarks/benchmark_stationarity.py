from benchmarks.benchmark_utils import (
    benchmark_batch_functions,
    benchmark_function_across_param_grid,
    generate_series_inputs,
)
from statsmodels.tsa.stattools import adfuller

from unitroot.tools.adf import adf_test
from unitroot.tools.dickeyfuller import dickeyfuller_test

lag = 2

## ADF

def statsmodels_adfuller(x, lag=lag, regression="c"):
    return adfuller(x, maxlag=lag, regression=regression, autolag=None)[0]

def unitroot_adf_numba(x, lag=lag, regression="c"):
    return adf_test(x, lag, regression, backend="numba").test_statistic

def unitroot_adf_jax(x, lag=lag, regression="c"):
    return adf_test(x, lag, regression, backend="jax").test_statistic

## Dickey-Fuller

def statsmodels_dickeyfuller(x, regression="c"):
    return adfuller(x, maxlag=0, regression=regression, autolag=None)[0]

def unitroot_dickeyfuller(x, regression="c"):
    return dickeyfuller_test(x, regression).test_statistic


def run_adfuller_benchmarks(sizes: list, runs: int):
    return benchmark_batch_functions(
        [unitroot_adf_numba, unitroot_adf_jax],
        statsmodels_adfuller,
        generate_series_inputs,
        sizes,
        runs=runs
    )

def run_dickeyfuller_benchmarks(sizes: list, runs: int):
    return benchmark_batch_functions(
        [unitroot_dickeyfuller],
        statsmodels_dickeyfuller,
        generate_series_inputs,
        sizes,
        runs=runs
    )

def run_adfuller_grid_benchmarks(sizes: list, runs: int):
    param_grid = {
        'regression': ['n', 'c', 'ct'],
        'lag': [0, 1, 2, 5, 10],
    }
    return benchmark_function_across_param_grid(
        unitroot_adf_numba,
        statsmodels_adfuller,
        generate_series_inputs,
        param_grid=param_grid,
        sizes=sizes,
        runs=runs
    )
