from benchmarks.benchmark_utils import generate_matrix_inputs, benchmark_batch_functions
import statsmodels.api as sm

from unitroot.regression.linear_models import ols


def statsmodels_ols(X, y):
    return sm.OLS(y, X).fit().tvalues

def ols_numba(X, y):
    return ols(y, X, backend="numba")[1]

def ols_jax(X, y):
    return ols(y, X, backend="jax")[1]


def run_ols_benchmarks(sizes: list, runs: int):
    return benchmark_batch_functions(
        [ols_numba, ols_jax],
        statsmodels_ols,
        generate_matrix_inputs,
        sizes,
        runs=runs
    )


if __name__ == "__main__":
    run_ols_benchmarks([(25, 3), (100, 3), (500, 5), (1000, 5), (10000, 12)], 10)
