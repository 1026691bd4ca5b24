import itertools
import time
from copy import deepcopy
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

from unitroot.utils.generators import gen_ar_1


def _timed(f: Callable, inputs: list):
    """Run `f` on a private copy of `inputs`, return (result, seconds)."""
    args = deepcopy(inputs)
    start = time.perf_counter()
    result = f(*args)
    return result, time.perf_counter() - start


def _check_agreement(name: str, reference, result, rtol: float = 1e-4, atol: float = 1e-6) -> None:
    if not np.allclose(reference, result, rtol=rtol, atol=atol, equal_nan=True):
        raise AssertionError(f"{name}: got {result}, reference gives {reference}")


def benchmark_function(f_unitroot, f_reference, input_generator, sizes, runs=5) -> pd.DataFrame:
    """
    Time a unitroot function against a reference implementation.

    Both are called on identical inputs for every size, and every run checks
    that they return the same statistics.
    """
    rows = []
    for size in sizes:
        inputs = input_generator(size)
        # Warm up so JIT compilation for this shape and dtype is not timed
        f_unitroot(*deepcopy(inputs))

        reference_times = np.empty(runs)
        unitroot_times = np.empty(runs)
        for run in range(runs):
            expected, reference_times[run] = _timed(f_reference, inputs)
            result, unitroot_times[run] = _timed(f_unitroot, inputs)
            _check_agreement(f_unitroot.__name__, expected, result)

        rows.append({
            'size': size,
            'reference_time': reference_times.mean(),
            'unitroot_time': unitroot_times.mean(),
            'speedup': reference_times.mean() / unitroot_times.mean(),
            'speedup_median': np.median(reference_times) / np.median(unitroot_times),
        })

    res = pd.DataFrame(rows)
    print(f"Results for {f_unitroot.__name__}")
    print("=" * 36)
    print(res)
    return res


def benchmark_batch_functions(unitroot_functions, f_reference, input_generator, sizes, runs=5) -> List[pd.DataFrame]:
    """Run `benchmark_function` for several unitroot functions sharing one reference."""
    return [
        benchmark_function(f, f_reference, input_generator, sizes, runs)
        for f in unitroot_functions
    ]


def benchmark_function_across_param_grid(
    f_unitroot,
    f_reference,
    input_generator,
    param_grid: Dict[str, Sequence],
    sizes,
    runs=5,
) -> pd.DataFrame:
    """
    Benchmark every combination of keyword arguments in `param_grid`.

    Parameters
    ----------
    f_unitroot, f_reference : callable
        Called as ``f(*inputs, **params)``.
    input_generator : callable
        Maps a size to the list of positional inputs.
    param_grid : dict
        Parameter name to the values to try, e.g.
        ``{'lag': [0, 2, 10], 'regression': ['n', 'c', 'ct']}``.
    sizes : list
    runs : int, default=5

    Returns
    -------
    pd.DataFrame
        One row per (parameters, size), parameter columns first.
    """
    names = list(param_grid)
    tables = []

    for values in itertools.product(*param_grid.values()):
        params = dict(zip(names, values))

        def with_params(f):
            def call(*args):
                return f(*args, **params)
            call.__name__ = f"{f.__name__}{params}"
            return call

        table = benchmark_function(
            with_params(f_unitroot), with_params(f_reference), input_generator, sizes, runs=runs
        )
        tables.append(table.assign(**params))

    combined = pd.concat(tables, ignore_index=True)
    return combined[names + [c for c in combined.columns if c not in names]]


def generate_matrix_inputs(size: Tuple[int, int]):
    """Random design with an intercept column, returned as [X, y]."""
    rng = np.random.default_rng(0)
    n, k = size
    X = np.column_stack([np.ones(n), rng.standard_normal((n, k - 1))])
    y = X @ rng.standard_normal(k) + rng.standard_normal(n)
    return [X, y]


def generate_series_inputs(size: int, delta: float = 0.5):
    """Stationary AR(1) series, returned as [y]."""
    return [gen_ar_1(np.random.default_rng(42), size, 0.0, delta, 1.0)]
