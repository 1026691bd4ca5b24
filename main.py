from benchmarks.benchmark_ols import run_ols_benchmarks
from benchmarks.benchmark_stationarity import run_adfuller_benchmarks, run_dickeyfuller_benchmarks, run_adfuller_grid_benchmarks
if __name__ == "__main__":
  run_adfuller_benchmarks([100, 200, 500, 1000, 5000], 10)
  run_dickeyfuller_benchmarks([100, 200, 500, 1000, 5000], 10)
  run_ols_benchmarks([(25, 3), (100, 3), (500, 5), (1000, 5), (10000, 12)], 10)
  # run_adfuller_grid_benchmarks([100, 1000], 5)
