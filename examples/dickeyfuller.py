"""Dickey-Fuller test on a short series and on simulated AR(1) series."""

import numpy as np

from unitroot import AlphaLevel, Regression, dickeyfuller_test, get_critical_value
from unitroot.utils.generators import gen_ar_1

y = np.array([
    -0.89642362, 0.3222552, -1.96581989, -1.10012936, -1.3682928, 1.17239875,
    2.19561259, 2.54295031, 2.05530587, 1.13212955, -0.42968979,
])

if __name__ == "__main__":
    regression = Regression.CONSTANT

    report = dickeyfuller_test(y, regression)
    critical_value = get_critical_value(regression, report.size, AlphaLevel.ONE_PERCENT)
    assert report.size == 10
    assert abs(report.test_statistic - -1.472691) < 1e-6
    assert report.test_statistic > critical_value
    print(f"t-statistic: {report.test_statistic}")
    print(f"critical value (1%): {critical_value}")

    for delta in (0.5, 1.0):
        rng = np.random.default_rng(42)
        series = gen_ar_1(rng, 100, 0.0, delta, 1.0)

        report = dickeyfuller_test(series, regression)
        critical_value = get_critical_value(regression, report.size, AlphaLevel.ONE_PERCENT)

        verdict = "stationary" if report.test_statistic < critical_value else "unit root not rejected"
        print(f"delta={delta}: t-statistic={report.test_statistic:.4f} "
              f"critical value (1%)={critical_value:.4f} -> {verdict}")
