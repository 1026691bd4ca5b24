"""Augmented Dickey-Fuller test on a short series."""

import numpy as np

from unitroot import AlphaLevel, Regression, adf_test, get_critical_value

y = np.array([
    -0.89642362, 0.3222552, -1.96581989, -1.10012936, -1.3682928, 1.17239875,
    2.19561259, 2.54295031, 2.05530587, 1.13212955, -0.42968979,
])

if __name__ == "__main__":
    lag = 1
    regression = Regression.CONSTANT
    report = adf_test(y, lag, regression)

    critical_value = get_critical_value(regression, report.size, AlphaLevel.ONE_PERCENT)
    assert report.size == 9

    t_stat = report.test_statistic
    print(f"t-statistic: {t_stat}")
    print(f"critical value (1%): {critical_value}")
    assert abs(t_stat - -1.1639935) < 1e-6
    assert t_stat > critical_value
    print("Cannot reject the unit root hypothesis at the 1% level")
