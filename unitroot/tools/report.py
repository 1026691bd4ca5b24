from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Report:
    """Result of a (augmented) Dickey-Fuller test."""

    # t-statistic of the coefficient on y[t-1]
    test_statistic: float
    # observations used in the regression
    size: int


@dataclass(frozen=True)
class LegacyReport:
    """Dickey-Fuller report whose statistic is None when it is not finite."""

    test_statistic: Optional[float]
    size: int
