from enum import Enum


class Regression(Enum):
    """
    Deterministic terms included in the Dickey-Fuller regression.

    The values are the short codes used by statsmodels, so ``Regression("c")``
    and ``Regression.CONSTANT`` are interchangeable.
    """

    # Δy_t = β_1·y_{t-1} + ε_t
    NO_CONSTANT_NO_TREND = "n"
    # Δy_t = β_0 + β_1·y_{t-1} + ε_t
    CONSTANT = "c"
    # Δy_t = β_0 + β_1·y_{t-1} + β_2·t + ε_t
    CONSTANT_AND_TREND = "ct"

    @property
    def n_deterministic(self) -> int:
        """Number of deterministic columns appended to the design matrix."""
        if self is Regression.NO_CONSTANT_NO_TREND:
            return 0
        elif self is Regression.CONSTANT:
            return 1
        elif self is Regression.CONSTANT_AND_TREND:
            return 2
        raise ValueError(f"Unhandled regression: {self!r}")


class AlphaLevel(Enum):
    """Significance levels with tabulated Dickey-Fuller critical values."""

    ONE_PERCENT = 0.01
    TWO_POINT_FIVE_PERCENT = 0.025
    FIVE_PERCENT = 0.05
    TEN_PERCENT = 0.10
