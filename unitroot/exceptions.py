"""
Errors raised by the unit root tests and the OLS estimator.

All of them are final: they signal either too little data or numerically
degenerate data, so retrying with the same input cannot succeed.
"""

import numpy as np


class UnitRootError(Exception):
    """Base class for all errors raised by unitroot."""


class NotEnoughSamplesError(UnitRootError, ValueError):
    """The series is too short for the requested lag order."""


class FailedToInvertMatrixError(UnitRootError, np.linalg.LinAlgError):
    """The cross-product matrix of the regressors could not be inverted."""

    def __init__(self, message: str):
        super().__init__(f"Failed to invert matrix: {message}")


class ConversionFailedError(UnitRootError, ValueError):
    """A value could not be represented in the working floating-point type."""
