import logging
from typing import Callable, Dict, Optional

import numpy as np

from .. import config

logger = logging.getLogger(__name__)

AVAILABLE_BACKENDS = ("numba", "jax")

# Core functions of every backend loaded so far, keyed by backend name
_BACKENDS: Dict[str, Dict[str, Callable]] = {}


def _precompile(ols_fit: Callable) -> None:
    """Compile the float64 OLS path on a tiny well-conditioned problem."""
    X = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0]])
    y = np.array([0.5, 1.0, 2.0])
    ols_fit(y, X)


def _load_backend(name: str) -> Dict[str, Callable]:
    """
    Import the core functions of a backend on first use.

    Parameters
    ----------
    name : str
        One of ``AVAILABLE_BACKENDS``.

    Returns
    -------
    Dict[str, Callable]
        Core functions by name, currently only "ols".
    """
    if name in _BACKENDS:
        return _BACKENDS[name]

    if name == "numba":
        from .numba.ols import ols_fit
    elif name == "jax":
        import jax
        jax.config.update("jax_enable_x64", config.JAX_ENABLE_X64)
        from .jax.ols import ols_fit
    else:
        raise ValueError(f"Invalid backend: {name}. Must be 'numba' or 'jax'.")

    # Trigger compilation
    _precompile(ols_fit)
    _BACKENDS[name] = {"ols": ols_fit}
    logger.debug("Loaded %s backend", name)
    return _BACKENDS[name]


class StatisticalBackend:
    """
    Handle on the OLS kernels of one computational backend.

    Parameters
    ----------
    backend : {"numba", "jax"}, optional
        Defaults to ``config.DEFAULT_BACKEND``.

    Raises
    ------
    ValueError
        If the backend name is unknown.
    """

    def __init__(self, backend: Optional[str] = None):
        if backend is None:
            backend = config.DEFAULT_BACKEND
        if backend not in AVAILABLE_BACKENDS:
            raise ValueError(f"Invalid backend: {backend}. Must be 'numba' or 'jax'.")

        self.backend = backend
        self._functions = _load_backend(backend)

    def get_core_function(self, func_name: str) -> Callable:
        """Look up a core function such as "ols" by name."""
        try:
            return self._functions[func_name]
        except KeyError:
            raise ValueError(
                f"Core function '{func_name}' not found for backend '{self.backend}'."
            ) from None

    def __repr__(self) -> str:
        return f"StatisticalBackend(backend={self.backend!r})"
