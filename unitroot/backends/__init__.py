from .backend import AVAILABLE_BACKENDS, StatisticalBackend

__all__ = ["AVAILABLE_BACKENDS", "StatisticalBackend"]
