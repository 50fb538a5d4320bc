"""Soft dispatch of numba decorators."""

from .njit import njit, numba_available

__all__ = ["njit", "numba_available"]
