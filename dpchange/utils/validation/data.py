"""Validation functions for input data."""

import numpy as np
from numpy.typing import ArrayLike

from ...errors import DPError


def as_2d_array(X: ArrayLike, vector_as_column=True, dtype=None) -> np.ndarray:
    """Convert an array-like object to a 2D numpy array.

    Parameters
    ----------
    X : `ArrayLike`
        Array-like object.

    Returns
    -------
    X : `np.ndarray`
        2D numpy array.
    """
    X = np.asarray(X, dtype=dtype)
    if X.ndim == 1:
        X = X.reshape(-1, 1) if vector_as_column else X.reshape(1, -1)
    elif X.ndim > 2:
        raise ValueError("X must be at most 2-dimensional.")
    return X


def check_t_max(X, t_max: int | None = None) -> int:
    """Resolve the last time step to segment.

    Parameters
    ----------
    X : object
        Input data. Only used to infer ``t_max`` through ``len(X)`` when ``t_max`` is
        not given.
    t_max : int, optional (default=None)
        Last time step. If ``None``, ``len(X)`` is used.

    Returns
    -------
    t_max : int
        The last time step, at least 1.

    Raises
    ------
    DPError
        If ``t_max`` is smaller than 1, or if it is not given and ``X`` has no length.
    """
    if t_max is None:
        try:
            t_max = len(X)
        except TypeError as error:
            raise DPError(
                f"t_max must be given for input data of type {type(X).__name__}."
            ) from error
    if isinstance(t_max, bool) or not isinstance(t_max, (int, np.integer)):
        raise DPError(f"t_max must be an integer (t_max={t_max}).")
    if t_max < 1:
        raise DPError(f"t_max must be at least 1 (t_max={t_max}).")
    return int(t_max)
