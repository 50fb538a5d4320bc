"""Validation of change point geometry."""

import numpy as np
from numpy.typing import ArrayLike

from ...errors import DPError


def order_change_point(t_prev: int, t_cur: int) -> None:
    """Check the order of two consecutive change points.

    Two consecutive change points must be at least two time steps apart, i.e.,
    ``t_cur > t_prev + 1``. The only exception is the first segment, where the pair
    ``(0, 1)`` is allowed. Time step 0 is the virtual start before the data.

    Parameters
    ----------
    t_prev : int
        The previous change point.
    t_cur : int
        The current change point.

    Raises
    ------
    DPError
        If the pair of change points violates the ordering rule.
    """
    if t_cur == 0:
        raise DPError(f"Index t_cur (={t_cur}) must be greater than 0.")
    if t_prev < 0:
        raise DPError(f"Index t_prev (={t_prev}) must be non-negative.")
    if t_prev >= t_cur - 1 and not (t_prev == 0 and t_cur == 1):
        raise DPError(
            f"Index t_cur (={t_cur}) must be greater than t_prev + 1 (={t_prev} + 1)."
        )


def check_change_points(change_points: ArrayLike) -> np.ndarray:
    """Check an explicit sequence of change points.

    The virtual start 0 is prepended before checking, so the first change point
    must be at least 1 and every later change point must satisfy
    `order_change_point` with respect to its predecessor.

    Parameters
    ----------
    change_points : ArrayLike
        Increasing sequence of change points. The last entry is the end of the last
        segment.

    Returns
    -------
    change_points : np.ndarray
        The change points as a 1D integer array.

    Raises
    ------
    DPError
        If the change points are not a 1D integer sequence or violate the ordering
        rule.
    """
    change_points = np.asarray(change_points)
    if change_points.size == 0:
        return change_points.astype(np.int64).reshape(-1)
    if change_points.ndim != 1:
        raise DPError("The change points must be a 1D sequence.")
    if not np.issubdtype(change_points.dtype, np.integer):
        raise DPError("The change points must be of integer type.")

    t_prev = 0
    for t_cur in change_points:
        order_change_point(t_prev, int(t_cur))
        t_prev = int(t_cur)
    return change_points
