"""Utility functions for pairwise evaluators."""

import numpy as np
import pandas as pd

from ..errors import DPError
from ..utils.validation.data import as_2d_array


def get_segment(data, t_prev: int, t_cur: int, min_size: int = 1) -> np.ndarray:
    """Extract the segment ``(t_prev, t_cur]`` of the data as a 2D float array.

    Parameters
    ----------
    data : pd.DataFrame, pd.Series or array-like
        Input data with time along the first axis.
    t_prev : int
        The previous change point.
    t_cur : int
        The current change point.
    min_size : int, optional (default=1)
        Minimum number of samples required in the segment.

    Returns
    -------
    segment : np.ndarray
        The rows ``data[t_prev:t_cur]`` as a 2D array.
    """
    n_samples = len(data)
    if t_cur > n_samples:
        raise DPError(
            f"Index t_cur (={t_cur}) is out of range for data with {n_samples} samples."
        )
    if t_cur - t_prev < min_size:
        raise DPError(
            f"The segment ({t_prev}, {t_cur}] must contain at least {min_size} samples."
        )

    if isinstance(data, (pd.DataFrame, pd.Series)):
        segment = data.iloc[t_prev:t_cur]
    else:
        segment = np.asarray(data)[t_prev:t_cur]
    return as_2d_array(segment, dtype=np.float64)
