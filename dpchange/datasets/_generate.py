"""Data generators."""

from numbers import Number

import numpy as np
import pandas as pd
from scipy.stats import multivariate_normal

from ..utils.validation.change_points import check_change_points


def generate_changing_data(
    change_points: int | list[int] = (50, 100),
    means: float | list[float] | list[np.ndarray] = (0.0, 3.0),
    variances: float | list[float] | list[np.ndarray] = 1.0,
    random_state: int = None,
) -> pd.DataFrame:
    """
    Generate piecewise multivariate normal data with changing means and variances.

    Parameters
    ----------
    change_points : list of ints, optional, default=(50, 100)
        Change points in the data. Segment ``j`` consists of the time steps
        ``(change_points[j - 1], change_points[j]]``, i.e., the rows
        ``change_points[j - 1]:change_points[j]``. The last change point is the
        number of samples.
    means : float, list of floats or list of arrays, optional, default=(0.0, 3.0)
        Mean of each segment. A single value is recycled for all segments.
    variances : float, list of floats or list of arrays, optional, default=1.0
        Variance of each segment. A single value is recycled for all segments.
    random_state : int or `RandomState`, optional
        Seed or random state for reproducible results. Defaults to None.

    Returns
    -------
    `pd.DataFrame`
        DataFrame with generated data.
    """
    if isinstance(change_points, Number):
        change_points = [change_points]
    change_points = [int(t) for t in check_change_points(list(change_points))]
    n_segments = len(change_points)
    if n_segments == 0:
        raise ValueError("At least one change point (the number of samples) is needed.")

    if isinstance(means, Number):
        means = [means]
    if isinstance(variances, Number):
        variances = [variances]
    means = [np.atleast_1d(np.asarray(mean, dtype=float)) for mean in means]
    variances = [np.atleast_1d(np.asarray(var, dtype=float)) for var in variances]

    if len(means) == 1:
        means = means * n_segments
    if len(variances) == 1:
        variances = variances * n_segments

    if len(means) != n_segments or len(variances) != n_segments:
        raise ValueError(
            "Number of segments (len(change_points)), means and variances must be"
            f" the same (got {n_segments}, {len(means)} and {len(variances)})."
        )

    n = change_points[-1]
    p = len(means[0])
    x = multivariate_normal.rvs(np.zeros(p), np.eye(p), n, random_state)
    x = x.reshape(n, p)
    starts = [0] + change_points[:-1]
    for start, end, mean, variance in zip(starts, change_points, means, variances):
        x[start:end] = mean + np.sqrt(variance) * x[start:end]

    return pd.DataFrame(x, index=range(n))


def generate_alternating_data(
    n_segments: int,
    segment_length: int,
    p: int = 1,
    mean: float = 0.0,
    variance: float = 1.0,
    random_state: int = None,
) -> pd.DataFrame:
    """
    Generate multivariate normal data that is alternating between two states.

    The data alternates between a state with mean 0 and variance 1 and a state with
    mean `mean` and variance `variance`. All segments have length `segment_length`,
    so the true change points are ``segment_length * i`` for
    ``i = 1, ..., n_segments``.

    Parameters
    ----------
    n_segments : int
        Number of segments to generate.
    segment_length : int
        Length of each segment. Must be at least 2.
    p : int, optional (default=1)
        Number of dimensions.
    mean : float, optional (default=0.0)
        Mean of every other segment.
    variance : float, optional (default=1.0)
        Variances of every other segment.
    random_state : int or `RandomState`, optional
        Seed or random state for reproducible results. Defaults to None.

    Returns
    -------
    `pd.DataFrame`
        DataFrame with generated data.
    """
    means = []
    variances = []
    for i in range(n_segments):
        means.append(np.zeros(p) if i % 2 == 0 else np.full(p, mean))
        variances.append(np.ones(p) if i % 2 == 0 else np.full(p, variance))

    change_points = [segment_length * i for i in range(1, n_segments + 1)]
    return generate_changing_data(change_points, means, variances, random_state)
