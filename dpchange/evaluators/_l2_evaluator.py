"""Negative L2 evaluator."""

__all__ = ["NegativeL2Evaluator"]

import numpy as np

from ..base import BasePairwiseEvaluator
from ..utils.numba import njit
from ._utils import get_segment


@njit
def negative_l2_value(x: np.ndarray) -> float:
    """Calculate the negative L2 cost of a segment around its optimal constant mean.

    Parameters
    ----------
    x : np.ndarray
        2D array with the samples of the segment.

    Returns
    -------
    value : float
        Minus the sum of squared deviations from the column means, summed over the
        columns.
    """
    p = x.shape[1]
    total = 0.0
    for j in range(p):
        column = x[:, j]
        mean = np.mean(column)
        total += np.sum((column - mean) ** 2)
    return -total


class NegativeL2Evaluator(BasePairwiseEvaluator):
    """Negative L2 cost of a constant mean.

    Scores a segment by minus its within-segment sum of squared errors. Maximising
    the total score over segmentations with a fixed number of change points is
    equivalent to least squares segmentation with piecewise constant means.
    """

    value_identity = 0.0

    def _calc_value(self, data, t_prev: int, t_cur: int) -> float:
        return negative_l2_value(get_segment(data, t_prev, t_cur))
