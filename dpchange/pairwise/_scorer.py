"""Scoring of explicit segmentations and brute force search."""

__all__ = ["SegmentationScorer", "brute_force_search"]

import warnings
from itertools import combinations
from math import comb

import numpy as np
from numpy.typing import ArrayLike
from sklearn.utils.validation import check_is_fitted

from ..config import config
from ..utils.validation.change_points import check_change_points
from ..utils.validation.parameters import check_larger_than, check_smaller_than
from ._cache import PairwiseCache


class SegmentationScorer(PairwiseCache):
    """Score explicit sequences of change points.

    Extends the pairwise cache with two ways of scoring a whole segmentation:
    `sum_frol_cp` sums the cached pairwise scores, while `evaluate` calls the
    overridable `_evaluate`. By default `_evaluate` recomputes each segment score
    with the evaluator, but subclasses can implement any total score, including
    scores that do not decompose into a sum over segments. Whenever the score is
    additive, the two agree.

    Parameters
    ----------
    evaluator : BasePairwiseEvaluator
        The evaluator scoring a single segment.
    n_jobs : int, optional (default=None)
        Number of parallel jobs used to build the table. If ``None``, the package
        default ``dpchange.config.config.n_jobs`` is used.
    """

    def evaluate(self, change_points: ArrayLike):
        """Evaluate the total score of a segmentation.

        Parameters
        ----------
        change_points : ArrayLike
            Increasing sequence of change points. The virtual start 0 is implicit,
            and the last entry is the end of the last segment.

        Returns
        -------
        value :
            The total score of the segmentation.
        """
        check_is_fitted(self)
        change_points = check_change_points(change_points)
        return self._evaluate(change_points)

    def _evaluate(self, change_points: np.ndarray):
        """Evaluate the total score of a validated segmentation.

        Parameters
        ----------
        change_points : np.ndarray
            Validated 1D integer array of change points.

        Returns
        -------
        value :
            The sum of the segment scores, each computed directly by the evaluator.
        """
        starts = np.concatenate(([0], change_points[:-1]))
        return self.evaluator.sum_values(
            self.evaluator.calc_value(self._X, int(t_prev), int(t_cur))
            for t_prev, t_cur in zip(starts, change_points)
        )

    def sum_frol_cp(self, change_points: ArrayLike):
        """Sum the cached pairwise scores of a segmentation.

        The change points are paired with themselves shifted by one, with the
        virtual start 0 prepended, and each pair is looked up in the table. The sum is
        not necessarily equal to `evaluate` if the total score is not additive.

        Parameters
        ----------
        change_points : ArrayLike
            Increasing sequence of integer change points.

        Returns
        -------
        value :
            The sum of the cached scores. The identity element for an empty sequence.
        """
        change_points = [int(t) for t in check_change_points(change_points)]
        starts = [0] + change_points[:-1]
        values = [
            self.value_tt(t_prev, t_cur) for t_prev, t_cur in zip(starts, change_points)
        ]
        return self.evaluator.sum_values(values)


def _is_valid_segmentation(change_points: list[int]) -> bool:
    t_prev = 0
    for t_cur in change_points:
        if t_cur <= t_prev + 1 and not (t_prev == 0 and t_cur == 1):
            return False
        t_prev = t_cur
    return True


def _is_better(value, change_points, best_value, best_change_points) -> bool:
    if not best_value <= value:
        return False
    if not value <= best_value:
        return True
    # Equal values, compare from the last change point backwards.
    return change_points[::-1] > best_change_points[::-1]


def brute_force_search(
    scorer: SegmentationScorer,
    n_change_points: int,
    t_max: int | None = None,
    use_cache: bool = True,
) -> tuple[list[int], object]:
    """Find the best segmentation by evaluating all of them.

    Enumerates every valid sequence of `n_change_points` change points before
    `t_max`, appends `t_max` as the end of the last segment, and keeps the sequence
    with the largest score. Ties are resolved like in the dynamic programming
    solver: the sequence with the largest last change point wins, then the largest
    second to last change point, and so on. Intended for small problems, for scores
    that are not additive, and for checking dynamic programming results.

    Parameters
    ----------
    scorer : SegmentationScorer
        A fitted segmentation scorer.
    n_change_points : int
        Number of change points before `t_max`.
    t_max : int, optional (default=None)
        End of the last segment. If ``None``, the `t_max_` of the scorer is used.
    use_cache : bool, optional (default=True)
        Score segmentations with `sum_frol_cp` if ``True``, and with `evaluate`
        otherwise.

    Returns
    -------
    change_points : list of int
        The best segmentation, ending with `t_max`.
    value :
        Its score.
    """
    check_is_fitted(scorer)
    if t_max is None:
        t_max = scorer.t_max_
    check_larger_than(1, t_max, "t_max")
    check_smaller_than(scorer.t_max_, t_max, "t_max")
    check_larger_than(0, n_change_points, "n_change_points")
    check_smaller_than((t_max - 1) // 2, n_change_points, "n_change_points")

    n_candidates = comb(t_max - 1, n_change_points)
    if n_candidates > config.brute_force_warning_size:
        warnings.warn(
            f"Brute force search over up to {n_candidates} segmentations"
            f" (t_max={t_max}, n_change_points={n_change_points}) may be slow.",
            stacklevel=2,
        )

    score = scorer.sum_frol_cp if use_cache else scorer.evaluate
    best_change_points = None
    best_value = None
    for interior in combinations(range(1, t_max), n_change_points):
        change_points = [*interior, t_max]
        if not _is_valid_segmentation(change_points):
            continue
        value = score(change_points)
        if best_value is None or _is_better(
            value, change_points, best_value, best_change_points
        ):
            best_change_points = change_points
            best_value = value

    return best_change_points, best_value
