import numpy as np
import pytest
from sklearn.exceptions import NotFittedError

from dpchange.config import config
from dpchange.errors import DPError
from dpchange.evaluators import FunctionEvaluator, NegativeL2Evaluator
from dpchange.pairwise import SegmentationScorer, brute_force_search

X = np.random.default_rng(7).normal(size=(9, 1))


class MaxSegmentScorer(SegmentationScorer):
    """Total score is the largest segment score, which is not additive."""

    def _evaluate(self, change_points):
        starts = np.concatenate(([0], change_points[:-1]))
        return max(
            self.evaluator.calc_value(self._X, int(a), int(b))
            for a, b in zip(starts, change_points)
        )


def constant_one(data, t_prev, t_cur):
    return 1


@pytest.mark.parametrize("change_points", [[9], [1, 9], [2, 5, 9], [1, 3, 5, 7, 9]])
def test_evaluate_equals_sum_frol_cp(change_points):
    scorer = SegmentationScorer(NegativeL2Evaluator()).fit(X)
    assert scorer.evaluate(change_points) == pytest.approx(
        scorer.sum_frol_cp(change_points)
    )


def test_sum_frol_cp_pairs():
    evaluator = FunctionEvaluator(lambda data, a, b: [(a, b)], value_identity=[])
    scorer = SegmentationScorer(evaluator)
    scorer.fit(X)
    assert scorer.sum_frol_cp([2, 5, 9]) == [(0, 2), (2, 5), (5, 9)]


def test_sum_frol_cp_empty():
    scorer = SegmentationScorer(NegativeL2Evaluator()).fit(X)
    assert scorer.sum_frol_cp([]) == 0.0
    assert scorer.evaluate([]) == 0.0


@pytest.mark.parametrize("change_points", [[2, 3], [0, 9], [3, 10]])
def test_invalid_change_points(change_points):
    scorer = SegmentationScorer(NegativeL2Evaluator()).fit(X)
    with pytest.raises(DPError):
        scorer.sum_frol_cp(change_points)
    if change_points[-1] <= len(X):
        with pytest.raises(DPError):
            scorer.evaluate(change_points)


def test_not_fitted():
    scorer = SegmentationScorer(NegativeL2Evaluator())
    with pytest.raises(NotFittedError):
        scorer.evaluate([2, 9])


def test_non_additive_evaluate():
    scorer = MaxSegmentScorer(FunctionEvaluator(lambda data, a, b: b - a)).fit(X)
    assert scorer.evaluate([2, 9]) == 7
    assert scorer.sum_frol_cp([2, 9]) == 9


def test_brute_force_search_constant():
    scorer = SegmentationScorer(FunctionEvaluator(constant_one)).fit(X, 6)
    change_points, value = brute_force_search(scorer, 2)
    assert value == 3
    assert change_points == [2, 4, 6]


def test_brute_force_search_no_change_points():
    scorer = SegmentationScorer(NegativeL2Evaluator()).fit(X)
    change_points, value = brute_force_search(scorer, 0)
    assert change_points == [9]
    assert value == pytest.approx(NegativeL2Evaluator().calc_value(X, 0, 9))


def test_brute_force_search_use_cache_false():
    scorer = SegmentationScorer(NegativeL2Evaluator()).fit(X)
    cached = brute_force_search(scorer, 2, use_cache=True)
    direct = brute_force_search(scorer, 2, use_cache=False)
    assert cached[0] == direct[0]
    assert cached[1] == pytest.approx(direct[1])


def test_brute_force_search_smaller_t_max():
    scorer = SegmentationScorer(FunctionEvaluator(constant_one)).fit(X)
    change_points, value = brute_force_search(scorer, 1, t_max=5)
    assert change_points[-1] == 5
    assert value == 2


def test_brute_force_search_invalid_parameters():
    scorer = SegmentationScorer(FunctionEvaluator(constant_one)).fit(X, 6)
    with pytest.raises(ValueError):
        brute_force_search(scorer, 3)
    with pytest.raises(ValueError):
        brute_force_search(scorer, -1)
    with pytest.raises(ValueError):
        brute_force_search(scorer, 1, t_max=7)


def test_brute_force_search_warns_for_large_search():
    original_size = config.brute_force_warning_size
    try:
        config.brute_force_warning_size = 1
        scorer = SegmentationScorer(FunctionEvaluator(constant_one)).fit(X, 6)
        with pytest.warns(UserWarning, match="Brute force search"):
            brute_force_search(scorer, 1)
    finally:
        config.brute_force_warning_size = original_size


@pytest.mark.parametrize("change_points", [[2.5, 9], [2.7, 9.9]])
def test_sum_frol_cp_non_integer(change_points):
    scorer = SegmentationScorer(FunctionEvaluator(lambda data, a, b: b - a)).fit(X)
    with pytest.raises(DPError, match="integer"):
        scorer.sum_frol_cp(change_points)
    with pytest.raises(DPError, match="integer"):
        scorer.evaluate(change_points)


def test_brute_force_search_tie_prefers_later_change_points():
    def scores(data, a, b):
        good_pairs = {(0, 2), (2, 4), (4, 8), (0, 1), (1, 6), (6, 8)}
        return 1 if (a, b) in good_pairs else -100

    scorer = SegmentationScorer(FunctionEvaluator(scores), n_jobs=1).fit(X, 8)
    assert brute_force_search(scorer, 2) == ([1, 6, 8], 3)
    assert brute_force_search(scorer, 2, use_cache=False) == ([1, 6, 8], 3)
