"""Pairwise evaluator wrapping a plain function."""

__all__ = ["FunctionEvaluator"]

from collections.abc import Callable

from ..base import BasePairwiseEvaluator


def _count_samples(data, t_prev: int, t_cur: int) -> int:
    return t_cur - t_prev


class FunctionEvaluator(BasePairwiseEvaluator):
    """Pairwise evaluator defined by a function.

    Parameters
    ----------
    func : Callable
        Function with signature ``func(data, t_prev, t_cur)`` returning the score of
        the segment ``(t_prev, t_cur]``. Exceptions raised by `func` propagate
        unchanged.
    value_identity : object, optional (default=0)
        Identity element of ``+`` for the values returned by `func`.
    is_additive : bool, optional (default=True)
        Whether the total score of a segmentation is the sum of its segment scores.
    """

    def __init__(self, func: Callable, value_identity=0, is_additive: bool = True):
        self.func = func
        self.value_identity = value_identity
        self.is_additive = is_additive

    def _calc_value(self, data, t_prev: int, t_cur: int):
        return self.func(data, t_prev, t_cur)

    @classmethod
    def get_test_params(cls, parameter_set="default"):
        """Return testing parameter settings for the evaluator.

        Parameters
        ----------
        parameter_set : str, default="default"
            Name of the set of test parameters to return, for use in tests.

        Returns
        -------
        params : list of dict
        """
        params = [
            {"func": _count_samples},
            {"func": _count_samples, "value_identity": 0.0},
        ]
        return params
