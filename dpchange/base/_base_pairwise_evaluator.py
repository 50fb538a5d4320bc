"""Pairwise evaluator base class.

    class name: BasePairwiseEvaluator

Scitype defining methods:
    scoring a segment               - calc_value(self, data, t_prev, t_cur)
    combining scores                - combine(self, a, b)
    summing scores                  - sum_values(self, values)

Needs to be implemented for a concrete pairwise evaluator:
    _calc_value(self, data, t_prev, t_cur)

Optional to implement for a concrete pairwise evaluator:
    _combine(self, a, b)
"""

__all__ = ["BasePairwiseEvaluator"]

from collections.abc import Iterable
from functools import reduce

from sklearn.base import BaseEstimator

from ..utils.validation.change_points import order_change_point


class BasePairwiseEvaluator(BaseEstimator):
    """Base class template for pairwise evaluators.

    A pairwise evaluator scores the segment between two consecutive change points
    ``t_prev`` and ``t_cur``. The segment consists of the time steps in
    ``(t_prev, t_cur]``, which by convention are the rows ``data[t_prev:t_cur]`` of
    array-like input data. Time step 0 is the virtual start before the data.

    Pairwise evaluators are the building block of the pairwise cache, the
    segmentation scorer and the dynamic programming solver. The solver maximises the
    sum of segment scores, so larger scores must mean better segments.

    The values returned by `calc_value` can be of any type that supports the
    `combine` operation and ordering by ``<=``. The default `combine` is ``a + b``
    with identity element `value_identity`. `combine` must be associative, since
    totals over many segments are folded in different groupings by different
    components.

    Attributes
    ----------
    value_identity : object
        Identity element of the `combine` operation.
    is_additive : bool
        Whether the total score of a segmentation is the sum of its segment scores.
        If `False`, dynamic programming is not exact and brute force search should be
        used instead.
    """

    value_identity = 0
    is_additive = True

    def calc_value(self, data, t_prev: int, t_cur: int):
        """Calculate the score of the segment between two change points.

        Parameters
        ----------
        data : object
            Input data. Read-only, and may be shared between threads.
        t_prev : int
            The previous change point, or 0 for the virtual start.
        t_cur : int
            The current change point.

        Returns
        -------
        value :
            The score of the segment ``(t_prev, t_cur]``.

        Raises
        ------
        DPError
            If the change points violate the ordering rule.
        """
        order_change_point(t_prev, t_cur)
        return self._calc_value(data, t_prev, t_cur)

    def _calc_value(self, data, t_prev: int, t_cur: int):
        """Calculate the score of the segment between two change points.

        The core logic of the evaluator is implemented here. The change points are
        already validated.

        Parameters
        ----------
        data : object
            Input data.
        t_prev : int
            The previous change point, or 0 for the virtual start.
        t_cur : int
            The current change point.

        Returns
        -------
        value :
            The score of the segment ``(t_prev, t_cur]``.
        """
        raise NotImplementedError("abstract method")

    @property
    def identity(self):
        """Identity element of the `combine` operation."""
        return self.value_identity

    def combine(self, a, b):
        """Combine two scores into one.

        Parameters
        ----------
        a, b :
            Scores returned by `calc_value`, or combinations thereof.

        Returns
        -------
        value :
            The combined score.
        """
        return self._combine(a, b)

    def _combine(self, a, b):
        """Combine two scores. Defaults to ``a + b``."""
        return a + b

    def sum_values(self, values: Iterable):
        """Sum scores by folding `combine` from the left, starting at `identity`.

        Parameters
        ----------
        values : Iterable
            Scores to sum.

        Returns
        -------
        value :
            The sum of the scores. The identity element if `values` is empty.
        """
        return reduce(self.combine, values, self.identity)

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
            Parameters to create testing instances of the class.
        """
        return [{}]

    @classmethod
    def create_test_instance(cls, parameter_set="default"):
        """Construct an instance of the class with the first set of test parameters.

        Parameters
        ----------
        parameter_set : str, default="default"
            Name of the set of test parameters to use.

        Returns
        -------
        instance : BasePairwiseEvaluator
        """
        params = cls.get_test_params(parameter_set=parameter_set)
        if isinstance(params, list):
            params = params[0]
        return cls(**params)
