"""Cache of the scores of all valid pairs of change points."""

__all__ = ["PairwiseCache"]

from joblib import Parallel, delayed
from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from ..base import BasePairwiseEvaluator
from ..config import config
from ..errors import DPError
from ..utils.validation.change_points import order_change_point
from ..utils.validation.data import check_t_max
from ..utils.validation.parameters import check_n_jobs


def _calc_row(evaluator: BasePairwiseEvaluator, data, t_prev: int, t_max: int):
    """Score every valid segment starting after `t_prev` and ending at most `t_max`."""
    return [
        evaluator.calc_value(data, t_prev, t_cur)
        for t_cur in range(t_prev + 2, t_max + 1)
    ]


class PairwiseCache(BaseEstimator):
    """Precomputed scores of all valid pairs of consecutive change points.

    Building the cache evaluates the pairwise evaluator on every valid pair
    ``(t_prev, t_cur)`` with ``t_cur <= t_max``. The rows of the table, one for each
    `t_prev`, are independent and computed in parallel with `joblib`. Once built, the
    table is never modified and can be read from several threads.

    The table is stored as a jagged list of rows. Row ``t_prev`` holds the scores for
    ``t_cur = t_prev + 2, ..., t_max``, such that the score of ``(t_prev, t_cur)``
    is located at ``[t_prev][t_cur - t_prev - 2]``. The score of the first segment
    pair ``(0, 1)``, which is the only pair of length one, is stored separately in
    ``first_value_``.

    Parameters
    ----------
    evaluator : BasePairwiseEvaluator
        The evaluator scoring a single segment.
    n_jobs : int, optional (default=None)
        Number of parallel jobs used to build the table. If ``None``, the package
        default ``dpchange.config.config.n_jobs`` is used.
    """

    def __init__(self, evaluator: BasePairwiseEvaluator, n_jobs: int | None = None):
        self.evaluator = evaluator
        self.n_jobs = n_jobs

    def _check_params(self):
        if not isinstance(self.evaluator, BasePairwiseEvaluator):
            raise TypeError(
                "evaluator must be an instance of BasePairwiseEvaluator"
                f" (got {type(self.evaluator).__name__})."
            )
        check_n_jobs(self.n_jobs)

    def calc_value_all(self, data, t_max: int) -> tuple[object, list[list]]:
        """Score all valid pairs of change points.

        Parameters
        ----------
        data : object
            Input data passed on to the evaluator.
        t_max : int
            The last time step.

        Returns
        -------
        first_value :
            The score of the pair ``(0, 1)``.
        table : list of list
            Row ``t_prev`` for ``t_prev = 0, ..., t_max - 2`` holds the scores of
            ``(t_prev, t_cur)`` for ``t_cur = t_prev + 2, ..., t_max``.

        Raises
        ------
        DPError
            If `t_max` is smaller than 1.
        Exception
            Any exception raised by the evaluator. If several rows fail, which of
            the exceptions is raised is unspecified.
        """
        self._check_params()
        t_max = check_t_max(data, t_max)
        n_jobs = config.n_jobs if self.n_jobs is None else self.n_jobs

        first_value = self.evaluator.calc_value(data, 0, 1)
        table = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(_calc_row)(self.evaluator, data, t_prev, t_max)
            for t_prev in range(t_max - 1)
        )
        return first_value, table

    def fit(self, X, t_max: int | None = None):
        """Build the table of pairwise scores.

        Parameters
        ----------
        X : object
            Input data passed on to the evaluator.
        t_max : int, optional (default=None)
            The last time step. If ``None``, ``len(X)`` is used.

        Returns
        -------
        self :
            Reference to self.

        Notes
        -----
        Updates the fitted model and sets attributes ending in ``"_"``.
        """
        t_max = check_t_max(X, t_max)
        first_value, table = self.calc_value_all(X, t_max)

        self._X = X
        self.t_max_ = t_max
        self.first_value_ = first_value
        self.table_ = table
        return self

    def value_tt_all(self) -> list[list]:
        """Return the table of pairwise scores.

        Returns
        -------
        table : list of list
            The table built by `fit`. The score of ``(0, 1)`` is not part of it, see
            ``first_value_``.
        """
        check_is_fitted(self)
        return self.table_

    def value_tt(self, t_prev: int, t_cur: int):
        """Look up the score of the segment between two change points.

        Parameters
        ----------
        t_prev : int
            The previous change point, or 0 for the virtual start.
        t_cur : int
            The current change point.

        Returns
        -------
        value :
            The cached score of ``(t_prev, t_cur]``.

        Raises
        ------
        DPError
            If the change points violate the ordering rule or are outside the table.
        """
        check_is_fitted(self)
        order_change_point(t_prev, t_cur)
        if t_prev == 0 and t_cur == 1:
            return self.first_value_

        table = self.value_tt_all()
        if t_prev >= len(table):
            raise DPError(f"Index t_prev (={t_prev}) is out of range.")
        row = table[t_prev]

        index = t_cur - t_prev - 2
        if index >= len(row):
            raise DPError(
                f"Index t_cur (={t_cur}) is out of range (t_max={self.t_max_})."
            )
        return row[index]
