"""Optimal segmentation by dynamic programming."""

__all__ = ["DynamicProgrammingSolver", "MemoCell"]

import warnings
from typing import NamedTuple

from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from ..base import BasePairwiseEvaluator
from ..errors import DPError
from ..utils.validation.data import check_t_max


class MemoCell(NamedTuple):
    """Optimum of the dynamic programming recursion for one time and change count.

    Containing:
    - `t_prev`: The previous change point on the optimal path.
    - `k`: The number of change points before the time of the cell.
    - `value`: The optimal total score of the segments up to the time of the cell.
    """

    t_prev: int
    k: int
    value: object


class DynamicProgrammingSolver(BaseEstimator):
    """Optimal partitioning with a fixed number of change points.

    For every number of change points ``k`` and time ``t``, the solver computes the
    largest total score of ``k + 1`` consecutive segments covering ``(0, t]``,
    together with the last change point before ``t`` that achieves it. Segments
    must contain at least two time steps, except the first one which may contain a
    single time step.

    The recursion is

        F(t, 0) = f(0, t),
        F(t, k) = max_{2k - 1 <= i <= t - 2} F(i, k - 1) + f(i, t),

    where ``f`` is the pairwise evaluator. Ties are resolved in favour of the largest
    ``i``.

    Filling the memo for all change counts takes in the order of
    ``K_max * t_max ** 2`` evaluator calls, so the solver is meant for moderate
    `t_max`. Cells are filled iteratively, so large change counts do not hit the
    recursion limit.

    The memo table is a jagged list with one row for each ``k = 0, ..., K_max``,
    where ``K_max = (t_max - 1) // 2``. Row ``k`` has ``t_max - 2k + 1`` entries, and
    the cell of time ``t`` is located at ``[k][t - 2k]``. Cells that have not been
    computed are ``None``.

    Parameters
    ----------
    evaluator : BasePairwiseEvaluator
        The evaluator scoring a single segment. It is called directly, without any
        pairwise cache.
    """

    def __init__(self, evaluator: BasePairwiseEvaluator):
        self.evaluator = evaluator

    @staticmethod
    def calc_max_k(t_max: int) -> int:
        """Calculate the maximum number of change points before a time.

        Parameters
        ----------
        t_max : int
            The time step.

        Returns
        -------
        k_max : int
            The maximum number of change points that fit before `t_max` given the
            minimum segment lengths.
        """
        return (t_max - 1) // 2

    def calc_memo_all(self, data, t_max: int) -> list[list[MemoCell | None]]:
        """Compute the memo table for all change counts at the last time step.

        Parameters
        ----------
        data : object
            Input data passed on to the evaluator.
        t_max : int
            The last time step.

        Returns
        -------
        memo : list of list
            The memo table. Only the cells reachable from ``(t_max, k)`` for
            ``k = 0, ..., K_max`` are filled.
        """
        if not isinstance(self.evaluator, BasePairwiseEvaluator):
            raise TypeError(
                "evaluator must be an instance of BasePairwiseEvaluator"
                f" (got {type(self.evaluator).__name__})."
            )
        if not self.evaluator.is_additive:
            warnings.warn(
                f"{type(self.evaluator).__name__} is not additive over segments."
                " The dynamic programming solution may not be optimal.",
                stacklevel=2,
            )

        t_max = check_t_max(data, t_max)
        k_max = self.calc_max_k(t_max)
        memo = [[None] * (t_max - 2 * k + 1) for k in range(k_max + 1)]
        for k in range(k_max + 1):
            self.calc_memo(t_max, k, memo, data)
        return memo

    def calc_memo(
        self, t: int, k: int, memo: list[list[MemoCell | None]], data
    ) -> MemoCell:
        """Compute the optimum at time `t` with `k` change points.

        Missing cells of lower change counts that the optimum depends on are
        computed first and stored in `memo`. Pending cells are kept on an explicit
        stack, so the depth of the computation is not bounded by the recursion
        limit.

        Parameters
        ----------
        t : int
            The time step.
        k : int
            The number of change points.
        memo : list of list
            The memo table. Modified in place.
        data : object
            Input data passed on to the evaluator.

        Returns
        -------
        cell : MemoCell
            The optimal cell at ``(t, k)``.
        """
        self._check_memo_index(t, k, memo)

        pending = [(t, k)]
        while pending:
            t_top, k_top = pending[-1]
            if self._get_from_memo(t_top, k_top, memo) is not None:
                pending.pop()
                continue

            if k_top == 0:
                value = self.evaluator.calc_value(data, 0, t_top)
                self._set_memo(t_top, MemoCell(0, 0, value), memo)
                pending.pop()
                continue

            missing = [
                (i, k_top - 1)
                for i in range(2 * k_top - 1, t_top - 1)
                if self._get_from_memo(i, k_top - 1, memo) is None
            ]
            if missing:
                pending.extend(missing)
                continue

            pending.pop()
            self._set_memo(t_top, self._best_cell(t_top, k_top, memo, data), memo)

        return self._get_from_memo(t, k, memo)

    def _best_cell(
        self, t: int, k: int, memo: list[list[MemoCell | None]], data
    ) -> MemoCell:
        best = None
        for i in range(2 * k - 1, t - 1):
            prev = self._get_from_memo(i, k - 1, memo)
            value = self.evaluator.combine(
                prev.value, self.evaluator.calc_value(data, i, t)
            )
            # Later predecessors win ties.
            if best is None or best.value <= value:
                best = MemoCell(i, k, value)

        if best is None:
            raise DPError(f"No valid previous change point for t = {t} and k = {k}.")
        return best

    def fit(self, X, t_max: int | None = None):
        """Compute the memo table.

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
        memo = self.calc_memo_all(X, t_max)

        self.t_max_ = t_max
        self.memo_ = memo
        return self

    def memo_all(self) -> list[list[MemoCell | None]]:
        """Return the memo table computed by `fit`."""
        check_is_fitted(self)
        return self.memo_

    def get_value(self, t: int, k: int):
        """Get the optimal total score at time `t` with `k` change points.

        Parameters
        ----------
        t : int
            The time step.
        k : int
            The number of change points.

        Returns
        -------
        value :
            The optimal total score.

        Raises
        ------
        DPError
            If ``(t, k)`` is out of range or has not been calculated.
        """
        cell = self._get_from_memo(t, k, self.memo_all())
        if cell is None:
            raise DPError(f"Value at t = {t} and k = {k} has not been calculated.")
        return cell.value

    def get_value_history(self, t: int, k: int) -> list[MemoCell]:
        """Backtrack the optimal path ending at time `t` with `k` change points.

        Parameters
        ----------
        t : int
            The time step.
        k : int
            The number of change points.

        Returns
        -------
        history : list of MemoCell
            The cells along the optimal path, starting with the cell at ``(t, k)``
            and ending with the cell of the first segment, whose `t_prev` is 0.

        Raises
        ------
        DPError
            If a cell along the path is out of range or has not been calculated.
        """
        memo = self.memo_all()
        history = []
        while t > 0:
            cell = self._get_from_memo(t, k, memo)
            if cell is None:
                raise DPError(
                    f"Value at t = {t} and k = {k} has not been calculated."
                )
            history.append(cell)
            t = cell.t_prev
            if cell.k != 0:
                k = cell.k - 1
        return history

    def get_change_points(self, t: int, k: int) -> list[int]:
        """Get the optimal change points ending at time `t` with `k` change points.

        Parameters
        ----------
        t : int
            The time step.
        k : int
            The number of change points.

        Returns
        -------
        change_points : list of int
            The ``k`` optimal change points in increasing order, followed by `t`.
        """
        history = self.get_value_history(t, k)
        return [cell.t_prev for cell in reversed(history)][1:] + [t]

    def _check_memo_index(self, t: int, k: int, memo: list[list[MemoCell | None]]):
        if not memo:
            raise DPError("The memo table is empty.")
        if t > len(memo[0]) - 1:
            raise DPError(f"Time step t = {t} is out of range.")
        if t <= 0:
            raise DPError("Time step t must be greater than 0.")
        if k < 0:
            raise DPError(
                f"The number of change points k (= {k}) must be non-negative."
            )

        max_k = self.calc_max_k(t)
        if k > max_k:
            raise DPError(
                f"The number of change points k (= {k}) must be at most"
                f" (t - 1) // 2 (= {max_k})."
            )

    def _get_from_memo(
        self, t: int, k: int, memo: list[list[MemoCell | None]]
    ) -> MemoCell | None:
        self._check_memo_index(t, k, memo)
        return memo[k][t - 2 * k]

    def _set_memo(
        self, t: int, cell: MemoCell, memo: list[list[MemoCell | None]]
    ) -> MemoCell:
        self._check_memo_index(t, cell.k, memo)
        memo[cell.k][t - 2 * cell.k] = cell
        return cell
