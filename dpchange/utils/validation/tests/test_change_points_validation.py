import numpy as np
import pytest

from dpchange.errors import DPError
from dpchange.utils.validation.change_points import (
    check_change_points,
    order_change_point,
)


@pytest.mark.parametrize("t_prev, t_cur", [(0, 1), (0, 2), (1, 3), (3, 10)])
def test_order_change_point_valid(t_prev, t_cur):
    order_change_point(t_prev, t_cur)


@pytest.mark.parametrize("t_prev, t_cur", [(1, 2), (2, 3), (3, 3), (5, 2), (1, 1)])
def test_order_change_point_too_close(t_prev, t_cur):
    with pytest.raises(DPError, match="must be greater than t_prev"):
        order_change_point(t_prev, t_cur)


@pytest.mark.parametrize("t_prev", [0, 1, 5])
def test_order_change_point_zero_t_cur(t_prev):
    with pytest.raises(DPError, match="must be greater than 0"):
        order_change_point(t_prev, 0)


def test_order_change_point_negative_t_prev():
    with pytest.raises(DPError, match="non-negative"):
        order_change_point(-1, 1)


def test_order_change_point_numpy_integers():
    order_change_point(np.int64(2), np.int32(4))
    with pytest.raises(DPError):
        order_change_point(np.int64(2), np.int64(3))


def test_dp_error_is_value_error():
    with pytest.raises(ValueError):
        order_change_point(1, 2)


def test_check_change_points_valid():
    change_points = check_change_points([1, 3, 5])
    assert np.array_equal(change_points, np.array([1, 3, 5]))


def test_check_change_points_empty():
    change_points = check_change_points([])
    assert change_points.size == 0


@pytest.mark.parametrize(
    "change_points",
    [[2, 3], [0], [0, 2], [3, 2], [1, 2, 5]],
)
def test_check_change_points_invalid_order(change_points):
    with pytest.raises(DPError):
        check_change_points(change_points)


def test_check_change_points_not_1d():
    with pytest.raises(DPError, match="1D"):
        check_change_points(np.array([[1], [3]]))


def test_check_change_points_not_integer():
    with pytest.raises(DPError, match="integer"):
        check_change_points([1.0, 3.0])
