import pytest

from dpchange.utils.validation.parameters import (
    check_larger_than,
    check_n_jobs,
    check_none,
    check_smaller_than,
)


def test_check_none():
    assert check_none(3, "test_param") == 3
    assert check_none(None, "test_param", allow_none=True) is None
    with pytest.raises(ValueError, match="test_param cannot be None."):
        check_none(None, "test_param")


def test_check_larger_than_valid():
    assert check_larger_than(0, 5, "test_param") == 5
    assert check_larger_than(5, 5, "test_param") == 5


def test_check_larger_than_below_min():
    with pytest.raises(ValueError, match="test_param must be at least 10"):
        check_larger_than(10, 5, "test_param")


def test_check_smaller_than_valid():
    assert check_smaller_than(10, 5, "test_param") == 5


def test_check_smaller_than_none_allowed():
    assert check_smaller_than(10, None, "test_param", allow_none=True) is None


def test_check_smaller_than_exceeds_max():
    with pytest.raises(ValueError, match="test_param must be at most 10"):
        check_smaller_than(10, 15, "test_param")


@pytest.mark.parametrize("n_jobs", [None, 1, 4, -1, -2])
def test_check_n_jobs_valid(n_jobs):
    assert check_n_jobs(n_jobs) == n_jobs


@pytest.mark.parametrize("n_jobs", [0, 1.0, "2", True])
def test_check_n_jobs_invalid(n_jobs):
    with pytest.raises(ValueError, match="n_jobs must be a non-zero integer"):
        check_n_jobs(n_jobs)
