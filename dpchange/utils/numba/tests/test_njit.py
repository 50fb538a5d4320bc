import os
import sys
from contextlib import contextmanager

import numpy as np
import pytest


def remove_modules_with_prefix(prefix):
    to_remove = [mod for mod in sys.modules if mod.startswith(prefix)]
    for mod in to_remove:
        del sys.modules[mod]


@contextmanager
def temp_env_and_modules(remove_module_prefix: str, env_vars: dict = None):
    original_modules = sys.modules.copy()
    original_environ = os.environ.copy()

    remove_modules_with_prefix(remove_module_prefix)
    if env_vars is not None:
        os.environ.update(env_vars)
    try:
        yield
    finally:
        sys.modules.clear()
        sys.modules.update(original_modules)
        os.environ.clear()
        os.environ.update(original_environ)


def test_setting_wrong_env_variable_raises():
    with (
        temp_env_and_modules(
            remove_module_prefix="dpchange", env_vars={"NUMBA_CACHE": "invalid_value"}
        ),
        pytest.raises(ValueError),
    ):
        import dpchange.utils.numba  # noqa: F401, I001


@pytest.mark.parametrize("value", ["1", "true", "0", "False"])
def test_setting_valid_env_variable_does_not_raise(value):
    with temp_env_and_modules(
        remove_module_prefix="dpchange", env_vars={"NUMBA_FASTMATH": value}
    ):
        import dpchange.utils.numba  # noqa: F401, I001


def test_read_boolean_env_var(monkeypatch):
    from dpchange.utils.numba.njit import read_boolean_env_var

    monkeypatch.delenv("DPCHANGE_TEST_FLAG", raising=False)
    assert read_boolean_env_var("DPCHANGE_TEST_FLAG", default_value=True)
    monkeypatch.setenv("DPCHANGE_TEST_FLAG", "0")
    assert not read_boolean_env_var("DPCHANGE_TEST_FLAG", default_value=True)
    monkeypatch.setenv("DPCHANGE_TEST_FLAG", "TRUE")
    assert read_boolean_env_var("DPCHANGE_TEST_FLAG", default_value=False)


def test_njit_function():
    from dpchange.utils.numba import njit

    @njit
    def add(x, y):
        return x + y

    assert add(1, 2) == 3


def test_njit_with_arguments():
    from dpchange.utils.numba import njit

    @njit(cache=False)
    def column_sums(x):
        return np.sum(x, axis=0)

    assert np.array_equal(column_sums(np.ones((3, 2))), np.array([3.0, 3.0]))
