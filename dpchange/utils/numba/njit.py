"""Dispatch njit decorator used to isolate numba.

The segment kernels of the reference evaluators are decorated with `njit`. If
`numba` is installed, `njit` dispatches to `numba.njit` with default keyword
arguments read from environment variables. If not, an identity decorator is used
and the kernels run as plain Python/numpy functions.

The defaults are configured by the environment variables:
- `NUMBA_CACHE` (default `True`)
- `NUMBA_FASTMATH` (default `False`)
- `NUMBA_PARALLEL` (default `False`)

The `truthy` values are ``["", "1", "true", "True", "TRUE"]`` and the `falsy`
values are ``["0", "false", "False", "FALSE"]``. Any other value raises a
``ValueError`` at import time.
"""

from functools import wraps
from importlib.util import find_spec
from os import environ

numba_available = find_spec("numba") is not None


def read_boolean_env_var(name, default_value):
    """Read a boolean environment variable."""
    truthy_strings = ["", "1", "true", "True", "TRUE"]
    falsy_strings = ["0", "false", "False", "FALSE"]

    env_value = environ.get(name)
    if env_value is None:
        return default_value

    if env_value in truthy_strings:
        return True
    elif env_value in falsy_strings:
        return False
    else:
        raise ValueError(
            f"Invalid value for boolean environment variable '{name}': {env_value}"
        )


def configure_njit(njit_default_kwargs):
    """Configure njit with default kwargs from environment variables."""

    def decorator(_):
        if numba_available:
            from numba import njit as numba_njit

            @wraps(numba_njit)
            def njit(maybe_func=None, **kwargs):
                """Dispatch njit decorator based on environment variables."""
                kwargs = {**njit_default_kwargs, **kwargs}
                return numba_njit(maybe_func, **kwargs)

        else:

            def njit(maybe_func=None, **kwargs):
                """Identity decorator for replacing njit by passthrough."""
                if callable(maybe_func):
                    # @njit
                    return maybe_func
                else:
                    # @njit(cache=True)
                    def decorator(func):
                        return func

                    return decorator

        return njit

    return decorator


@configure_njit(
    njit_default_kwargs={
        "cache": read_boolean_env_var("NUMBA_CACHE", default_value=True),
        "fastmath": read_boolean_env_var("NUMBA_FASTMATH", default_value=False),
        "parallel": read_boolean_env_var("NUMBA_PARALLEL", default_value=False),
    }
)
def njit():
    """Dispatch njit decorator based on environment variables."""
    ...  # pragma: no cover
