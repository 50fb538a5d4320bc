"""Common validation functions for input parameters."""

from numbers import Number


def check_none(value: Number, name: str, allow_none: bool = False) -> Number:
    """Check if value is None.

    Parameters
    ----------
    value : int, float
        Value to check.
    name : str
        Name of the parameter to be shown in the error message.
    allow_none : bool, optional (default=False)
        Whether to allow None values.

    Returns
    -------
    value : int, float
        Input value.

    Raises
    ------
    ValueError
        If value is None and allow_none is False.
    """
    if not allow_none and value is None:
        raise ValueError(f"{name} cannot be None.")
    return value


def check_larger_than(
    min_value: Number, value: Number, name: str, allow_none: bool = False
) -> Number:
    """Check if `value` is larger than or equal to `min_value`.

    Parameters
    ----------
    min_value : int, float
        Minimum allowed value.
    value : int, float
        Value to check.
    name : str
        Name of the parameter to be shown in the error message.
    allow_none : bool, optional (default=False)
        Whether to allow None values.

    Returns
    -------
    value : int, float
        Input value.

    Raises
    ------
    ValueError
        If value is `not None` and smaller than `min_value`.
    """
    check_none(value, name, allow_none)
    if value is not None and value < min_value:
        raise ValueError(f"{name} must be at least {min_value} ({name}={value}).")
    return value


def check_smaller_than(
    max_value: Number, value: Number, name: str, allow_none: bool = False
) -> Number:
    """Check if `value` is smaller than or equal to `max_value`.

    Parameters
    ----------
    max_value : int, float
        Maximum allowed value.
    value : int, float
        Value to check.
    name : str
        Name of the parameter to be shown in the error message.
    allow_none : bool, optional (default=False)
        Whether to allow None values.

    Returns
    -------
    value : int, float
        Input value.

    Raises
    ------
    ValueError
        If value is larger than `max_value`.
    """
    check_none(value, name, allow_none)
    if value is not None and value > max_value:
        raise ValueError(f"{name} must be at most {max_value} ({name}={value}).")
    return value


def check_n_jobs(n_jobs: int | None, name: str = "n_jobs") -> int | None:
    """Check the number of parallel jobs.

    Parameters
    ----------
    n_jobs : int or None
        Number of jobs. ``None`` means the package default is used, negative values
        are interpreted by joblib relative to the number of CPUs.
    name : str, optional (default="n_jobs")
        Name of the parameter to be shown in the error message.

    Returns
    -------
    n_jobs : int or None
        Input value.
    """
    if n_jobs is None:
        return n_jobs
    if not isinstance(n_jobs, int) or isinstance(n_jobs, bool) or n_jobs == 0:
        raise ValueError(
            f"{name} must be a non-zero integer or None ({name}={n_jobs})."
        )
    return n_jobs
