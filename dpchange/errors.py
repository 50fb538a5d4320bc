"""Errors raised by dpchange."""

__all__ = ["DPError"]


class DPError(ValueError):
    """Error raised by the dynamic programming and pairwise score machinery.

    Raised for invalid change point geometry, out of range table or memo lookups,
    access to memo cells that have not been calculated, change point counts above
    the maximum for a given time, and an empty candidate set in the recurrence.
    The message is the only payload.
    """
