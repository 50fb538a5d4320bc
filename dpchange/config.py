"""Configuration module for the package."""


class Config:
    """Configuration class for dpchange."""

    def __init__(self):
        """Initialize the default configuration."""
        self._n_jobs = -1
        self._brute_force_warning_size = 1_000_000

    @property
    def n_jobs(self):
        """Default number of parallel jobs used when building pairwise tables."""
        return self._n_jobs

    @n_jobs.setter
    def n_jobs(self, value):
        if not isinstance(value, int) or isinstance(value, bool) or value == 0:
            raise ValueError("n_jobs must be a non-zero integer")
        self._n_jobs = value

    @property
    def brute_force_warning_size(self):
        """Number of candidate segmentations above which brute force search warns."""
        return self._brute_force_warning_size

    @brute_force_warning_size.setter
    def brute_force_warning_size(self, value):
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError("brute_force_warning_size must be a positive integer")
        self._brute_force_warning_size = value

    def get(self, key=None):
        """Get the entire config or a specific key."""
        if key:
            return getattr(self, key, None)
        return {
            attr: getattr(self, attr)
            for attr in dir(self)
            if not callable(getattr(self, attr)) and not attr.startswith("_")
        }


config = Config()
