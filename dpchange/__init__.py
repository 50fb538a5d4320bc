"""dpchange: optimal change point segmentation by dynamic programming."""

__version__ = "0.1.0"
