"""Optimisers for segmentations with a fixed number of change points."""

from ._dynamic_programming import DynamicProgrammingSolver, MemoCell

__all__ = ["DynamicProgrammingSolver", "MemoCell"]
