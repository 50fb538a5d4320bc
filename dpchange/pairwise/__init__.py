"""Pairwise score caching and scoring of explicit segmentations."""

from ._cache import PairwiseCache
from ._scorer import SegmentationScorer, brute_force_search

__all__ = ["PairwiseCache", "SegmentationScorer", "brute_force_search"]
