"""Base classes and errors in dpchange."""

from ..errors import DPError
from ._base_pairwise_evaluator import BasePairwiseEvaluator

__all__ = ["BasePairwiseEvaluator", "DPError"]
