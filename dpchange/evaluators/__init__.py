"""Reference pairwise evaluators."""

from ._function_evaluator import FunctionEvaluator
from ._l2_evaluator import NegativeL2Evaluator

EVALUATORS = [
    FunctionEvaluator,
    NegativeL2Evaluator,
]

__all__ = [
    "EVALUATORS",
    "FunctionEvaluator",
    "NegativeL2Evaluator",
]
