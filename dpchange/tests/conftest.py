"""Shared fixtures for dpchange tests."""

import pytest

from dpchange.datasets import generate_alternating_data
from dpchange.evaluators import FunctionEvaluator


@pytest.fixture
def sample_alternating_data():
    """Generate sample alternating data with change points 10, 20 and 30."""
    return generate_alternating_data(
        n_segments=3,
        segment_length=10,
        mean=10,
        p=2,
        random_state=15,
    )


@pytest.fixture
def constant_evaluator():
    """Evaluator giving every segment the score 1."""
    return FunctionEvaluator(lambda data, t_prev, t_cur: 1)
