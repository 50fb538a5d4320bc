"""Dataset generators for dpchange."""

from ._generate import generate_alternating_data, generate_changing_data

GENERATORS = [
    generate_alternating_data,
    generate_changing_data,
]

__all__ = [
    "GENERATORS",
    "generate_alternating_data",
    "generate_changing_data",
]
