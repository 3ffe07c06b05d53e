"""
Vector helpers for the scoring engine.

Plain-Python linear algebra over short fixed-length feature vectors.
"""

import math
from typing import Sequence


def weighted_dot_product(values: Sequence[float], weights: Sequence[float]) -> float:
    """Dot product of factor values with their weights."""
    if len(values) != len(weights):
        raise ValueError("Values and weights must have the same length")
    return sum(v * w for v, w in zip(values, weights))


def magnitude(vector: Sequence[float]) -> float:
    return math.sqrt(sum(v * v for v in vector))


def cosine_similarity(vector_a: Sequence[float], vector_b: Sequence[float]) -> float:
    """
    Cosine of the angle between two vectors.
    
    Returns 0 for mismatched lengths or when either vector has zero magnitude.
    """
    if len(vector_a) != len(vector_b):
        return 0.0
    
    mag_a = magnitude(vector_a)
    mag_b = magnitude(vector_b)
    if mag_a == 0 or mag_b == 0:
        return 0.0
    
    dot = sum(a * b for a, b in zip(vector_a, vector_b))
    return dot / (mag_a * mag_b)


def to_percentage(value: float) -> int:
    """Convert a [0, 1] score to an integer percentage, rounding half up."""
    return int(math.floor(value * 100 + 0.5))
