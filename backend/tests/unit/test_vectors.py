"""
Unit tests for vector helpers.
"""

import pytest

from smartadmit.domain.scoring.vectors import (
    cosine_similarity,
    magnitude,
    to_percentage,
    weighted_dot_product,
)


def test_weighted_dot_product():
    assert weighted_dot_product([1.0, 0.5, 0.0], [0.5, 0.2, 0.3]) == pytest.approx(0.6)


def test_weighted_dot_product_length_mismatch():
    with pytest.raises(ValueError):
        weighted_dot_product([1.0], [0.5, 0.5])


def test_magnitude():
    assert magnitude([3.0, 4.0]) == pytest.approx(5.0)


def test_cosine_similarity_parallel_vectors():
    assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)


def test_cosine_similarity_orthogonal_vectors():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)


def test_cosine_similarity_zero_magnitude():
    assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0


def test_cosine_similarity_length_mismatch():
    assert cosine_similarity([1.0], [1.0, 1.0]) == 0.0


@pytest.mark.parametrize("value, expected", [
    (0.0, 0),
    (0.124, 12),
    (0.126, 13),
    (0.5, 50),
    (1.0, 100),
])
def test_to_percentage(value, expected):
    assert to_percentage(value) == expected
