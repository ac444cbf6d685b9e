"""Tests for cosine similarity."""

import math

import pytest

from minirag.pipeline.embed import embed
from minirag.pipeline.similarity import cosine_similarity


def test_self_similarity_is_one():
    v = embed("Cats are mammals", 4)

    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_symmetry():
    a = embed("Cats are mammals", 6)
    b = embed("Cars are vehicles", 6)

    assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_orthogonal_vectors():
    assert cosine_similarity((1.0, 0.0), (0.0, 1.0)) == 0.0


def test_opposite_vectors():
    assert cosine_similarity((1.0, 2.0), (-1.0, -2.0)) == pytest.approx(-1.0)


def test_scale_invariance():
    assert cosine_similarity((1.0, 2.0, 3.0), (2.0, 4.0, 6.0)) == pytest.approx(1.0)


def test_zero_vector_gives_nan():
    """Test that zero magnitude yields NaN rather than an error."""
    assert math.isnan(cosine_similarity((0.0, 0.0), (1.0, 0.5)))
    assert math.isnan(cosine_similarity((1.0, 0.5), (0.0, 0.0)))
    assert math.isnan(cosine_similarity((0.0, 0.0), (0.0, 0.0)))


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        cosine_similarity((1.0, 0.0), (1.0, 0.0, 0.0))
