"""Vector similarity scoring."""

import math
from typing import Sequence


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute cosine similarity between two equal-length vectors.

    Returns NaN when either vector has zero magnitude.

    Raises:
        ValueError: If the vectors differ in length
    """
    dot_product = sum(x * y for x, y in zip(a, b, strict=True))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))

    denominator = magnitude_a * magnitude_b
    if denominator == 0:
        # 0/0 in float arithmetic
        return math.nan
    return dot_product / denominator
