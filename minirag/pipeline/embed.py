"""Deterministic hash-based text embeddings.

This is a placeholder embedding, not a learned representation. The text is
folded into a signed 32-bit hash and each vector component is derived from
the sine of a multiple of that hash.
"""

import math
from typing import List

from minirag.domain.entry import Vector

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= _UINT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def _utf16_code_units(text: str) -> List[int]:
    """Return the UTF-16 code units of text.

    Characters outside the Basic Multilingual Plane yield two surrogate
    units, matching JavaScript string indexing.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def hash_text(text: str) -> int:
    """Compute the signed 32-bit string hash of text.

    Folds each code unit with ``h = ((h << 5) - h) + c``, wrapping to 32 bits
    after every step.
    """
    h = 0
    for code in _utf16_code_units(text):
        h = _to_int32((h << 5) - h + code)
    return h


def embed(text: str, dimensions: int) -> Vector:
    """Embed text into a vector of length ``dimensions``.

    Component ``i`` is ``(sin(h * i) + 1) / 2``; component 0 is always 0.5.
    """
    h = hash_text(text)
    return tuple((math.sin(h * i) + 1) / 2 for i in range(dimensions))


class HashEmbedder:
    """Embedding client bound to a fixed dimensionality.

    Attributes:
        dimensions: Length of every produced vector
    """

    def __init__(self, dimensions: int):
        self.dimensions = dimensions

    def embed_query(self, text: str) -> Vector:
        """Embed a single query string."""
        return embed(text, self.dimensions)

    def embed_documents(self, texts: List[str]) -> List[Vector]:
        """Embed a batch of chunk texts, preserving order."""
        return [embed(text, self.dimensions) for text in texts]
