"""Vector search over an in-memory index."""

import math
from abc import ABC, abstractmethod
from typing import List

from minirag.domain.entry import RetrievalResult, Vector
from minirag.pipeline.index import Index
from minirag.pipeline.similarity import cosine_similarity


def _rank_key(result: RetrievalResult) -> tuple[bool, float]:
    # NaN scores rank below every real score
    return (not math.isnan(result.similarity), result.similarity)


class VectorSearch(ABC):
    """Abstract base class for vector search implementations.

    All search strategies must implement this interface.
    """

    def __init__(self, index: Index):
        """Initialize search over an index.

        Args:
            index: Index entries to search
        """
        self.index = index

    @abstractmethod
    def search(self, query_vector: Vector, k: int) -> List[RetrievalResult]:
        """Return the k entries most similar to query_vector.

        Args:
            query_vector: Embedded query
            k: Maximum number of results

        Returns:
            Results ranked by descending similarity
        """
        pass


class LinearScanSearch(VectorSearch):
    """Exhaustive search that scores every entry.

    Ranking is by descending cosine similarity. The sort is stable, so equal
    scores keep index order, and NaN scores are placed after all real scores.
    """

    def search(self, query_vector: Vector, k: int) -> List[RetrievalResult]:
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        scored = [
            RetrievalResult.from_entry(entry, cosine_similarity(query_vector, entry.vector))
            for entry in self.index
        ]
        ranked = sorted(scored, key=_rank_key, reverse=True)
        return ranked[:k]
