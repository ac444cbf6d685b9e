"""Domain entities for the retrieval pipeline.

This module contains immutable data structures that represent index entries
and retrieval results.
"""

from minirag.domain.entry import IndexEntry, RetrievalResult, Vector

__all__ = ["IndexEntry", "RetrievalResult", "Vector"]
