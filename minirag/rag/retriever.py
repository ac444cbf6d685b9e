"""Retrieval orchestration for the RAG pipeline."""

import logging
from typing import Callable, List, Tuple

from minirag.domain.entry import RetrievalResult, Vector
from minirag.pipeline.embed import HashEmbedder
from minirag.pipeline.index import Index
from minirag.storage.vectorstore import LinearScanSearch, VectorSearch

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


class Retriever:
    """Embeds queries and ranks index entries against them.

    Attributes:
        embedder_factory: Builds an embedder for a dimensionality
        search_factory: Builds a search strategy over an index
    """

    def __init__(
        self,
        embedder_factory: Callable[[int], HashEmbedder] = HashEmbedder,
        search_factory: Callable[[Index], VectorSearch] = LinearScanSearch,
    ):
        """Initialize Retriever.

        Args:
            embedder_factory: Embedder constructor (default: HashEmbedder)
            search_factory: Search constructor (default: LinearScanSearch)
        """
        self.embedder_factory = embedder_factory
        self.search_factory = search_factory

    def retrieve_with_vector(
        self,
        query: str,
        index: Index,
        dimensions: int,
        k: int = DEFAULT_TOP_K,
    ) -> Tuple[Vector, List[RetrievalResult]]:
        """Embed a query and return it along with the top-k results.

        Args:
            query: Query text
            index: Index built with the same dimensionality
            dimensions: Embedding dimensionality
            k: Number of results to return (default: 3)

        Returns:
            Tuple of (query vector, results ranked by descending similarity)
        """
        query_vector = self.embedder_factory(dimensions).embed_query(query)
        results = self.search_factory(index).search(query_vector, k)

        logger.debug(
            "Retrieved %d/%d entries for query %r", len(results), len(index), query
        )
        return query_vector, results

    def retrieve(
        self,
        query: str,
        index: Index,
        dimensions: int,
        k: int = DEFAULT_TOP_K,
    ) -> List[RetrievalResult]:
        """Return the top-k index entries for a query.

        An empty index yields an empty list.
        """
        _, results = self.retrieve_with_vector(query, index, dimensions, k)
        return results
