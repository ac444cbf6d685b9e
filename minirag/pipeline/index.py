"""Index building - orchestrates chunking and embedding."""

import logging
from typing import Tuple

from tqdm import tqdm

from minirag.domain.entry import IndexEntry
from minirag.pipeline.chunk import ChunkingStrategy
from minirag.pipeline.embed import HashEmbedder

logger = logging.getLogger(__name__)

Index = Tuple[IndexEntry, ...]


class IndexBuilder:
    """Builds a complete in-memory index from a document.

    Every call produces a fresh index; previous indexes are never updated
    in place.
    """

    def __init__(
        self,
        chunker: ChunkingStrategy | None = None,
        show_progress: bool = False,
    ):
        """Initialize index builder.

        Args:
            chunker: Chunking strategy (default: split on ".")
            show_progress: Show a tqdm progress bar while embedding
        """
        self._chunker = chunker or ChunkingStrategy()
        self._show_progress = show_progress

    @property
    def chunker(self) -> ChunkingStrategy:
        return self._chunker

    def build(self, document: str, dimensions: int) -> Index:
        """Build an index from a document.

        Args:
            document: Raw document text
            dimensions: Embedding dimensionality

        Returns:
            Tuple of index entries in chunk order, ids 0..n-1
        """
        chunks = self._chunker.split(document)
        vectors = HashEmbedder(dimensions).embed_documents(chunks)

        entries = []
        for i, (text, vector) in enumerate(
            tqdm(
                zip(chunks, vectors),
                total=len(chunks),
                desc="Indexing",
                disable=not self._show_progress,
            )
        ):
            entries.append(IndexEntry(id=i, text=text, vector=vector))

        logger.debug("Built index: %d chunks, %d dimensions", len(entries), dimensions)
        return tuple(entries)
