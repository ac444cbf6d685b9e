"""Indexing pipeline components."""

from minirag.pipeline.chunk import ChunkingStrategy, chunk
from minirag.pipeline.embed import HashEmbedder, embed, hash_text
from minirag.pipeline.index import Index, IndexBuilder
from minirag.pipeline.similarity import cosine_similarity

__all__ = [
    # Chunking
    "ChunkingStrategy",
    "chunk",
    # Embedding
    "HashEmbedder",
    "embed",
    "hash_text",
    # Scoring
    "cosine_similarity",
    # Indexing
    "Index",
    "IndexBuilder",
]
