"""In-memory chunking, embedding and retrieval pipeline."""

__version__ = "0.1.0"

# Domain entities
from minirag.domain.entry import IndexEntry, RetrievalResult

# Pipeline components
from minirag.pipeline.chunk import ChunkingStrategy, chunk
from minirag.pipeline.embed import HashEmbedder, embed
from minirag.pipeline.index import IndexBuilder
from minirag.pipeline.similarity import cosine_similarity

# Search and retrieval
from minirag.storage.vectorstore import LinearScanSearch, VectorSearch
from minirag.rag.retriever import Retriever
from minirag.rag.answer_generator import AnswerSynthesizer

# Configuration and session
from minirag.config import AppConfig, load_config
from minirag.session import QueryResult, Session

__all__ = [
    # Domain
    "IndexEntry",
    "RetrievalResult",
    # Pipeline
    "ChunkingStrategy",
    "chunk",
    "HashEmbedder",
    "embed",
    "IndexBuilder",
    "cosine_similarity",
    # Retrieval
    "LinearScanSearch",
    "VectorSearch",
    "Retriever",
    "AnswerSynthesizer",
    # Session
    "AppConfig",
    "load_config",
    "QueryResult",
    "Session",
]
