"""Search adapters."""

from minirag.storage.vectorstore import LinearScanSearch, VectorSearch

__all__ = ["LinearScanSearch", "VectorSearch"]
