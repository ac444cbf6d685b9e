"""Index entry entities for the retrieval pipeline."""

from dataclasses import dataclass

Vector = tuple[float, ...]


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """Immutable index entry.

    Represents one chunk of the current document together with its
    embedding vector.

    Attributes:
        id: Zero-based position of the chunk in the current chunk sequence.
            Reassigned from zero on every rebuild, not a stable identity.
        text: Chunk text, untrimmed
        vector: Embedding vector of the chunk
    """

    id: int
    text: str
    vector: Vector

    def to_dict(self) -> dict:
        """Convert entry to dictionary for serialization."""
        return {
            "id": self.id,
            "text": self.text,
            "vector": list(self.vector),
        }


@dataclass(frozen=True, slots=True)
class RetrievalResult:
    """An index entry scored against a query vector.

    Only produced by retrieval; never stored in the index.

    Attributes:
        id: Index entry id
        text: Chunk text
        vector: Chunk embedding vector
        similarity: Cosine similarity to the query vector (may be NaN)
    """

    id: int
    text: str
    vector: Vector
    similarity: float

    @classmethod
    def from_entry(cls, entry: IndexEntry, similarity: float) -> "RetrievalResult":
        """Create a result from an index entry and its score."""
        return cls(
            id=entry.id,
            text=entry.text,
            vector=entry.vector,
            similarity=similarity,
        )

    def to_dict(self) -> dict:
        """Convert result to dictionary for serialization."""
        return {
            "id": self.id,
            "text": self.text,
            "vector": list(self.vector),
            "similarity": self.similarity,
        }
