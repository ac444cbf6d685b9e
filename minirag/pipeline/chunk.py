"""Document chunking strategy."""

from typing import List

DEFAULT_DELIMITER = "."


class ChunkingStrategy:
    """Delimiter-based chunking.

    Splits a document on a literal delimiter and drops blank segments.
    Retained segments keep their surrounding whitespace.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        """Initialize chunking strategy.

        Args:
            delimiter: Literal string to split on (default: ".")

        Raises:
            ValueError: If delimiter is empty
        """
        if not delimiter:
            raise ValueError("Chunk delimiter must be a non-empty string")
        self.delimiter = delimiter

    def split(self, document: str) -> List[str]:
        """Split a document into chunks."""
        if not document:
            return []

        return [
            segment
            for segment in document.split(self.delimiter)
            if segment.strip()
        ]


def chunk(document: str) -> List[str]:
    """Split a document on "." using the default strategy."""
    return ChunkingStrategy().split(document)
