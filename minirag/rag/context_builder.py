"""Context building for templated answers."""

from typing import List

from minirag.domain.entry import RetrievalResult


class ContextBuilder:
    """Builds the context string from retrieved results.

    Attributes:
        separator: String placed between result texts (default: single space)
    """

    def __init__(self, separator: str = " "):
        self.separator = separator

    def build_context(self, results: List[RetrievalResult]) -> str:
        """Join result texts in result order.

        Texts are used verbatim, without trimming.

        Args:
            results: Retrieved results, most similar first

        Returns:
            Context string, empty when there are no results
        """
        return self.separator.join(result.text for result in results)
