"""Answer synthesis for the RAG pipeline."""

from typing import List

from minirag.domain.entry import RetrievalResult
from minirag.rag import prompts
from minirag.rag.context_builder import ContextBuilder


class AnswerSynthesizer:
    """Produces templated answers from retrieved results.

    This is plain string templating; no language model is involved.

    Attributes:
        context_builder: Context builder for joining retrieved text
    """

    def __init__(self, context_builder: ContextBuilder | None = None):
        """Initialize AnswerSynthesizer.

        Args:
            context_builder: Context builder (default: space-separated join)
        """
        self._context_builder = context_builder or ContextBuilder()

    def synthesize(self, query: str, results: List[RetrievalResult]) -> str:
        """Build an answer string for a query.

        Args:
            query: User query text
            results: Retrieved results, most similar first

        Returns:
            Answer naming the query and the joined result text
        """
        context = self._context_builder.build_context(results)
        return prompts.build_answer(query, context)
