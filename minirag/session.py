"""Session state for the retrieval pipeline.

A session owns the current document, the embedding dimensionality, the index
built from them and the most recent answer. State only changes through
``set_document``, ``set_dimensions`` and ``query``.

Answers are committed after a simulated generation delay. Each query gets a
monotonically increasing request id; issuing a new query cancels the pending
answer of the previous one, and a delayed completion whose request id is no
longer the latest is discarded. Only the latest query's answer is ever
visible.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, List, Tuple

from minirag.config import AppConfig, DEFAULT_DOCUMENT, clamp_dimensions
from minirag.domain.entry import RetrievalResult, Vector
from minirag.pipeline.chunk import ChunkingStrategy
from minirag.pipeline.index import Index, IndexBuilder
from minirag.rag.answer_generator import AnswerSynthesizer
from minirag.rag.retriever import DEFAULT_TOP_K, Retriever

logger = logging.getLogger(__name__)

DEFAULT_ANSWER_DELAY = 1.5

AnswerCallback = Callable[[int, str], None]


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a query.

    Retrieval data is available immediately; ``answer`` resolves after the
    session's answer delay, or is cancelled if a newer query supersedes it.

    Attributes:
        request_id: Sequence number of this query
        query: Query text
        query_vector: Embedded query
        results: Retrieved results, most similar first
        answer: Future resolving to the synthesized answer
    """

    request_id: int
    query: str
    query_vector: Vector
    results: List[RetrievalResult]
    answer: Future

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "query": self.query,
            "query_vector": list(self.query_vector),
            "results": [r.to_dict() for r in self.results],
        }


class Session:
    """Retrieval session with explicit state transitions."""

    def __init__(
        self,
        document: str = DEFAULT_DOCUMENT,
        dimensions: int = 4,
        *,
        chunker: ChunkingStrategy | None = None,
        retriever: Retriever | None = None,
        synthesizer: AnswerSynthesizer | None = None,
        top_k: int = DEFAULT_TOP_K,
        answer_delay: float = DEFAULT_ANSWER_DELAY,
        show_progress: bool = False,
    ):
        """Initialize a session and build the initial index.

        Args:
            document: Initial document text
            dimensions: Embedding dimensionality, clamped to [2, 8]
            chunker: Chunking strategy (default: split on ".")
            retriever: Retriever (default: hash embedder + linear scan)
            synthesizer: Answer synthesizer (default: templated answer)
            top_k: Number of results per query
            answer_delay: Seconds before an answer is committed
            show_progress: Show a progress bar while indexing
        """
        self._lock = threading.RLock()
        self._builder = IndexBuilder(chunker, show_progress=show_progress)
        self._retriever = retriever or Retriever()
        self._synthesizer = synthesizer or AnswerSynthesizer()
        self.top_k = top_k
        self.answer_delay = answer_delay

        self._document = document
        self._dimensions = clamp_dimensions(dimensions)
        self._index: Index = ()

        self._request_id = 0
        self._pending_timer: threading.Timer | None = None
        self._pending_future: Future | None = None
        self._answer: str | None = None
        self._answer_request_id: int | None = None
        self._last_query_vector: Vector = ()
        self._last_results: Tuple[RetrievalResult, ...] = ()
        self._callbacks: List[AnswerCallback] = []

        self._rebuild()

    @classmethod
    def from_config(cls, config: AppConfig, show_progress: bool = False) -> "Session":
        """Create a session from application config."""
        return cls(
            document=config.document,
            dimensions=config.embedding.dimensions,
            chunker=ChunkingStrategy(config.chunking.delimiter),
            top_k=config.retrieval.top_k,
            answer_delay=config.answer.delay_seconds,
            show_progress=show_progress,
        )

    # ========== Transitions ==========

    def set_document(self, text: str) -> None:
        """Replace the document and rebuild the index."""
        with self._lock:
            self._document = text
            self._rebuild()

    def set_dimensions(self, dimensions: int) -> int:
        """Set the dimensionality (clamped to [2, 8]) and rebuild the index.

        Returns:
            The effective dimensionality
        """
        with self._lock:
            self._dimensions = clamp_dimensions(dimensions)
            self._rebuild()
            return self._dimensions

    def query(self, text: str, k: int | None = None) -> QueryResult:
        """Retrieve the top results for a query and schedule its answer.

        Args:
            text: Query text
            k: Number of results (default: session top_k)

        Returns:
            QueryResult with immediate retrieval data and a pending answer
        """
        k = self.top_k if k is None else k
        with self._lock:
            # A failed retrieval must leave the previous answer untouched
            query_vector, results = self._retriever.retrieve_with_vector(
                text, self._index, self._dimensions, k
            )

            self._cancel_pending()
            self._request_id += 1
            request_id = self._request_id

            self._last_query_vector = query_vector
            self._last_results = tuple(results)

            future: Future = Future()
            self._pending_future = future

            if self.answer_delay > 0:
                timer = threading.Timer(
                    self.answer_delay,
                    self._complete,
                    args=(request_id, text, results, future),
                )
                timer.daemon = True
                self._pending_timer = timer
                timer.start()

        logger.debug("Query #%d returned %d results", request_id, len(results))

        if self.answer_delay <= 0:
            self._complete(request_id, text, results, future)

        return QueryResult(
            request_id=request_id,
            query=text,
            query_vector=query_vector,
            results=results,
            answer=future,
        )

    def on_answer(self, callback: AnswerCallback) -> None:
        """Register a callback invoked with (request_id, answer) on commit."""
        with self._lock:
            self._callbacks.append(callback)

    def close(self) -> None:
        """Cancel any pending answer."""
        with self._lock:
            self._cancel_pending()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ========== Read accessors ==========

    @property
    def document(self) -> str:
        return self._document

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def index(self) -> Index:
        with self._lock:
            return self._index

    @property
    def chunks(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(entry.text for entry in self._index)

    @property
    def vectors(self) -> Tuple[Vector, ...]:
        with self._lock:
            return tuple(entry.vector for entry in self._index)

    @property
    def answer(self) -> str | None:
        """Most recently committed answer, or None."""
        return self._answer

    @property
    def answer_request_id(self) -> int | None:
        return self._answer_request_id

    @property
    def request_id(self) -> int:
        """Id of the latest query (0 before any query)."""
        return self._request_id

    @property
    def pending(self) -> bool:
        """Whether the latest query's answer has not been committed yet."""
        with self._lock:
            return self._request_id > 0 and self._answer_request_id != self._request_id

    @property
    def last_query_vector(self) -> Vector:
        return self._last_query_vector

    @property
    def last_results(self) -> Tuple[RetrievalResult, ...]:
        return self._last_results

    # ========== Internals ==========

    def _rebuild(self) -> None:
        self._index = self._builder.build(self._document, self._dimensions)
        logger.info(
            "Index rebuilt: %d entries, %d dimensions", len(self._index), self._dimensions
        )

    def _cancel_pending(self) -> None:
        if self._pending_timer is not None:
            self._pending_timer.cancel()
            self._pending_timer = None
        if self._pending_future is not None and not self._pending_future.done():
            self._pending_future.cancel()
        self._pending_future = None

    def _complete(
        self,
        request_id: int,
        query: str,
        results: List[RetrievalResult],
        future: Future,
    ) -> None:
        with self._lock:
            if request_id != self._request_id or future.cancelled():
                logger.debug("Discarding stale answer for query #%d", request_id)
                future.cancel()
                return

            answer = self._synthesizer.synthesize(query, results)
            self._answer = answer
            self._answer_request_id = request_id
            self._pending_timer = None
            self._pending_future = None
            callbacks = list(self._callbacks)

        future.set_result(answer)
        for callback in callbacks:
            callback(request_id, answer)
