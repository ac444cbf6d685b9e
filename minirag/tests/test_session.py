"""Tests for session state transitions and delayed answers."""

import threading

import pytest

from minirag.config import AppConfig, ChunkingConfig, EmbeddingConfig, AnswerConfig
from minirag.session import Session


@pytest.fixture
def session(sample_document):
    s = Session(document=sample_document, dimensions=4, answer_delay=0)
    yield s
    s.close()


class TestTransitions:
    """Test suite for set_document / set_dimensions."""

    def test_initial_index(self, session):
        assert len(session.index) == 3
        assert session.chunks == ("Cats are mammals", " Dogs are mammals", " Cars are vehicles")
        assert all(len(v) == 4 for v in session.vectors)

    def test_set_document_rebuilds(self, session):
        session.set_document("One. Two")

        assert session.document == "One. Two"
        assert session.chunks == ("One", " Two")
        assert [e.id for e in session.index] == [0, 1]

    def test_set_empty_document(self, session):
        session.set_document("")

        assert session.index == ()
        assert session.chunks == ()
        assert session.vectors == ()

    def test_set_dimensions_rebuilds(self, session):
        old_index = session.index

        assert session.set_dimensions(6) == 6
        assert all(len(e.vector) == 6 for e in session.index)
        assert all(len(e.vector) == 4 for e in old_index)

    @pytest.mark.parametrize("requested,effective", [(0, 2), (-5, 2), (9, 8), (20, 8), (5, 5)])
    def test_set_dimensions_clamps(self, session, requested, effective):
        assert session.set_dimensions(requested) == effective
        assert session.dimensions == effective

    def test_accessors_are_read_only_views(self, session):
        chunks = session.chunks

        assert isinstance(chunks, tuple)
        assert isinstance(session.index, tuple)
        assert isinstance(session.vectors[0], tuple)

    def test_from_config(self):
        config = AppConfig(
            document="a;b;c",
            chunking=ChunkingConfig(delimiter=";"),
            embedding=EmbeddingConfig(dimensions=3),
            answer=AnswerConfig(delay_seconds=0),
        )

        with Session.from_config(config) as session:
            assert session.chunks == ("a", "b", "c")
            assert session.dimensions == 3
            assert session.answer_delay == 0


class TestQuery:
    """Test suite for queries and answers."""

    def test_query_returns_results_immediately(self, session, sample_query):
        result = session.query(sample_query)

        assert result.request_id == 1
        assert len(result.query_vector) == 4
        assert len(result.results) == 3
        assert session.last_results == tuple(result.results)
        assert session.last_query_vector == result.query_vector

    def test_answer_without_delay(self, session, sample_query):
        result = session.query(sample_query)

        answer = result.answer.result(timeout=1)
        assert sample_query in answer
        assert result.results[0].text in answer
        assert session.answer == answer
        assert session.answer_request_id == 1
        assert session.pending is False

    def test_query_respects_k(self, session):
        assert len(session.query("q", k=1).results) == 1

    def test_query_on_empty_index(self, session):
        session.set_document("")
        result = session.query("anything")

        assert result.results == []
        assert "The query is related to . " in result.answer.result(timeout=1)

    def test_request_ids_increase(self, session):
        ids = [session.query("q").request_id for _ in range(3)]

        assert ids == [1, 2, 3]
        assert session.request_id == 3

    def test_on_answer_callback(self, session):
        received = []
        session.on_answer(lambda request_id, answer: received.append((request_id, answer)))

        result = session.query("q")

        assert received == [(1, result.answer.result(timeout=1))]

    def test_to_dict(self, session):
        data = session.query("q").to_dict()

        assert data["request_id"] == 1
        assert data["query"] == "q"
        assert len(data["results"]) == 3


class TestDelayedAnswer:
    """Test suite for the simulated answer latency."""

    def test_answer_is_pending_until_delay(self, sample_document):
        with Session(document=sample_document, answer_delay=0.3) as session:
            result = session.query("first")

            assert session.answer is None
            assert session.pending is True

            answer = result.answer.result(timeout=5)
            assert session.answer == answer
            assert session.pending is False

    def test_newer_query_supersedes_pending_answer(self, sample_document):
        """Test that only the latest query's answer becomes visible."""
        with Session(document=sample_document, answer_delay=0.2) as session:
            committed = []
            done = threading.Event()

            def record(request_id, answer):
                committed.append(request_id)
                done.set()

            session.on_answer(record)

            first = session.query("first question")
            second = session.query("second question")

            assert first.answer.cancelled()
            answer = second.answer.result(timeout=5)
            assert done.wait(timeout=5)

            assert '"second question"' in answer
            assert session.answer == answer
            assert session.answer_request_id == second.request_id
            assert committed == [second.request_id]

    def test_stale_completion_is_discarded(self, sample_document):
        """Test that a completion for an old request id does not commit."""
        with Session(document=sample_document, answer_delay=0) as session:
            first = session.query("first")
            session.query("second")
            stale = type(first.answer)()

            session._complete(first.request_id, "first", first.results, stale)

            assert stale.cancelled()
            assert '"second"' in session.answer

    def test_failed_query_keeps_pending_answer(self, sample_document):
        """Test that a query that raises leaves the previous answer alone."""
        with Session(document=sample_document, answer_delay=5) as session:
            first = session.query("first")

            with pytest.raises(ValueError):
                session.query("bad", k=-1)

            assert not first.answer.cancelled()
            assert session.request_id == first.request_id
            assert session.last_results == tuple(first.results)
            assert session.pending is True

            session._complete(first.request_id, "first", first.results, first.answer)

            assert '"first"' in first.answer.result(timeout=1)
            assert session.pending is False

    def test_close_cancels_pending(self, sample_document):
        session = Session(document=sample_document, answer_delay=5)
        result = session.query("q")

        session.close()

        assert result.answer.cancelled()
        assert session.answer is None
