"""Tests for index building."""

from unittest.mock import patch

from minirag.domain.entry import IndexEntry
from minirag.pipeline.chunk import ChunkingStrategy
from minirag.pipeline.embed import HashEmbedder, embed
from minirag.pipeline.index import IndexBuilder


class TestIndexBuilder:
    """Test suite for IndexBuilder."""

    def test_one_entry_per_chunk(self, sample_document):
        index = IndexBuilder().build(sample_document, 4)

        assert len(index) == 3
        assert all(isinstance(entry, IndexEntry) for entry in index)

    def test_ids_are_contiguous_from_zero(self, sample_document):
        index = IndexBuilder().build(sample_document, 4)

        assert [entry.id for entry in index] == [0, 1, 2]

    def test_entries_follow_chunk_order(self, sample_document):
        index = IndexBuilder().build(sample_document, 4)

        assert [entry.text for entry in index] == [
            "Cats are mammals",
            " Dogs are mammals",
            " Cars are vehicles",
        ]

    def test_vectors_match_embedder(self, sample_document):
        index = IndexBuilder().build(sample_document, 5)

        for entry in index:
            assert entry.vector == embed(entry.text, 5)

    def test_embeds_chunks_as_one_batch(self, sample_document):
        """Test that the builder embeds all chunks with embed_documents."""
        with patch.object(
            HashEmbedder,
            "embed_documents",
            autospec=True,
            side_effect=lambda self, texts: [embed(t, self.dimensions) for t in texts],
        ) as mock_embed:
            index = IndexBuilder().build(sample_document, 4)

        mock_embed.assert_called_once()
        assert mock_embed.call_args.args[1] == [entry.text for entry in index]

    def test_rebuild_is_idempotent(self, sample_document):
        """Test that building twice yields identical ids and vectors."""
        builder = IndexBuilder()

        assert builder.build(sample_document, 4) == builder.build(sample_document, 4)

    def test_dimension_change_replaces_all_vectors(self, sample_document):
        builder = IndexBuilder()
        old_index = builder.build(sample_document, 4)
        new_index = builder.build(sample_document, 6)

        assert all(len(entry.vector) == 4 for entry in old_index)
        assert all(len(entry.vector) == 6 for entry in new_index)

    def test_new_document_reassigns_ids(self, sample_document):
        builder = IndexBuilder()
        builder.build(sample_document, 4)
        index = builder.build("Only one sentence", 4)

        assert [(e.id, e.text) for e in index] == [(0, "Only one sentence")]

    def test_empty_document(self):
        assert IndexBuilder().build("", 4) == ()

    def test_custom_chunker(self):
        builder = IndexBuilder(ChunkingStrategy(delimiter=";"))
        index = builder.build("a;b. c", 3)

        assert [e.text for e in index] == ["a", "b. c"]

    def test_progress_bar_toggle(self, sample_document):
        """Test that tqdm is disabled unless progress is requested."""
        with patch("minirag.pipeline.index.tqdm", side_effect=lambda it, **kw: it) as mock_tqdm:
            IndexBuilder().build(sample_document, 4)
            IndexBuilder(show_progress=True).build(sample_document, 4)

        assert mock_tqdm.call_args_list[0].kwargs["disable"] is True
        assert mock_tqdm.call_args_list[1].kwargs["disable"] is False


class TestIndexEntry:
    """Test suite for IndexEntry dataclass."""

    def test_to_dict(self):
        entry = IndexEntry(id=2, text="text", vector=(0.5, 0.25))

        assert entry.to_dict() == {"id": 2, "text": "text", "vector": [0.5, 0.25]}
