"""
Tests for the flat JSON vector store.

Covers persistence, model stamping, atomic replacement and load failures.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from docs_rag.boundary.vdb import JsonVectorStore, VectorIndex
from docs_rag.core.exceptions import ConsistencyError, VectorStoreError


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "embeddings.json"


class TestJsonVectorStore:
    """Test JsonVectorStore save/load."""

    def test_save_then_load(self, store_path: Path, sample_chunks) -> None:
        """Should persist chunks in order with their stamp."""
        snapshot = JsonVectorStore(store_path).save(sample_chunks, model_id="model-a")

        index = JsonVectorStore(store_path).load(expected_model_id="model-a")

        assert snapshot.chunk_count == 4
        assert index.model_id == "model-a"
        assert index.dimension == 3
        assert list(index.chunks) == sample_chunks

    def test_file_is_stamped(self, store_path: Path, sample_chunks) -> None:
        """Should write model id, dimension and count into the JSON document."""
        JsonVectorStore(store_path).save(sample_chunks, model_id="model-a")

        raw = json.loads(store_path.read_text(encoding="utf-8"))

        assert raw["model_id"] == "model-a"
        assert raw["dimension"] == 3
        assert raw["chunk_count"] == 4
        assert "created_at" in raw

    def test_no_temp_files_left(self, store_path: Path, sample_chunks) -> None:
        """Should leave only the store file after a successful write."""
        JsonVectorStore(store_path).save(sample_chunks, model_id="model-a")

        assert [path.name for path in store_path.parent.iterdir()] == ["embeddings.json"]

    def test_save_replaces_previous_store(self, store_path: Path, sample_chunks) -> None:
        """Should fully replace the previous corpus."""
        store = JsonVectorStore(store_path)
        store.save(sample_chunks, model_id="model-a")
        store.save(sample_chunks[:1], model_id="model-b")

        index = store.load()

        assert len(index) == 1
        assert index.model_id == "model-b"

    def test_mixed_dimensions_rejected(self, store_path: Path, sample_chunks, make_chunk) -> None:
        """Should refuse to persist vectors of different dimensions."""
        store = JsonVectorStore(store_path)
        store.save(sample_chunks, model_id="model-a")
        before = store_path.read_text(encoding="utf-8")

        with pytest.raises(ConsistencyError):
            store.save([*sample_chunks, make_chunk("short", [1.0, 0.0])], model_id="model-a")

        assert store_path.read_text(encoding="utf-8") == before

    def test_failed_replace_keeps_previous_store(self, store_path: Path, sample_chunks) -> None:
        """Should keep the old store and clean up when the rename fails."""
        store = JsonVectorStore(store_path)
        store.save(sample_chunks, model_id="model-a")
        before = store_path.read_text(encoding="utf-8")

        with patch("docs_rag.boundary.vdb.json_vector_store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(VectorStoreError) as exc_info:
                store.save(sample_chunks[:1], model_id="model-b")

        assert exc_info.value.details["operation"] == "save"
        assert store_path.read_text(encoding="utf-8") == before
        assert [path.name for path in store_path.parent.iterdir()] == ["embeddings.json"]

    def test_empty_store(self, store_path: Path) -> None:
        """Should round-trip an empty corpus."""
        JsonVectorStore(store_path).save([], model_id="model-a")

        index = JsonVectorStore(store_path).load()

        assert index.is_empty
        assert index.dimension == 0

    def test_model_mismatch_on_load(self, store_path: Path, sample_chunks) -> None:
        """Should raise ConsistencyError for a different model."""
        JsonVectorStore(store_path).save(sample_chunks, model_id="model-a")

        with pytest.raises(ConsistencyError) as exc_info:
            JsonVectorStore(store_path).load(expected_model_id="model-b")

        assert exc_info.value.details == {"expected": "model-a", "actual": "model-b"}

    def test_missing_file(self, store_path: Path) -> None:
        """Should raise VectorStoreError for a missing store."""
        with pytest.raises(VectorStoreError) as exc_info:
            JsonVectorStore(store_path).load()

        assert exc_info.value.details["operation"] == "load"

    def test_malformed_file(self, store_path: Path) -> None:
        """Should raise VectorStoreError for invalid JSON."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("[1, 2", encoding="utf-8")

        with pytest.raises(VectorStoreError):
            JsonVectorStore(store_path).load()

    def test_inconsistent_count_on_disk(self, store_path: Path, sample_chunks) -> None:
        """Should reject a document whose count disagrees with its chunks."""
        JsonVectorStore(store_path).save(sample_chunks, model_id="model-a")
        raw = json.loads(store_path.read_text(encoding="utf-8"))
        raw["chunk_count"] = 99
        store_path.write_text(json.dumps(raw), encoding="utf-8")

        with pytest.raises(VectorStoreError):
            JsonVectorStore(store_path).load()


class TestVectorIndex:
    """Test VectorIndex."""

    def test_is_immutable(self, sample_index: VectorIndex) -> None:
        """Should not allow reassignment."""
        with pytest.raises(AttributeError):
            sample_index.model_id = "other"

    def test_len(self, sample_index: VectorIndex) -> None:
        assert len(sample_index) == 4
        assert not sample_index.is_empty
