"""
Tests for the ingestion pipeline orchestrator.

Runs the full discover -> chunk -> embed -> save flow against a temp content
tree with a fake embedding provider.
"""

import json
from pathlib import Path

import pytest

from docs_rag.boundary.vdb import JsonVectorStore
from docs_rag.configs import EmbeddingSettings, IngestionSettings, RetrievalSettings, Settings
from docs_rag.core.exceptions import IngestionError, ProviderError
from docs_rag.core.ingestion import IngestionPipeline


@pytest.fixture
def settings(tmp_path: Path, content_root: Path, taxonomy_file: Path) -> Settings:
    """Settings pointing at the temp content tree and store."""
    return Settings(
        embedding=EmbeddingSettings(batch_size=2, batch_delay_seconds=0.0),
        ingestion=IngestionSettings(
            content_roots=[str(content_root)],
            max_chunk_size=1000,
            taxonomy_path=str(taxonomy_file),
        ),
        retrieval=RetrievalSettings(vector_store_path=str(tmp_path / "data" / "embeddings.json")),
    )


class TestIngestionPipeline:
    """Test IngestionPipeline.run."""

    def test_run_writes_stamped_store(self, settings: Settings, fake_provider) -> None:
        """Should chunk, embed and persist every readable file."""
        result = IngestionPipeline(settings=settings, provider=fake_provider).run()

        assert result.file_count == 2
        assert result.chunk_count == 2
        assert result.skipped_files == ["docs/empty.md"]
        assert result.model_id == fake_provider.model_id
        assert result.dimension == 3

        index = JsonVectorStore(result.output_path).load(expected_model_id=fake_provider.model_id)
        by_path = {chunk.source_path: chunk for chunk in index.chunks}
        fetch = by_path["examples/typescript/clients/fetch/README.md"]
        gin = by_path["examples/go/servers/gin/README.md"]

        assert fetch.metadata.framework == "fetch"
        assert fetch.title == "x402 Fetch Client"
        assert gin.metadata.language == "go"
        assert gin.metadata.role == "server"

    def test_embeds_title_prefixed_text(self, settings: Settings, fake_provider) -> None:
        """Should send 'Title: ...' formatted text to the provider."""
        IngestionPipeline(settings=settings, provider=fake_provider).run()

        texts = [text for kind, batch in fake_provider.calls if kind == "embed_batch" for text in batch]
        assert texts[0].startswith("Title: Gin Server\n\n")

    def test_explicit_roots_override_settings(
        self,
        settings: Settings,
        content_root: Path,
        fake_provider,
    ) -> None:
        """Should ingest only the roots passed to run."""
        result = IngestionPipeline(settings=settings, provider=fake_provider).run(
            [content_root / "examples" / "go"]
        )

        assert result.file_count == 1

    def test_skips_undecodable_file(self, settings: Settings, content_root: Path, fake_provider) -> None:
        """Should skip files that are not valid UTF-8."""
        (content_root / "docs" / "binary.md").write_bytes(b"\xff\xfe\xfa\x00")

        result = IngestionPipeline(settings=settings, provider=fake_provider).run()

        assert "docs/binary.md" in result.skipped_files
        assert result.file_count == 2

    def test_no_chunks_keeps_existing_store(
        self,
        settings: Settings,
        tmp_path: Path,
        fake_provider,
    ) -> None:
        """Should refuse to overwrite the store with an empty corpus."""
        store_path = Path(settings.retrieval.vector_store_path)
        store_path.parent.mkdir(parents=True)
        store_path.write_text('{"previous": true}', encoding="utf-8")
        empty_root = tmp_path / "empty"
        empty_root.mkdir()

        with pytest.raises(IngestionError):
            IngestionPipeline(settings=settings, provider=fake_provider).run([empty_root])

        assert json.loads(store_path.read_text(encoding="utf-8")) == {"previous": True}

    def test_provider_failure_writes_nothing(self, settings: Settings, provider_factory) -> None:
        """Should abort before persisting when embedding fails."""
        provider = provider_factory(error=RuntimeError("unavailable"))

        with pytest.raises(ProviderError):
            IngestionPipeline(settings=settings, provider=provider).run()

        assert not Path(settings.retrieval.vector_store_path).exists()

    def test_missing_root_raises(self, settings: Settings, tmp_path: Path, fake_provider) -> None:
        """Should raise IngestionError for a missing content root."""
        with pytest.raises(IngestionError):
            IngestionPipeline(settings=settings, provider=fake_provider).run([tmp_path / "nope"])

    def test_missing_taxonomy_raises(self, settings: Settings, tmp_path: Path, fake_provider) -> None:
        """Should fail at construction when the catalog is missing."""
        broken = settings.model_copy(
            update={"ingestion": IngestionSettings(taxonomy_path=str(tmp_path / "missing.json"))}
        )

        with pytest.raises(IngestionError):
            IngestionPipeline(settings=broken, provider=fake_provider)

    def test_collect_chunks_is_deterministic(self, settings: Settings, content_root: Path, fake_provider) -> None:
        """Should produce identical chunks on repeated runs."""
        pipeline = IngestionPipeline(settings=settings, provider=fake_provider)

        first, _, _ = pipeline.collect_chunks([content_root])
        second, _, _ = pipeline.collect_chunks([content_root])

        assert first == second
        assert fake_provider.calls == []
