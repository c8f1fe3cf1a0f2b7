"""
Ingestion pipeline orchestrator.

Coordinates discovery, metadata resolution, chunking, embedding and the
atomic store write. The run is all-or-nothing: the existing store is only
replaced once every chunk has been embedded.

Dependencies: All task modules, configs, boundary.vdb
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from docs_rag.boundary.embeddings import EmbeddingProvider, build_embedding_provider
from docs_rag.boundary.vdb import JsonVectorStore
from docs_rag.configs import Settings, get_settings
from docs_rag.core.exceptions import IngestionError
from docs_rag.core.taxonomy import TaxonomyResolver, load_taxonomy
from docs_rag.models.chunk import ContentChunk
from docs_rag.models.ingestion import IngestionResult

from .tasks import ChunkingTask, DiscoveryTask, EmbeddingTask, MetadataTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate ingestion: discover -> resolve metadata -> chunk -> embed -> save."""

    def __init__(
        self,
        settings: Settings | None = None,
        provider: EmbeddingProvider | None = None,
        resolver: TaxonomyResolver | None = None,
        store: JsonVectorStore | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration and collaborators.

        Args:
            settings: Application settings (uses get_settings() if None)
            provider: Embedding provider (built from settings if None)
            resolver: Taxonomy index (loaded from settings.ingestion.taxonomy_path if None)
            store: Output store (settings.retrieval.vector_store_path if None)

        Raises:
            IngestionError: Taxonomy catalog missing or malformed
        """
        self._settings = settings or get_settings()
        ingestion = self._settings.ingestion

        self._provider = provider or build_embedding_provider(self._settings.embedding)
        if resolver is None:
            resolver = TaxonomyResolver(
                load_taxonomy(ingestion.taxonomy_path),
                known_prefix=ingestion.path_prefix,
            )
        self._store = store or JsonVectorStore(self._settings.retrieval.vector_store_path)

        self._discovery_task = DiscoveryTask(extension=ingestion.file_extension)
        self._metadata_task = MetadataTask(resolver)
        self._chunking_task = ChunkingTask(max_chunk_size=ingestion.max_chunk_size)
        self._embedding_task = EmbeddingTask(
            self._provider,
            batch_size=self._settings.embedding.batch_size,
            batch_delay_seconds=self._settings.embedding.batch_delay_seconds,
        )

    def collect_chunks(
        self,
        roots: Iterable[str | Path],
    ) -> tuple[list[ContentChunk], int, list[str]]:
        """
        Discover and chunk every source file.

        Unreadable and empty files are skipped with a warning.

        Args:
            roots: Content roots

        Returns:
            tuple: (chunks, number of files chunked, skipped file paths)
        """
        chunks: list[ContentChunk] = []
        skipped: list[str] = []
        file_count = 0

        for source in self._discovery_task.discover(roots):
            try:
                text = source.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"{__name__}:collect_chunks - Skipping unreadable {source.path}: {e}")
                skipped.append(source.relative_path)
                continue

            metadata = self._metadata_task.resolve(source.relative_path)
            file_chunks = self._chunking_task.chunk_file(source.relative_path, text, metadata)
            if not file_chunks:
                logger.warning(f"{__name__}:collect_chunks - Skipping empty {source.path}")
                skipped.append(source.relative_path)
                continue

            chunks.extend(file_chunks)
            file_count += 1

        return chunks, file_count, skipped

    def run(self, roots: Iterable[str | Path] | None = None) -> IngestionResult:
        """
        Run the full ingestion batch and replace the vector store.

        Args:
            roots: Content roots (settings.ingestion.content_roots if None)

        Returns:
            IngestionResult: Counts, output path and timing

        Raises:
            IngestionError: A root is missing or nothing could be chunked
            ProviderError: An embedding batch failed (store untouched)
            ConsistencyError: Vectors came back inconsistent (store untouched)
            VectorStoreError: Writing the store failed (previous store intact)
        """
        start_time = time.perf_counter()
        roots = list(roots if roots is not None else self._settings.ingestion.content_roots)

        chunks, file_count, skipped = self.collect_chunks(roots)
        if not chunks:
            raise IngestionError(
                "No content chunks produced; refusing to replace the vector store",
                details={"roots": [str(root) for root in roots], "skipped": len(skipped)},
            )
        logger.info(f"{__name__}:run - Created {len(chunks)} chunks from {file_count} files")

        embedded = self._embedding_task.embed(chunks)
        snapshot = self._store.save(embedded, model_id=self._provider.model_id)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return IngestionResult(
            file_count=file_count,
            chunk_count=snapshot.chunk_count,
            skipped_files=skipped,
            output_path=str(self._store.path),
            model_id=snapshot.model_id,
            dimension=snapshot.dimension,
            processing_time_ms=elapsed_ms,
        )
