"""
Embedding generation task.

Formats each chunk as "Title: <title>\n\n<text>" and embeds the corpus in
bounded, sequential batches so that output order matches input order. Any
failure aborts the run before anything is persisted.

Dependencies: docs_rag.boundary.embeddings, docs_rag.models
System role: Embedding stage of the ingestion pipeline
"""

import logging
import math
import time
from collections.abc import Sequence

from docs_rag.boundary.embeddings import EmbeddingProvider
from docs_rag.core.exceptions import ConsistencyError, ProviderError
from docs_rag.models.chunk import ContentChunk, EmbeddedChunk

logger = logging.getLogger(__name__)


def format_for_embedding(chunk: ContentChunk) -> str:
    return f"Title: {chunk.title}\n\n{chunk.text}"


class EmbeddingTask:
    """Generate embeddings for chunks through an EmbeddingProvider."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        batch_size: int = 100,
        batch_delay_seconds: float = 0.0,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            provider: Embedding capability
            batch_size: Maximum texts per embed_batch call
            batch_delay_seconds: Pause between batches (rate limiting)

        Raises:
            ValueError: When batch_size is not positive
        """
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self._provider = provider
        self._batch_size = batch_size
        self._batch_delay_seconds = batch_delay_seconds

    def embed(self, chunks: Sequence[ContentChunk]) -> list[EmbeddedChunk]:
        """
        Embed chunks in order.

        Args:
            chunks: Chunks to embed

        Returns:
            list[EmbeddedChunk]: Chunks with vectors, same order as input

        Raises:
            ProviderError: An embedding call failed
            ConsistencyError: Provider returned a wrong count or mixed dimensions
        """
        if not chunks:
            return []

        total_batches = math.ceil(len(chunks) / self._batch_size)
        embedded: list[EmbeddedChunk] = []
        dimension: int | None = None

        for batch_number, start in enumerate(range(0, len(chunks), self._batch_size), start=1):
            batch = chunks[start:start + self._batch_size]
            logger.info(f"{__name__}:embed - Processing batch {batch_number}/{total_batches}")

            try:
                vectors = self._provider.embed_batch([format_for_embedding(c) for c in batch])
            except ProviderError:
                raise
            except Exception as e:
                raise ProviderError(
                    f"Failed to generate embeddings: {e}",
                    model_id=self._provider.model_id,
                    details={"batch": batch_number},
                ) from e

            if len(vectors) != len(batch):
                raise ConsistencyError(
                    "Provider returned a different number of vectors than texts",
                    expected=len(batch),
                    actual=len(vectors),
                    details={"batch": batch_number},
                )

            for chunk, vector in zip(batch, vectors):
                if dimension is None:
                    dimension = len(vector)
                if len(vector) != dimension or dimension == 0:
                    raise ConsistencyError(
                        "Embedding dimension changed within one ingestion run",
                        expected=dimension,
                        actual=len(vector),
                        details={"chunk_id": chunk.id},
                    )
                embedded.append(EmbeddedChunk(**dict(chunk), vector=vector))

            if self._batch_delay_seconds and batch_number < total_batches:
                time.sleep(self._batch_delay_seconds)

        return embedded
