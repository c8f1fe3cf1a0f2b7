"""
Embedding provider capability.

The retrieval subsystem depends only on the EmbeddingProvider protocol:
order-preserving batch embedding, single-text embedding and the model
identifier that names the embedding space. LangChainEmbeddingProvider adapts
any langchain_core Embeddings implementation and translates its failures into
ProviderError.

Dependencies: langchain_core, docs_rag.core.exceptions
System role: Boundary between docs_rag and the embedding service
"""

import logging
from typing import Protocol, runtime_checkable

from langchain_core.embeddings import Embeddings

from docs_rag.configs import EmbeddingSettings
from docs_rag.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Capability required from any embedding backend."""

    @property
    def model_id(self) -> str: ...

    def embed(self, text: str) -> list[float]: ...

    def embed_batch(self, texts: list[str]) -> list[list[float]]: ...

    async def aembed(self, text: str) -> list[float]: ...


class LangChainEmbeddingProvider:
    """EmbeddingProvider backed by a LangChain Embeddings model."""

    def __init__(self, embeddings: Embeddings, model_id: str) -> None:
        """
        Initialize provider.

        Args:
            embeddings: LangChain embeddings implementation
            model_id: Identifier of the embedding space (stamped into stores)

        Raises:
            ValueError: When model_id is empty
        """
        if not model_id:
            raise ValueError("model_id cannot be empty")
        self._embeddings = embeddings
        self._model_id = model_id

    @property
    def model_id(self) -> str:
        return self._model_id

    def embed(self, text: str) -> list[float]:
        try:
            return list(self._embeddings.embed_query(text))
        except Exception as e:
            logger.error(f"{__name__}:embed - {type(e).__name__}: {e}")
            raise ProviderError(f"Failed to embed query: {e}", model_id=self._model_id) from e

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        try:
            return [list(vector) for vector in self._embeddings.embed_documents(texts)]
        except Exception as e:
            logger.error(f"{__name__}:embed_batch - {type(e).__name__}: {e}")
            raise ProviderError(
                f"Failed to embed batch: {e}",
                model_id=self._model_id,
                details={"batch_size": len(texts)},
            ) from e

    async def aembed(self, text: str) -> list[float]:
        try:
            return list(await self._embeddings.aembed_query(text))
        except Exception as e:
            logger.error(f"{__name__}:aembed - {type(e).__name__}: {e}")
            raise ProviderError(f"Failed to embed query: {e}", model_id=self._model_id) from e


def build_embedding_provider(settings: EmbeddingSettings) -> LangChainEmbeddingProvider:
    """
    Create the default provider (Google Generative AI, fixed dimension).

    Args:
        settings: Embedding settings

    Returns:
        LangChainEmbeddingProvider: Provider stamped with settings.model_id
    """
    from docs_rag.boundary.embeddings.embeddings_wrapper import FixedDimensionEmbeddings

    embeddings = FixedDimensionEmbeddings(
        model=settings.model_id,
        output_dimensionality=settings.output_dimensionality,
    )
    return LangChainEmbeddingProvider(embeddings, model_id=settings.model_id)
