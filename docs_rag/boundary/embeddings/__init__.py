"""
Embedding provider boundary.

- EmbeddingProvider: capability protocol used by ingestion and search
- LangChainEmbeddingProvider: adapter over langchain_core Embeddings
"""

from docs_rag.boundary.embeddings.provider import (
    EmbeddingProvider,
    LangChainEmbeddingProvider,
    build_embedding_provider,
)

__all__ = [
    "EmbeddingProvider",
    "LangChainEmbeddingProvider",
    "build_embedding_provider",
]
