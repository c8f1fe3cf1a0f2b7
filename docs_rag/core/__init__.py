"""
Core business logic module.

Contains the exception hierarchy, taxonomy resolution, query analysis,
ingestion and retrieval.
"""

from docs_rag.core.exceptions import (
    ConsistencyError,
    DocsRagException,
    IngestionError,
    NotFoundError,
    ProviderError,
    VectorStoreError,
)

__all__ = [
    "DocsRagException",
    "ProviderError",
    "ConsistencyError",
    "IngestionError",
    "NotFoundError",
    "VectorStoreError",
]
