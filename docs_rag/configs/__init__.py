"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from docs_rag.configs.embedding import EmbeddingSettings
from docs_rag.configs.ingestion import IngestionSettings
from docs_rag.configs.retrieval import RetrievalSettings
from docs_rag.configs.settings import Settings, get_settings

__all__ = [
    "EmbeddingSettings",
    "IngestionSettings",
    "RetrievalSettings",
    "Settings",
    "get_settings",
]
