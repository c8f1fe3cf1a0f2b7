"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides the cached factory used by the service wiring and the API layer.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docs_rag.configs.base import BaseSettings
from docs_rag.configs.embedding import EmbeddingSettings
from docs_rag.configs.ingestion import IngestionSettings
from docs_rag.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from docs_rag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
