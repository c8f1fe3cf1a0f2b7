"""
Embedding provider configuration settings.

The model identifier configured here is stamped into every vector store built
with it and checked again when the store is queried.

Dependencies: pydantic, pydantic_settings
System role: Embedding model configuration for ingestion and query time
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docs_rag.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding model and batching configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model identifier (stamped into the vector store)",
    )
    output_dimensionality: int = Field(
        default=1024,
        ge=1,
        description="Fixed vector dimension requested from the provider",
    )
    batch_size: int = Field(
        default=100,
        ge=1,
        description="Maximum number of texts per embed_batch call",
    )
    batch_delay_seconds: float = Field(
        default=0.1,
        ge=0.0,
        description="Pause between ingestion batches to stay under rate limits",
    )
