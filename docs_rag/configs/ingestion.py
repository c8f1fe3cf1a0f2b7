"""
Ingestion pipeline configuration settings.

Provides environment-based configuration for discovery, chunking and the
taxonomy catalog used to attach metadata.

Dependencies: pydantic, pydantic_settings
System role: Offline ingestion configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docs_rag.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Settings for the content ingestion batch job."""

    model_config = SettingsConfigDict(
        env_prefix="INGESTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    content_roots: list[str] = Field(
        default=["./content"],
        description="Source trees walked for content files",
    )
    file_extension: str = Field(
        default=".md",
        description="Only files with this extension are ingested",
    )
    max_chunk_size: int = Field(
        default=1000,
        ge=1,
        description="Maximum chunk size in characters",
    )
    taxonomy_path: str = Field(
        default="./content-taxonomy.json",
        description="Path to the static taxonomy catalog (JSON)",
    )
    path_prefix: str = Field(
        default="content/",
        description="Known path prefix toggled when matching taxonomy paths",
    )
