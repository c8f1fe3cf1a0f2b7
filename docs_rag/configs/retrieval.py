"""
Retrieval configuration settings.

Holds the single threshold/topK policy used by every caller of
get_relevant_context unless a call overrides it explicitly.

Dependencies: pydantic, pydantic_settings
System role: Query-time retrieval configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docs_rag.configs.base import BaseSettings


class RetrievalSettings(BaseSettings):
    """Vector store location and ranking policy."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIEVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    vector_store_path: str = Field(
        default="./data/embeddings.json",
        description="Location of the persisted vector store snapshot",
    )
    top_k: int = Field(default=5, ge=1, description="Number of top results to retrieve")
    min_similarity: float = Field(
        default=0.5,
        ge=-1.0,
        le=1.0,
        description="Minimum cosine similarity for a result to be kept",
    )
    url_prefix: str = Field(
        default="/content/",
        description="Prefix of user-facing content URLs built from taxonomy ids",
    )
