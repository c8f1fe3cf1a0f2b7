"""
Ingestion result model.

Dependencies: pydantic
System role: Return type for IngestionPipeline.run()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Outcome of one ingestion run."""

    file_count: int = Field(description="Number of source files chunked")
    chunk_count: int = Field(description="Number of chunks embedded and persisted")
    skipped_files: list[str] = Field(default_factory=list, description="Unreadable or empty files")
    output_path: str = Field(description="Path of the written vector store")
    model_id: str = Field(description="Embedding model stamped into the store")
    dimension: int = Field(description="Vector dimension of the store")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
