"""
Vector store snapshot model.

The persisted store is a single JSON document stamped with the embedding
model that produced it.

Dependencies: pydantic
System role: On-disk format of the vector store
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator

from docs_rag.models.chunk import EmbeddedChunk


class VectorStoreSnapshot(BaseModel):
    """Flat, ordered collection of embedded chunks."""

    model_id: str = Field(min_length=1, description="Embedding model used to build the store")
    dimension: int = Field(ge=0, description="Vector dimension shared by every chunk (0 when empty)")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    chunk_count: int = Field(ge=0)
    chunks: list[EmbeddedChunk] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> "VectorStoreSnapshot":
        if self.chunk_count != len(self.chunks):
            raise ValueError(
                f"chunk_count {self.chunk_count} does not match {len(self.chunks)} chunks"
            )
        for chunk in self.chunks:
            if len(chunk.vector) != self.dimension:
                raise ValueError(
                    f"chunk {chunk.id} has dimension {len(chunk.vector)}, expected {self.dimension}"
                )
        return self
