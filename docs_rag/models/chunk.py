"""
Chunk domain models.

ContentChunk is produced by ingestion; EmbeddedChunk adds the vector and is
what the vector store persists.

Dependencies: pydantic
System role: Data structures shared by ingestion, storage and search
"""

from pydantic import BaseModel, ConfigDict, Field

METADATA_FIELDS = ("type", "role", "language", "framework", "complexity")


class ChunkMetadata(BaseModel):
    """Filterable metadata attached to every chunk."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    role: str | None = None
    language: str | None = None
    framework: str | None = None
    complexity: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in METADATA_FIELDS)


class ContentChunk(BaseModel):
    """Bounded slice of a source document."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier")
    title: str = Field(description="Document title, suffixed with (part N) after the first chunk")
    source_path: str = Field(description="Path relative to its content root")
    chunk_index: int = Field(ge=0, description="0-based position within the source file")
    text: str = Field(description="Chunk text content")
    metadata: ChunkMetadata = Field(default_factory=ChunkMetadata)


class EmbeddedChunk(ContentChunk):
    """Content chunk with its embedding vector."""

    vector: list[float] = Field(description="Embedding vector (dimension fixed per store)")
