"""
Search request and result models.

Dependencies: pydantic
System role: Type-safe contract of the similarity search engine
"""

from pydantic import BaseModel, ConfigDict, Field

from docs_rag.models.chunk import METADATA_FIELDS, ChunkMetadata, EmbeddedChunk


class SearchFilter(BaseModel):
    """Exact-match metadata filter; every set field must match (conjunction)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str | None = None
    role: str | None = None
    language: str | None = None
    framework: str | None = None
    complexity: str | None = None

    def constraints(self) -> dict[str, str]:
        """Return only the fields that constrain the search."""
        return {
            name: getattr(self, name)
            for name in METADATA_FIELDS
            if getattr(self, name) is not None
        }

    def is_empty(self) -> bool:
        return not self.constraints()

    def matches(self, metadata: ChunkMetadata) -> bool:
        return all(
            getattr(metadata, name) == value
            for name, value in self.constraints().items()
        )

    def type_only(self) -> "SearchFilter":
        """Relaxed variant keeping only the type constraint."""
        return SearchFilter(type=self.type)


class SearchOptions(BaseModel):
    """Per-call search options."""

    model_config = ConfigDict(frozen=True)

    top_k: int = Field(default=5, ge=1, description="Maximum number of results")
    min_similarity: float = Field(
        default=0.5,
        ge=-1.0,
        le=1.0,
        description="Results scoring below this are dropped",
    )
    filter_by: SearchFilter | None = Field(default=None, description="Metadata filter")


class SearchResult(EmbeddedChunk):
    """Embedded chunk scored against one query."""

    similarity: float = Field(description="Cosine similarity to the query (-1.0..1.0)")
