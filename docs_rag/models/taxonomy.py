"""
Taxonomy domain model.

Represents one curated content record from the static taxonomy catalog.

Dependencies: pydantic
System role: Canonical metadata source for ingestion and citations
"""

from pydantic import BaseModel, ConfigDict, Field


class TaxonomyItem(BaseModel):
    """Content record keyed by id; path locates it in the source tree."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1, description="Stable content identifier used in URLs")
    path: str = Field(min_length=1, description="Source path of the file or directory")
    type: str = Field(description="Content type (quickstart, example, guide, spec, ...)")
    role: str | None = Field(default=None, description="client, server, facilitator or both")
    language: str | None = Field(default=None, description="Programming language")
    framework: str | None = Field(default=None, description="Framework or library")
    complexity: str | None = Field(default=None, description="beginner, intermediate, advanced")
    title: str = Field(description="Human-readable title")
    description: str = Field(default="", description="Short summary shown to readers")
    features: list[str] = Field(default_factory=list)
    networks: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)

    @property
    def is_directory(self) -> bool:
        """True when the path names a directory (multi-file example) rather than a file."""
        last_segment = self.path.rstrip("/").rsplit("/", 1)[-1]
        return "." not in last_segment
