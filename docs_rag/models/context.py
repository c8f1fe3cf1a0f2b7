"""
Context API models.

Request/response bodies of POST /context.

Dependencies: pydantic
System role: HTTP contract of the retrieval subsystem
"""

from pydantic import BaseModel, Field

from docs_rag.models.search import SearchFilter


class ContextRequest(BaseModel):
    """Question to retrieve context for, with optional overrides."""

    query: str = Field(min_length=1, max_length=4000, description="User question")
    top_k: int | None = Field(default=None, ge=1, le=50, description="Override result count")
    min_similarity: float | None = Field(
        default=None,
        ge=-1.0,
        le=1.0,
        description="Override similarity floor",
    )
    filter_by: SearchFilter | None = Field(
        default=None,
        description="Explicit metadata filter; replaces the intent-derived filter and is never relaxed",
    )


class ContextResponse(BaseModel):
    """Assembled context string."""

    context: str = Field(description="Prompt-ready context or the no-content sentinel")
