"""
Query intent model.

Structured interpretation of a free-text question, derived per request.

Dependencies: pydantic
System role: Input to intent-driven filtering and context assembly
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Participant role a question is about."""

    CLIENT = "client"
    SERVER = "server"
    FACILITATOR = "facilitator"


class QueryIntent(BaseModel):
    """Result of analyze_query."""

    model_config = ConfigDict(frozen=True)

    wants_examples: bool = False
    wants_quickstart: bool = False
    role: Role | None = None
    language: str | None = None
    framework: str | None = None
    keywords: list[str] = Field(default_factory=list)
