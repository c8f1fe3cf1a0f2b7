"""API-specific dependencies."""

from .dependencies import get_relevant_context_service

__all__ = [
    "get_relevant_context_service",
]
