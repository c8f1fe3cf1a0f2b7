"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: docs_rag.core.retrieval
System role: DI container for service injection
"""

from docs_rag.core.retrieval import RelevantContextService, get_context_service


def get_relevant_context_service() -> RelevantContextService:
    """
    Process-wide context service.

    Built once on first use; the loaded store and taxonomy are read-only and
    shared by every request.
    """
    return get_context_service()
