"""
Query-time retrieval.

Similarity search, intent-filtered fallback and context assembly behind
RelevantContextService.get_relevant_context.
"""

from .context_assembler import BLOCK_SEPARATOR, NO_CONTEXT_SENTINEL, ContextAssembler
from .fallback import FallbackOutcome, FallbackSearch, SearchStage, intent_filter
from .search_engine import SimilaritySearchEngine
from .service import (
    RelevantContextService,
    build_context_service,
    get_context_service,
    get_relevant_context,
)
from .similarity import cosine_similarity

__all__ = [
    "BLOCK_SEPARATOR",
    "NO_CONTEXT_SENTINEL",
    "ContextAssembler",
    "FallbackOutcome",
    "FallbackSearch",
    "SearchStage",
    "intent_filter",
    "SimilaritySearchEngine",
    "RelevantContextService",
    "build_context_service",
    "get_context_service",
    "get_relevant_context",
    "cosine_similarity",
]
