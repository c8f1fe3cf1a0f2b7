"""
Domain models.

Exports: TaxonomyItem, ChunkMetadata, ContentChunk, EmbeddedChunk, Role, QueryIntent,
SearchFilter, SearchOptions, SearchResult, VectorStoreSnapshot, IngestionResult,
ContextRequest, ContextResponse
"""

from docs_rag.models.chunk import ChunkMetadata, ContentChunk, EmbeddedChunk
from docs_rag.models.context import ContextRequest, ContextResponse
from docs_rag.models.ingestion import IngestionResult
from docs_rag.models.intent import QueryIntent, Role
from docs_rag.models.search import SearchFilter, SearchOptions, SearchResult
from docs_rag.models.taxonomy import TaxonomyItem
from docs_rag.models.vector_store import VectorStoreSnapshot

__all__ = [
    "TaxonomyItem",
    "ChunkMetadata",
    "ContentChunk",
    "EmbeddedChunk",
    "Role",
    "QueryIntent",
    "SearchFilter",
    "SearchOptions",
    "SearchResult",
    "VectorStoreSnapshot",
    "IngestionResult",
    "ContextRequest",
    "ContextResponse",
]
