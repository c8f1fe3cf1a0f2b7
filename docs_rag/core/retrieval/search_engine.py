"""
Similarity search engine.

Ranks stored chunks against a query by cosine similarity under an exact-match
metadata filter. The engine holds only read-only state (the loaded index and
the provider), so one instance serves concurrent requests without locking.

Dependencies: docs_rag.boundary, docs_rag.models
System role: Core ranking step of retrieval
"""

import logging

from docs_rag.boundary.embeddings import EmbeddingProvider
from docs_rag.boundary.vdb import VectorIndex
from docs_rag.core.exceptions import ConsistencyError
from docs_rag.models.chunk import EmbeddedChunk
from docs_rag.models.search import SearchFilter, SearchOptions, SearchResult

from .similarity import cosine_similarity

logger = logging.getLogger(__name__)


class SimilaritySearchEngine:
    """Cosine-similarity search over a VectorIndex."""

    def __init__(self, index: VectorIndex, provider: EmbeddingProvider) -> None:
        """
        Bind the engine to a loaded index and the provider that embeds queries.

        Args:
            index: Loaded vector store
            provider: Embedding provider; must use the model the store was built with

        Raises:
            ConsistencyError: Provider model differs from the store's model
        """
        if provider.model_id != index.model_id:
            raise ConsistencyError(
                "Query embedding model does not match the vector store",
                expected=index.model_id,
                actual=provider.model_id,
            )
        self._index = index
        self._provider = provider

    @property
    def index(self) -> VectorIndex:
        return self._index

    @property
    def provider(self) -> EmbeddingProvider:
        return self._provider

    def candidates(self, filter_by: SearchFilter | None) -> list[EmbeddedChunk]:
        """Chunks whose metadata matches every field set on the filter."""
        if filter_by is None or filter_by.is_empty():
            return list(self._index.chunks)
        return [chunk for chunk in self._index.chunks if filter_by.matches(chunk.metadata)]

    def rank(self, query_vector: list[float], options: SearchOptions) -> list[SearchResult]:
        """
        Score and rank candidates against an already embedded query.

        Args:
            query_vector: Query embedding
            options: top_k, min_similarity and filter

        Returns:
            list[SearchResult]: Sorted descending, each >= min_similarity, at most top_k

        Raises:
            ConsistencyError: Query dimension differs from the store dimension
        """
        if self._index.is_empty:
            return []
        if len(query_vector) != self._index.dimension:
            raise ConsistencyError(
                "Query vector dimension does not match the vector store",
                expected=self._index.dimension,
                actual=len(query_vector),
            )

        scored = [
            (cosine_similarity(query_vector, chunk.vector), chunk)
            for chunk in self.candidates(options.filter_by)
        ]
        # list.sort is stable, so equal scores keep corpus order
        scored.sort(key=lambda pair: pair[0], reverse=True)

        results = [
            SearchResult(**dict(chunk), similarity=score)
            for score, chunk in scored
            if score >= options.min_similarity
        ]
        return results[: options.top_k]

    def search(self, query: str, options: SearchOptions | None = None) -> list[SearchResult]:
        """
        Embed the query and rank matching chunks.

        The provider is not called when no chunk passes the filter.

        Raises:
            ProviderError: Query embedding failed
            ConsistencyError: Query dimension mismatch
        """
        options = options or SearchOptions()
        if not self.candidates(options.filter_by):
            return []
        return self.rank(self._provider.embed(query), options)

    async def asearch(self, query: str, options: SearchOptions | None = None) -> list[SearchResult]:
        """Awaitable search; cancelling the awaiting task abandons the request."""
        options = options or SearchOptions()
        if not self.candidates(options.filter_by):
            return []
        return self.rank(await self._provider.aembed(query), options)
