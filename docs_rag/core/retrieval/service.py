"""
Relevant context service.

The public entry point of the retrieval subsystem:
get_relevant_context(query, options) -> str. Analyzes the query, runs the
intent-filtered search with its single fallback, and assembles the context.

Dependencies: All retrieval modules, configs, boundary
System role: Retrieval orchestration (coordinates only)
"""

import logging
from functools import lru_cache

from docs_rag.boundary.embeddings import EmbeddingProvider, build_embedding_provider
from docs_rag.boundary.vdb import JsonVectorStore
from docs_rag.configs import Settings, get_settings
from docs_rag.core.query_analyzer import analyze_query
from docs_rag.core.taxonomy import TaxonomyResolver, load_taxonomy
from docs_rag.core.url_mapper import ContentUrlMapper
from docs_rag.models.intent import QueryIntent
from docs_rag.models.search import SearchOptions
from docs_rag.observability.log_utils import log_retrieval

from .context_assembler import NO_CONTEXT_SENTINEL, ContextAssembler
from .fallback import FallbackOutcome, FallbackSearch
from .search_engine import SimilaritySearchEngine

logger = logging.getLogger(__name__)


class RelevantContextService:
    """Answer a question with a citation-annotated context string."""

    def __init__(
        self,
        engine: SimilaritySearchEngine,
        assembler: ContextAssembler,
        default_options: SearchOptions | None = None,
    ) -> None:
        """
        Initialize service.

        Args:
            engine: Search engine over the loaded store
            assembler: Context assembler sharing the process-wide URL mapper
            default_options: Policy used when a call passes no options
        """
        self._search = FallbackSearch(engine)
        self._assembler = assembler
        self._default_options = default_options or SearchOptions()

    @property
    def engine(self) -> SimilaritySearchEngine:
        return self._search.engine

    @property
    def default_options(self) -> SearchOptions:
        return self._default_options

    def get_relevant_context(self, query: str, options: SearchOptions | None = None) -> str:
        """
        Retrieve and render context for a question.

        Args:
            query: User question
            options: Per-call overrides (service defaults if None)

        Returns:
            str: Context blocks, or the no-content sentinel

        Raises:
            ProviderError: Query embedding failed
            ConsistencyError: Query vector does not match the store
        """
        if not query.strip():
            logger.warning(f"{__name__}:get_relevant_context - Blank query")
            return NO_CONTEXT_SENTINEL

        intent = analyze_query(query)
        outcome = self._search.search(query, intent, options or self._default_options)
        return self._render(query, intent, outcome, "get_relevant_context")

    async def aget_relevant_context(self, query: str, options: SearchOptions | None = None) -> str:
        """Awaitable variant; cancellation abandons the request without partial output."""
        if not query.strip():
            logger.warning(f"{__name__}:aget_relevant_context - Blank query")
            return NO_CONTEXT_SENTINEL

        intent = analyze_query(query)
        outcome = await self._search.asearch(query, intent, options or self._default_options)
        return self._render(query, intent, outcome, "aget_relevant_context")

    def _render(self, query: str, intent: QueryIntent, outcome: FallbackOutcome, caller: str) -> str:
        context = self._assembler.build_context(outcome.results, intent)
        log_retrieval(
            logger,
            f"{__name__}:{caller} - Context assembled",
            query=query,
            filter_by=outcome.filter_by,
            stage=outcome.stage.value,
            results=len(outcome.results),
            context_len=len(context),
        )
        return context


def build_context_service(
    settings: Settings | None = None,
    provider: EmbeddingProvider | None = None,
) -> RelevantContextService:
    """
    Wire the service once at process start.

    Loads the taxonomy and vector store, builds the single URL mapper and
    checks the store against the provider's model.

    Args:
        settings: Application settings (get_settings() if None)
        provider: Embedding provider (built from settings if None)

    Returns:
        RelevantContextService: Ready-to-use service

    Raises:
        IngestionError: Taxonomy catalog missing or malformed
        VectorStoreError: Store missing or malformed
        ConsistencyError: Store built with a different embedding model
    """
    settings = settings or get_settings()
    provider = provider or build_embedding_provider(settings.embedding)

    resolver = TaxonomyResolver(
        load_taxonomy(settings.ingestion.taxonomy_path),
        known_prefix=settings.ingestion.path_prefix,
    )
    url_mapper = ContentUrlMapper(resolver, url_prefix=settings.retrieval.url_prefix)
    index = JsonVectorStore(settings.retrieval.vector_store_path).load(
        expected_model_id=provider.model_id,
    )

    return RelevantContextService(
        engine=SimilaritySearchEngine(index, provider),
        assembler=ContextAssembler(url_mapper),
        default_options=SearchOptions(
            top_k=settings.retrieval.top_k,
            min_similarity=settings.retrieval.min_similarity,
        ),
    )


@lru_cache
def get_context_service() -> RelevantContextService:
    """Process-wide service built from get_settings() on first use."""
    return build_context_service()


def get_relevant_context(query: str, options: SearchOptions | None = None) -> str:
    """
    Module-level entry point used by the chat completion component.

    Args:
        query: User question
        options: Per-call overrides of top_k, min_similarity, filter_by

    Returns:
        str: Prompt-ready context, or the no-content sentinel
    """
    return get_context_service().get_relevant_context(query, options)
