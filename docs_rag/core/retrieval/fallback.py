"""
Intent-filtered search with one bounded relaxation.

The orchestration is a two-state machine: STRICT searches with the full
intent-derived filter (type plus role/language); if that yields nothing it
moves to RELAXED, which keeps only the type constraint. RELAXED is terminal,
so there is never more than one retry. A filter passed explicitly in
SearchOptions is applied as given, with no relaxation.

Dependencies: docs_rag.core.retrieval.search_engine, docs_rag.models
System role: Recall policy on top of the similarity search engine
"""

import logging
from dataclasses import dataclass
from enum import Enum

from docs_rag.models.intent import QueryIntent
from docs_rag.models.search import SearchFilter, SearchOptions, SearchResult

from .search_engine import SimilaritySearchEngine

logger = logging.getLogger(__name__)


class SearchStage(str, Enum):
    """Stage of the fallback state machine."""

    STRICT = "strict"
    RELAXED = "relaxed"


@dataclass(frozen=True)
class FallbackOutcome:
    """Results plus the stage and filter that produced them."""

    results: list[SearchResult]
    stage: SearchStage
    filter_by: SearchFilter | None


def intent_filter(intent: QueryIntent) -> SearchFilter | None:
    """
    Strict filter derived from a query intent.

    type is "quickstart" for quickstart questions, "example" for example
    requests; role and language are added when detected.
    """
    if intent.wants_quickstart:
        content_type = "quickstart"
    elif intent.wants_examples:
        content_type = "example"
    else:
        content_type = None

    strict = SearchFilter(
        type=content_type,
        role=intent.role.value if intent.role is not None else None,
        language=intent.language,
    )
    return None if strict.is_empty() else strict


def relax(strict: SearchFilter | None) -> SearchFilter | None:
    """The single relaxation step, or None when there is nothing to drop."""
    if strict is None:
        return None
    relaxed = strict.type_only()
    return None if relaxed == strict else relaxed


class FallbackSearch:
    """Run STRICT, then at most one RELAXED pass."""

    def __init__(self, engine: SimilaritySearchEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> SimilaritySearchEngine:
        return self._engine

    def _plan(
        self,
        intent: QueryIntent,
        options: SearchOptions,
    ) -> tuple[SearchFilter | None, SearchFilter | None]:
        # A caller-supplied filter is binding: every result must match it
        if options.filter_by is not None:
            return options.filter_by, None
        strict = intent_filter(intent)
        return strict, relax(strict)

    def _needs_embedding(self, strict: SearchFilter | None, relaxed: SearchFilter | None) -> bool:
        if self._engine.candidates(strict):
            return True
        return relaxed is not None and bool(self._engine.candidates(relaxed))

    def _run_stages(
        self,
        query_vector: list[float],
        options: SearchOptions,
        strict: SearchFilter | None,
        relaxed: SearchFilter | None,
    ) -> FallbackOutcome:
        stage, active = SearchStage.STRICT, strict
        while True:
            results = self._engine.rank(query_vector, options.model_copy(update={"filter_by": active}))
            if results or stage is SearchStage.RELAXED or relaxed is None:
                break
            logger.info(
                f"{__name__}:search - No results for strict filter {strict.constraints()}, "
                f"retrying with {relaxed.constraints()}"
            )
            stage, active = SearchStage.RELAXED, relaxed

        logger.info(
            f"{__name__}:search - stage={stage.value} results={len(results)} "
            f"filter={active.constraints() if active else {}}"
        )
        return FallbackOutcome(results=results, stage=stage, filter_by=active)

    def search(self, query: str, intent: QueryIntent, options: SearchOptions) -> FallbackOutcome:
        """
        Search with the intent-derived filter and the bounded fallback.

        The query is embedded at most once.

        Args:
            query: Raw user question
            intent: analyze_query(query)
            options: top_k/min_similarity; an explicit filter_by replaces the
                intent filter and is never relaxed

        Returns:
            FallbackOutcome: Results with the stage that produced them
        """
        strict, relaxed = self._plan(intent, options)
        if not self._needs_embedding(strict, relaxed):
            return FallbackOutcome(results=[], stage=SearchStage.STRICT, filter_by=strict)
        vector = self._engine.provider.embed(query)
        return self._run_stages(vector, options, strict, relaxed)

    async def asearch(self, query: str, intent: QueryIntent, options: SearchOptions) -> FallbackOutcome:
        strict, relaxed = self._plan(intent, options)
        if not self._needs_embedding(strict, relaxed):
            return FallbackOutcome(results=[], stage=SearchStage.STRICT, filter_by=strict)
        vector = await self._engine.provider.aembed(query)
        return self._run_stages(vector, options, strict, relaxed)
