"""
Context API endpoint.

Routes:
- POST /context - Retrieve citation-annotated context for a question

Dependencies: docs_rag.core.retrieval
System role: HTTP surface of get_relevant_context
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from docs_rag.api.deps import get_relevant_context_service
from docs_rag.core.exceptions import ConsistencyError, ProviderError
from docs_rag.core.retrieval import RelevantContextService
from docs_rag.models.context import ContextRequest, ContextResponse
from docs_rag.observability.log_utils import log_retrieval_failure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/context", tags=["context"])


@router.post("", response_model=ContextResponse)
async def retrieve_context(
    request: ContextRequest,
    service: RelevantContextService = Depends(get_relevant_context_service),
) -> ContextResponse:
    """Retrieve context for a question.

    Args:
        request: Question and optional search overrides
        service: Injected RelevantContextService

    Returns:
        ContextResponse: Assembled context

    Raises:
        HTTPException(502): Embedding provider failed
        HTTPException(500): Store/model consistency failure
    """
    overrides = request.model_dump(include={"top_k", "min_similarity", "filter_by"}, exclude_none=True)
    if "filter_by" in overrides:
        overrides["filter_by"] = request.filter_by
    options = service.default_options.model_copy(update=overrides)

    try:
        context = await service.aget_relevant_context(request.query, options)
    except ProviderError as e:
        log_retrieval_failure(
            logger,
            f"{__name__}:retrieve_context - Provider failure",
            e,
            query=request.query,
            filter_by=options.filter_by,
        )
        raise HTTPException(status_code=502, detail=e.message) from e
    except ConsistencyError as e:
        log_retrieval_failure(
            logger,
            f"{__name__}:retrieve_context - Consistency failure",
            e,
            query=request.query,
            filter_by=options.filter_by,
        )
        raise HTTPException(status_code=500, detail=e.message) from e

    return ContextResponse(context=context)
