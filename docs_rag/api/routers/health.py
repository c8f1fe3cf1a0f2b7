"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: docs_rag.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from docs_rag.api.deps import get_relevant_context_service
from docs_rag.core.retrieval import RelevantContextService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    service: RelevantContextService = Depends(get_relevant_context_service),
) -> HealthResponse:
    """Report how many chunks the loaded store serves."""
    index = service.engine.index
    return HealthResponse(
        status="healthy",
        message=f"{len(index)} chunks loaded (model={index.model_id}, dim={index.dimension})",
    )
