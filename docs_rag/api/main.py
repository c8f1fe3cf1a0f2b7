"""
FastAPI application with assembled routers.

Dependencies: fastapi, uvicorn, docs_rag.api.routers
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from docs_rag import __version__
from docs_rag.api.deps import get_relevant_context_service
from docs_rag.observability import configure_logging
from docs_rag.observability.middleware import RequestLoggingMiddleware

from .routers import context_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load taxonomy and vector store once before serving."""
    logger = logging.getLogger("uvicorn")
    logger.info("Loading retrieval service...")
    get_relevant_context_service()
    logger.info("Retrieval service ready")
    yield


def create_app(warm_up: bool = True) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        warm_up: Build the retrieval service at startup instead of on first request

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="docs-rag retrieval API",
        description="Citation-annotated context retrieval over documentation and examples",
        version=__version__,
        lifespan=lifespan if warm_up else None,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(context_router, prefix="/api/v1")

    return app


if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "docs_rag.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
