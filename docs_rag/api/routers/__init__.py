"""API routers."""

from .context import router as context_router
from .health import router as health_router

__all__ = ["context_router", "health_router"]
