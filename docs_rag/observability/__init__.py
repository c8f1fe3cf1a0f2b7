"""
Observability module.

Logging configuration and retrieval log records.
"""

from docs_rag.observability.log_utils import (
    describe_filter,
    describe_query,
    log_retrieval,
    log_retrieval_failure,
)
from docs_rag.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "describe_filter",
    "describe_query",
    "log_retrieval",
    "log_retrieval_failure",
]
