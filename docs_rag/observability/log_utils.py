"""
Retrieval log records.

Every retrieval log line carries the same extras: a shortened query, the
active filter as `field=value` pairs and, on success, the fallback stage and
result counts. Raw query text longer than a line and vectors never reach
the handlers.

Dependencies: logging (stdlib), docs_rag.models
System role: Structured logging for the retrieval path
"""

import logging

from docs_rag.models.search import SearchFilter

QUERY_PREVIEW_LENGTH = 80


def describe_query(query: str, max_length: int = QUERY_PREVIEW_LENGTH) -> str:
    """
    Collapse whitespace and shorten a question for a log line.

    Args:
        query: User question
        max_length: Characters kept before the length marker

    Returns:
        str: Single-line preview, e.g. "How do I pay... (212 chars)"
    """
    flat = " ".join(query.split())
    if len(flat) <= max_length:
        return flat
    return f"{flat[:max_length]}... ({len(flat)} chars)"


def describe_filter(filter_by: SearchFilter | None) -> str:
    """Render the constraining fields of a filter, or "none"."""
    if filter_by is None or filter_by.is_empty():
        return "none"
    return ",".join(f"{name}={value}" for name, value in filter_by.constraints().items())


def log_retrieval(
    logger: logging.Logger,
    message: str,
    *,
    query: str,
    filter_by: SearchFilter | None,
    stage: str,
    results: int,
    context_len: int,
) -> None:
    """
    Log one completed retrieval at INFO.

    Args:
        logger: Caller's module logger
        message: Log message
        query: User question
        filter_by: Filter of the stage that produced the results
        stage: Fallback stage name ("strict" or "relaxed")
        results: Number of chunks rendered
        context_len: Length of the assembled context
    """
    logger.info(
        message,
        extra={
            "query": describe_query(query),
            "filter": describe_filter(filter_by),
            "stage": stage,
            "results": results,
            "context_len": context_len,
        },
    )


def log_retrieval_failure(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    *,
    query: str,
    filter_by: SearchFilter | None = None,
) -> None:
    """
    Log a failed retrieval with its traceback.

    Args:
        logger: Caller's module logger
        message: Log message
        exc: Raised exception
        query: User question
        filter_by: Filter requested by the caller, if any
    """
    logger.exception(
        message,
        extra={
            "query": describe_query(query),
            "filter": describe_filter(filter_by),
            "error_type": type(exc).__name__,
        },
    )
