"""
Exception hierarchy for the docs-rag retrieval subsystem.

Every error carries a details dict so the caller can log it without parsing
the message.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across ingestion and retrieval
"""

from typing import Any


class DocsRagException(Exception):
    """Base exception for all docs-rag errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ProviderError(DocsRagException):
    """Raised when the embedding provider call fails (network, auth, rate limit)."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            model_id: Embedding model that was being called
            details: Additional context
        """
        details = details or {}
        if model_id:
            details["model_id"] = model_id
        super().__init__(message, details)


class ConsistencyError(DocsRagException):
    """Raised when vectors or models do not match the stored corpus."""

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize consistency error.

        Args:
            message: Error message
            expected: Value recorded in the store (model id or dimension)
            actual: Value observed at runtime
            details: Additional context
        """
        details = details or {}
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__(message, details)


class IngestionError(DocsRagException):
    """Raised when the ingestion batch cannot continue."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            path: Source file, root or catalog path involved
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class NotFoundError(DocsRagException):
    """Raised when a source path has no taxonomy entry."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            path: Path that could not be resolved
            details: Additional context
        """
        details = details or {}
        details["path"] = path
        super().__init__(f"No taxonomy entry for path: {path}", details)


class VectorStoreError(DocsRagException):
    """Raised when the persisted vector store cannot be read or written."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (load, save)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
