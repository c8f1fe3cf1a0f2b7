"""
Context assembly for the language model prompt.

Renders ranked search results as numbered source blocks. A citation line is
added only when the chunk's source path resolves to a taxonomy entry;
unresolved paths get no link rather than a guessed one.

Dependencies: docs_rag.core.url_mapper, docs_rag.models
System role: Final formatting step of retrieval
"""

import logging
from collections.abc import Sequence

from docs_rag.core.url_mapper import ContentUrlMapper
from docs_rag.models.intent import QueryIntent
from docs_rag.models.search import SearchResult

logger = logging.getLogger(__name__)

NO_CONTEXT_SENTINEL = "No relevant content found in the documentation."
BLOCK_SEPARATOR = "\n\n---\n\n"

# (metadata field, header label) in header order
HEADER_FIELDS: tuple[tuple[str, str], ...] = (
    ("role", "Role"),
    ("language", "Language"),
    ("type", "Type"),
)


class ContextAssembler:
    """Build the prompt-ready context string from search results."""

    def __init__(self, url_mapper: ContentUrlMapper) -> None:
        """
        Initialize assembler.

        Args:
            url_mapper: Shared mapper used to resolve citation URLs
        """
        self._url_mapper = url_mapper

    def header(self, position: int, result: SearchResult) -> str:
        labels = [
            f"{label}: {getattr(result.metadata, field)}"
            for field, label in HEADER_FIELDS
            if getattr(result.metadata, field)
        ]
        suffix = f" ({', '.join(labels)})" if labels else ""
        return f"[Source {position}: {result.title}{suffix}]"

    def citation(self, result: SearchResult) -> str | None:
        """Citation line, or None when the source path is not in the taxonomy."""
        url = self._url_mapper.get_content_url(result.source_path)
        if url is None:
            return None
        title = self._url_mapper.get_title(result.source_path) or result.title
        prefix = "Full example" if result.metadata.type == "example" else "Read more"
        return f"{prefix}: {title} - {url}"

    def render_block(self, position: int, result: SearchResult) -> str:
        lines = [self.header(position, result)]
        citation = self.citation(result)
        if citation is not None:
            lines.append(citation)
        lines.append(result.text)
        return "\n".join(lines)

    def build_context(
        self,
        results: Sequence[SearchResult],
        intent: QueryIntent | None = None,
    ) -> str:
        """
        Render results in rank order.

        Args:
            results: Ranked search results
            intent: Intent of the query the results answer (logged only;
                rendering depends on the results alone)

        Returns:
            str: Context blocks joined by BLOCK_SEPARATOR, or NO_CONTEXT_SENTINEL
        """
        if not results:
            return NO_CONTEXT_SENTINEL

        blocks = [self.render_block(position, result) for position, result in enumerate(results, start=1)]
        if intent is not None:
            logger.debug(
                f"{__name__}:build_context - {len(blocks)} blocks for "
                f"examples={intent.wants_examples} quickstart={intent.wants_quickstart}"
            )
        return BLOCK_SEPARATOR.join(blocks)
