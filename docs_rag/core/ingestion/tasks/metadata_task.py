"""
Chunk metadata resolution.

Taxonomy first: when the source path (or its directory) is a curated content
record, its type/role/language/framework/complexity are copied verbatim.
Otherwise fixed path-substring rules are applied.

Dependencies: docs_rag.core.taxonomy, docs_rag.models
System role: Metadata attachment stage of the ingestion pipeline
"""

import logging

from docs_rag.core.taxonomy import TaxonomyResolver
from docs_rag.models.chunk import ChunkMetadata

logger = logging.getLogger(__name__)

# Each table is ordered; the first substring found in "/<path>" wins.
LANGUAGE_PATH_RULES: tuple[tuple[str, str], ...] = (
    ("/typescript/", "typescript"),
    ("/go/", "go"),
    ("/python/", "python"),
    ("/java/", "java"),
)

ROLE_PATH_RULES: tuple[tuple[str, str], ...] = (
    ("/client", "client"),
    ("/server", "server"),
    ("/facilitator", "facilitator"),
)

TYPE_PATH_RULES: tuple[tuple[str, str], ...] = (
    ("quickstart", "quickstart"),
    ("/getting-started", "quickstart"),
    ("/examples/", "example"),
    ("/specs/", "spec"),
    ("/docs/", "guide"),
)


def _first_rule(rules: tuple[tuple[str, str], ...], path: str) -> str | None:
    for needle, value in rules:
        if needle in path:
            return value
    return None


def infer_metadata_from_path(relative_path: str) -> ChunkMetadata:
    """Heuristic metadata from path segments alone."""
    path = "/" + relative_path.lstrip("/")
    return ChunkMetadata(
        type=_first_rule(TYPE_PATH_RULES, path),
        role=_first_rule(ROLE_PATH_RULES, path),
        language=_first_rule(LANGUAGE_PATH_RULES, path),
    )


class MetadataTask:
    """Resolve metadata for a source file."""

    def __init__(self, resolver: TaxonomyResolver) -> None:
        self._resolver = resolver

    def resolve(self, relative_path: str) -> ChunkMetadata:
        """
        Resolve metadata for a source path.

        Args:
            relative_path: Path relative to the content root

        Returns:
            ChunkMetadata: Taxonomy metadata on a hit, path heuristics otherwise
        """
        item = self._resolver.resolve(relative_path)
        if item is not None:
            return ChunkMetadata(
                type=item.type,
                role=item.role,
                language=item.language,
                framework=item.framework,
                complexity=item.complexity,
            )

        logger.debug(f"{__name__}:resolve - No taxonomy entry for {relative_path}, using path rules")
        return infer_metadata_from_path(relative_path)
