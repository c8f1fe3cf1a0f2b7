"""
Content URL mapping.

Maps chunk source paths to user-facing content URLs, e.g.
"examples/typescript/clients/fetch/README.md" -> "/content/ts-client-fetch".

Construct one instance at process start and pass it to the components that
cite sources.

Dependencies: docs_rag.core.taxonomy
System role: Citation URL resolution for context assembly
"""

import logging

from docs_rag.core.exceptions import NotFoundError
from docs_rag.core.taxonomy import TaxonomyResolver
from docs_rag.models.taxonomy import TaxonomyItem

logger = logging.getLogger(__name__)


class ContentUrlMapper:
    """Resolve source paths to citable content URLs."""

    def __init__(self, resolver: TaxonomyResolver, url_prefix: str = "/content/") -> None:
        """
        Initialize mapper over a built taxonomy index.

        Args:
            resolver: Taxonomy path index
            url_prefix: Prefix prepended to the content id
        """
        self._resolver = resolver
        self._url_prefix = url_prefix

    def get_content_url(self, file_path: str) -> str | None:
        """
        Convert a chunk source path to a content URL.

        Args:
            file_path: Path recorded on the chunk

        Returns:
            str | None: URL path, or None when the path is not in the taxonomy
        """
        item = self.get_content_item(file_path)
        return f"{self._url_prefix}{item.id}" if item is not None else None

    def get_title(self, file_path: str) -> str | None:
        item = self.get_content_item(file_path)
        return item.title if item is not None else None

    def get_content_item(self, file_path: str) -> TaxonomyItem | None:
        """Taxonomy item for a chunk path; an unmapped path is uncited, not an error."""
        try:
            return self._resolver.require(file_path)
        except NotFoundError as e:
            logger.debug(f"{__name__}:get_content_item - No citation for {e.details['path']}")
            return None
