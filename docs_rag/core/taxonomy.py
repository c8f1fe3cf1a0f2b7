"""
Taxonomy catalog loading and path resolution.

Builds an immutable path -> id index over the static taxonomy so that source
files discovered during ingestion, and chunk paths seen at query time, can be
traced back to their curated content record.

Dependencies: pydantic, docs_rag.models, docs_rag.core.exceptions
System role: Canonical metadata lookup for the chunker and the URL mapper
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from docs_rag.core.exceptions import IngestionError, NotFoundError
from docs_rag.models.taxonomy import TaxonomyItem

logger = logging.getLogger(__name__)

_SLASH_RUN = re.compile(r"/+")


def normalize_path(path: str) -> str:
    """Strip leading/trailing slashes and collapse internal slash runs."""
    return _SLASH_RUN.sub("/", path.strip("/"))


def directory_of(path: str) -> str:
    """Drop the last path segment (the filename)."""
    return path.rsplit("/", 1)[0] if "/" in path else ""


def load_taxonomy(taxonomy_path: str | Path) -> list[TaxonomyItem]:
    """
    Load the taxonomy catalog from JSON.

    Accepts either the full catalog document (items under "content_map") or a
    bare list of items.

    Args:
        taxonomy_path: Path to the catalog file

    Returns:
        list[TaxonomyItem]: Items in catalog order

    Raises:
        IngestionError: File unreadable, not JSON, or an entry is malformed
    """
    path = Path(taxonomy_path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise IngestionError(f"Failed to read taxonomy catalog: {e}", path=str(path)) from e

    entries = raw.get("content_map", []) if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise IngestionError("Taxonomy content_map must be a list", path=str(path))

    items: list[TaxonomyItem] = []
    for position, entry in enumerate(entries):
        try:
            items.append(TaxonomyItem.model_validate(entry))
        except ValidationError as e:
            raise IngestionError(
                "Malformed taxonomy entry",
                path=str(path),
                details={"position": position, "errors": e.errors(include_url=False)},
            ) from e

    logger.info(f"{__name__}:load_taxonomy - Loaded {len(items)} items from {path}")
    return items


class TaxonomyResolver:
    """
    Immutable index from path variants to taxonomy items.

    Safe for concurrent reads; nothing is mutated after __init__.
    """

    def __init__(self, items: Iterable[TaxonomyItem], known_prefix: str = "content/") -> None:
        """
        Build the path index.

        Args:
            items: Taxonomy items; ids must be unique
            known_prefix: Prefix toggled on and off when registering variants

        Raises:
            IngestionError: Duplicate item id
        """
        self._known_prefix = known_prefix
        by_id: dict[str, TaxonomyItem] = {}
        path_to_id: dict[str, str] = {}

        for item in items:
            if item.id in by_id:
                raise IngestionError("Duplicate taxonomy id", details={"id": item.id})
            by_id[item.id] = item
            for key in self._variants(item):
                existing = path_to_id.setdefault(key, item.id)
                if existing != item.id:
                    logger.debug(
                        f"{__name__}:__init__ - Path variant {key!r} already mapped to "
                        f"{existing}, ignoring {item.id}"
                    )

        self._items: Mapping[str, TaxonomyItem] = MappingProxyType(by_id)
        self._path_to_id: Mapping[str, str] = MappingProxyType(path_to_id)

    def _toggle_prefix(self, path: str) -> str:
        if path.startswith(self._known_prefix):
            return path[len(self._known_prefix):]
        return self._known_prefix + path

    def _variants(self, item: TaxonomyItem) -> list[str]:
        normalized = normalize_path(item.path)
        variants = [
            item.path,
            normalized,
            self._toggle_prefix(item.path),
            self._toggle_prefix(normalized),
            normalized + "/",
        ]
        if item.is_directory:
            readme = f"{normalized}/README.md"
            variants.extend([readme, self._toggle_prefix(readme)])
        return [variant for variant in variants if variant.strip("/")]

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Mapping[str, TaxonomyItem]:
        return self._items

    def get(self, item_id: str) -> TaxonomyItem | None:
        return self._items.get(item_id)

    def resolve_id(self, file_path: str) -> str | None:
        """
        Resolve a path to a taxonomy id.

        Tries exact, normalized, directory-of-file, then normalized directory.
        """
        candidates = (
            file_path,
            normalize_path(file_path),
            directory_of(file_path),
            normalize_path(directory_of(file_path)),
        )
        for candidate in candidates:
            item_id = self._path_to_id.get(candidate)
            if item_id is not None:
                return item_id
        return None

    def resolve(self, file_path: str) -> TaxonomyItem | None:
        item_id = self.resolve_id(file_path)
        return self._items[item_id] if item_id is not None else None

    def require(self, file_path: str) -> TaxonomyItem:
        """Like resolve, but raises NotFoundError on a miss."""
        item = self.resolve(file_path)
        if item is None:
            raise NotFoundError(file_path)
        return item
