"""
Source discovery task.

Walks one or more content trees and collects files with the target extension.

Dependencies: os, pathlib
System role: First stage of the ingestion pipeline
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from docs_rag.core.exceptions import IngestionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A discovered file and its POSIX path relative to its content root."""

    path: Path
    relative_path: str


class DiscoveryTask:
    """Collect content files from source trees."""

    def __init__(self, extension: str = ".md") -> None:
        """
        Initialize discovery task.

        Args:
            extension: File extension to collect (with leading dot)
        """
        self._extension = extension if extension.startswith(".") else f".{extension}"

    def discover(self, roots: Iterable[str | Path]) -> list[SourceFile]:
        """
        Walk every root and return matching files.

        Hidden directories and files are skipped. Files are returned in
        root order, then sorted by relative path within each root.

        Args:
            roots: Content root directories

        Returns:
            list[SourceFile]: Discovered files

        Raises:
            IngestionError: A root does not exist or is not a directory
        """
        found: list[SourceFile] = []
        for root in roots:
            root_path = Path(root)
            if not root_path.is_dir():
                raise IngestionError("Content root is not a directory", path=str(root_path))

            in_root: list[SourceFile] = []
            for dirpath, dirnames, filenames in os.walk(root_path):
                dirnames[:] = [name for name in dirnames if not name.startswith(".")]
                for filename in filenames:
                    if filename.startswith(".") or not filename.endswith(self._extension):
                        continue
                    full_path = Path(dirpath) / filename
                    in_root.append(
                        SourceFile(
                            path=full_path,
                            relative_path=full_path.relative_to(root_path).as_posix(),
                        )
                    )
            in_root.sort(key=lambda source: source.relative_path)
            logger.info(
                f"{__name__}:discover - Found {len(in_root)} {self._extension} files in {root_path}"
            )
            found.extend(in_root)
        return found
