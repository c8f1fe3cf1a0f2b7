"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits a file into chunks of at most max_chunk_size characters, preferring
paragraph boundaries, then line boundaries, then a hard character cut.
Adjacent paragraphs are merged while they fit. There is no overlap.

Dependencies: langchain_text_splitters
System role: Chunking stage of the ingestion pipeline
"""

import re
from pathlib import PurePosixPath

from langchain_text_splitters import RecursiveCharacterTextSplitter

from docs_rag.models.chunk import ChunkMetadata, ContentChunk

PARAGRAPH_LINE_CHAR_SEPARATORS = ["\n\n", "\n", ""]

_HEADING = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def extract_title(text: str, fallback: str) -> str:
    """First level-one markdown heading, or the fallback."""
    match = _HEADING.search(text)
    return match.group(1).strip() if match else fallback


def chunk_id_for(relative_path: str, chunk_index: int) -> str:
    stem = PurePosixPath(relative_path).with_suffix("").as_posix()
    return f"{stem.replace('/', '_')}_chunk_{chunk_index}"


class ChunkingTask:
    """Split source text into bounded ContentChunks."""

    def __init__(self, max_chunk_size: int = 1000) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            max_chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When max_chunk_size is not positive
        """
        if max_chunk_size < 1:
            raise ValueError("max_chunk_size must be positive")
        self._max_chunk_size = max_chunk_size
        self._splitter = RecursiveCharacterTextSplitter(
            separators=PARAGRAPH_LINE_CHAR_SEPARATORS,
            chunk_size=max_chunk_size,
            chunk_overlap=0,
            keep_separator=False,
            strip_whitespace=True,
            length_function=len,
        )

    @property
    def max_chunk_size(self) -> int:
        return self._max_chunk_size

    def split(self, text: str) -> list[str]:
        """Split text into chunk strings (empty list for blank text)."""
        if not text.strip():
            return []
        return self._splitter.split_text(text)

    def chunk_file(
        self,
        relative_path: str,
        text: str,
        metadata: ChunkMetadata,
    ) -> list[ContentChunk]:
        """
        Split one source file into chunks.

        Args:
            relative_path: Path relative to its content root
            text: File content
            metadata: Metadata shared by every chunk of the file

        Returns:
            list[ContentChunk]: Chunks in file order
        """
        title = extract_title(text, fallback=PurePosixPath(relative_path).stem)
        return [
            ContentChunk(
                id=chunk_id_for(relative_path, index),
                title=title if index == 0 else f"{title} (part {index + 1})",
                source_path=relative_path,
                chunk_index=index,
                text=piece,
                metadata=metadata,
            )
            for index, piece in enumerate(self.split(text))
        ]
