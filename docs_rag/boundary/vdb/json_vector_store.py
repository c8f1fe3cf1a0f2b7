"""
Flat JSON vector store.

Persists the whole corpus as one JSON snapshot stamped with the embedding
model id and dimension. Writes go to a temporary file in the same directory
that is then os.replace()d over the previous store, so an interrupted write
leaves the old store intact. Loading returns an immutable VectorIndex shared
read-only by all requests.

Dependencies: pydantic, json, tempfile, docs_rag.models
System role: Vector store persistence (ingestion writes, query path reads)
"""

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from docs_rag.core.exceptions import ConsistencyError, VectorStoreError
from docs_rag.models.chunk import EmbeddedChunk
from docs_rag.models.vector_store import VectorStoreSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VectorIndex:
    """Read-only in-memory view of a loaded store."""

    model_id: str
    dimension: int
    chunks: tuple[EmbeddedChunk, ...]

    @classmethod
    def from_snapshot(cls, snapshot: VectorStoreSnapshot) -> "VectorIndex":
        return cls(
            model_id=snapshot.model_id,
            dimension=snapshot.dimension,
            chunks=tuple(snapshot.chunks),
        )

    def __len__(self) -> int:
        return len(self.chunks)

    @property
    def is_empty(self) -> bool:
        return not self.chunks


class JsonVectorStore:
    """Load and atomically replace the JSON vector store file."""

    def __init__(self, path: str | Path) -> None:
        """
        Initialize store location.

        Args:
            path: Path of the JSON snapshot
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, chunks: Sequence[EmbeddedChunk], model_id: str) -> VectorStoreSnapshot:
        """
        Replace the store with the given chunks.

        Args:
            chunks: Embedded chunks in corpus order
            model_id: Embedding model that produced the vectors

        Returns:
            VectorStoreSnapshot: The snapshot that was written

        Raises:
            ConsistencyError: Chunks have mixed vector dimensions
            VectorStoreError: Writing the file failed
        """
        dimension = len(chunks[0].vector) if chunks else 0
        try:
            snapshot = VectorStoreSnapshot(
                model_id=model_id,
                dimension=dimension,
                chunk_count=len(chunks),
                chunks=list(chunks),
            )
        except ValidationError as e:
            raise ConsistencyError(
                "Refusing to persist inconsistent vector store",
                expected=dimension,
                details={"errors": e.errors(include_url=False, include_input=False)},
            ) from e

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(snapshot.model_dump(mode="json"), f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.exception(f"{__name__}:save - Failed to write {self._path}")
            raise VectorStoreError(
                f"Failed to write vector store: {e}",
                operation="save",
                details={"path": str(self._path)},
            ) from e

        logger.info(
            f"{__name__}:save - Wrote {snapshot.chunk_count} chunks "
            f"(dim={dimension}, model={model_id}) to {self._path}"
        )
        return snapshot

    def load(self, expected_model_id: str | None = None) -> VectorIndex:
        """
        Load the store.

        Args:
            expected_model_id: Model the caller will embed queries with

        Returns:
            VectorIndex: Immutable index over the stored chunks

        Raises:
            VectorStoreError: File missing, unreadable or malformed
            ConsistencyError: Store was built with a different model
        """
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            snapshot = VectorStoreSnapshot.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise VectorStoreError(
                f"Failed to load vector store: {e}",
                operation="load",
                details={"path": str(self._path)},
            ) from e

        if expected_model_id is not None and snapshot.model_id != expected_model_id:
            raise ConsistencyError(
                "Vector store was built with a different embedding model",
                expected=snapshot.model_id,
                actual=expected_model_id,
            )

        logger.info(
            f"{__name__}:load - Loaded {snapshot.chunk_count} chunks "
            f"(dim={snapshot.dimension}, model={snapshot.model_id})"
        )
        return VectorIndex.from_snapshot(snapshot)
