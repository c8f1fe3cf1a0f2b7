"""
Content ingestion pipeline.

Offline batch that turns content trees into the persisted vector store.

Dependencies: langchain_text_splitters, langchain_core, pydantic
System role: Ingestion pipeline entrypoint
"""

from .entrypoint import IngestionPipeline
from .tasks import ChunkingTask, DiscoveryTask, EmbeddingTask, MetadataTask, SourceFile

__all__ = [
    "IngestionPipeline",
    "DiscoveryTask",
    "SourceFile",
    "MetadataTask",
    "ChunkingTask",
    "EmbeddingTask",
]
