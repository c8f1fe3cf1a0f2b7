"""
Task modules for the ingestion pipeline.

Exports: DiscoveryTask, SourceFile, MetadataTask, ChunkingTask, EmbeddingTask
"""

from .chunking_task import ChunkingTask
from .discovery_task import DiscoveryTask, SourceFile
from .embedding_task import EmbeddingTask, format_for_embedding
from .metadata_task import MetadataTask, infer_metadata_from_path

__all__ = [
    "DiscoveryTask",
    "SourceFile",
    "MetadataTask",
    "infer_metadata_from_path",
    "ChunkingTask",
    "EmbeddingTask",
    "format_for_embedding",
]
