"""
Rebuild the vector store from the content roots.

Usage:
    python -m docs_rag.scripts.generate_embeddings
    python -m docs_rag.scripts.generate_embeddings --root ./docs --root ./examples
    python -m docs_rag.scripts.generate_embeddings --output ./data/embeddings.json

Purpose:
- Discover markdown files under each content root
- Chunk, embed and stamp them with the embedding model id
- Atomically replace the JSON vector store

Exit codes: 0 on success or --help, 1 on any failure (the previous store is kept).

Dependencies: docs_rag.core.ingestion, docs_rag.observability
System role: Offline ingestion batch
"""

import logging
import sys

from docs_rag.boundary.vdb import JsonVectorStore
from docs_rag.configs import get_settings
from docs_rag.core.exceptions import DocsRagException
from docs_rag.core.ingestion import IngestionPipeline
from docs_rag.observability import configure_logging

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: python -m docs_rag.scripts.generate_embeddings "
    "[--root DIR]... [--output PATH] [--log-level LEVEL]"
)


def parse_args(argv: list[str]) -> dict:
    """
    Parse the flags accepted by the script.

    Args:
        argv: Arguments after the program name

    Returns:
        dict: roots (list[str]), output (str | None), log_level (str | None),
            help (bool, set by -h/--help; remaining flags are ignored)

    Raises:
        ValueError: Unknown flag or a flag without its value
    """
    parsed: dict = {"roots": [], "output": None, "log_level": None, "help": False}
    args = iter(argv)
    for flag in args:
        if flag in ("-h", "--help"):
            parsed["help"] = True
            return parsed
        value = next(args, None)
        if value is None:
            raise ValueError(f"{flag} requires a value")
        if flag == "--root":
            parsed["roots"].append(value)
        elif flag == "--output":
            parsed["output"] = value
        elif flag == "--log-level":
            parsed["log_level"] = value
        else:
            raise ValueError(f"Unknown flag: {flag}")
    return parsed


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        print(e)
        print(USAGE)
        return 1

    if args["help"]:
        print(USAGE)
        return 0

    configure_logging(args["log_level"])
    settings = get_settings()
    output = args["output"] or settings.retrieval.vector_store_path

    try:
        pipeline = IngestionPipeline(settings=settings, store=JsonVectorStore(output))
        result = pipeline.run(args["roots"] or None)
    except DocsRagException as e:
        logger.error(f"Ingestion failed: {e}")
        return 1

    logger.info(
        f"Wrote {result.chunk_count} chunks from {result.file_count} files to "
        f"{result.output_path} (model={result.model_id}, dim={result.dimension}, "
        f"{result.processing_time_ms:.0f} ms)"
    )
    if result.skipped_files:
        logger.warning(f"Skipped {len(result.skipped_files)} files: {result.skipped_files}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
