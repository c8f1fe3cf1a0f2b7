"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

GoogleGenerativeAIEmbeddings ignores output_dimensionality passed to the
constructor, so every embed call forwards it explicitly. A vector store must
never mix dimensions, which makes this the default concrete backend.

Dependencies: langchain_google_genai, python-dotenv
System role: Embedding dimension consistency for the vector store
"""

import logging
from typing import List

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)
load_dotenv()


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests the configured dimension."""

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension requested on every call
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        """
        Embed chunk texts at the store dimension.

        Args:
            texts: Chunk texts, one vector each
            batch_size: Texts per API request
            task_type: Optional Gemini task type
            titles: Optional per-text titles
            output_dimensionality: Per-call dimension (configured dimension if None)

        Returns:
            List[List[float]]: One vector per text, in input order
        """
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=dim,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """
        Embed a user question at the store dimension.

        Args:
            text: Question text
            task_type: Optional Gemini task type
            title: Optional title
            output_dimensionality: Per-call dimension (configured dimension if None)

        Returns:
            List[float]: Query vector comparable with stored chunk vectors
        """
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )

    async def aembed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Awaitable embed_query; same arguments and dimension rule."""
        dim = output_dimensionality or self._output_dimensionality
        return await super().aembed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )
