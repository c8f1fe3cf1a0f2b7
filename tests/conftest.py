"""
Shared test fixtures and configuration for entire test suite.

Provides: Fake embedding provider, sample taxonomy, resolver/URL mapper,
chunk factories, temp content trees and stores
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import json
from pathlib import Path

import pytest

from docs_rag.boundary.vdb import VectorIndex
from docs_rag.core.taxonomy import TaxonomyResolver
from docs_rag.core.url_mapper import ContentUrlMapper
from docs_rag.models.chunk import ChunkMetadata, EmbeddedChunk
from docs_rag.models.taxonomy import TaxonomyItem

FAKE_MODEL_ID = "fake-embedding-model"


class FakeEmbeddingProvider:
    """
    Deterministic in-memory EmbeddingProvider.

    Texts listed in `vectors` get that vector; every other text gets `default`.
    Every call is recorded in `calls`.
    """

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        default: list[float] | None = None,
        model_id: str = FAKE_MODEL_ID,
        error: Exception | None = None,
    ) -> None:
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0, 0.0, 0.0]
        self.error = error
        self.calls: list[tuple[str, object]] = []
        self._model_id = model_id

    @property
    def model_id(self) -> str:
        return self._model_id

    def _lookup(self, text: str) -> list[float]:
        return list(self.vectors.get(text, self.default))

    def embed(self, text: str) -> list[float]:
        self.calls.append(("embed", text))
        if self.error is not None:
            raise self.error
        return self._lookup(text)

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(("embed_batch", list(texts)))
        if self.error is not None:
            raise self.error
        return [self._lookup(text) for text in texts]

    async def aembed(self, text: str) -> list[float]:
        self.calls.append(("aembed", text))
        if self.error is not None:
            raise self.error
        return self._lookup(text)


def make_embedded_chunk(
    chunk_id: str,
    vector: list[float],
    source_path: str = "docs/guide.md",
    title: str | None = None,
    text: str | None = None,
    chunk_index: int = 0,
    **metadata,
) -> EmbeddedChunk:
    """Build an EmbeddedChunk with sensible defaults."""
    return EmbeddedChunk(
        id=chunk_id,
        title=title or chunk_id,
        source_path=source_path,
        chunk_index=chunk_index,
        text=text or f"Text of {chunk_id}",
        metadata=ChunkMetadata(**metadata),
        vector=vector,
    )


TAXONOMY_ENTRIES = [
    {
        "id": "ts-client-fetch",
        "path": "examples/typescript/clients/fetch",
        "type": "example",
        "role": "client",
        "language": "typescript",
        "framework": "fetch",
        "complexity": "beginner",
        "title": "Fetch Client Example",
        "description": "Pay for a protected resource with fetch",
        "files": ["index.ts", "README.md"],
    },
    {
        "id": "ts-server-express",
        "path": "examples/typescript/servers/express",
        "type": "example",
        "role": "server",
        "language": "typescript",
        "framework": "express",
        "complexity": "beginner",
        "title": "Express Server Example",
    },
    {
        "id": "quickstart-sellers",
        "path": "docs/getting-started/quickstart-for-sellers.md",
        "type": "quickstart",
        "role": "server",
        "title": "Quickstart for Sellers",
    },
    {
        "id": "protocol-overview",
        "path": "docs/core-concepts/overview.md",
        "type": "guide",
        "title": "Protocol Overview",
    },
]


@pytest.fixture
def taxonomy_items() -> list[TaxonomyItem]:
    """Provide sample taxonomy items."""
    return [TaxonomyItem.model_validate(entry) for entry in TAXONOMY_ENTRIES]


@pytest.fixture
def taxonomy_file(tmp_path: Path) -> Path:
    """Write the sample catalog in its full document form."""
    path = tmp_path / "content-taxonomy.json"
    path.write_text(json.dumps({"version": "1", "content_map": TAXONOMY_ENTRIES}), encoding="utf-8")
    return path


@pytest.fixture
def resolver(taxonomy_items: list[TaxonomyItem]) -> TaxonomyResolver:
    """Provide resolver over the sample taxonomy."""
    return TaxonomyResolver(taxonomy_items)


@pytest.fixture
def url_mapper(resolver: TaxonomyResolver) -> ContentUrlMapper:
    """Provide URL mapper over the sample taxonomy."""
    return ContentUrlMapper(resolver)


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    """Provide fake provider returning [1, 0, 0] for every text."""
    return FakeEmbeddingProvider()


@pytest.fixture
def sample_chunks() -> list[EmbeddedChunk]:
    """
    Provide a small corpus in 3 dimensions.

    Similarity to the query [1, 0, 0]: fetch 1.0, express 0.8, quickstart 0.6,
    overview 0.0.
    """
    return [
        make_embedded_chunk(
            "fetch_chunk_0",
            [1.0, 0.0, 0.0],
            source_path="examples/typescript/clients/fetch/README.md",
            title="x402 Fetch Client",
            text="Wrap fetch with the payment handler.",
            type="example",
            role="client",
            language="typescript",
            framework="fetch",
        ),
        make_embedded_chunk(
            "express_chunk_0",
            [0.8, 0.6, 0.0],
            source_path="examples/typescript/servers/express/README.md",
            title="Express Server",
            type="example",
            role="server",
            language="typescript",
            framework="express",
        ),
        make_embedded_chunk(
            "quickstart_chunk_0",
            [0.6, 0.8, 0.0],
            source_path="docs/getting-started/quickstart-for-sellers.md",
            title="Quickstart for Sellers",
            type="quickstart",
            role="server",
        ),
        make_embedded_chunk(
            "overview_chunk_0",
            [0.0, 0.0, 1.0],
            source_path="docs/core-concepts/overview.md",
            title="Overview",
            type="guide",
        ),
    ]


@pytest.fixture
def sample_index(sample_chunks: list[EmbeddedChunk]) -> VectorIndex:
    """Provide loaded index over sample_chunks."""
    return VectorIndex(model_id=FAKE_MODEL_ID, dimension=3, chunks=tuple(sample_chunks))


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """
    Create a content tree.

    Contains one taxonomy-mapped example, one heuristic-only example,
    an empty file, a hidden directory and a non-markdown file.
    """
    root = tmp_path / "content"
    fetch_dir = root / "examples" / "typescript" / "clients" / "fetch"
    fetch_dir.mkdir(parents=True)
    (fetch_dir / "README.md").write_text(
        "# x402 Fetch Client\n\nWrap fetch with the payment handler.\n\nThen call the API.",
        encoding="utf-8",
    )
    (fetch_dir / "index.ts").write_text("export {}", encoding="utf-8")

    gin_dir = root / "examples" / "go" / "servers" / "gin"
    gin_dir.mkdir(parents=True)
    (gin_dir / "README.md").write_text("# Gin Server\n\nProtect a route.", encoding="utf-8")

    (root / "docs").mkdir()
    (root / "docs" / "empty.md").write_text("  \n\n", encoding="utf-8")

    hidden = root / ".drafts"
    hidden.mkdir()
    (hidden / "secret.md").write_text("# Draft", encoding="utf-8")
    return root


@pytest.fixture
def make_chunk():
    """Provide the EmbeddedChunk factory."""
    return make_embedded_chunk


@pytest.fixture
def provider_factory():
    """Provide the FakeEmbeddingProvider class for custom vectors or errors."""
    return FakeEmbeddingProvider
