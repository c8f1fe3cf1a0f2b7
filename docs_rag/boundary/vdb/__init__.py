"""
Vector store boundary layer.

- JsonVectorStore: flat JSON snapshot persistence with atomic replace
- VectorIndex: read-only loaded view used by the search engine
"""

from docs_rag.boundary.vdb.json_vector_store import JsonVectorStore, VectorIndex

__all__ = ["JsonVectorStore", "VectorIndex"]
