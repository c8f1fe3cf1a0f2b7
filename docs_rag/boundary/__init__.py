"""
Boundary layer.

Adapters to the outside world: embedding provider and vector store file.
"""
