"""
HTTP API layer.

FastAPI app factory and routers exposing get_relevant_context over HTTP.
"""
