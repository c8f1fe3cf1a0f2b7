"""
docs-rag: retrieval subsystem for documentation and example content.

Turns a tree of markdown content into a searchable vector store and answers
free-text questions with a citation-annotated context block for an LLM.
"""

__version__ = "0.1.0"
