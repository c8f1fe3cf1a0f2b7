"""
Vector similarity.

Dependencies: math (stdlib)
System role: Scoring function of the similarity search engine
"""

import math
from collections.abc import Sequence

from docs_rag.core.exceptions import ConsistencyError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity: dot(a, b) / (|a| * |b|).

    Returns 0.0 when either vector has zero norm, never NaN. The result is
    clamped to [-1, 1] to absorb floating point drift.

    Raises:
        ConsistencyError: Vectors have different dimensions
    """
    if len(a) != len(b):
        raise ConsistencyError("Cannot compare vectors of different dimension", expected=len(a), actual=len(b))

    dot = math.fsum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(math.fsum(x * x for x in a))
    norm_b = math.sqrt(math.fsum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return max(-1.0, min(1.0, dot / (norm_a * norm_b)))
