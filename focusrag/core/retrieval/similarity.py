"""
Vector similarity scoring.

Dependencies: numpy
System role: Relevance score for reranking
"""

import math
from collections.abc import Sequence

import numpy as np

from focusrag.core.exceptions import InvalidInputError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two equal-length vectors.

    Zero-magnitude (or empty) vectors and vectors with NaN or infinite
    components score 0.0. The result is clamped to [-1.0, 1.0] so floating
    point error never leaves the valid range.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1.0, 1.0]

    Raises:
        InvalidInputError: If the vectors differ in length
    """
    if len(a) != len(b):
        raise InvalidInputError(
            f"Vector length mismatch: {len(a)} != {len(b)}",
            field="vectors",
        )

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if not (math.isfinite(norm_a) and math.isfinite(norm_b)) or norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    score = float(np.dot(va, vb)) / (norm_a * norm_b)
    if not math.isfinite(score):
        return 0.0
    return max(-1.0, min(1.0, score))
