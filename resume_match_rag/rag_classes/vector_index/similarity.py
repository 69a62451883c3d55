"""similarity.py
Vector similarity functions used for retrieval ranking.
"""
from typing import Sequence

import numpy as np

from resume_match_rag.exceptions import DimensionMismatchError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Normalized dot product of two vectors.

    Returns 0.0 when either vector has zero magnitude. The result is clipped
    to [-1, 1] to absorb floating point drift.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise DimensionMismatchError(
            expected=a.shape[0] if a.ndim else 0,
            actual=b.shape[0] if b.ndim else 0,
            context="cosine_similarity()"
        )

    denom = np.linalg.norm(a) * np.linalg.norm(b)
    if denom == 0:
        return 0.0
    return float(np.clip(np.dot(a, b) / denom, -1.0, 1.0))
