from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from rag_toolkit.exceptions import DimensionMismatchError, InvalidInputError


def _as_arrays(a: Sequence[float], b: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.ndim != 1 or right.ndim != 1:
        raise InvalidInputError("Similarity functions expect one-dimensional vectors")
    if left.shape[0] != right.shape[0]:
        raise DimensionMismatchError(left.shape[0], right.shape[0])
    return left, right


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the cosine of the angle between *a* and *b*.

    A zero vector scores 0.0 against everything, including another zero vector.
    """

    left, right = _as_arrays(a, b)
    magnitude_a = float(np.linalg.norm(left))
    magnitude_b = float(np.linalg.norm(right))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0

    score = float(np.dot(left, right)) / (magnitude_a * magnitude_b)
    # Rounding can push parallel vectors slightly past 1.
    return max(-1.0, min(1.0, score))


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    left, right = _as_arrays(a, b)
    return float(np.linalg.norm(left - right))


__all__ = ["cosine_similarity", "euclidean_distance"]
