from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from rag_toolkit.chunking.models import Chunk
from rag_toolkit.exceptions import InvalidInputError, NotFittedError
from rag_toolkit.vectorize.similarity import cosine_similarity
from rag_toolkit.vectorize.tfidf import VectorizerState, fit, transform, transform_many

logger = logging.getLogger(__name__)


class TfidfIndex:
    """Rank chunks against a query by TF-IDF cosine similarity.

    The vocabulary is refit over every indexed chunk the first time
    :meth:`search` runs after chunks were added.
    """

    def __init__(self) -> None:
        self._chunks: List[Chunk] = []
        self._state: VectorizerState | None = None
        self._matrix: np.ndarray | None = None

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def state(self) -> VectorizerState:
        if self._state is None:
            raise NotFittedError("TfidfIndex has not been fit; call search() or refit()")
        return self._state

    def add(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)
        self._state = None
        self._matrix = None

    def add_many(self, chunks: Iterable[Chunk]) -> None:
        for chunk in chunks:
            self.add(chunk)

    def refit(self) -> VectorizerState:
        texts = [chunk.text for chunk in self._chunks]
        self._state = fit(texts)
        self._matrix = np.array(transform_many(texts, self._state), dtype=np.float64)
        logger.debug(
            "Indexed %d chunks over %d vocabulary tokens",
            len(self._chunks),
            self._state.vocabulary_size,
        )
        return self._state

    def search(self, query: str, *, k: int = 10) -> List[Tuple[Chunk, float]]:
        if k <= 0:
            raise InvalidInputError("k must be positive")
        if not query or not self._chunks:
            return []

        if self._state is None or self._matrix is None:
            self.refit()

        query_vector = transform(query, self.state)
        scores: List[Tuple[int, float]] = []
        for idx, row in enumerate(self._matrix):
            score = cosine_similarity(query_vector, row)
            if score > 0:
                scores.append((idx, score))

        # Stable sort keeps insertion order among equal scores.
        scores.sort(key=lambda item: item[1], reverse=True)
        return [(self._chunks[idx], score) for idx, score in scores[:k]]


__all__ = ["TfidfIndex"]
