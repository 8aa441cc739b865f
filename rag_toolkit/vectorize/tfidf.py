"""TF-IDF vocabulary fitting and document projection."""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from rag_toolkit.exceptions import InvalidInputError, NotFittedError

from .tokenizer import tokenize

logger = logging.getLogger(__name__)

Vector = List[float]


@dataclass(frozen=True, eq=False)
class VectorizerState:
    """Vocabulary, IDF weights and training size produced by a fit.

    The mappings are read-only views; vocabulary indices are dense and
    assigned in first-seen order.
    """

    vocabulary: Mapping[str, int]
    idf: Mapping[str, float]
    document_count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "vocabulary", MappingProxyType(dict(self.vocabulary)))
        object.__setattr__(self, "idf", MappingProxyType(dict(self.idf)))

    @property
    def vocabulary_size(self) -> int:
        return len(self.vocabulary)

    def feature_names(self) -> List[str]:
        """Return vocabulary tokens ordered by their vector index."""

        return list(self.vocabulary)

    def index_of(self, token: str) -> Optional[int]:
        return self.vocabulary.get(token)

    def idf_of(self, token: str) -> Optional[float]:
        return self.idf.get(token)


class FitBuilder:
    """Accumulate document statistics, then freeze them into a state."""

    def __init__(self) -> None:
        self._vocabulary: Dict[str, int] = {}
        self._doc_freqs: Dict[str, int] = {}
        self._document_count = 0

    @property
    def document_count(self) -> int:
        return self._document_count

    def add_document(self, text: str) -> "FitBuilder":
        # dict.fromkeys keeps first-occurrence order while dropping repeats.
        for token in dict.fromkeys(tokenize(text)):
            if token not in self._vocabulary:
                self._vocabulary[token] = len(self._vocabulary)
            self._doc_freqs[token] = self._doc_freqs.get(token, 0) + 1
        self._document_count += 1
        return self

    def add_documents(self, documents: Iterable[str]) -> "FitBuilder":
        for document in documents:
            self.add_document(document)
        return self

    def finalize(self) -> VectorizerState:
        if self._document_count == 0:
            raise InvalidInputError("Cannot fit a vectorizer on an empty corpus")

        n_docs = self._document_count
        idf: Dict[str, float] = {}
        for token in self._vocabulary:
            df = self._doc_freqs.get(token, 1)
            idf[token] = math.log((n_docs + 1) / (df + 1)) + 1

        logger.debug(
            "Fit TF-IDF vocabulary of %d tokens over %d documents",
            len(self._vocabulary),
            n_docs,
        )
        return VectorizerState(
            vocabulary=self._vocabulary, idf=idf, document_count=n_docs
        )


def fit(documents: Iterable[str]) -> VectorizerState:
    """Build a :class:`VectorizerState` from a training corpus."""

    return FitBuilder().add_documents(documents).finalize()


def transform(document: str, state: VectorizerState) -> Vector:
    """Project *document* onto the fitted vocabulary.

    Tokens missing from the vocabulary contribute nothing to the vector.
    """

    vector = [0.0] * state.vocabulary_size
    tokens = tokenize(document)
    if not tokens:
        return vector

    total = len(tokens)
    dropped = 0
    for token, count in Counter(tokens).items():
        index = state.vocabulary.get(token)
        if index is None:
            dropped += count
            continue
        vector[index] = (count / total) * state.idf[token]

    if dropped:
        logger.debug("Ignored %d out-of-vocabulary tokens of %d", dropped, total)
    return vector


def transform_many(documents: Iterable[str], state: VectorizerState) -> List[Vector]:
    return [transform(document, state) for document in documents]


class TfidfVectorizer:
    """Stateful convenience wrapper around :func:`fit` and :func:`transform`."""

    def __init__(self) -> None:
        self._state: VectorizerState | None = None

    @property
    def state(self) -> VectorizerState:
        if self._state is None:
            raise NotFittedError("TfidfVectorizer has not been fit")
        return self._state

    @property
    def is_fitted(self) -> bool:
        return self._state is not None

    def fit(self, documents: Iterable[str]) -> "TfidfVectorizer":
        self._state = fit(documents)
        return self

    def transform(self, document: str) -> Vector:
        return transform(document, self.state)

    def fit_transform(self, documents: Iterable[str]) -> List[Vector]:
        corpus = list(documents)
        self.fit(corpus)
        return transform_many(corpus, self.state)


__all__ = [
    "FitBuilder",
    "TfidfVectorizer",
    "Vector",
    "VectorizerState",
    "fit",
    "transform",
    "transform_many",
]
