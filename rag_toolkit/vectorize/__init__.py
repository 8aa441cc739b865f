"""Tokenization, TF-IDF vectorization and vector similarity metrics."""

from .similarity import cosine_similarity, euclidean_distance
from .tfidf import (
    FitBuilder,
    TfidfVectorizer,
    Vector,
    VectorizerState,
    fit,
    transform,
    transform_many,
)
from .tokenizer import tokenize

__all__ = [
    "FitBuilder",
    "TfidfVectorizer",
    "Vector",
    "VectorizerState",
    "cosine_similarity",
    "euclidean_distance",
    "fit",
    "tokenize",
    "transform",
    "transform_many",
]
