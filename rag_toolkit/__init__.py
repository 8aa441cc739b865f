"""Text retrieval primitives: tokenization, TF-IDF vectors, similarity and chunking."""

from .chunking import Chunk, chunk_fixed, chunk_semantic
from .config import ToolkitConfig
from .exceptions import (
    DimensionMismatchError,
    InvalidInputError,
    NotFittedError,
    ToolkitError,
)
from .index import TfidfIndex
from .vectorize import (
    FitBuilder,
    TfidfVectorizer,
    VectorizerState,
    cosine_similarity,
    euclidean_distance,
    fit,
    tokenize,
    transform,
    transform_many,
)

__all__ = [
    "Chunk",
    "DimensionMismatchError",
    "FitBuilder",
    "InvalidInputError",
    "NotFittedError",
    "TfidfIndex",
    "TfidfVectorizer",
    "ToolkitConfig",
    "ToolkitError",
    "VectorizerState",
    "chunk_fixed",
    "chunk_semantic",
    "cosine_similarity",
    "euclidean_distance",
    "fit",
    "tokenize",
    "transform",
    "transform_many",
]
