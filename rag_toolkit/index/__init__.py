"""Caller-side ranking built on the TF-IDF primitives."""

from .tfidf_index import TfidfIndex

__all__ = ["TfidfIndex"]
