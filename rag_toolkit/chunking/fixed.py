"""Fixed-size word windows with overlap."""

from __future__ import annotations

import logging
from typing import List

from rag_toolkit.exceptions import InvalidInputError

from .models import Chunk

logger = logging.getLogger(__name__)


def chunk_fixed(text: str, chunk_size: int, overlap_size: int = 0) -> List[Chunk]:
    """Split *text* into windows of ``chunk_size`` whitespace-delimited words.

    Consecutive windows share ``overlap_size`` words. The last window may be
    shorter than ``chunk_size``; no window starts past the end of the text.
    """

    if chunk_size <= 0:
        raise InvalidInputError("chunk_size must be positive")
    if overlap_size < 0 or overlap_size >= chunk_size:
        raise InvalidInputError("overlap_size must be in the range [0, chunk_size)")

    words = text.split()
    step = chunk_size - overlap_size
    chunks: List[Chunk] = []

    start = 0
    while start < len(words):
        end = min(start + chunk_size, len(words))
        chunks.append(
            Chunk(
                text=" ".join(words[start:end]),
                start_index=start,
                end_index=end,
                sequence_number=len(chunks),
            )
        )
        if end == len(words):
            break
        start += step

    logger.debug("Split %d words into %d fixed-size chunks", len(words), len(chunks))
    return chunks


__all__ = ["chunk_fixed"]
