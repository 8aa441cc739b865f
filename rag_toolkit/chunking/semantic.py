"""Header-delimited section chunking for markdown-like text."""

from __future__ import annotations

import logging
from typing import List

from rag_toolkit.exceptions import InvalidInputError

from .models import Chunk

logger = logging.getLogger(__name__)

DEFAULT_SECTION_MARKER = "#"


def chunk_semantic(text: str, *, marker: str = DEFAULT_SECTION_MARKER) -> List[Chunk]:
    """Split *text* into one chunk per section between header lines.

    A header is any line starting with *marker* once surrounding whitespace is
    stripped. Header lines only delimit sections and never appear in chunk
    text; sections that are blank after trimming are skipped.
    """

    if not marker:
        raise InvalidInputError("Section marker must be a non-empty string")

    # Only "\n" ends a line; form feeds and other separators stay in the text.
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    chunks: List[Chunk] = []
    buffer: List[str] = []
    section_start = 0

    def flush(end: int) -> None:
        section_text = "\n".join(buffer).strip()
        if section_text:
            chunks.append(
                Chunk(
                    text=section_text,
                    start_index=section_start,
                    end_index=end,
                    sequence_number=len(chunks),
                )
            )

    for line_no, line in enumerate(lines):
        if line.strip().startswith(marker):
            flush(line_no)
            buffer = []
            section_start = line_no + 1
            continue
        buffer.append(line)

    flush(len(lines))

    logger.debug("Split %d lines into %d sections", len(lines), len(chunks))
    return chunks


__all__ = ["DEFAULT_SECTION_MARKER", "chunk_semantic"]
