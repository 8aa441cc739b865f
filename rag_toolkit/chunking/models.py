from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of a source document.

    ``start_index`` and ``end_index`` are a half-open range of word offsets
    (fixed-size chunking) or line offsets (semantic chunking).
    """

    text: str
    start_index: int
    end_index: int
    sequence_number: int
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "sequence_number": self.sequence_number,
            "metadata": dict(self.metadata),
        }
