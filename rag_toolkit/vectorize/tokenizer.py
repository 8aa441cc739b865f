from __future__ import annotations

import re
from typing import List

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> List[str]:
    """Lower-case *text* and split it into word tokens.

    Punctuation is replaced by a space rather than deleted, so ``"AI-based"``
    yields ``["ai", "based"]`` instead of ``["aibased"]``.
    """

    return _NON_WORD_RE.sub(" ", text.lower()).split()


__all__ = ["tokenize"]
