"""Chunking utilities for splitting long documents before indexing.

Example: chunk a markdown guide and rank its sections
-----------------------------------------------------
```python
from rag_toolkit.chunking import chunk_fixed, chunk_semantic
from rag_toolkit.index import TfidfIndex

guide = "# Setup\nInstall the package.\n# Usage\nRun the command line tool."
index = TfidfIndex()
index.add_many(chunk_semantic(guide))
results = index.search("install")

windows = chunk_fixed(guide, chunk_size=5, overlap_size=1)
```
"""

from .fixed import chunk_fixed
from .models import Chunk
from .semantic import DEFAULT_SECTION_MARKER, chunk_semantic

__all__ = ["Chunk", "DEFAULT_SECTION_MARKER", "chunk_fixed", "chunk_semantic"]
