from pathlib import Path

import pytest

from rag_toolkit.chunking import chunk_semantic
from rag_toolkit.exceptions import InvalidInputError

FIXTURE_PATH = Path(__file__).parent.parent / "fixtures" / "docs" / "database_guide.md"


def test_headers_delimit_sections_and_are_dropped() -> None:
    chunks = chunk_semantic("# A\nfoo\n# B\nbar\nbaz")

    assert [chunk.text for chunk in chunks] == ["foo", "bar\nbaz"]
    assert [(chunk.start_index, chunk.end_index) for chunk in chunks] == [(1, 2), (3, 5)]
    assert [chunk.sequence_number for chunk in chunks] == [0, 1]


def test_text_without_headers_is_one_chunk() -> None:
    text = "\n  First line.\nSecond line.  \n"

    chunks = chunk_semantic(text)

    assert len(chunks) == 1
    assert chunks[0].text == text.strip()
    assert chunks[0].start_index == 0


def test_indented_header_is_detected() -> None:
    chunks = chunk_semantic("intro\n   ## Details\nbody")

    assert [chunk.text for chunk in chunks] == ["intro", "body"]


def test_blank_sections_between_headers_are_skipped() -> None:
    chunks = chunk_semantic("# Title\n\n## Intro\n\nHello there.\n\n## Empty\n\n")

    assert [chunk.text for chunk in chunks] == ["Hello there."]
    assert chunks[0].sequence_number == 0


def test_custom_section_marker() -> None:
    chunks = chunk_semantic("== One\nalpha\n== Two\nbeta", marker="==")

    assert [chunk.text for chunk in chunks] == ["alpha", "beta"]


def test_empty_marker_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        chunk_semantic("text", marker="")


def test_empty_text_yields_no_chunks() -> None:
    assert chunk_semantic("") == []


def test_markdown_guide_sections() -> None:
    chunks = chunk_semantic(FIXTURE_PATH.read_text(encoding="utf-8"))

    assert len(chunks) == 3
    assert chunks[0].text.startswith("This guide explains")
    assert chunks[1].text.startswith("Connection pooling improves")
    assert "pool_size" in chunks[1].text
    assert chunks[2].text.startswith("For production environments")
    for chunk in chunks:
        assert 0 <= chunk.start_index < chunk.end_index
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end_index <= current.start_index


def test_only_newlines_split_lines() -> None:
    chunks = chunk_semantic("# A\nfoo\fbar\n# B\nbaz")

    assert [chunk.text for chunk in chunks] == ["foo\fbar", "baz"]
    assert [(chunk.start_index, chunk.end_index) for chunk in chunks] == [(1, 2), (3, 4)]


def test_crlf_line_endings() -> None:
    chunks = chunk_semantic("# A\r\nfoo\r\nbar\r\n# B\r\nbaz")

    assert [chunk.text for chunk in chunks] == ["foo\nbar", "baz"]
    assert [(chunk.start_index, chunk.end_index) for chunk in chunks] == [(1, 3), (4, 5)]
