"""Command-line utilities for the text retrieval toolkit."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, List

from rag_toolkit.chunking import Chunk, chunk_fixed, chunk_semantic
from rag_toolkit.config import ToolkitConfig
from rag_toolkit.exceptions import InvalidInputError, ToolkitError
from rag_toolkit.index import TfidfIndex
from rag_toolkit.vectorize import tokenize


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:  # pragma: no cover - user input validation
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("Value must be a positive integer")
    return number


def _add_chunking_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strategy",
        choices=("fixed", "semantic"),
        default="semantic",
        help="Split by fixed-size word windows or by header-delimited sections",
    )
    parser.add_argument(
        "--size", type=_positive_int, default=None, help="Words per fixed-size chunk"
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=None,
        help="Words shared by consecutive fixed-size chunks "
        "(defaults to the configured overlap, capped below --size)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Utilities for TF-IDF text retrieval")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default=None,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chunk = subparsers.add_parser("chunk", help="Split a text file into chunks")
    chunk.add_argument("path", type=Path, help="Text or markdown file to split")
    _add_chunking_arguments(chunk)
    chunk.add_argument("--json", action="store_true", help="Emit chunks as a JSON array")

    search = subparsers.add_parser("search", help="Rank chunks of text files against a query")
    search.add_argument("query", help="Free-text query")
    search.add_argument("paths", type=Path, nargs="+", help="Files to chunk and index")
    _add_chunking_arguments(search)
    search.add_argument(
        "-k", type=_positive_int, default=None, help="Number of results to print"
    )

    tokens = subparsers.add_parser("tokenize", help="Print the tokens of a string")
    tokens.add_argument("text", help="Text to tokenize")

    return parser


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidInputError(f"Cannot read {path}: {exc}") from exc


def _chunk_file(path: Path, args: argparse.Namespace, config: ToolkitConfig) -> List[Chunk]:
    text = _read_text(path)
    if args.strategy == "semantic":
        chunks = chunk_semantic(text, marker=config.section_marker)
    else:
        size = args.size if args.size is not None else config.chunk_size
        if args.overlap is not None:
            overlap = args.overlap
        else:
            overlap = min(config.chunk_overlap, size - 1)
        chunks = chunk_fixed(text, size, overlap)

    return [
        dataclasses.replace(chunk, metadata={**chunk.metadata, "source": str(path)})
        for chunk in chunks
    ]


def _run_chunk(args: argparse.Namespace, config: ToolkitConfig) -> None:
    chunks = _chunk_file(args.path, args, config)
    if args.json:
        print(json.dumps([chunk.to_dict() for chunk in chunks], indent=2))
        return

    for chunk in chunks:
        print(f"--- chunk {chunk.sequence_number} [{chunk.start_index}:{chunk.end_index}]")
        print(chunk.text)


def _run_search(args: argparse.Namespace, config: ToolkitConfig) -> None:
    index = TfidfIndex()
    for path in args.paths:
        index.add_many(_chunk_file(path, args, config))

    k = args.k if args.k is not None else config.top_k
    results = index.search(args.query, k=k)
    if not results:
        print("No matching chunks.")
        return

    for rank, (chunk, score) in enumerate(results, start=1):
        source = chunk.metadata.get("source", "?")
        print(f"{rank}. {score:.4f} {source} #{chunk.sequence_number}")
        print(f"   {chunk.text[:200]}")


def _run_tokenize(args: argparse.Namespace, config: ToolkitConfig) -> None:
    for token in tokenize(args.text):
        print(token)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = ToolkitConfig()
    logging.basicConfig(level=args.log_level or config.log_level)

    commands: dict[str, Any] = {
        "chunk": _run_chunk,
        "search": _run_search,
        "tokenize": _run_tokenize,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.error("Unknown command")
        return 1

    try:
        handler(args, config)
    except ToolkitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
