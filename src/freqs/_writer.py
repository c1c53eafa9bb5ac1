"""Ranking and output of word counts."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import BinaryIO

from ._errors import InvalidOutputFileError
from ._types import DecodedText, WordCount, WordRecord

logger = logging.getLogger(__name__)


def rank(records: Iterable[WordRecord], keys: Sequence[int]) -> list[WordRecord]:
    """Sort by entries descending, then folded word ascending."""
    return sorted(
        records,
        key=lambda r: (-r.entries, tuple(keys[r.start:r.start + r.length])),
    )


def to_counts(
    records: Iterable[WordRecord], keys: Sequence[int], text: DecodedText
) -> list[WordCount]:
    """Resolve records into public results, keeping their order."""
    return [
        WordCount(
            entries=r.entries,
            word=text.source_bytes(r.start, r.length),
            key=tuple(keys[r.start:r.start + r.length]),
        )
        for r in records
    ]


def format_line(entries: int, word: bytes) -> bytes:
    return b"%d %s\n" % (entries, word)


def write_counts(stream: BinaryIO, counts: Iterable[WordCount]) -> int:
    """Write one line per count; returns the number of lines written."""
    n = 0
    try:
        for c in counts:
            stream.write(format_line(c.entries, c.word))
            n += 1
        stream.flush()
    except OSError as exc:
        name = getattr(stream, "name", "<stream>")
        raise InvalidOutputFileError(
            f"Cannot write output file {name!r}: {exc.strerror or exc}"
        ) from exc
    logger.debug("Wrote %d lines", n)
    return n


def open_output(path: Path | str) -> BinaryIO:
    """Open (create/truncate) the output file for binary writing."""
    try:
        return open(path, "wb")
    except OSError as exc:
        raise InvalidOutputFileError(
            f"Cannot open output file {str(path)!r}: {exc.strerror or exc}"
        ) from exc
