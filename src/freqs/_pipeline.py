"""End-to-end word counting: decode, fold, segment, aggregate, rank."""

from __future__ import annotations

import logging
from pathlib import Path

from ._alphabet import AlphabetTable
from ._counter import FrequencyTable
from ._errors import InvalidOutputFileError
from ._loader import open_input, read_stream
from ._segmenter import iter_words
from ._types import DecodedText, WordCount
from ._utf8 import decode
from ._writer import format_line, open_output, rank, to_counts, write_counts

logger = logging.getLogger(__name__)

_DEFAULT_TABLE = AlphabetTable()


def count_text(text: DecodedText, table: AlphabetTable | None = None) -> list[WordCount]:
    """Count and rank the words of an already decoded buffer."""
    if table is None:
        table = _DEFAULT_TABLE

    keys = table.fold_all(text.codepoints)
    counter = FrequencyTable(keys)
    for start, length in iter_words(keys, table):
        counter.register(start, length)

    logger.debug(
        "Counted %d words, %d distinct", counter.total(), len(counter)
    )
    return to_counts(rank(counter.records(), keys), keys, text)


def count_words(buffer: bytes, table: AlphabetTable | None = None) -> list[WordCount]:
    """Decode a UTF-8 buffer and return its ranked word counts."""
    return count_text(decode(buffer), table)


def render(counts: list[WordCount]) -> bytes:
    """The output file contents for ``counts``."""
    return b"".join(format_line(c.entries, c.word) for c in counts)


def count_file(
    input_path: Path | str,
    output_path: Path | str,
    table: AlphabetTable | None = None,
) -> int:
    """Count words of ``input_path`` into ``output_path``.

    Returns the number of lines written. The output file is opened before
    the input is read, so on a read or decode failure it is left empty.
    """
    try:
        with open_input(input_path) as src, open_output(output_path) as dst:
            buffer = read_stream(src)
            counts = count_words(buffer, table)
            return write_counts(dst, counts)
    except OSError as exc:
        # Only a failed flush on close of the output reaches here.
        raise InvalidOutputFileError(
            f"Cannot write output file {str(output_path)!r}: {exc.strerror or exc}"
        ) from exc
