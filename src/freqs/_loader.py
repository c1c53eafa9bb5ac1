"""Input loading and alphabet table files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, BinaryIO

import msgpack

from ._alphabet import AlphabetTable
from ._errors import AlphabetConfigError, InvalidInputFileError
from ._types import Alphabet

logger = logging.getLogger(__name__)

_ALPHABET_FIELDS = ("upper_case_begin", "lower_case_begin", "lower_case_end")


def open_input(path: Path | str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise InvalidInputFileError(
            f"Cannot open input file {str(path)!r}: {exc.strerror or exc}"
        ) from exc


def read_stream(stream: BinaryIO) -> bytes:
    """Read an open binary file in full.

    The byte count must match the size the file reports; any mismatch is
    treated as a failed read.
    """
    name = getattr(stream, "name", "<stream>")
    try:
        expected = os.fstat(stream.fileno()).st_size
        data = stream.read()
    except OSError as exc:
        raise InvalidInputFileError(f"Cannot read input file {name!r}: {exc}") from exc

    got = 0 if data is None else len(data)
    if got != expected:
        kind = "Short read" if got < expected else "Size mismatch"
        raise InvalidInputFileError(
            f"{kind} from {name!r}: expected {expected} bytes, got {got}"
        )

    logger.debug("Read %d bytes from %s", got, name)
    return data


def read_bytes(path: Path | str) -> bytes:
    """Read a whole file as raw bytes; all-or-nothing."""
    with open_input(path) as f:
        return read_stream(f)


def _parse_alphabet(entry: Any, index: int) -> Alphabet:
    if isinstance(entry, dict):
        try:
            values = [entry[name] for name in _ALPHABET_FIELDS]
        except KeyError as exc:
            raise AlphabetConfigError(
                f"Alphabet #{index} is missing field {exc.args[0]!r}"
            ) from exc
    elif isinstance(entry, (list, tuple)) and len(entry) == 3:
        values = list(entry)
    else:
        raise AlphabetConfigError(
            f"Alphabet #{index} must be a 3-element array or a map, got {entry!r}"
        )

    for v in values:
        if not isinstance(v, int) or isinstance(v, bool) or v < 0:
            raise AlphabetConfigError(
                f"Alphabet #{index} has a non-codepoint value: {v!r}"
            )
    return Alphabet(*values)


def _load_payload(path: Path) -> Any:
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False)


def load_alphabets(path: Path | str) -> AlphabetTable:
    """Load an alphabet table from a JSON or msgpack file."""
    path = Path(path)
    if not path.exists():
        raise AlphabetConfigError(f"Alphabet file not found: {path}")

    try:
        payload = _load_payload(path)
    except (OSError, ValueError) as exc:
        raise AlphabetConfigError(f"Cannot parse alphabet file {path}: {exc}") from exc

    if not isinstance(payload, list):
        raise AlphabetConfigError(
            f"Alphabet file {path} must hold a list, got {type(payload).__name__}"
        )

    table = AlphabetTable([_parse_alphabet(e, i) for i, e in enumerate(payload)])
    logger.debug("Loaded %d alphabets from %s", len(table.alphabets), path)
    return table
