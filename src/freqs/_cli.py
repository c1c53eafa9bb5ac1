"""Command-line entry point: ``freqs INPUT OUTPUT``."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

from ._alphabet import AlphabetTable
from ._errors import ExitCode, FreqsError, InvalidInputArgsCountError
from ._loader import load_alphabets
from ._pipeline import count_file

logger = logging.getLogger("freqs")

USAGE = "usage: freqs INPUT OUTPUT"


def _setup_logging() -> None:
    level = os.getenv("FREQS_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level if level in logging.getLevelNamesMapping() else "WARNING",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _alphabet_table() -> AlphabetTable | None:
    path = os.getenv("FREQS_ALPHABETS")
    if not path:
        return None
    return load_alphabets(path)


def run(args: Sequence[str]) -> None:
    """Run the counter for ``[input, output]``; raises FreqsError."""
    if len(args) != 2:
        raise InvalidInputArgsCountError(
            f"Expected 2 arguments, got {len(args)}. {USAGE}"
        )
    input_path, output_path = args
    table = _alphabet_table()
    n = count_file(input_path, output_path, table)
    logger.info("Wrote %d words to %s", n, output_path)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    _setup_logging()

    try:
        run(argv)
    except FreqsError as exc:
        logger.error("%s", exc)
        return int(exc.exit_code)
    return int(ExitCode.OK)
