"""Freqs: case-insensitive word frequency counting over UTF-8 text."""

from __future__ import annotations

from ._alphabet import CYRILLIC, DEFAULT_ALPHABETS, LATIN, AlphabetTable
from ._errors import (
    AlphabetConfigError,
    ExitCode,
    FreqsError,
    InvalidFileFormatError,
    InvalidInputArgsCountError,
    InvalidInputFileError,
    InvalidOutputFileError,
)
from ._loader import load_alphabets, read_bytes
from ._pipeline import count_file, count_text, count_words, render
from ._types import Alphabet, DecodedText, WordCount, WordRecord
from ._utf8 import decode

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Alphabet",
    "AlphabetConfigError",
    "AlphabetTable",
    "CYRILLIC",
    "DEFAULT_ALPHABETS",
    "DecodedText",
    "ExitCode",
    "FreqsError",
    "InvalidFileFormatError",
    "InvalidInputArgsCountError",
    "InvalidInputFileError",
    "InvalidOutputFileError",
    "LATIN",
    "WordCount",
    "WordRecord",
    "count_file",
    "count_text",
    "count_words",
    "decode",
    "load_alphabets",
    "read_bytes",
    "render",
]
