"""Freqs error types and process exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    INVALID_INPUT_ARGS_COUNT = 1
    INVALID_INPUT_FILE = 2
    INVALID_OUTPUT_FILE = 3
    INVALID_FILE_FORMAT = 4
    INVALID_CONFIG = 5


class FreqsError(Exception):
    """Base error for all freqs failures.

    Only subclasses are raised; each sets the process exit code it maps to.
    """

    exit_code: ExitCode


class InvalidInputArgsCountError(FreqsError):
    """Wrong number of command-line arguments."""

    exit_code = ExitCode.INVALID_INPUT_ARGS_COUNT


class InvalidInputFileError(FreqsError):
    """Input file could not be opened or read in full."""

    exit_code = ExitCode.INVALID_INPUT_FILE


class InvalidOutputFileError(FreqsError):
    """Output file could not be opened for writing."""

    exit_code = ExitCode.INVALID_OUTPUT_FILE


class InvalidFileFormatError(FreqsError):
    """Input bytes are not valid UTF-8."""

    exit_code = ExitCode.INVALID_FILE_FORMAT


class AlphabetConfigError(FreqsError):
    """Alphabet table is missing, malformed or out of order."""

    exit_code = ExitCode.INVALID_CONFIG
