"""Data structures for freqs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Alphabet:
    upper_case_begin: int  # first uppercase codepoint
    lower_case_begin: int  # first lowercase codepoint
    lower_case_end: int    # exclusive bound for is_alpha


@dataclass(slots=True, frozen=True)
class DecodedText:
    buffer: bytes
    codepoints: list[int]
    spans: list[tuple[int, int]]  # (byte_offset, byte_length) per codepoint

    def __len__(self) -> int:
        return len(self.codepoints)

    def source_bytes(self, start: int, length: int) -> bytes:
        """Original encoded bytes of letters [start, start + length)."""
        buf = self.buffer
        return b"".join(
            buf[offset:offset + n]
            for offset, n in self.spans[start:start + length]
        )


@dataclass(slots=True)
class WordRecord:
    start: int       # index of the first letter of the first occurrence
    length: int      # letters in the word
    entries: int = 1


@dataclass(slots=True, frozen=True)
class WordCount:
    entries: int
    word: bytes            # verbatim bytes of the first occurrence
    key: tuple[int, ...]   # folded codepoints
