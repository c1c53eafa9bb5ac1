"""Span-preserving UTF-8 decoder.

Every decoded codepoint keeps the (offset, length) of the bytes it came
from so words can be written back out verbatim.
"""

from __future__ import annotations

import logging

from ._errors import InvalidFileFormatError
from ._types import DecodedText

logger = logging.getLogger(__name__)


def _lead_byte(byte: int, offset: int) -> tuple[int, int]:
    """Interpret a lead byte, returning (total_byte_count, initial_value).

    Bit 6 is never inspected: a stray continuation byte is read as a lead
    byte whose length comes from its bits 5..2.
    """
    if byte & 0x80 == 0:
        return 1, byte

    for bit in range(5, 1, -1):
        if byte & (1 << bit) == 0:
            return 7 - bit, byte & (0xFF >> (8 - bit))

    raise InvalidFileFormatError(
        f"Invalid lead byte 0x{byte:02X} at offset {offset}"
    )


def read_letter(buffer: bytes, index: int) -> tuple[int, int]:
    """Decode one codepoint starting at ``index``.

    Returns (codepoint, next_index).
    """
    if index >= len(buffer):
        raise InvalidFileFormatError(f"Read past end of buffer at offset {index}")

    count, letter = _lead_byte(buffer[index], index)
    end = index + count
    if end > len(buffer):
        raise InvalidFileFormatError(
            f"Truncated {count}-byte sequence at offset {index}"
        )

    for pos in range(index + 1, end):
        byte = buffer[pos]
        if byte & 0xC0 != 0x80:
            raise InvalidFileFormatError(
                f"Invalid continuation byte 0x{byte:02X} at offset {pos}"
            )
        letter = (letter << 6) | (byte & 0x3F)

    return letter, end


def decode(buffer: bytes) -> DecodedText:
    """Decode a whole buffer; all-or-nothing."""
    codepoints: list[int] = []
    spans: list[tuple[int, int]] = []

    index = 0
    size = len(buffer)
    while index < size:
        letter, next_index = read_letter(buffer, index)
        codepoints.append(letter)
        spans.append((index, next_index - index))
        index = next_index

    logger.debug("Decoded %d bytes into %d letters", size, len(codepoints))
    return DecodedText(buffer=buffer, codepoints=codepoints, spans=spans)
