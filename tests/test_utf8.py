"""Tests for the span-preserving UTF-8 decoder."""

import pytest

from freqs._errors import InvalidFileFormatError
from freqs._utf8 import decode, read_letter


def test_empty():
    text = decode(b"")
    assert text.codepoints == []
    assert text.spans == []
    assert len(text) == 0


def test_ascii():
    text = decode(b"ab\n")
    assert text.codepoints == [97, 98, 10]
    assert text.spans == [(0, 1), (1, 1), (2, 1)]


def test_two_byte():
    text = decode("я".encode("utf-8"))
    assert text.codepoints == [1103]
    assert text.spans == [(0, 2)]


def test_three_byte():
    assert decode("€".encode("utf-8")).codepoints == [0x20AC]


def test_four_byte():
    text = decode("a😀b".encode("utf-8"))
    assert text.codepoints == [97, 0x1F600, 98]
    assert text.spans == [(0, 1), (1, 4), (5, 1)]


def test_matches_builtin_codec():
    s = "Héllo, wörld! Привет, мир. € 😀 日本"
    assert decode(s.encode("utf-8")).codepoints == [ord(c) for c in s]


def test_span_round_trip():
    """Concatenating every span reproduces the buffer."""
    buf = "Съешь же ещё этих мягких французских булок\r\nvoilà".encode("utf-8")
    text = decode(buf)
    assert b"".join(buf[o:o + n] for o, n in text.spans) == buf
    assert text.source_bytes(0, len(text)) == buf


def test_source_bytes_slice():
    text = decode("xЁжy".encode("utf-8"))
    assert text.source_bytes(1, 2) == "Ёж".encode("utf-8")
    assert text.source_bytes(3, 1) == b"y"


def test_read_letter_returns_next_index():
    buf = "aж".encode("utf-8")
    assert read_letter(buf, 0) == (97, 1)
    assert read_letter(buf, 1) == (1078, 3)


def test_read_letter_past_end():
    with pytest.raises(InvalidFileFormatError):
        read_letter(b"a", 1)


def test_lone_continuation_byte():
    with pytest.raises(InvalidFileFormatError, match="Truncated"):
        decode(b"\x80")


def test_truncated_sequence():
    with pytest.raises(InvalidFileFormatError, match="offset 1"):
        decode(b"a\xe2\x82")


def test_bad_continuation_byte():
    with pytest.raises(InvalidFileFormatError, match="continuation byte 0x61"):
        decode(b"\xc3a")


def test_stray_continuation_acts_as_lead():
    """A 10xxxxxx byte is read as a lead byte using its bits 5..2."""
    text = decode(b"\x80\x80z")
    assert text.codepoints == [0, 122]
    assert text.spans == [(0, 2), (2, 1)]


def test_five_byte_sequence_accepted():
    text = decode(b"\xf8\x88\x80\x80\x80")
    assert text.codepoints == [0x200000]
    assert text.spans == [(0, 5)]


@pytest.mark.parametrize("lead", [0xFC, 0xFD, 0xFE, 0xFF, 0xBC, 0xBF])
def test_lead_without_length_bit_rejected(lead):
    with pytest.raises(InvalidFileFormatError, match="Invalid lead byte"):
        decode(bytes([lead]) + b"\x80" * 6)
