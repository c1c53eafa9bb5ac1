"""Frequency aggregation keyed by folded codepoint sequences."""

from __future__ import annotations

from collections.abc import Sequence

from ._types import WordRecord


class FrequencyTable:
    """Counts distinct words, remembering where each was first seen.

    Records point into ``keys`` rather than copying letters; equality is
    exact codepoint-sequence equality.
    """

    __slots__ = ("_keys", "_records", "_total")

    def __init__(self, keys: Sequence[int]) -> None:
        self._keys = keys
        self._records: dict[tuple[int, ...], WordRecord] = {}
        self._total = 0

    def __len__(self) -> int:
        return len(self._records)

    def total(self) -> int:
        """Number of registered occurrences."""
        return self._total

    def register(self, start: int, length: int) -> WordRecord:
        """Count one occurrence of keys[start:start + length]."""
        if length <= 0:
            raise ValueError(f"Word length must be positive, got {length}")

        word = tuple(self._keys[start:start + length])
        self._total += 1
        record = self._records.get(word)
        if record is not None:
            record.entries += 1
            return record

        record = WordRecord(start=start, length=length)
        self._records[word] = record
        return record

    def get(self, word: Sequence[int]) -> WordRecord | None:
        return self._records.get(tuple(word))

    def records(self) -> list[WordRecord]:
        """Records in first-seen order."""
        return list(self._records.values())
