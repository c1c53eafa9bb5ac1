"""Word segmentation over folded codepoints."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._alphabet import AlphabetTable


def iter_words(
    keys: Sequence[int], table: AlphabetTable
) -> Iterator[tuple[int, int]]:
    """Yield (start, length) for each maximal run of alphabetic letters."""
    is_alpha = table.is_alpha
    first = -1

    for index, letter in enumerate(keys):
        if is_alpha(letter):
            if first == -1:
                first = index
        elif first != -1:
            yield first, index - first
            first = -1

    if first != -1:
        yield first, len(keys) - first
