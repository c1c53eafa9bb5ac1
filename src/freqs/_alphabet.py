"""Alphabet descriptors: letter classification and case folding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ._errors import AlphabetConfigError
from ._types import Alphabet

LATIN = Alphabet(upper_case_begin=65, lower_case_begin=97, lower_case_end=122)
CYRILLIC = Alphabet(upper_case_begin=1040, lower_case_begin=1072, lower_case_end=1104)

# Must stay sorted by upper_case_begin.
DEFAULT_ALPHABETS: tuple[Alphabet, ...] = (LATIN, CYRILLIC)


class AlphabetTable:
    """An ordered set of alphabet descriptors."""

    __slots__ = ("_alphabets",)

    def __init__(self, alphabets: Sequence[Alphabet] = DEFAULT_ALPHABETS) -> None:
        alphabets = tuple(alphabets)
        if not alphabets:
            raise AlphabetConfigError("At least one alphabet is required")

        prev: Alphabet | None = None
        for a in alphabets:
            if not (a.upper_case_begin <= a.lower_case_begin <= a.lower_case_end):
                raise AlphabetConfigError(f"Inconsistent alphabet ranges: {a}")
            if prev is not None and a.upper_case_begin < prev.upper_case_begin:
                raise AlphabetConfigError(
                    "Alphabets must be sorted by upper_case_begin: "
                    f"{a.upper_case_begin} follows {prev.upper_case_begin}"
                )
            prev = a

        self._alphabets = alphabets

    @property
    def alphabets(self) -> tuple[Alphabet, ...]:
        return self._alphabets

    def __repr__(self) -> str:
        return f"AlphabetTable({list(self._alphabets)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphabetTable):
            return NotImplemented
        return self._alphabets == other._alphabets

    def __hash__(self) -> int:
        return hash(self._alphabets)

    def is_alpha(self, letter: int) -> bool:
        """Early-exit range check over the ascending descriptors.

        Anything from an uppercase start up to (not including) the
        lowercase end counts as a letter, gap included.
        """
        for a in self._alphabets:
            if letter < a.upper_case_begin:
                return False
            if letter < a.lower_case_end:
                return True
        return False

    def fold(self, letter: int) -> int:
        """Map an uppercase codepoint onto its lowercase counterpart."""
        for a in self._alphabets:
            if a.upper_case_begin <= letter < a.lower_case_begin:
                return letter + (a.lower_case_begin - a.upper_case_begin)
        return letter

    def fold_all(self, letters: Iterable[int]) -> list[int]:
        """Fold a whole sequence into a new comparison-key list."""
        fold = self.fold
        return [fold(letter) for letter in letters]
