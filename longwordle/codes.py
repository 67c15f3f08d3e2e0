"""
codes.py

Letter codes and position codes: the atomic units of information a guess
can reveal.

A letter code (letter, ordinal) means "the word contains at least `ordinal`
copies of `letter`". The word "abbot" has the codes

    a1, b1, b2, o1, t1

so its second "b" is a different fact from its first. A position code
(letter, position) means "the word has `letter` at 0-based `position`".
"""

from functools import lru_cache
from typing import NamedTuple


class LetterCode(NamedTuple):
    letter: str
    ordinal: int

    def __str__(self):
        return f"{self.letter}{self.ordinal}"


class PositionCode(NamedTuple):
    letter: str
    position: int

    def __str__(self):
        return f"{self.letter}@{self.position}"


@lru_cache(maxsize=None)
def letter_codes(word: str) -> tuple[LetterCode, ...]:
    """
    Decompose a word into its letter codes.

    Codes are grouped by letter in order of first appearance, so
    letter_codes("abbot") == (a1, b1, b2, o1, t1). Words are immutable and
    the decomposition is pure, so results are cached per word.
    """
    counts = {}
    for letter in word:
        counts[letter] = counts.get(letter, 0) + 1

    return tuple(
        LetterCode(letter, ordinal)
        for letter, count in counts.items()
        for ordinal in range(1, count + 1)
    )


def position_codes(word: str) -> tuple[PositionCode, ...]:
    return tuple(PositionCode(letter, i) for i, letter in enumerate(word))


def covered_letter_codes(*words: str) -> set[LetterCode]:
    """Union of the letter codes of all given words."""
    covered = set()
    for word in words:
        covered.update(letter_codes(word))
    return covered


def covered_position_codes(*words: str) -> set[PositionCode]:
    covered = set()
    for word in words:
        covered.update(position_codes(word))
    return covered


def all_possible_codes(occurrence_table) -> list[LetterCode]:
    """
    Every letter code a corpus can contain.

    `occurrence_table` maps letter -> occurrence counts (see
    stats.build_occurrence_table); a letter whose counts have length n
    contributes codes 1..n. This bounds the exclusion walk in inference.
    """
    return [
        LetterCode(letter, i + 1)
        for letter, counts in occurrence_table.items()
        for i in range(len(counts))
    ]
