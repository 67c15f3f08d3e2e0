"""
stats.py

Corpus statistics behind the letter and position values.

Two tables are built here:

    occurrence table     letter -> [#words with >= 1 copy, >= 2 copies, ...]
    position rate table  array (MAX_POSITIONS, 26) of P(letter at position)

Both are built with numpy from a per-word letter count matrix so a corpus of
tens of thousands of words is processed in one pass.
"""

import logging
import string

import numpy as np


log = logging.getLogger(__name__)

LETTERS = string.ascii_lowercase
LETTER_INDEX = {letter: i for i, letter in enumerate(LETTERS)}

# Position tables cover indexes 0..9; later positions are never scored.
MAX_POSITIONS = 10


def letter_count_matrix(words: list[str]) -> np.ndarray:
    """
    Count every letter in every word.

    Returns an array of shape (len(words), 26) where cell [w, l] is the number
    of times letter l occurs in word w. Characters outside a..z are ignored.
    """
    matrix = np.zeros((len(words), len(LETTERS)), dtype=np.int32)
    for w, word in enumerate(words):
        for letter in word:
            idx = LETTER_INDEX.get(letter)
            if idx is not None:
                matrix[w, idx] += 1
    return matrix


def _counts_at_least(column: np.ndarray) -> list[int]:
    if column.size == 0:
        return []
    most = int(column.max())
    return [int(np.count_nonzero(column >= n)) for n in range(1, most + 1)]


def occurrence_counts(letter: str, words: list[str]) -> list[int]:
    """
    Number of words containing `letter` at least 1, 2, 3, ... times.

    Entry i counts words with at least i+1 copies. The list stops at the
    largest count any word reaches, so a letter that never occurs gives [].
    For example, 100 words with a "b", 20 with two and 5 with three gives
    [100, 20, 5].
    """
    column = np.array([word.count(letter) for word in words], dtype=np.int32)
    return _counts_at_least(column)


def build_occurrence_table(words: list[str]) -> dict[str, list[int]]:
    """Occurrence counts for every letter a..z over `words`."""
    matrix = letter_count_matrix(words)
    table = {
        letter: _counts_at_least(matrix[:, LETTER_INDEX[letter]])
        for letter in LETTERS
    }
    log.debug(
        "Built occurrence table over %d words (%d letter codes).",
        len(words),
        sum(len(counts) for counts in table.values()),
    )
    return table


def position_rates(letter: str, position: int, words: list[str]) -> float:
    """
    Fraction of `words` with `letter` at 0-based `position`.

    Words too short to have that position simply do not match.
    """
    if not words:
        return 0.0
    hits = sum(1 for word in words if position < len(word) and word[position] == letter)
    return hits / len(words)


def build_position_rate_table(words: list[str]) -> np.ndarray:
    """
    Letter rates at each position over a candidate list.

    Returns an array of shape (MAX_POSITIONS, 26); row p holds the probability
    of each letter occurring at position p in a word drawn from `words`.
    """
    counts = np.zeros((MAX_POSITIONS, len(LETTERS)), dtype=np.int64)
    for word in words:
        for position, letter in enumerate(word[:MAX_POSITIONS]):
            idx = LETTER_INDEX.get(letter)
            if idx is not None:
                counts[position, idx] += 1

    if not words:
        return counts.astype(np.float64)
    return counts / len(words)
