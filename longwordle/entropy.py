"""
entropy.py

Turns corpus rates into information values.

The value of learning a fact with probability p is taken as

    p * log2(1 / p)

which is only the "hit" half of binary entropy: a letter that turns out to be
absent is worth nothing here. Certain and impossible facts (p <= 0, p >= 1)
are worth 0.
"""

import logging

import numpy as np

from .codes import LetterCode
from .stats import LETTERS


log = logging.getLogger(__name__)

# Learning that a letter is in the word is worth 1, learning exactly where it
# sits is worth 2. Only trio scoring mixes the two.
INCLUSION_WEIGHT = 1
POSITION_WEIGHT = 2


def entropy(p: float) -> float:
    if p <= 0 or p >= 1:
        return 0.0
    return float(p * np.log2(1 / p))


def entropy_array(probs: np.ndarray) -> np.ndarray:
    """Vectorised entropy(); saturates to 0 outside the open interval (0, 1)."""
    probs = np.asarray(probs, dtype=np.float64)
    values = np.zeros_like(probs)
    inside = (probs > 0) & (probs < 1)
    values[inside] = -probs[inside] * np.log2(probs[inside])
    return values


def build_letter_value_table(occurrence_table, corpus_size: int) -> dict[LetterCode, float]:
    """
    Score every letter code of a corpus.

    Code (c, i) is worth entropy(occurrence_table[c][i - 1] / corpus_size).
    An empty corpus has no codes.
    """
    values = {}
    if corpus_size <= 0:
        return values

    for letter in LETTERS:
        counts = occurrence_table.get(letter, [])
        if not counts:
            continue
        scores = entropy_array(np.array(counts) / corpus_size)
        for i, score in enumerate(scores):
            values[LetterCode(letter, i + 1)] = float(score)

    log.debug("Built letter value table with %d codes.", len(values))
    return values


def build_position_value_table(rate_table: np.ndarray) -> np.ndarray:
    """Entropy of every (position, letter) rate; same shape as the rate table."""
    return entropy_array(rate_table)
