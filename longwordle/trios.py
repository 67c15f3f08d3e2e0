"""
trios.py

Budgeted search for the best three-word openings.

A trio is worth

    inclusion_score * INCLUSION_WEIGHT + position_score * POSITION_WEIGHT

where inclusion_score sums letter values over the union of the three words'
letter codes and position_score sums position values over the union of
their (letter, position) codes. Position values come from letter rates at
each position over the word list being searched.

Optimizations / limits:

1. Symmetry reduction
   Only index triples i < j < k are visited, in lexicographic order.

2. Evolving cutoff
   A running best is kept. A trio scoring below best * cutoff is not
   recorded, but the scan goes on. The best only rises, so the threshold only
   tightens: early trios were judged against a looser bar than later ones.

3. Trial budget
   The scan stops after max_trials scored trios. The full space is about
   n**3 / 6 trios, far too many for a real dictionary, so the result is the
   best of a deterministic prefix of the enumeration, not a random sample.
"""

import logging
from itertools import combinations, islice
from math import comb

from tqdm import tqdm

from .codes import covered_letter_codes, covered_position_codes
from .entropy import INCLUSION_WEIGHT, POSITION_WEIGHT, build_position_value_table
from .ranking import score_codes
from .stats import LETTER_INDEX, MAX_POSITIONS, build_position_rate_table
from .util import sort_by_value


log = logging.getLogger(__name__)

DEFAULT_CUTOFF = 0.99
DEFAULT_MAX_TRIALS = 1000**2


def build_position_values(words) -> list[list[float]]:
    """Position value table over `words` as nested lists, [position][letter]."""
    return build_position_value_table(build_position_rate_table(list(words))).tolist()


def score_positions(position_values, codes) -> float:
    score = 0.0
    for letter, position in codes:
        idx = LETTER_INDEX.get(letter)
        if idx is None or position >= MAX_POSITIONS:
            continue
        score += position_values[position][idx]
    return score


def score_word_trio(context, position_values, word1, word2, word3) -> float:
    inclusion_score = score_codes(context, covered_letter_codes(word1, word2, word3))
    position_score = score_positions(
        position_values, covered_position_codes(word1, word2, word3)
    )
    return inclusion_score * INCLUSION_WEIGHT + position_score * POSITION_WEIGHT


class TrioReducer:
    """
    Folds a stream of (key, score) pairs into pruned results.

    State is (best, results, trials). Each score first raises best if it is
    higher, then is kept only when score >= best * cutoff against the best
    as it stands at that moment.
    """

    def __init__(self, cutoff=DEFAULT_CUTOFF):
        if not 0 < cutoff <= 1:
            raise ValueError(f"cutoff must be in (0, 1], got {cutoff}")
        self.cutoff = cutoff
        self.best = 0.0
        self.trials = 0
        self.results = {}

    def feed(self, key, score) -> bool:
        """Consume one scored trio; return True if it was recorded."""
        self.trials += 1
        if score > self.best:
            self.best = score
        if score < self.best * self.cutoff:
            return False
        self.results[key] = score
        return True

    def ranking(self):
        return sort_by_value(self.results)


def iter_trios(words, max_trials):
    """Index-ordered trios of `words`, at most `max_trials` of them."""
    return islice(combinations(words, 3), max_trials)


def rank_word_trios(
    context,
    words,
    cutoff=DEFAULT_CUTOFF,
    max_trials=DEFAULT_MAX_TRIALS,
    progress=False,
):
    """
    Rank word trios from `words`, keyed "word1,word2,word3".

    `cutoff` is the fraction of the best score seen so far below which a trio
    is dropped; `max_trials` bounds how many trios are scored at all.
    """
    if max_trials < 0:
        raise ValueError(f"max_trials must be >= 0, got {max_trials}")

    words = list(words)
    reducer = TrioReducer(cutoff)
    position_values = build_position_values(words)
    total = min(max_trials, comb(len(words), 3))

    trios = iter_trios(words, max_trials)
    for word1, word2, word3 in tqdm(trios, total=total, desc="Trios", disable=not progress):
        score = score_word_trio(context, position_values, word1, word2, word3)
        reducer.feed(f"{word1},{word2},{word3}", score)

    log.info(
        "Scored %d trios, kept %d, best %.4f.",
        reducer.trials,
        len(reducer.results),
        reducer.best,
    )
    return reducer.ranking()
