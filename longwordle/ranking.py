"""
ranking.py

Scores and ranks single words and word pairs by the information their letter
codes reveal.

A set of guesses is scored on the union of its letter codes: a fact is only
learned the first time it is revealed, so a code shared by two guesses counts
once. Rankings are dicts ordered by descending score with non-positive
entries removed (see util.sort_by_value).
"""

import logging
from itertools import combinations

from tqdm import tqdm

from .codes import covered_letter_codes, letter_codes
from .inference import known_codes
from .util import sort_by_value


log = logging.getLogger(__name__)


def score_codes(context, codes, known=frozenset()) -> float:
    """Sum of letter values over `codes`, skipping codes in `known`."""
    return sum(context.letter_value(code) for code in codes if code not in known)


def score_word(context, word: str) -> float:
    return score_codes(context, letter_codes(word))


def score_word_set(context, *words: str) -> float:
    return score_codes(context, covered_letter_codes(*words))


def letter_value_ranking(context):
    """
    The raw letter value table as a ranking, e.g. {"e1": 0.53, ...}.

    Codes worth nothing are kept, since this is a diagnostic view of the
    whole table rather than a list of guesses.
    """
    values = {str(code): score for code, score in context.letter_values.items()}
    return sort_by_value(values, include_non_positive=True)


def rank_first_words(context, include_non_positive=False):
    """Every corpus word ranked on its own."""
    scores = {word: score_word(context, word) for word in context.corpus}
    return sort_by_value(scores, include_non_positive)


def rank_first_two_word_pairs(context, words, progress=False):
    """
    Every unordered pair from `words`, keyed "word1,word2".

    There are len(words)**2 / 2 pairs, so callers usually pass a shortlist
    rather than the whole corpus.
    """
    words = list(words)
    n_pairs = len(words) * (len(words) - 1) // 2
    log.info("Ranking %d word pairs from %d words.", n_pairs, len(words))

    scores = {}
    pairs = combinations(words, 2)
    for word1, word2 in tqdm(pairs, total=n_pairs, desc="Pairs", disable=not progress):
        scores[f"{word1},{word2}"] = score_word_set(context, word1, word2)

    return sort_by_value(scores)


def _rank_remaining(context, already_guessed, known, words):
    guessed = set(already_guessed)
    scores = {}
    for word in words:
        if word in guessed:
            continue
        scores[word] = score_codes(context, letter_codes(word), known)
    return sort_by_value(scores)


def rank_words_after(context, already_guessed, words=None):
    """
    Rank the next guess given earlier guesses, ignoring their feedback.

    Every code of every earlier guess counts as already learned, whatever the
    game actually answered. Earlier guesses themselves are left out.
    """
    words = context.corpus if words is None else words
    known = covered_letter_codes(*already_guessed)
    return _rank_remaining(context, already_guessed, known, words)


def rank_words_after_results(context, already_guessed, results, words=None):
    """
    Rank the next guess given earlier guesses and their feedback.

    `results[i]` is the feedback for `already_guessed[i]`, one symbol per
    letter (see inference). Only codes the feedback has not settled score.
    """
    words = context.corpus if words is None else words
    known = known_codes(already_guessed, results, context.code_universe)
    log.debug("%d letter codes settled by %d guesses.", len(known), len(already_guessed))
    return _rank_remaining(context, already_guessed, known, words)
