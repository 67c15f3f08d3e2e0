"""
util.py

Helpers for score mappings.
"""

from itertools import islice


def sort_by_value(scores, include_non_positive=False):
    """
    Return a new dict ordered by descending score.

    Equal scores are ordered by key so output is reproducible. Entries with a
    score <= 0 are dropped unless `include_non_positive` is set (used when
    showing raw diagnostic tables rather than word rankings).
    """
    ordered = sorted(scores.items(), key=lambda item: (-item[1], str(item[0])))
    return {
        key: score
        for key, score in ordered
        if include_non_positive or score > 0
    }


def head(ranking, length=1):
    """The first `length` entries of a ranking, as a new dict."""
    return dict(islice(ranking.items(), max(0, length)))
